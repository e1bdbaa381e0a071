"""闘獣棋 (Jungle / Animal Chess): 7x9 board rules engine."""

from jungle_ai.game.jungle.board import Board, Move, Piece
from jungle_ai.game.jungle.display import board_to_str
from jungle_ai.game.jungle.moves import can_capture, legal_moves, moves_by_side
from jungle_ai.game.jungle.rules import is_terminal, winner
from jungle_ai.game.jungle.serialize import DecodeError, decode_board, encode_board
from jungle_ai.game.jungle.types import COLS, ROWS, Point, Side, Species

__all__ = [
    "Board",
    "COLS",
    "DecodeError",
    "Move",
    "Piece",
    "Point",
    "ROWS",
    "Side",
    "Species",
    "board_to_str",
    "can_capture",
    "decode_board",
    "encode_board",
    "is_terminal",
    "legal_moves",
    "moves_by_side",
    "winner",
]
