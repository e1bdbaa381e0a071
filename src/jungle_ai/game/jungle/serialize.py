"""JSON encoding of 闘獣棋 boards.

盤面の JSON 形式への変換と復元。

形式: 9行 × 7列 の整数の2次元配列（rank 0 が先頭）。
  0      空きマス
  1〜8   A 陣営の駒（値 = ランク）
  9〜16  B 陣営の駒（値 = 8 + ランク）

復元は全体が成功するか DecodeError になるかのどちらかで、
中途半端な盤面は返さない。
"""

from __future__ import annotations

import logging
from typing import Annotated

from pydantic import Field, StrictInt, TypeAdapter, ValidationError

from jungle_ai.game.jungle.board import Board, Piece
from jungle_ai.game.jungle.types import COLS, ROWS, Point, Side, Species

logger = logging.getLogger(__name__)

EMPTY_CODE = 0
_SIDE_STRIDE = len(Species)  # = 8
MAX_CODE = 2 * _SIDE_STRIDE  # = 16

# 構造の検証は pydantic に任せる（行数・列数・値の範囲）
Code = Annotated[StrictInt, Field(ge=EMPTY_CODE, le=MAX_CODE)]
Row = Annotated[list[Code], Field(min_length=COLS, max_length=COLS)]
Grid = Annotated[list[Row], Field(min_length=ROWS, max_length=ROWS)]

_GRID_ADAPTER: TypeAdapter[list[list[int]]] = TypeAdapter(Grid)


class DecodeError(ValueError):
    """Raised when a serialized board is malformed."""


def piece_to_code(piece: Piece | None) -> int:
    """駒を整数コードに変換する。"""
    if piece is None:
        return EMPTY_CODE
    return piece.side.value * _SIDE_STRIDE + piece.rank


def code_to_piece(code: int) -> Piece | None:
    """整数コードを駒に戻す。範囲外のコードは ValueError。"""
    if code == EMPTY_CODE:
        return None
    if not (EMPTY_CODE < code <= MAX_CODE):
        msg = f"Invalid piece code: {code}"
        raise ValueError(msg)
    side, rank = divmod(code - 1, _SIDE_STRIDE)
    return Piece(Species(rank + 1), Side(side))


def board_to_grid(board: Board) -> list[list[int]]:
    """盤面を rank 行 × file 列の整数グリッドに変換する。"""
    return [
        [piece_to_code(board.get(Point(f, r))) for f in range(COLS)]
        for r in range(ROWS)
    ]


def grid_to_board(grid: list[list[int]]) -> Board:
    """Build a board from a validated integer grid."""
    squares = [code_to_piece(code) for row in grid for code in row]
    return Board(squares=squares)


def encode_board(board: Board) -> str:
    """Encode a board as compact JSON text."""
    return _GRID_ADAPTER.dump_json(board_to_grid(board)).decode()


def decode_board(blob: str | bytes) -> Board:
    """Decode JSON text produced by encode_board.

    JSON として壊れている場合や、形・値が不正な場合は DecodeError を送出する。
    """
    try:
        grid = _GRID_ADAPTER.validate_json(blob)
    except ValidationError as exc:
        logger.debug("Rejected board blob: %d error(s)", exc.error_count())
        msg = f"Malformed board: {exc.error_count()} validation error(s)"
        raise DecodeError(msg) from exc
    return grid_to_board(grid)
