"""Terminal display for 闘獣棋 boards.

闘獣棋の盤面をターミナルに表示するためのモジュール。
"""

from __future__ import annotations

from jungle_ai.game.jungle.board import Board
from jungle_ai.game.jungle.types import COLS, DENS, RIVER, ROWS, Point, Side, Species, trap_owner

# 駒の表示文字: 大文字=A 陣営、小文字=B 陣営
PIECE_CHARS: dict[Species, str] = {
    Species.MOUSE: "M",     # ねずみ
    Species.CAT: "C",       # ねこ
    Species.DOG: "D",       # いぬ
    Species.WOLF: "W",      # おおかみ
    Species.HYENA: "H",     # ハイエナ
    Species.TIGER: "T",     # とら
    Species.LION: "L",      # ライオン
    Species.ELEPHANT: "E",  # ぞう
}

# 空きマスの地形表示
RIVER_CHAR = "~"
TRAP_CHAR = "#"
DEN_CHAR = "@"
LAND_CHAR = "."

_BORDER = "+" + "---+" * COLS


def piece_to_char(species: Species, side: Side) -> str:
    """Convert a piece to its display character.

    駒を表示文字に変換する。A 陣営は大文字、B 陣営は小文字。
    """
    char = PIECE_CHARS[species]
    if side == Side.B:
        return char.lower()
    return char


def terrain_char(p: Point) -> str:
    """空きマス p の地形を表す文字を返す。"""
    if p in DENS.values():
        return DEN_CHAR
    if trap_owner(p) is not None:
        return TRAP_CHAR
    if p in RIVER:
        return RIVER_CHAR
    return LAND_CHAR


def board_to_str(board: Board) -> str:
    """Convert a board to a bordered fixed-width grid.

    盤面を枠付きの文字列に変換する。rank 8（B 陣営）が上、rank 0（A 陣営）が下。

    Example output (initial position, top three ranks):
        +---+---+---+---+---+---+---+
        | t | . | # | @ | # | . | l |
        +---+---+---+---+---+---+---+
        | . | c | . | # | . | d | . |
        +---+---+---+---+---+---+---+
        | e | . | w | . | h | . | m |
        +---+---+---+---+---+---+---+
    """
    lines: list[str] = [_BORDER]
    for r in reversed(range(ROWS)):
        cells: list[str] = []
        for f in range(COLS):
            p = Point(f, r)
            piece = board.get(p)
            if piece is None:
                cells.append(terrain_char(p))
            else:
                cells.append(piece_to_char(piece.species, piece.side))
        lines.append("| " + " | ".join(cells) + " |")
        lines.append(_BORDER)
    return "\n".join(lines)
