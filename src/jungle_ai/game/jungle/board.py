"""Board representation for 闘獣棋.

盤面のデータ構造。探索で使いやすいようにミュータブルにしている。

ミュータブルにする理由:
- 深い探索では move() / unmove() で盤面をその場で進めて戻せる（割り当て不要）
- 並列探索や後戻りしない探索では clone() で独立したコピーを作る
盤面の所有者は常に1人（1スレッド）で、ロックは持たない。
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from jungle_ai.game.jungle.types import (
    ALL_POINTS,
    NUM_SQUARES,
    Point,
    Side,
    Species,
)


@dataclass(frozen=True)
class Piece:
    """A piece on the board.

    盤面上の1つの駒。種類と陣営を持つ。空きマスは None で表す。
    """

    species: Species
    side: Side

    @property
    def rank(self) -> int:
        return self.species.rank


# 手: (移動元, 移動先) の組
Move = tuple[Point, Point]


@dataclass(eq=True)
class Board:
    """Mutable board state for 7x9 闘獣棋.

    7×9 = 63マスの盤面。

    squares: 63要素のリスト（行優先）。各要素は Piece | None。
             squares[rank * COLS + file] でマス (file, rank) にアクセス。
    """

    squares: list[Piece | None] = field(default_factory=lambda: Board._initial_squares())

    def __post_init__(self) -> None:
        if len(self.squares) != NUM_SQUARES:
            msg = f"Board needs {NUM_SQUARES} squares, got {len(self.squares)}"
            raise ValueError(msg)
        self.squares = list(self.squares)  # 呼び出し側のリストと共有しない

    @staticmethod
    def _initial_squares() -> list[Piece | None]:
        """Return the standard starting position.

        標準的な初期配置を返す。B 陣営の配置は A 陣営を 180° 回転したもの。

        Rank 8 (top):    B: Tiger . . [den] . . Lion
        Rank 7:          . Cat . . . Dog .
        Rank 6:          Elephant . Wolf . Hyena . Mouse
        Rank 3-5:        川
        Rank 2:          Mouse . Hyena . Wolf . Elephant
        Rank 1:          . Dog . . . Cat .
        Rank 0 (bottom): A: Lion . . [den] . . Tiger
        """
        squares: list[Piece | None] = [None] * NUM_SQUARES
        a_layout = {
            Point(0, 0): Species.LION,
            Point(6, 0): Species.TIGER,
            Point(1, 1): Species.DOG,
            Point(5, 1): Species.CAT,
            Point(0, 2): Species.MOUSE,
            Point(2, 2): Species.HYENA,
            Point(4, 2): Species.WOLF,
            Point(6, 2): Species.ELEPHANT,
        }
        for p, species in a_layout.items():
            squares[p.index] = Piece(species, Side.A)
            squares[p.rotate().index] = Piece(species, Side.B)  # 点対称に配置
        return squares

    @classmethod
    def empty(cls) -> Board:
        """駒のない盤面を返す（テストや局面の組み立て用）。"""
        return cls(squares=[None] * NUM_SQUARES)

    def get(self, p: Point) -> Piece | None:
        """Return the occupant of p, or None if empty."""
        return self.squares[p.index]

    def put(self, p: Point, piece: Piece | None) -> Piece | None:
        """Place piece on p and return what was there before.

        マス p に駒を置き、元の駒を返す（戻す操作に使える）。
        """
        idx = p.index
        displaced = self.squares[idx]
        self.squares[idx] = piece
        return displaced

    def move(self, origin: Point, destination: Point) -> Piece | None:
        """Move the occupant of origin to destination.

        移動元の駒を移動先へ動かし、移動先にあった駒（取った駒、または None）を返す。
        合法性はチェックしない（合法手の判定は moves.legal_moves の役目）。
        """
        return self.put(destination, self.put(origin, None))

    def unmove(self, origin: Point, destination: Point, displaced: Piece | None) -> None:
        """Undo move(origin, destination), given the piece it returned.

        move() の逆操作。移動先の駒を移動元に戻し、取られた駒を移動先に戻す。
        """
        self.put(origin, self.put(destination, displaced))

    def clone(self) -> Board:
        """独立したコピーを返す（Piece はイミュータブルなので浅いコピーで十分）。"""
        return Board(squares=list(self.squares))

    def with_piece(self, p: Point, piece: Piece | None) -> Board:
        """Return a copy of the board with p set to piece.

        マス p を変更した新しい Board を返す。テスト用の局面を連鎖的に組み立てられる:
            Board.empty().with_piece(a, x).with_piece(b, y)
        """
        board = self.clone()
        board.put(p, piece)
        return board

    def occupied(self) -> Iterator[tuple[Point, Piece]]:
        """Yield (point, piece) for every non-empty square in scan order.

        駒のあるマスを走査順（file が外側、rank が内側）で列挙する。
        """
        for p in ALL_POINTS:
            piece = self.squares[p.index]
            if piece is not None:
                yield p, piece
