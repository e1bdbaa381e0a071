"""Types and constants for 闘獣棋 (Jungle / Animal Chess).

闘獣棋の基本型・定数定義。
盤面は 7列 × 9行（63マス）で、各陣営に8種類の動物駒がある。
川・罠・巣（ゴール）の位置は盤面の形から決まる定数であり、盤面ごとには持たない。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, unique

# 盤面のサイズ: 7列（file）× 9行（rank）
COLS = 7
ROWS = 9
NUM_SQUARES = ROWS * COLS  # = 63

# 罠に入った駒の実効ランク（どの駒にも取られる）
TRAPPED_RANK = 0


@unique
class Side(IntEnum):
    """Side identifiers.

    A 陣営は rank 0 側（下）に巣を持ち、B 陣営は rank 8 側（上）に巣を持つ。
    """

    A = 0
    B = 1

    @property
    def opponent(self) -> Side:
        """相手の陣営を返す。A↔B の切り替え。"""
        return Side(1 - self.value)


@unique
class Species(IntEnum):
    """Animal species, valued by rank.

    動物の種類（8種類）。値がそのままランク（強さ）になる。
    ランクが同じか高い駒を取れるが、ねずみだけはぞうを取れる。
    """

    MOUSE = 1     # ねずみ: 唯一川に入れる
    CAT = 2       # ねこ
    DOG = 3       # いぬ
    WOLF = 4      # おおかみ
    HYENA = 5     # ハイエナ
    TIGER = 6     # とら: 川を跳び越えられる
    LION = 7      # ライオン: 川を跳び越えられる
    ELEPHANT = 8  # ぞう: 最強だがねずみに取られる

    @property
    def rank(self) -> int:
        return self.value

    @property
    def can_swim(self) -> bool:
        """川のマスに入れるか。"""
        return self in SWIMMERS

    @property
    def can_jump(self) -> bool:
        """川を跳び越えられるか。"""
        return self in JUMPERS


SWIMMERS = frozenset({Species.MOUSE})
JUMPERS = frozenset({Species.TIGER, Species.LION})

# ランク逆転の唯一の例外: 最弱の駒が最強の駒を取れる
WEAKEST = min(Species)
STRONGEST = max(Species)


@dataclass(frozen=True, order=True)
class Point:
    """A square on the board, as (file, rank).

    盤面上のマス。file は列（0〜6）、rank は行（0〜8）。
    範囲外の座標は作れない（呼び出し側のバグとして ValueError）。
    """

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < COLS and 0 <= self.rank < ROWS):
            msg = f"Point out of range: ({self.file}, {self.rank})"
            raise ValueError(msg)

    @property
    def index(self) -> int:
        """squares 配列上のインデックス（行優先）。"""
        return self.rank * COLS + self.file

    @staticmethod
    def from_index(idx: int) -> Point:
        return Point(idx % COLS, idx // COLS)

    def rotate(self) -> Point:
        """Return the square seen from the opposite side (180° rotation).

        反対側の陣営から見た同じマス。視点の正規化に使う。
        """
        return Point(COLS - 1 - self.file, ROWS - 1 - self.rank)

    def __str__(self) -> str:
        return f"({self.file}, {self.rank})"


# 巣（ゴール）: 相手の巣に入れば勝ち、自分の巣には入れない
A_DEN = Point(3, 0)
B_DEN = Point(3, 8)
DENS: dict[Side, Point] = {Side.A: A_DEN, Side.B: B_DEN}

# 罠: 各陣営の巣を囲む3マス。相手の駒が入るとランクが 0 になる
A_TRAPS = frozenset({Point(2, 0), Point(4, 0), Point(3, 1)})
B_TRAPS = frozenset({Point(3, 7), Point(2, 8), Point(4, 8)})
TRAPS: dict[Side, frozenset[Point]] = {Side.A: A_TRAPS, Side.B: B_TRAPS}

# 川: 左右2本（file 1-2 と 4-5）× rank 3〜5
RIVER = frozenset(
    Point(f, r) for f in (1, 2, 4, 5) for r in (3, 4, 5)
)

# 走査順: file が外側、rank が内側（手の生成順序を決める）
ALL_POINTS: tuple[Point, ...] = tuple(
    Point(f, r) for f in range(COLS) for r in range(ROWS)
)


def trap_owner(p: Point) -> Side | None:
    """Return the side whose trap p is, or None.

    マス p がどちらの陣営の罠かを返す。罠でなければ None。
    """
    for side, traps in TRAPS.items():
        if p in traps:
            return side
    return None
