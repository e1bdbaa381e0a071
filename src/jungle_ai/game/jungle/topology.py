"""Static adjacency tables for the 闘獣棋 board.

盤面の隣接関係テーブル。盤面の形だけから決まるので、モジュール読み込み時に
一度だけ生成し、以後は変更しない（MappingProxyType で読み取り専用にする）。

テーブルは3種類:
- NORMAL_ADJACENCY:   普通の駒（川に入れない）
- JUMPING_ADJACENCY:  とら・ライオン（川を縦横に跳び越える）
- SWIMMING_ADJACENCY: ねずみ（川に入れる）

JUMP_PATHS は跳躍手 (移動元, 移動先) から、途中で空いていなければならない
川のマスの並びへの対応表。
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from jungle_ai.game.jungle.types import ALL_POINTS, COLS, RIVER, ROWS, Point

Adjacency = Mapping[Point, tuple[Point, ...]]
JumpPaths = Mapping[tuple[Point, Point], tuple[Point, ...]]

# 探索方向: (file の変化, rank の変化)。上・左・右・下の順で、この順序が
# 各マスの隣接リストの順序（＝手の生成順序）になる
DIRECTIONS: Final[tuple[tuple[int, int], ...]] = ((0, -1), (-1, 0), (1, 0), (0, 1))


def _step(p: Point, df: int, dr: int) -> Point | None:
    """1マス進んだ先を返す。盤外なら None。"""
    f, r = p.file + df, p.rank + dr
    if 0 <= f < COLS and 0 <= r < ROWS:
        return Point(f, r)
    return None


def _build_normal() -> dict[Point, tuple[Point, ...]]:
    table: dict[Point, tuple[Point, ...]] = {}
    for p in ALL_POINTS:
        if p in RIVER:
            table[p] = ()  # 川の中からは動けない（そもそも入れない）
            continue
        neighbours = []
        for df, dr in DIRECTIONS:
            q = _step(p, df, dr)
            if q is not None and q not in RIVER:
                neighbours.append(q)
        table[p] = tuple(neighbours)
    return table


def _build_jumping() -> tuple[
    dict[Point, tuple[Point, ...]],
    dict[tuple[Point, Point], tuple[Point, ...]],
]:
    table: dict[Point, tuple[Point, ...]] = {}
    paths: dict[tuple[Point, Point], tuple[Point, ...]] = {}
    for p in ALL_POINTS:
        if p in RIVER:
            table[p] = ()
            continue
        neighbours = []
        for df, dr in DIRECTIONS:
            q = _step(p, df, dr)
            crossed: list[Point] = []
            # 川が続く限り同じ方向に進み、対岸の最初の陸地に着地する
            while q is not None and q in RIVER:
                crossed.append(q)
                q = _step(q, df, dr)
            if q is None:
                continue
            neighbours.append(q)
            if crossed:
                paths[(p, q)] = tuple(crossed)
        table[p] = tuple(neighbours)
    return table, paths


def _build_swimming() -> dict[Point, tuple[Point, ...]]:
    table: dict[Point, tuple[Point, ...]] = {}
    for p in ALL_POINTS:
        neighbours = []
        for df, dr in DIRECTIONS:
            q = _step(p, df, dr)
            if q is not None:
                neighbours.append(q)
        table[p] = tuple(neighbours)
    return table


_jumping, _paths = _build_jumping()

NORMAL_ADJACENCY: Final[Adjacency] = MappingProxyType(_build_normal())
JUMPING_ADJACENCY: Final[Adjacency] = MappingProxyType(_jumping)
SWIMMING_ADJACENCY: Final[Adjacency] = MappingProxyType(_build_swimming())
JUMP_PATHS: Final[JumpPaths] = MappingProxyType(_paths)

del _jumping, _paths
