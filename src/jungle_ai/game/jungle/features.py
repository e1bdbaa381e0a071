"""Perspective normalisation and tensor planes for 闘獣棋.

盤面をニューラルネットワーク入力用のテンソルに変換する。

AlphaZero と同じく「その陣営から見た盤面」を作る。B 陣営の視点では盤面を
180° 回転し、陣営を入れ替える。こうすると自分の巣は常に (3, 0) にあり、
先手・後手を区別せず同じネットワークを使える。
"""

from __future__ import annotations

from dataclasses import dataclass

import torch

from jungle_ai.game.jungle.board import Board, Piece
from jungle_ai.game.jungle.types import (
    ALL_POINTS,
    COLS,
    RIVER,
    ROWS,
    TRAPS,
    Side,
    Species,
)

_NUM_SPECIES = len(Species)


@dataclass(frozen=True)
class FeatureConfig:
    """Configuration for to_tensor_planes.

    Attributes:
        include_terrain: 地形プレーン（川・自陣の罠・相手の罠）を加えるか
    """

    include_terrain: bool = True

    @property
    def in_channels(self) -> int:
        """入力チャンネル数: 駒 8種 × 2陣営 (+ 地形 3)。"""
        return 2 * _NUM_SPECIES + (3 if self.include_terrain else 0)


DEFAULT_FEATURE_CONFIG = FeatureConfig()


def normalize(board: Board, perspective: Side) -> Board:
    """Return the board as seen by perspective.

    perspective の陣営が A 陣営の位置（巣が rank 0 側）に来るように変換した
    新しい盤面を返す。A 陣営の視点ではコピーをそのまま返す。
    """
    if perspective == Side.A:
        return board.clone()
    result = Board.empty()
    for p, piece in board.occupied():
        result.put(p.rotate(), Piece(piece.species, piece.side.opponent))
    return result


def to_tensor_planes(
    board: Board,
    perspective: Side,
    config: FeatureConfig = DEFAULT_FEATURE_CONFIG,
) -> torch.Tensor:
    """Convert a board to planes from perspective's point of view.

    Planes（チャンネル）の構成:
    ch.0-7:   自分の駒（Mouse 〜 Elephant、ランク順）
    ch.8-15:  相手の駒
    ch.16:    川（include_terrain のとき）
    ch.17:    自陣の罠
    ch.18:    相手の罠

    テンソルの形は (チャンネル, ROWS, COLS) で、[ch, rank, file] でアクセスする。
    """
    planes = torch.zeros(config.in_channels, ROWS, COLS)
    view = normalize(board, perspective)

    for p, piece in view.occupied():
        offset = 0 if piece.side == Side.A else _NUM_SPECIES
        planes[offset + piece.rank - 1, p.rank, p.file] = 1.0

    if config.include_terrain:
        base = 2 * _NUM_SPECIES
        # 正規化後の盤面では自陣は常に A 陣営の位置にある
        for p in ALL_POINTS:
            if p in RIVER:
                planes[base, p.rank, p.file] = 1.0
            elif p in TRAPS[Side.A]:
                planes[base + 1, p.rank, p.file] = 1.0
            elif p in TRAPS[Side.B]:
                planes[base + 2, p.rank, p.file] = 1.0

    return planes
