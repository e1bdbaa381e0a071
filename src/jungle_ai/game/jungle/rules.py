"""Terminal-state detection for 闘獣棋.

勝敗判定。盤面だけから決まり、手番には依存しない。

判定順序:
1. A の駒が B の巣にいる → A の勝ち
2. B の駒が A の巣にいる → B の勝ち
3. 合法手のない陣営の負け（スタレメートも負け）。A を先に調べる
4. それ以外は対局中（None）
"""

from __future__ import annotations

import logging

from jungle_ai.game.jungle.board import Board
from jungle_ai.game.jungle.moves import moves_by_side
from jungle_ai.game.jungle.types import A_DEN, B_DEN, Side

logger = logging.getLogger(__name__)


def winner(board: Board) -> Side | None:
    """Return the winning side, or None if the game continues."""
    # 1-2. 巣への侵入（A を優先して判定する）
    occupant = board.get(B_DEN)
    if occupant is not None and occupant.side == Side.A:
        logger.debug("Side A occupies B's den at %s", B_DEN)
        return Side.A
    occupant = board.get(A_DEN)
    if occupant is not None and occupant.side == Side.B:
        logger.debug("Side B occupies A's den at %s", A_DEN)
        return Side.B

    # 3. 合法手なし → その陣営の負け
    by_side = moves_by_side(board)
    for side in Side:
        if not by_side[side]:
            logger.debug("Side %s has no moves", side.name)
            return side.opponent

    return None  # まだ対局中


def is_terminal(board: Board) -> bool:
    """ゲームが終局ならば True。"""
    return winner(board) is not None
