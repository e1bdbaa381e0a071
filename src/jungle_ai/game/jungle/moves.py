"""Move generation for 闘獣棋.

合法手の生成と駒の取り合いの判定。

生成される手は両陣営分まとめて返す（手番による絞り込みはしない）。
手番の管理は盤面の外側の責任で、呼び出し側が moves_by_side() などで絞り込む。
"""

from __future__ import annotations

from jungle_ai.game.jungle.board import Board, Move, Piece
from jungle_ai.game.jungle.topology import (
    JUMP_PATHS,
    JUMPING_ADJACENCY,
    NORMAL_ADJACENCY,
    SWIMMING_ADJACENCY,
    Adjacency,
)
from jungle_ai.game.jungle.types import (
    DENS,
    STRONGEST,
    TRAPPED_RANK,
    WEAKEST,
    Point,
    Side,
    trap_owner,
)


def effective_rank(defender: Piece, square: Point) -> int:
    """Return the defender's rank for capture purposes on square.

    守る側の実効ランクを返す。相手陣営の罠にいる駒はランク 0 として扱う。
    自陣の罠にいる駒は影響を受けない。駒自体のランクは変わらない。
    """
    owner = trap_owner(square)
    if owner is not None and owner != defender.side:
        return TRAPPED_RANK
    return defender.rank


def can_capture(attacker: Piece, defender: Piece | None, square: Point) -> bool:
    """Check if attacker may move onto square occupied by defender.

    攻める駒が square の駒を取れるか判定する。

    - 空きマスには常に移動できる
    - 基本: 攻める駒のランク >= 守る駒の実効ランク
    - 例外: 最弱の駒（ねずみ）は最強の駒（ぞう）を取れる

    同じ陣営の駒かどうかはここでは見ない（legal_moves 側で除外する）。
    """
    if defender is None:
        return True
    if attacker.species == WEAKEST and defender.species == STRONGEST:
        return True  # ランク逆転の唯一の例外
    return attacker.rank >= effective_rank(defender, square)


def adjacency_for(piece: Piece) -> Adjacency:
    """駒の能力に応じた隣接テーブルを返す（跳躍 > 泳ぎ > 通常の優先順）。"""
    if piece.species.can_jump:
        return JUMPING_ADJACENCY
    if piece.species.can_swim:
        return SWIMMING_ADJACENCY
    return NORMAL_ADJACENCY


def _jump_blocked(board: Board, origin: Point, destination: Point) -> bool:
    """跳躍の途中の川に駒（ねずみ）がいれば True。"""
    path = JUMP_PATHS.get((origin, destination))
    if path is None:
        return False  # 跳躍ではない普通の1マス移動
    return any(board.get(p) is not None for p in path)


def legal_moves(board: Board) -> list[Move]:
    """Generate all legal moves for both sides.

    両陣営のすべての合法手を生成する。

    For each piece, in scan order (file outer, rank inner), each destination
    of its adjacency table is kept unless:
    - it is the mover's own den（自分の巣には入れない）
    - it is a jump whose river path is occupied（川にねずみがいると跳べない）
    - it holds a piece of the mover's own side（味方の駒は取れない）
    - the occupant out-ranks the mover after trap neutralisation
    """
    moves: list[Move] = []

    for origin, piece in board.occupied():
        own_den = DENS[piece.side]
        jumper = piece.species.can_jump

        for destination in adjacency_for(piece)[origin]:
            if destination == own_den:
                continue  # 自分の巣には入れない
            if jumper and _jump_blocked(board, origin, destination):
                continue
            target = board.get(destination)
            if target is not None and target.side == piece.side:
                continue  # 自分の駒のある場所には動けない
            if can_capture(piece, target, destination):
                moves.append((origin, destination))

    return moves


def moves_by_side(board: Board, moves: list[Move] | None = None) -> dict[Side, list[Move]]:
    """Partition moves by the side of the moving piece.

    手を動かす駒の陣営ごとに分ける。手番を管理する呼び出し側はここから
    現在の陣営の手だけを取り出せばよい。
    """
    if moves is None:
        moves = legal_moves(board)
    result: dict[Side, list[Move]] = {side: [] for side in Side}
    for origin, destination in moves:
        piece = board.get(origin)
        assert piece is not None, f"No piece at {origin}"
        result[piece.side].append((origin, destination))
    return result
