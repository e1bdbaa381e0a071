"""Tests for Board representation."""

import pytest

from jungle_ai.game.jungle.board import Board, Piece
from jungle_ai.game.jungle.moves import legal_moves
from jungle_ai.game.jungle.types import ALL_POINTS, NUM_SQUARES, Point, Side, Species


class TestInitialPosition:
    def test_board_size(self) -> None:
        board = Board()
        assert len(board.squares) == NUM_SQUARES

    def test_sixteen_pieces(self) -> None:
        board = Board()
        pieces = [piece for _, piece in board.occupied()]
        assert len(pieces) == 16
        for side in Side:
            assert sorted(p.species for p in pieces if p.side == side) == list(Species)

    def test_side_a_pieces(self) -> None:
        board = Board()
        assert board.get(Point(0, 0)) == Piece(Species.LION, Side.A)
        assert board.get(Point(6, 0)) == Piece(Species.TIGER, Side.A)
        assert board.get(Point(1, 1)) == Piece(Species.DOG, Side.A)
        assert board.get(Point(5, 1)) == Piece(Species.CAT, Side.A)
        assert board.get(Point(0, 2)) == Piece(Species.MOUSE, Side.A)
        assert board.get(Point(2, 2)) == Piece(Species.HYENA, Side.A)
        assert board.get(Point(4, 2)) == Piece(Species.WOLF, Side.A)
        assert board.get(Point(6, 2)) == Piece(Species.ELEPHANT, Side.A)

    def test_side_b_pieces(self) -> None:
        board = Board()
        assert board.get(Point(0, 8)) == Piece(Species.TIGER, Side.B)
        assert board.get(Point(6, 8)) == Piece(Species.LION, Side.B)
        assert board.get(Point(1, 7)) == Piece(Species.CAT, Side.B)
        assert board.get(Point(5, 7)) == Piece(Species.DOG, Side.B)
        assert board.get(Point(0, 6)) == Piece(Species.ELEPHANT, Side.B)
        assert board.get(Point(2, 6)) == Piece(Species.WOLF, Side.B)
        assert board.get(Point(4, 6)) == Piece(Species.HYENA, Side.B)
        assert board.get(Point(6, 6)) == Piece(Species.MOUSE, Side.B)

    def test_layout_is_point_symmetric(self) -> None:
        board = Board()
        for p in ALL_POINTS:
            piece = board.get(p)
            mirrored = board.get(p.rotate())
            if piece is None:
                assert mirrored is None
            else:
                assert mirrored == Piece(piece.species, piece.side.opponent)

    def test_dens_empty(self) -> None:
        board = Board()
        assert board.get(Point(3, 0)) is None
        assert board.get(Point(3, 8)) is None

    def test_empty_board(self) -> None:
        board = Board.empty()
        assert all(sq is None for sq in board.squares)
        assert list(board.occupied()) == []

    def test_wrong_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board(squares=[None] * 10)


class TestBoardOperations:
    def test_put_returns_displaced(self) -> None:
        board = Board()
        mouse = Piece(Species.MOUSE, Side.B)
        displaced = board.put(Point(0, 0), mouse)
        assert displaced == Piece(Species.LION, Side.A)
        assert board.get(Point(0, 0)) == mouse

    def test_put_on_empty_returns_none(self) -> None:
        board = Board.empty()
        assert board.put(Point(3, 4), Piece(Species.CAT, Side.A)) is None

    def test_move_to_empty(self) -> None:
        board = Board()
        captured = board.move(Point(6, 2), Point(6, 3))
        assert captured is None
        assert board.get(Point(6, 2)) is None
        assert board.get(Point(6, 3)) == Piece(Species.ELEPHANT, Side.A)

    def test_move_returns_captured(self) -> None:
        board = Board.empty()
        board.put(Point(0, 0), Piece(Species.LION, Side.A))
        board.put(Point(1, 0), Piece(Species.CAT, Side.B))
        captured = board.move(Point(0, 0), Point(1, 0))
        assert captured == Piece(Species.CAT, Side.B)
        assert board.get(Point(0, 0)) is None
        assert board.get(Point(1, 0)) == Piece(Species.LION, Side.A)

    def test_unmove_restores_capture(self) -> None:
        board = Board.empty()
        board.put(Point(0, 0), Piece(Species.LION, Side.A))
        board.put(Point(1, 0), Piece(Species.CAT, Side.B))
        before = board.clone()
        captured = board.move(Point(0, 0), Point(1, 0))
        board.unmove(Point(0, 0), Point(1, 0), captured)
        assert board == before

    def test_move_unmove_inverse_for_all_initial_moves(self) -> None:
        board = Board()
        before = board.clone()
        for origin, destination in legal_moves(board):
            displaced = board.move(origin, destination)
            board.unmove(origin, destination, displaced)
            assert board == before

    def test_nested_make_unmake(self) -> None:
        """深さ優先で数手進めて逆順に戻すと元の盤面に戻る。"""
        board = Board()
        before = board.clone()
        stack = []
        for _ in range(6):
            origin, destination = legal_moves(board)[0]
            stack.append((origin, destination, board.move(origin, destination)))
        while stack:
            origin, destination, displaced = stack.pop()
            board.unmove(origin, destination, displaced)
        assert board == before

    def test_single_occupancy_after_moves(self) -> None:
        board = Board()
        for _ in range(10):
            origin, destination = legal_moves(board)[-1]
            board.move(origin, destination)
            assert len(board.squares) == NUM_SQUARES
            assert board.get(origin) is None
            assert board.get(destination) is not None

    def test_clone_is_independent(self) -> None:
        board = Board()
        copy = board.clone()
        assert copy == board
        copy.move(Point(6, 2), Point(6, 3))
        assert copy != board
        assert board.get(Point(6, 2)) == Piece(Species.ELEPHANT, Side.A)

    def test_with_piece_returns_new_board(self) -> None:
        board = Board.empty()
        cat = Piece(Species.CAT, Side.A)
        new_board = board.with_piece(Point(2, 2), cat).with_piece(Point(4, 4), cat)
        assert new_board.get(Point(2, 2)) == cat
        assert new_board.get(Point(4, 4)) == cat
        assert board.get(Point(2, 2)) is None  # Original unchanged

    def test_constructor_copies_squares(self) -> None:
        squares = [None] * NUM_SQUARES
        board = Board(squares=squares)
        board.put(Point(0, 0), Piece(Species.DOG, Side.A))
        assert squares[0] is None

    def test_occupied_scan_order(self) -> None:
        """file が外側、rank が内側の順で列挙される。"""
        points = [p for p, _ in Board().occupied()]
        assert points[:4] == [Point(0, 0), Point(0, 2), Point(0, 6), Point(0, 8)]
        assert points == sorted(points)
