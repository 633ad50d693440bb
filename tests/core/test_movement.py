"""Tests for per-piece movement legality."""

from battlechess.core.board import Board, BoardView
from battlechess.core.enums import Color, MoveKind, PieceType
from battlechess.core.movement import (
    classify_move,
    is_valid_move,
    legal_targets,
    reaches_promotion_row,
    squares_between,
)
from battlechess.core.piece import Piece
from battlechess.core.types import make_square, parse_square


def _view(placements: dict[str, str]) -> BoardView:
    board = Board()
    for name, char in placements.items():
        board[parse_square(name)] = Piece.from_char(char)
    return board.view()


def _sq(name: str) -> int:
    return parse_square(name)


class TestGeometryHelpers:
    def test_squares_between_straight(self) -> None:
        assert list(squares_between(_sq("a1"), _sq("a4"))) == [_sq("a2"), _sq("a3")]

    def test_squares_between_diagonal_backwards(self) -> None:
        assert list(squares_between(_sq("d4"), _sq("a1"))) == [_sq("c3"), _sq("b2")]

    def test_squares_between_adjacent(self) -> None:
        assert list(squares_between(_sq("a1"), _sq("b2"))) == []


class TestGeneral:
    def test_empty_origin_is_illegal(self) -> None:
        view = _view({})
        assert classify_move(_sq("a1"), _sq("a2"), view) is None

    def test_same_square_is_illegal(self) -> None:
        view = _view({"a1": "R"})
        assert not is_valid_move(_sq("a1"), _sq("a1"), view)

    def test_ally_destination_is_illegal(self) -> None:
        view = _view({"a1": "R", "a3": "N"})
        assert not is_valid_move(_sq("a1"), _sq("a3"), view)


class TestRook:
    def test_straight_moves(self) -> None:
        view = _view({"c6": "R"})
        assert classify_move(_sq("c6"), _sq("c12"), view) == MoveKind.NORMAL
        assert classify_move(_sq("c6"), _sq("a6"), view) == MoveKind.NORMAL
        assert classify_move(_sq("c6"), _sq("c1"), view) == MoveKind.NORMAL

    def test_diagonal_rejected(self) -> None:
        view = _view({"c6": "R"})
        assert not is_valid_move(_sq("c6"), _sq("d7"), view)

    def test_blocked_by_ally(self) -> None:
        view = _view({"a1": "R", "a3": "P"})
        assert not is_valid_move(_sq("a1"), _sq("a5"), view)

    def test_blocked_by_enemy_in_between(self) -> None:
        for direction_target, blocker in (("a5", "a3"), ("e1", "c1")):
            view = _view({"a1": "R", blocker: "p"})
            assert not is_valid_move(_sq("a1"), _sq(direction_target), view)

    def test_blocked_moving_down_and_left(self) -> None:
        view = _view({"e12": "r", "e6": "P", "b12": "N"})
        assert not is_valid_move(_sq("e12"), _sq("e1"), view)
        assert not is_valid_move(_sq("e12"), _sq("a12"), view)

    def test_capture_with_clear_path(self) -> None:
        view = _view({"a1": "R", "a9": "q"})
        assert classify_move(_sq("a1"), _sq("a9"), view) == MoveKind.CAPTURE


class TestBishopQueen:
    def test_bishop_diagonals(self) -> None:
        view = _view({"c6": "B"})
        for target in ("a4", "e8", "a8", "e4"):
            assert is_valid_move(_sq("c6"), _sq(target), view), target

    def test_bishop_rejects_straight(self) -> None:
        view = _view({"c6": "B"})
        assert not is_valid_move(_sq("c6"), _sq("c8"), view)

    def test_bishop_blocked(self) -> None:
        view = _view({"a1": "B", "c3": "p", "d4": "p"})
        assert not is_valid_move(_sq("a1"), _sq("d4"), view)
        assert classify_move(_sq("a1"), _sq("c3"), view) == MoveKind.CAPTURE

    def test_queen_combines_both(self) -> None:
        view = _view({"c6": "Q"})
        assert is_valid_move(_sq("c6"), _sq("c1"), view)
        assert is_valid_move(_sq("c6"), _sq("e8"), view)
        assert not is_valid_move(_sq("c6"), _sq("d8"), view)


class TestKnightKing:
    def test_knight_l_shapes(self) -> None:
        view = _view({"c6": "N"})
        targets = {_sq(n) for n in ("a5", "a7", "b4", "b8", "d4", "d8", "e5", "e7")}
        assert set(legal_targets(_sq("c6"), view)) == targets

    def test_knight_jumps_over_pieces(self) -> None:
        view = _view({"c6": "N", "c7": "P", "b6": "P", "d7": "p"})
        assert is_valid_move(_sq("c6"), _sq("b8"), view)

    def test_king_single_step(self) -> None:
        view = _view({"c6": "K"})
        assert len(legal_targets(_sq("c6"), view)) == 8
        assert not is_valid_move(_sq("c6"), _sq("c8"), view)

    def test_king_in_corner(self) -> None:
        view = _view({"a1": "K"})
        assert set(legal_targets(_sq("a1"), view)) == {_sq("a2"), _sq("b1"), _sq("b2")}


class TestMiner:
    def test_moves_like_rook(self) -> None:
        view = _view({"c6": "M", "c9": "p"})
        assert is_valid_move(_sq("c6"), _sq("a6"), view)
        assert classify_move(_sq("c6"), _sq("c9"), view) == MoveKind.CAPTURE
        assert not is_valid_move(_sq("c6"), _sq("c10"), view)
        assert not is_valid_move(_sq("c6"), _sq("d7"), view)


class TestPawn:
    def test_single_step_forward(self) -> None:
        view = _view({"c2": "P"})
        assert classify_move(_sq("c2"), _sq("c3"), view) == MoveKind.NORMAL

    def test_double_step_on_first_move(self) -> None:
        view = _view({"c2": "P"})
        assert classify_move(_sq("c2"), _sq("c4"), view) == MoveKind.DOUBLE_STEP

    def test_no_double_step_after_moving(self) -> None:
        board = Board()
        pawn = Piece(Color.WHITE, PieceType.PAWN, first_move=False)
        board[_sq("c2")] = pawn
        assert not is_valid_move(_sq("c2"), _sq("c4"), board.view())

    def test_double_step_blocked_by_intermediate(self) -> None:
        view = _view({"c2": "P", "c3": "n"})
        assert not is_valid_move(_sq("c2"), _sq("c4"), view)

    def test_no_straight_capture(self) -> None:
        view = _view({"c2": "P", "c3": "p"})
        assert not is_valid_move(_sq("c2"), _sq("c3"), view)

    def test_never_backwards(self) -> None:
        view = _view({"c5": "P", "c10": "p"})
        assert not is_valid_move(_sq("c5"), _sq("c4"), view)
        assert not is_valid_move(_sq("c10"), _sq("c11"), view)

    def test_black_moves_down(self) -> None:
        view = _view({"c10": "p"})
        assert classify_move(_sq("c10"), _sq("c9"), view) == MoveKind.NORMAL
        assert classify_move(_sq("c10"), _sq("c8"), view) == MoveKind.DOUBLE_STEP

    def test_diagonal_capture(self) -> None:
        view = _view({"c2": "P", "d3": "r"})
        assert classify_move(_sq("c2"), _sq("d3"), view) == MoveKind.CAPTURE

    def test_diagonal_to_empty_rejected(self) -> None:
        view = _view({"c2": "P"})
        assert not is_valid_move(_sq("c2"), _sq("d3"), view)

    def test_sideways_rejected(self) -> None:
        view = _view({"c2": "P"})
        assert not is_valid_move(_sq("c2"), _sq("d2"), view)


class TestEnPassant:
    @staticmethod
    def _setup(mover: str, victim: str, flagged: bool = True) -> BoardView:
        board = Board()
        board[_sq(mover)] = Piece.from_char("P" if mover[1:] == "5" else "p")
        enemy = Piece.from_char("p" if mover[1:] == "5" else "P")
        enemy.just_made_double_step = flagged
        board[_sq(victim)] = enemy
        return board.view()

    def test_white_on_row_five_captures(self) -> None:
        view = self._setup("b5", "c5")
        assert classify_move(_sq("b5"), _sq("c6"), view) == MoveKind.EN_PASSANT

    def test_black_on_row_four_captures(self) -> None:
        view = self._setup("b4", "c4")
        assert classify_move(_sq("b4"), _sq("c3"), view) == MoveKind.EN_PASSANT

    def test_requires_double_step_flag(self) -> None:
        view = self._setup("b5", "c5", flagged=False)
        assert not is_valid_move(_sq("b5"), _sq("c6"), view)

    def test_requires_en_passant_row(self) -> None:
        board = Board()
        board[_sq("b6")] = Piece.from_char("P")
        enemy = Piece.from_char("p")
        enemy.just_made_double_step = True
        board[_sq("c6")] = enemy
        assert not is_valid_move(_sq("b6"), _sq("c7"), board.view())

    def test_victim_must_be_pawn(self) -> None:
        board = Board()
        board[_sq("b5")] = Piece.from_char("P")
        board[_sq("c5")] = Piece.from_char("n")
        assert not is_valid_move(_sq("b5"), _sq("c6"), board.view())


class TestPromotionRow:
    def test_white_promotes_on_row_eight(self) -> None:
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        assert reaches_promotion_row(pawn, make_square(0, 7))
        assert not reaches_promotion_row(pawn, make_square(0, 6))

    def test_black_promotes_on_row_one(self) -> None:
        pawn = Piece(Color.BLACK, PieceType.PAWN)
        assert reaches_promotion_row(pawn, make_square(3, 0))

    def test_only_pawns(self) -> None:
        rook = Piece(Color.WHITE, PieceType.ROOK)
        assert not reaches_promotion_row(rook, make_square(0, 7))
