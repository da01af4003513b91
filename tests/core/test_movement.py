"""Tests for the movement rule set (pure geometry) and attack detection."""

import pytest

from chessrules.core.attacks import is_in_check, is_square_attacked
from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.movement import (
    CASTLING_ROUTES,
    candidate_squares,
    pawn_captures,
    pawn_pushes,
    rays,
    squares_between,
)
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, A8, B1, C1, D1, D4, E1, E2, E4, E8, F1, G1, H1, H8,
    parse_square,
    square_name,
)


def _names(squares: tuple[int, ...]) -> set[str]:
    return {square_name(sq) for sq in squares}


class TestCandidateSquares:
    def test_knight_in_corner(self) -> None:
        assert _names(candidate_squares(PieceType.KNIGHT, Color.WHITE, A1)) == {"b3", "c2"}

    def test_knight_in_centre(self) -> None:
        assert len(candidate_squares(PieceType.KNIGHT, Color.WHITE, D4)) == 8

    def test_king_on_edge(self) -> None:
        assert _names(candidate_squares(PieceType.KING, Color.BLACK, H8)) == {"g8", "g7", "h7"}

    def test_rook_covers_rank_and_file(self) -> None:
        squares = candidate_squares(PieceType.ROOK, Color.WHITE, D4)
        assert len(squares) == 14
        assert parse_square("d8") in squares and parse_square("a4") in squares

    def test_bishop_from_centre(self) -> None:
        assert len(candidate_squares(PieceType.BISHOP, Color.WHITE, D4)) == 13

    def test_queen_is_rook_plus_bishop(self) -> None:
        queen = set(candidate_squares(PieceType.QUEEN, Color.WHITE, D4))
        rook = set(candidate_squares(PieceType.ROOK, Color.WHITE, D4))
        bishop = set(candidate_squares(PieceType.BISHOP, Color.WHITE, D4))
        assert queen == rook | bishop

    def test_occupancy_is_ignored(self) -> None:
        # a1 rook reaches a8 even though a2..a7 are full in the initial position
        assert A8 in candidate_squares(PieceType.ROOK, Color.WHITE, A1)

    def test_white_pawn_on_start_rank(self) -> None:
        assert _names(pawn_pushes(Color.WHITE, E2)) == {"e3", "e4"}
        assert _names(pawn_captures(Color.WHITE, E2)) == {"d3", "f3"}

    def test_black_pawn_moves_down(self) -> None:
        e7 = parse_square("e7")
        assert _names(pawn_pushes(Color.BLACK, e7)) == {"e6", "e5"}
        assert _names(pawn_captures(Color.BLACK, e7)) == {"d6", "f6"}

    def test_pawn_off_start_rank_single_step(self) -> None:
        assert _names(pawn_pushes(Color.WHITE, E4)) == {"e5"}

    def test_edge_pawn_has_one_capture(self) -> None:
        assert _names(pawn_captures(Color.WHITE, parse_square("a2"))) == {"b3"}

    def test_pawn_candidates_combine_pushes_and_captures(self) -> None:
        assert _names(candidate_squares(PieceType.PAWN, Color.WHITE, E2)) == {
            "e3", "e4", "d3", "f3",
        }

    def test_castling_destinations_only_from_home(self) -> None:
        with_castling = candidate_squares(PieceType.KING, Color.WHITE, E1, castling=True)
        assert {G1, C1} <= set(with_castling)
        assert G1 not in candidate_squares(PieceType.KING, Color.WHITE, E1)
        assert G1 not in candidate_squares(PieceType.KING, Color.WHITE, D1, castling=True)
        # a white king on e8 is not on its home square
        assert parse_square("g8") not in candidate_squares(
            PieceType.KING, Color.WHITE, E8, castling=True
        )

    def test_every_piece_type_is_handled(self) -> None:
        for pt in PieceType:
            for color in Color:
                assert isinstance(candidate_squares(pt, color, D4), tuple)


class TestRaysAndLines:
    def test_rays_nearest_first(self) -> None:
        north = next(ray for ray in rays(PieceType.ROOK, A1) if ray and ray[0] == parse_square("a2"))
        assert north[-1] == A8
        assert len(north) == 7

    def test_non_sliding_has_no_rays(self) -> None:
        assert rays(PieceType.KNIGHT, D4) == ()

    def test_squares_between_line(self) -> None:
        assert squares_between(A1, H1) == (B1, C1, D1, E1, F1, parse_square("g1"))
        assert squares_between(A1, H8)[0] == parse_square("b2")

    def test_squares_between_adjacent_or_unaligned(self) -> None:
        assert squares_between(E1, F1) == ()
        assert squares_between(A1, parse_square("b3")) == ()

    def test_castling_routes(self) -> None:
        kingside = CASTLING_ROUTES[G1]
        assert (kingside.rook_from, kingside.rook_to) == (H1, F1)
        queenside = CASTLING_ROUTES[C1]
        assert set(queenside.must_be_empty) == {B1, C1, D1}
        assert B1 not in queenside.king_path


class TestAttacks:
    @pytest.fixture
    def board(self) -> Board:
        return Board.from_mapping(
            {
                E1: Piece(Color.WHITE, PieceType.KING),
                E8: Piece(Color.BLACK, PieceType.KING),
                parse_square("a4"): Piece(Color.BLACK, PieceType.BISHOP),
                parse_square("d3"): Piece(Color.BLACK, PieceType.PAWN),
            }
        )

    def test_pawn_attacks_diagonally_forward(self, board: Board) -> None:
        assert is_square_attacked(board, parse_square("e2"), Color.BLACK)
        assert is_square_attacked(board, parse_square("c2"), Color.BLACK)
        assert not is_square_attacked(board, parse_square("d2"), Color.BLACK)

    def test_slider_blocked_by_piece(self, board: Board) -> None:
        assert is_square_attacked(board, D1, Color.BLACK)
        blocked = board.replace({parse_square("b3"): Piece(Color.WHITE, PieceType.PAWN)})
        assert not is_square_attacked(blocked, D1, Color.BLACK)

    def test_king_in_check(self, board: Board) -> None:
        assert not is_in_check(board, Color.WHITE)
        checked = board.replace({parse_square("e5"): Piece(Color.BLACK, PieceType.ROOK)})
        assert is_in_check(checked, Color.WHITE)

    def test_missing_king_is_never_in_check(self) -> None:
        board = Board.from_mapping({A1: Piece(Color.BLACK, PieceType.ROOK)})
        assert not is_in_check(board, Color.WHITE)
