"""Tests for Position, the initial position factory and rule options."""

import dataclasses

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.options import STANDARD, RuleOptions
from chessrules.core.piece import Piece
from chessrules.core.position import Position, initial_position
from chessrules.core.types import A1, E1, E2, E4, E8, H8


class TestInitialPosition:
    def test_sixteen_pieces_per_side(self) -> None:
        pos = initial_position()
        assert len(pos.board.all_pieces(Color.WHITE)) == 16
        assert len(pos.board.all_pieces(Color.BLACK)) == 16

    def test_white_to_move(self) -> None:
        pos = initial_position()
        assert pos.side_to_move == Color.WHITE
        assert pos.active_color == Color.WHITE

    def test_metadata(self) -> None:
        pos = initial_position()
        assert pos.castling == CastlingRights.ALL
        assert pos.en_passant is None
        assert (pos.halfmove_clock, pos.fullmove_number) == (0, 1)

    def test_idempotent(self) -> None:
        assert initial_position() == initial_position()
        assert hash(initial_position()) == hash(initial_position())
        assert Position.initial() == initial_position()

    def test_standard_arrangement(self) -> None:
        pos = initial_position()
        assert pos.board == Board.initial()
        assert pos.piece_at(E1) == Piece(Color.WHITE, PieceType.KING)
        assert pos.piece_at(E8) == Piece(Color.BLACK, PieceType.KING)
        assert pos.piece_at(E2) == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.piece_at(E4) is None


class TestPosition:
    def test_frozen(self) -> None:
        pos = initial_position()
        with pytest.raises(dataclasses.FrozenInstanceError):
            pos.side_to_move = Color.BLACK  # type: ignore[misc]

    def test_piece_at_off_board(self) -> None:
        pos = initial_position()
        assert pos.piece_at(-1) is None
        assert pos.piece_at(64) is None

    def test_kingless_position_is_allowed(self) -> None:
        pos = Position(Board.from_mapping({A1: Piece(Color.WHITE, PieceType.ROOK)}))
        assert pos.board.king_square(Color.WHITE) is None

    def test_invalid_en_passant(self) -> None:
        with pytest.raises(ValueError, match="en-passant"):
            Position(en_passant=64)

    def test_invalid_clocks(self) -> None:
        with pytest.raises(ValueError, match="halfmove"):
            Position(halfmove_clock=-1)
        with pytest.raises(ValueError, match="fullmove"):
            Position(fullmove_number=0)

    def test_equality_covers_side_to_move(self) -> None:
        assert Position(side_to_move=Color.BLACK) != initial_position()

    def test_positions_with_same_board_share_hash(self) -> None:
        board = Board.from_mapping({H8: Piece(Color.BLACK, PieceType.KING)})
        assert hash(Position(board)) == hash(Position(board))


class TestRuleOptions:
    def test_standard_is_default(self) -> None:
        assert RuleOptions() == RuleOptions.standard() == STANDARD
        assert STANDARD.check_safety and STANDARD.castling
        assert STANDARD.en_passant and STANDARD.promotion

    def test_basic_disables_special_rules(self) -> None:
        basic = RuleOptions.basic()
        assert not (basic.check_safety or basic.castling or basic.en_passant or basic.promotion)

    def test_describe(self) -> None:
        assert RuleOptions.basic().describe() == "basic"
        assert RuleOptions(castling=False, en_passant=False, promotion=False).describe() == (
            "check_safety"
        )
        assert "castling" in STANDARD.describe()
