"""High-level chess rules: check, checkmate, stalemate, draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.options import STANDARD, RuleOptions
from chessrules.core.types import file_of, rank_of

if TYPE_CHECKING:
    from chessrules.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position, options: RuleOptions = STANDARD) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not MoveGenerator(position, options).has_legal_move()

    @staticmethod
    def is_stalemate(position: Position, options: RuleOptions = STANDARD) -> bool:
        if Rules.is_in_check(position):
            return False
        return not MoveGenerator(position, options).has_legal_move()

    @staticmethod
    def is_insufficient_material(position: Position) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops)."""
        board = position.board
        others = [
            (sq, piece)
            for sq, piece in board.occupied()
            if piece.piece_type != PieceType.KING
        ]

        if not others:
            return True

        if len(others) == 1:
            return others[0][1].piece_type in (PieceType.KNIGHT, PieceType.BISHOP)

        if len(others) == 2:
            (a_sq, a), (b_sq, b) = others
            if (
                a.piece_type == PieceType.BISHOP
                and b.piece_type == PieceType.BISHOP
                and a.color != b.color
            ):
                a_shade = (file_of(a_sq) + rank_of(a_sq)) % 2
                b_shade = (file_of(b_sq) + rank_of(b_sq)) % 2
                return a_shade == b_shade

        return False

    @staticmethod
    def is_fifty_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= 100  # 100 half-moves = 50 full moves

    @staticmethod
    def is_seventy_five_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= 150  # 150 half-moves = 75 full moves

    @staticmethod
    def is_automatic_draw(position: Position) -> bool:
        """Whether the position is an automatic draw without player claim."""
        return (
            Rules.is_insufficient_material(position)
            or Rules.is_seventy_five_move_rule(position)
        )

    @staticmethod
    def game_result(position: Position, options: RuleOptions = STANDARD) -> GameResult:
        """Determine the current game result."""
        gen = MoveGenerator(position, options)

        if not gen.has_legal_move():
            if gen.is_in_check(position.side_to_move):
                return (
                    GameResult.BLACK_WINS
                    if position.side_to_move == Color.WHITE
                    else GameResult.WHITE_WINS
                )
            return GameResult.DRAW  # stalemate

        if Rules.is_automatic_draw(position):
            return GameResult.DRAW

        return GameResult.IN_PROGRESS
