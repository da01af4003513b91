"""Legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.attacks import is_in_check, is_square_attacked
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.movement import PROMOTION_RANK, PROMOTION_TYPES, candidate_squares
from chessrules.core.options import STANDARD, RuleOptions
from chessrules.core.types import Square, is_valid_square, rank_of
from chessrules.core.validator import destination_rejection

if TYPE_CHECKING:
    from chessrules.core.position import Position


class MoveGenerator:
    """Enumerates legal moves for a given :class:`Position`.

    Candidate squares come from the movement rule set and are filtered
    through the validator's own per-destination checks, so every move
    produced here validates and every other move is rejected.
    """

    __slots__ = ("_pos", "_options")

    def __init__(self, position: Position, options: RuleOptions = STANDARD) -> None:
        self._pos = position
        self._options = options

    # -- Public API ---------------------------------------------------------

    def legal_destinations(self, sq: Square) -> frozenset[Square]:
        """Legal target squares for the piece on *sq*.

        Empty when *sq* is off-board, empty, or holds a piece of the side
        not to move.
        """
        if not is_valid_square(sq):
            return frozenset()
        piece = self._pos.board[sq]
        if piece is None or piece.color != self._pos.side_to_move:
            return frozenset()

        options = self._options
        return frozenset(
            to_sq
            for to_sq in candidate_squares(
                piece.piece_type, piece.color, sq, castling=options.castling
            )
            if destination_rejection(self._pos, piece, sq, to_sq, None, options) is None
        )

    def generate_legal_moves(self) -> list[Move]:
        """All legal moves for the side to move, one per promotion choice."""
        legal: list[Move] = []
        board = self._pos.board
        promotes = self._options.promotion

        for from_sq in board.all_pieces(self._pos.side_to_move):
            piece = board[from_sq]
            assert piece is not None
            for to_sq in sorted(self.legal_destinations(from_sq)):
                if (
                    promotes
                    and piece.piece_type == PieceType.PAWN
                    and rank_of(to_sq) == PROMOTION_RANK[piece.color]
                ):
                    legal.extend(Move(from_sq, to_sq, pt) for pt in PROMOTION_TYPES)
                else:
                    legal.append(Move(from_sq, to_sq))
        return legal

    def has_legal_move(self) -> bool:
        board = self._pos.board
        return any(
            self.legal_destinations(sq)
            for sq in board.all_pieces(self._pos.side_to_move)
        )

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_in_check(self._pos.board, color)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return is_square_attacked(self._pos.board, sq, by_color)


def legal_moves(
    position: Position, sq: Square, options: RuleOptions = STANDARD
) -> frozenset[Square]:
    """Legal destination squares for the piece on *sq*."""
    return MoveGenerator(position, options).legal_destinations(sq)
