"""Move validation: accept or reject a single proposed move."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from chessrules.core.applier import apply_move, en_passant_victim, successor_board
from chessrules.core.attacks import is_in_check, is_square_attacked
from chessrules.core.enums import PieceType, RejectionReason
from chessrules.core.errors import IllegalMoveError
from chessrules.core.move import Move
from chessrules.core.movement import (
    CASTLING_ROUTES,
    CastlingRoute,
    PROMOTION_RANK,
    PROMOTION_TYPES,
    candidate_squares,
    squares_between,
)
from chessrules.core.options import STANDARD, RuleOptions
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import Square, file_of, is_valid_square, rank_of

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of :func:`validate`: valid, or rejected with a reason."""

    reason: RejectionReason | None = None

    VALID: ClassVar[MoveOutcome]

    @classmethod
    def rejected(cls, reason: RejectionReason) -> MoveOutcome:
        return cls(reason)

    @property
    def valid(self) -> bool:
        return self.reason is None

    @property
    def message(self) -> str:
        return "valid" if self.reason is None else self.reason.value

    def __bool__(self) -> bool:
        return self.valid

    def __str__(self) -> str:
        return self.message


MoveOutcome.VALID = MoveOutcome()


def validate(
    position: Position, move: Move, options: RuleOptions = STANDARD
) -> MoveOutcome:
    """Judge *move* against *position*.

    Checks run in a fixed order and the first failure is reported:
    board bounds, empty source, turn ownership, self-capture, movement
    pattern, path obstruction, pawn push/capture rules, then the optional
    promotion, castling and king-safety rules enabled in *options*.
    """
    reason = _source_rejection(position, move)
    if reason is None:
        piece = position.board[move.from_sq]
        assert piece is not None
        reason = destination_rejection(
            position, piece, move.from_sq, move.to_sq, move.promotion, options
        )
    if reason is None:
        return MoveOutcome.VALID
    _LOGGER.debug("Rejected %s: %s", move, reason.name)
    return MoveOutcome.rejected(reason)


def is_legal(position: Position, move: Move, options: RuleOptions = STANDARD) -> bool:
    return validate(position, move, options).valid


def play(position: Position, move: Move, options: RuleOptions = STANDARD) -> Position:
    """Validate *move* and apply it, raising :class:`IllegalMoveError` if rejected."""
    outcome = validate(position, move, options)
    if outcome.reason is not None:
        raise IllegalMoveError(move, outcome.reason)
    return apply_move(position, move, options)


def _source_rejection(position: Position, move: Move) -> RejectionReason | None:
    if not (is_valid_square(move.from_sq) and is_valid_square(move.to_sq)):
        return RejectionReason.OFF_BOARD
    piece = position.board[move.from_sq]
    if piece is None:
        return RejectionReason.EMPTY_SOURCE
    if piece.color != position.side_to_move:
        return RejectionReason.NOT_YOUR_TURN
    return None


def destination_rejection(
    position: Position,
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    promotion: PieceType | None = None,
    options: RuleOptions = STANDARD,
) -> RejectionReason | None:
    """Per-destination checks shared by the validator and the move generator.

    *piece* must be the side to move's piece standing on *from_sq*.
    """
    board = position.board
    target = board[to_sq]

    if target is not None and target.color == piece.color:
        return RejectionReason.OWN_PIECE

    if to_sq not in candidate_squares(
        piece.piece_type, piece.color, from_sq, castling=options.castling
    ):
        return RejectionReason.ILLEGAL_PATTERN

    if piece.piece_type.is_sliding and any(
        board[sq] is not None for sq in squares_between(from_sq, to_sq)
    ):
        return RejectionReason.PATH_BLOCKED

    move = Move(from_sq, to_sq, promotion)

    if piece.piece_type == PieceType.PAWN:
        reason = _pawn_rejection(position, piece, move, options)
        if reason is not None:
            return reason

    if promotion is not None:
        if (
            not options.promotion
            or piece.piece_type != PieceType.PAWN
            or rank_of(to_sq) != PROMOTION_RANK[piece.color]
            or promotion not in PROMOTION_TYPES
        ):
            return RejectionReason.INVALID_PROMOTION

    route = CASTLING_ROUTES.get(to_sq)
    if (
        piece.piece_type == PieceType.KING
        and route is not None
        and route.king_from == from_sq
    ):
        if not _castling_allowed(position, piece, route):
            return RejectionReason.CASTLING_NOT_ALLOWED

    if options.check_safety and is_in_check(
        successor_board(position, move, options), piece.color
    ):
        return RejectionReason.KING_IN_CHECK

    return None


def _pawn_rejection(
    position: Position, piece: Piece, move: Move, options: RuleOptions
) -> RejectionReason | None:
    board = position.board
    target = board[move.to_sq]

    if file_of(move.to_sq) != file_of(move.from_sq):
        if target is not None:
            return None
        if options.en_passant and move.to_sq == position.en_passant:
            victim = board[en_passant_victim(move)]
            if victim == Piece(piece.color.opposite, PieceType.PAWN):
                return None
        return RejectionReason.PAWN_CAPTURE_REQUIRED

    if target is not None:
        return RejectionReason.PAWN_PUSH_BLOCKED
    if any(board[sq] is not None for sq in squares_between(move.from_sq, move.to_sq)):
        return RejectionReason.PATH_BLOCKED
    return None


def _castling_allowed(position: Position, king: Piece, route: CastlingRoute) -> bool:
    board = position.board
    if not position.castling & route.right:
        return False
    if board[route.rook_from] != Piece(king.color, PieceType.ROOK):
        return False
    if any(board[sq] is not None for sq in route.must_be_empty):
        return False
    opponent = king.color.opposite
    if is_square_attacked(board, route.king_from, opponent):
        return False
    return not any(is_square_attacked(board, sq, opponent) for sq in route.king_path)
