"""Move application: derive the successor of a position."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.errors import MoveContractError
from chessrules.core.move import Move
from chessrules.core.movement import CASTLING_ROUTES, PROMOTION_RANK
from chessrules.core.options import STANDARD, RuleOptions
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import (
    Square,
    file_of,
    is_valid_square,
    make_square,
    rank_of,
)

_ROOK_CORNERS: dict[Square, CastlingRights] = {
    make_square(0, 0): CastlingRights.WHITE_QUEENSIDE,
    make_square(7, 0): CastlingRights.WHITE_KINGSIDE,
    make_square(0, 7): CastlingRights.BLACK_QUEENSIDE,
    make_square(7, 7): CastlingRights.BLACK_KINGSIDE,
}
_KING_RIGHTS: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_BOTH,
    Color.BLACK: CastlingRights.BLACK_BOTH,
}


def en_passant_victim(move: Move) -> Square:
    """Square of the pawn removed by an en-passant capture."""
    return make_square(file_of(move.to_sq), rank_of(move.from_sq))


def classify_move(
    position: Position, move: Move, options: RuleOptions = STANDARD
) -> MoveFlag:
    """Classify *move* against *position* (assumes the move is legal)."""
    piece = position.board[move.from_sq]
    if piece is None:
        return MoveFlag.NORMAL

    if piece.piece_type == PieceType.KING:
        route = CASTLING_ROUTES.get(move.to_sq)
        if options.castling and route is not None and route.king_from == move.from_sq:
            return (
                MoveFlag.CASTLE_KINGSIDE
                if file_of(move.to_sq) > file_of(move.from_sq)
                else MoveFlag.CASTLE_QUEENSIDE
            )
        return MoveFlag.NORMAL

    if piece.piece_type != PieceType.PAWN:
        return MoveFlag.NORMAL

    if options.promotion and rank_of(move.to_sq) == PROMOTION_RANK[piece.color]:
        return MoveFlag.PROMOTION
    if abs(rank_of(move.to_sq) - rank_of(move.from_sq)) == 2:
        return MoveFlag.DOUBLE_PAWN
    if (
        options.en_passant
        and file_of(move.to_sq) != file_of(move.from_sq)
        and move.to_sq == position.en_passant
        and position.board.is_empty(move.to_sq)
    ):
        return MoveFlag.EN_PASSANT
    return MoveFlag.NORMAL


def captured_piece(
    position: Position, move: Move, options: RuleOptions = STANDARD
) -> Piece | None:
    """The piece *move* would remove from the board, if any."""
    if classify_move(position, move, options) == MoveFlag.EN_PASSANT:
        return position.board[en_passant_victim(move)]
    return position.board[move.to_sq]


def apply_move(
    position: Position, move: Move, options: RuleOptions = STANDARD
) -> Position:
    """Return the position after *move*.

    The caller must already have validated *move* for *position*; only the
    violations visible without running the rules (off-board squares, empty
    source square) are detected and raised as :class:`MoveContractError`.
    *position* itself is never modified.
    """
    if not (is_valid_square(move.from_sq) and is_valid_square(move.to_sq)):
        raise MoveContractError(f"Move leaves the board: {move}", move)
    piece = position.board[move.from_sq]
    if piece is None:
        raise MoveContractError(f"No piece on source square of {move}", move)

    flag = classify_move(position, move, options)
    board = position.board
    captured = board[move.to_sq]
    changes: dict[Square, Piece | None] = {move.from_sq: None}

    if flag == MoveFlag.EN_PASSANT:
        victim_sq = en_passant_victim(move)
        captured = board[victim_sq]
        changes[victim_sq] = None

    placed = piece
    if flag == MoveFlag.PROMOTION:
        placed = piece.promoted_to(move.promotion or PieceType.QUEEN)
    changes[move.to_sq] = placed

    # Slide the rook for castling
    if flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE):
        route = CASTLING_ROUTES[move.to_sq]
        changes[route.rook_to] = board[route.rook_from]
        changes[route.rook_from] = None

    next_en_passant: Square | None = None
    if flag == MoveFlag.DOUBLE_PAWN and options.en_passant:
        next_en_passant = make_square(
            file_of(move.from_sq),
            (rank_of(move.from_sq) + rank_of(move.to_sq)) // 2,
        )

    if piece.piece_type == PieceType.PAWN or captured is not None:
        halfmove_clock = 0
    else:
        halfmove_clock = position.halfmove_clock + 1

    fullmove_number = position.fullmove_number
    if position.side_to_move == Color.BLACK:
        fullmove_number += 1

    return Position(
        board=board.replace(changes),
        side_to_move=position.side_to_move.opposite,
        castling=_next_castling(position.castling, move, piece),
        en_passant=next_en_passant,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
    )


def successor_board(
    position: Position, move: Move, options: RuleOptions = STANDARD
) -> Board:
    """Board after *move*, without the metadata bookkeeping."""
    return apply_move(position, move, options).board


def _next_castling(castling: CastlingRights, move: Move, piece: Piece) -> CastlingRights:
    if piece.piece_type == PieceType.KING:
        castling &= ~_KING_RIGHTS[piece.color]
    # A rook leaving or being captured on its corner loses that side.
    for sq in (move.from_sq, move.to_sq):
        if sq in _ROOK_CORNERS:
            castling &= ~_ROOK_CORNERS[sq]
    return castling
