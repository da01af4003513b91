"""Attack detection on a board."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.movement import king_targets, knight_targets, pawn_captures, rays
from chessrules.core.piece import Piece
from chessrules.core.types import Square

_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)
_STRAIGHT_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)


def _first_piece(board: Board, ray: tuple[Square, ...]) -> Piece | None:
    for to_sq in ray:
        piece = board[to_sq]
        if piece is not None:
            return piece
    return None


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    # A pawn of by_color attacks sq from the squares an opposing pawn on sq
    # would capture towards.
    pawn = Piece(by_color, PieceType.PAWN)
    if any(
        board[from_sq] == pawn for from_sq in pawn_captures(by_color.opposite, sq)
    ):
        return True

    knight = Piece(by_color, PieceType.KNIGHT)
    if any(board[from_sq] == knight for from_sq in knight_targets(sq)):
        return True

    king = Piece(by_color, PieceType.KING)
    if any(board[from_sq] == king for from_sq in king_targets(sq)):
        return True

    for ray in rays(PieceType.BISHOP, sq):
        piece = _first_piece(board, ray)
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type in _DIAGONAL_ATTACKERS
        ):
            return True

    for ray in rays(PieceType.ROOK, sq):
        piece = _first_piece(board, ray)
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type in _STRAIGHT_ATTACKERS
        ):
            return True

    return False


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked? A side without a king is never in check."""
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, color.opposite)
