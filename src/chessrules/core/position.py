"""Position — immutable snapshot of piece placement plus game metadata."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.piece import Piece
from chessrules.core.types import Square, is_valid_square


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    Positions are values. Every transition (see
    :func:`chessrules.core.applier.apply_move`) builds a new instance, so a
    caller may keep any earlier position around, e.g. for history navigation.
    The constructor does not insist on one king per side; the engine copes
    with positions that lack one.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    def __post_init__(self) -> None:
        if self.en_passant is not None and not is_valid_square(self.en_passant):
            raise ValueError(f"Invalid en-passant square: {self.en_passant!r}")
        if self.halfmove_clock < 0:
            raise ValueError(f"Invalid halfmove clock: {self.halfmove_clock!r}")
        if self.fullmove_number < 1:
            raise ValueError(f"Invalid fullmove number: {self.fullmove_number!r}")

    @property
    def active_color(self) -> Color:
        """The side whose move is currently legal."""
        return self.side_to_move

    def piece_at(self, sq: Square) -> Piece | None:
        """Piece on *sq*, or ``None`` for empty and off-board squares."""
        if not is_valid_square(sq):
            return None
        return self.board[sq]

    @classmethod
    def initial(cls) -> Position:
        return cls()


def initial_position() -> Position:
    """Standard starting position with White to move."""
    return Position.initial()
