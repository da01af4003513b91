"""Core enumerations and flags for the rules engine."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def is_sliding(self) -> bool:
        return self in (PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN)


class MoveFlag(IntEnum):
    """Special move classification, derived from a position and a move."""

    NORMAL = 0
    DOUBLE_PAWN = 1
    EN_PASSANT = 2
    CASTLE_KINGSIDE = 3
    CASTLE_QUEENSIDE = 4
    PROMOTION = 5


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH


class RejectionReason(str, Enum):
    """Why the validator refused a move. The value is the display text."""

    OFF_BOARD = "square is off the board"
    EMPTY_SOURCE = "no piece on source square"
    NOT_YOUR_TURN = "not this piece's turn"
    OWN_PIECE = "destination occupied by own piece"
    ILLEGAL_PATTERN = "movement pattern not permitted for this piece"
    PATH_BLOCKED = "path is blocked"
    PAWN_CAPTURE_REQUIRED = "pawn can only move diagonally when capturing"
    PAWN_PUSH_BLOCKED = "pawn cannot capture straight ahead"
    INVALID_PROMOTION = "invalid promotion"
    CASTLING_NOT_ALLOWED = "castling is not allowed"
    KING_IN_CHECK = "move would leave own king in check"

    def __str__(self) -> str:
        return self.value


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
