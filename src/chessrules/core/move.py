"""Move request value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.types import Square, is_valid_square, parse_square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}
_PROMO_TYPES: dict[str, PieceType] = {v: k for k, v in _PROMO_CHARS.items()}


def _name(sq: Square) -> str:
    return square_name(sq) if is_valid_square(sq) else f"?{sq}"


@dataclass(frozen=True, slots=True)
class Move:
    """A requested relocation of the piece on *from_sq* to *to_sq*.

    Nothing is checked on construction; legality is judged against a
    position by :func:`chessrules.core.validator.validate`.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    def __str__(self) -> str:
        base = f"{_name(self.from_sq)}{_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    @classmethod
    def from_names(
        cls, from_name: str, to_name: str, promotion: PieceType | None = None
    ) -> Move:
        """Build a move from two square names, e.g. ``("e2", "e4")``."""
        return cls(parse_square(from_name), parse_square(to_name), promotion)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse ``e2e4`` / ``e7e8q``."""
        text = text.strip().lower()
        if len(text) not in (4, 5):
            raise ValueError(f"Invalid UCI move: {text!r}")
        promotion: PieceType | None = None
        if len(text) == 5:
            promotion = _PROMO_TYPES.get(text[4])
            if promotion is None:
                raise ValueError(f"Invalid UCI promotion piece: {text!r}")
        return cls(parse_square(text[:2]), parse_square(text[2:4]), promotion)
