"""The engine's four operations, spoken in algebraic square names.

This is the boundary the rendering and history layers talk to: squares go in
and come out as strings such as ``"e4"``; everything below it works on
integer square indices.

    >>> from chessrules import api
    >>> pos = api.initial_position()
    >>> api.validate(pos, "e2", "e4").valid
    True
    >>> sorted(api.legal_moves(pos, "g1"))
    ['f3', 'h3']
"""

from __future__ import annotations

from chessrules.core import applier, move_generator, position, validator
from chessrules.core.enums import PieceType
from chessrules.core.move import Move
from chessrules.core.options import STANDARD, RuleOptions
from chessrules.core.position import Position
from chessrules.core.types import parse_square, square_name
from chessrules.core.validator import MoveOutcome

__all__ = [
    "MoveOutcome",
    "Position",
    "apply_move",
    "initial_position",
    "legal_moves",
    "validate",
]


def initial_position() -> Position:
    """Standard starting position, White to move."""
    return position.initial_position()


def validate(
    pos: Position,
    from_square: str,
    to_square: str,
    promotion: PieceType | None = None,
    options: RuleOptions = STANDARD,
) -> MoveOutcome:
    """Judge the move *from_square* → *to_square*.

    Raises ``ValueError`` only for text that is not a square name; every
    illegal move is reported through the returned outcome.
    """
    return validator.validate(
        pos, Move.from_names(from_square, to_square, promotion), options
    )


def legal_moves(
    pos: Position, square: str, options: RuleOptions = STANDARD
) -> set[str]:
    """Names of the squares the piece on *square* may move to."""
    return {
        square_name(sq)
        for sq in move_generator.legal_moves(pos, parse_square(square), options)
    }


def apply_move(
    pos: Position,
    from_square: str,
    to_square: str,
    promotion: PieceType | None = None,
    options: RuleOptions = STANDARD,
) -> Position:
    """Successor of *pos* after an already-validated move."""
    return applier.apply_move(
        pos, Move.from_names(from_square, to_square, promotion), options
    )
