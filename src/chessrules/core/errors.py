"""Exception hierarchy for the rules engine.

Ordinary illegal move attempts are *not* errors: the validator reports them
as a :class:`~chessrules.core.validator.MoveOutcome`. The exceptions here are
for callers that break the engine's contracts or ask for a move to be forced
through.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.enums import RejectionReason
    from chessrules.core.move import Move

__all__ = [
    "ChessRulesError",
    "IllegalMoveError",
    "MoveContractError",
]


class ChessRulesError(Exception):
    """Base class for every error raised by the engine."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class IllegalMoveError(ChessRulesError, ValueError):
    """A move was played without passing validation."""

    def __init__(self, move: Move, reason: RejectionReason) -> None:
        super().__init__(f"Illegal move {move}: {reason}")
        self.move = move
        self.reason = reason


class MoveContractError(ChessRulesError):
    """The applier was handed a move that cannot have been validated."""

    def __init__(self, message: str, move: Move | None = None) -> None:
        super().__init__(message)
        self.move = move
