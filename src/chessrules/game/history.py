"""Move log: an ordered record of accepted moves plus a navigation cursor.

The log owns no chess logic: every position it reports is rebuilt by
replaying the recorded moves from the start position through the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import cached_property

from chessrules.core.applier import apply_move
from chessrules.core.enums import GameResult
from chessrules.core.errors import IllegalMoveError
from chessrules.core.move import Move
from chessrules.core.notation.pgn import (
    first_ply,
    moves_to_pgn,
    movetext_from_sans,
    sans_from_moves,
)
from chessrules.core.options import STANDARD, RuleOptions
from chessrules.core.position import Position, initial_position
from chessrules.core.rules import Rules
from chessrules.core.validator import validate


@dataclass(frozen=True)
class MoveLog:
    """Immutable move history with a cursor.

    ``cursor`` is the index of the move the current position follows;
    ``-1`` means "before the first move". Navigation methods return a new
    log and leave this one unchanged; a request that makes no sense (jumping
    past the end, stepping back from the start) returns the log as-is.
    """

    moves: tuple[Move, ...] = ()
    cursor: int = -1
    start: Position = field(default_factory=initial_position)
    options: RuleOptions = STANDARD

    def __post_init__(self) -> None:
        if not -1 <= self.cursor < len(self.moves):
            raise ValueError(
                f"Cursor {self.cursor} out of range for {len(self.moves)} moves"
            )

    # ── Positions ────────────────────────────────────────────────────────

    @cached_property
    def _positions(self) -> tuple[Position, ...]:
        positions = [self.start]
        for move in self.moves:
            positions.append(apply_move(positions[-1], move, self.options))
        return tuple(positions)

    def position_at(self, index: int) -> Position:
        """Position after move *index* (``-1`` → the start position)."""
        if not -1 <= index < len(self.moves):
            raise IndexError(f"No move at index {index}")
        return self._positions[index + 1]

    @property
    def current_position(self) -> Position:
        return self.position_at(self.cursor)

    @property
    def latest_position(self) -> Position:
        return self._positions[-1]

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_previewing(self) -> bool:
        """True while the cursor sits before the most recent move."""
        return self.cursor < len(self.moves) - 1

    @property
    def ply_count(self) -> int:
        """Number of half-moves up to the cursor."""
        return self.cursor + 1

    def __len__(self) -> int:
        return len(self.moves)

    def result(self) -> GameResult:
        return Rules.game_result(self.latest_position, self.options)

    # ── Recording ────────────────────────────────────────────────────────

    def record(self, move: Move) -> MoveLog:
        """Append an already-validated *move* after the cursor.

        Moves after the cursor are discarded first.
        """
        kept = self.moves[: self.cursor + 1]
        return replace(self, moves=(*kept, move), cursor=len(kept))

    def push(self, move: Move) -> MoveLog:
        """Validate *move* at the current position, then record it."""
        outcome = validate(self.current_position, move, self.options)
        if outcome.reason is not None:
            raise IllegalMoveError(move, outcome.reason)
        return self.record(move)

    # ── Navigation ───────────────────────────────────────────────────────

    def undo(self) -> MoveLog:
        """Take back the move at the cursor.

        The move stays recorded, so :meth:`next` redoes it; recording a new
        move from here discards it.
        """
        if self.cursor < 0:
            return self
        return replace(self, cursor=self.cursor - 1)

    def previous(self) -> MoveLog:
        return self.jump_to(self.cursor - 1)

    def next(self) -> MoveLog:
        return self.jump_to(self.cursor + 1)

    def jump_to(self, index: int) -> MoveLog:
        if not -1 <= index < len(self.moves) or index == self.cursor:
            return self
        return replace(self, cursor=index)

    def reset(self) -> MoveLog:
        return replace(self, moves=(), cursor=-1)

    # ── Export ───────────────────────────────────────────────────────────

    def sans(self) -> list[str]:
        return sans_from_moves(self.moves, self.start, self.options)

    def movetext(self) -> str:
        return movetext_from_sans(self.sans(), first_ply=first_ply(self.start))

    def to_pgn(self, headers: dict[str, str] | None = None) -> str:
        return moves_to_pgn(
            self.moves, self.result(), headers, start=self.start, options=self.options
        )
