"""JSON persistence for a :class:`MoveLog`.

The snapshot stores moves as UCI strings together with the cursor, so a log
can be rebuilt later by replaying those moves through the validator. A
stored document that is malformed or no longer replays cleanly is replaced
by an empty log.
"""

from __future__ import annotations

import logging

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from chessrules.core.errors import ChessRulesError
from chessrules.core.move import Move
from chessrules.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.notation.pgn import sans_from_moves
from chessrules.core.options import STANDARD, RuleOptions
from chessrules.game.history import MoveLog

_LOGGER = logging.getLogger(__name__)


class MoveRecordModel(BaseModel):
    """One recorded move."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    uci: str
    san: str | None = None

    @field_validator("uci")
    @classmethod
    def check_uci(cls, value: str) -> str:
        Move.from_uci(value)
        return value

    def to_move(self) -> Move:
        return Move.from_uci(self.uci)


class HistorySnapshot(BaseModel):
    """Serialized move log: recorded moves plus the navigation cursor."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    move_history: list[MoveRecordModel] = Field(default_factory=list, alias="moveHistory")
    current_move_index: int = Field(-1, alias="currentMoveIndex")
    is_previewing: bool = Field(False, alias="isPreviewing")
    start_fen: str = Field(STARTING_FEN, alias="startFen")

    @model_validator(mode="after")
    def check_cursor(self) -> HistorySnapshot:
        if not -1 <= self.current_move_index < len(self.move_history):
            raise ValueError(
                f"currentMoveIndex {self.current_move_index} out of range "
                f"for {len(self.move_history)} moves"
            )
        return self


def snapshot_from_log(log: MoveLog) -> HistorySnapshot:
    sans = sans_from_moves(log.moves, log.start, log.options)
    return HistorySnapshot(
        move_history=[
            MoveRecordModel(uci=move.uci, san=san) for move, san in zip(log.moves, sans)
        ],
        current_move_index=log.cursor,
        is_previewing=log.is_previewing,
        start_fen=position_to_fen(log.start),
    )


def dump_history(log: MoveLog) -> str:
    """Serialize *log* to a camelCase JSON document."""
    return snapshot_from_log(log).model_dump_json(by_alias=True)


def log_from_snapshot(snapshot: HistorySnapshot, options: RuleOptions = STANDARD) -> MoveLog:
    """Rebuild a log by replaying every stored move through the validator.

    Raises :class:`~chessrules.core.errors.IllegalMoveError` when a stored
    move is not legal where it was recorded.
    """
    log = MoveLog(start=position_from_fen(snapshot.start_fen), options=options)
    for record in snapshot.move_history:
        log = log.push(record.to_move())
    return log.jump_to(snapshot.current_move_index)


def load_history(text: str | bytes, options: RuleOptions = STANDARD) -> MoveLog:
    """Parse a stored snapshot, falling back to an empty log when it is unusable."""
    try:
        snapshot = HistorySnapshot.model_validate_json(text)
        return log_from_snapshot(snapshot, options)
    except ValidationError as exc:
        _LOGGER.warning("Discarding malformed history snapshot: %s", exc)
    except (ChessRulesError, ValueError) as exc:
        _LOGGER.warning("Discarding history snapshot that does not replay: %s", exc)
    return MoveLog(options=options)
