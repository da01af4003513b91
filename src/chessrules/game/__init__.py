"""Move history layer — an externally owned log of accepted moves.

Quick start::

    from chessrules.core import Move
    from chessrules.game import MoveLog, dump_history, load_history

    log = MoveLog().push(Move.from_uci("e2e4")).push(Move.from_uci("e7e5"))
    log = log.previous()                 # preview the position after 1. e4
    restored = load_history(dump_history(log))
"""

from chessrules.game.history import MoveLog
from chessrules.game.snapshot import (
    HistorySnapshot,
    MoveRecordModel,
    dump_history,
    load_history,
    log_from_snapshot,
    snapshot_from_log,
)

__all__ = [
    "HistorySnapshot",
    "MoveLog",
    "MoveRecordModel",
    "dump_history",
    "load_history",
    "log_from_snapshot",
    "snapshot_from_log",
]
