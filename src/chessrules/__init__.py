"""chessrules — a pure chess rules engine.

The engine itself lives in :mod:`chessrules.core`; :mod:`chessrules.api`
exposes its four operations with algebraic square names and
:mod:`chessrules.game` keeps a replayable move log on top of it.
"""

__version__ = "0.1.0"
