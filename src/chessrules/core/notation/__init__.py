"""Notation package: FEN / SAN parsing and serialization, PGN export."""

from chessrules.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.notation.pgn import (
    build_pgn,
    first_ply,
    moves_to_pgn,
    moves_to_text,
    movetext_from_sans,
    pgn_result_token,
    sans_from_moves,
)
from chessrules.core.notation.san import move_to_san, parse_san

__all__ = [
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    "move_to_san",
    "parse_san",
    "pgn_result_token",
    "first_ply",
    "sans_from_moves",
    "movetext_from_sans",
    "moves_to_text",
    "build_pgn",
    "moves_to_pgn",
]
