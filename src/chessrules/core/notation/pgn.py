"""PGN / move-text export of a played move sequence."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date

from chessrules.core.applier import apply_move
from chessrules.core.enums import Color, GameResult
from chessrules.core.errors import IllegalMoveError
from chessrules.core.move import Move
from chessrules.core.notation.fen import position_to_fen
from chessrules.core.notation.san import move_to_san
from chessrules.core.options import STANDARD, RuleOptions
from chessrules.core.position import Position, initial_position
from chessrules.core.validator import validate

DEFAULT_HEADERS: dict[str, str] = {
    "Event": "Chess Practice Game",
    "Site": "Local",
    "Date": "????.??.??",
    "Round": "?",
    "White": "Player 1",
    "Black": "Player 2",
}


def pgn_result_token(result: GameResult) -> str:
    """Convert :class:`GameResult` to a PGN result token."""
    if result == GameResult.WHITE_WINS:
        return "1-0"
    if result == GameResult.BLACK_WINS:
        return "0-1"
    if result == GameResult.DRAW:
        return "1/2-1/2"
    return "*"


def first_ply(position: Position) -> int:
    """Ply index of the next move in *position*, counted from the game start."""
    black = 1 if position.side_to_move == Color.BLACK else 0
    return 2 * (position.fullmove_number - 1) + black


def sans_from_moves(
    moves: Iterable[Move],
    start: Position | None = None,
    options: RuleOptions = STANDARD,
) -> list[str]:
    """Replay *moves* from *start* and return their SAN.

    Raises :class:`~chessrules.core.errors.IllegalMoveError` on the first
    move that does not validate.
    """
    position = start if start is not None else initial_position()
    sans: list[str] = []
    for move in moves:
        outcome = validate(position, move, options)
        if outcome.reason is not None:
            raise IllegalMoveError(move, outcome.reason)
        sans.append(move_to_san(position, move, options))
        position = apply_move(position, move, options)
    return sans


def movetext_from_sans(
    sans: list[str], result_token: str | None = None, first_ply: int = 0
) -> str:
    """Build ``1. e4 e5 2. Nf3`` style text, optionally ending in a result token.

    *first_ply* is the ply index of the first move (odd when Black starts).
    """
    parts: list[str] = []
    for offset, san in enumerate(sans):
        ply = first_ply + offset
        if ply % 2 == 0:
            parts.append(f"{(ply // 2) + 1}.")
        elif offset == 0:
            parts.append(f"{(ply // 2) + 1}...")
        parts.append(san)
    if result_token:
        parts.append(result_token)
    return " ".join(parts)


def moves_to_text(
    moves: Iterable[Move],
    result: GameResult = GameResult.IN_PROGRESS,
    options: RuleOptions = STANDARD,
) -> str:
    """Human-readable move list from the starting position, e.g. ``1. e4 e5``."""
    sans = sans_from_moves(moves, options=options)
    if not sans:
        return ""
    token = pgn_result_token(result) if result != GameResult.IN_PROGRESS else None
    return movetext_from_sans(sans, token)


def build_pgn(
    headers: Mapping[str, str], sans: list[str], result_token: str, first_ply: int = 0
) -> str:
    """Build a single-game PGN document."""
    lines: list[str] = []
    for key, value in headers.items():
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'[{key} "{escaped}"]')
    lines.append("")
    lines.append(movetext_from_sans(sans, result_token, first_ply))
    lines.append("")
    return "\n".join(lines)


def moves_to_pgn(
    moves: Iterable[Move],
    result: GameResult = GameResult.IN_PROGRESS,
    headers: Mapping[str, str] | None = None,
    played_on: date | None = None,
    start: Position | None = None,
    options: RuleOptions = STANDARD,
) -> str:
    """PGN export of a game played from *start* (default: the initial position)."""
    token = pgn_result_token(result)
    tags = dict(DEFAULT_HEADERS)
    tags["Result"] = token
    if start is not None and start != initial_position():
        tags["SetUp"] = "1"
        tags["FEN"] = position_to_fen(start)
    if played_on is not None:
        tags["Date"] = played_on.strftime("%Y.%m.%d")
    if headers:
        tags.update(headers)
    tags["Result"] = token
    sans = sans_from_moves(moves, start, options)
    ply = first_ply(start) if start is not None else 0
    return build_pgn(tags, sans, token, ply)
