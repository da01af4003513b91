"""Command-line front end for the rules engine."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from chessrules.core.errors import ChessRulesError
from chessrules.core.move import Move
from chessrules.core.move_generator import legal_moves
from chessrules.core.notation.fen import position_from_fen, position_to_fen
from chessrules.core.notation.pgn import pgn_result_token
from chessrules.core.notation.san import parse_san
from chessrules.core.options import RuleOptions
from chessrules.core.position import Position, initial_position
from chessrules.core.rules import Rules
from chessrules.core.types import parse_square, square_name
from chessrules.core.validator import validate
from chessrules.game.history import MoveLog

_LOGGER = logging.getLogger(__name__)


def _start_position(args: argparse.Namespace) -> Position:
    return position_from_fen(args.fen) if args.fen else initial_position()


def _options(args: argparse.Namespace) -> RuleOptions:
    return RuleOptions.basic() if args.basic else RuleOptions.standard()


def _parse_move(position: Position, text: str, options: RuleOptions) -> Move:
    """Accept UCI (``e2e4``) first, then SAN (``Nf3``)."""
    try:
        return Move.from_uci(text)
    except ValueError:
        return parse_san(position, text, options)


# ── Commands ─────────────────────────────────────────────────────────────


def cmd_show(args: argparse.Namespace) -> int:
    position = _start_position(args)
    options = _options(args)
    print(repr(position.board))
    print(f"FEN: {position_to_fen(position)}")
    print(f"To move: {position.side_to_move}")
    print(f"Rules: {options.describe()}")
    result = Rules.game_result(position, options)
    print(f"Result: {pgn_result_token(result)}")
    return 0


def cmd_moves(args: argparse.Namespace) -> int:
    position = _start_position(args)
    targets = legal_moves(position, parse_square(args.square), _options(args))
    print(" ".join(square_name(sq) for sq in sorted(targets)))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    position = _start_position(args)
    move = Move.from_uci(args.from_square + args.to_square + (args.promotion or ""))
    outcome = validate(position, move, _options(args))
    print(f"{move}: {outcome}")
    return 0 if outcome.valid else 1


def cmd_replay(args: argparse.Namespace) -> int:
    options = _options(args)
    log = MoveLog(start=_start_position(args), options=options)
    for text in args.moves:
        move = _parse_move(log.current_position, text, options)
        log = log.push(move)
        _LOGGER.debug("Played %s", move)
    print(position_to_fen(log.current_position))
    print()
    print(log.to_pgn(), end="")
    return 0


# ── Parser ───────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--fen", help="Start from this FEN instead of the initial position")
    common.add_argument(
        "--basic",
        action="store_true",
        help="Core movement rules only (no check, castling, en passant or promotion)",
    )

    parser = argparse.ArgumentParser(
        prog="chessrules",
        description="Validate and enumerate chess moves",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    show_parser = subparsers.add_parser("show", parents=[common], help="Print a position")
    show_parser.set_defaults(handler=cmd_show)

    moves_parser = subparsers.add_parser(
        "moves", parents=[common], help="List legal destinations of a piece"
    )
    moves_parser.add_argument("square", help="Square name, e.g. g1")
    moves_parser.set_defaults(handler=cmd_moves)

    check_parser = subparsers.add_parser("check", parents=[common], help="Validate one move")
    check_parser.add_argument("from_square", help="Source square, e.g. e2")
    check_parser.add_argument("to_square", help="Destination square, e.g. e4")
    check_parser.add_argument(
        "--promotion", choices=["q", "r", "b", "n"], help="Promotion piece"
    )
    check_parser.set_defaults(handler=cmd_check)

    replay_parser = subparsers.add_parser(
        "replay", parents=[common], help="Play a move sequence and print FEN and PGN"
    )
    replay_parser.add_argument("moves", nargs="+", help="Moves in UCI or SAN")
    replay_parser.set_defaults(handler=cmd_replay)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    try:
        return args.handler(args)
    except (ChessRulesError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
