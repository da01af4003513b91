"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import (
        Move, apply_move, initial_position, legal_moves, parse_square,
        square_name, validate,
    )

    pos = initial_position()
    move = Move.from_names("e2", "e4")
    if validate(pos, move):
        pos = apply_move(pos, move)
    print(sorted(square_name(sq) for sq in legal_moves(pos, parse_square("e7"))))
"""

from chessrules.core.applier import apply_move, classify_move
from chessrules.core.board import Board
from chessrules.core.enums import (
    CastlingRights,
    Color,
    GameResult,
    MoveFlag,
    PieceType,
    RejectionReason,
)
from chessrules.core.errors import ChessRulesError, IllegalMoveError, MoveContractError
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator, legal_moves
from chessrules.core.movement import candidate_squares
from chessrules.core.notation import (
    STARTING_FEN,
    move_to_san,
    parse_san,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.options import RuleOptions
from chessrules.core.piece import Piece
from chessrules.core.position import Position, initial_position
from chessrules.core.rules import Rules
from chessrules.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)
from chessrules.core.validator import MoveOutcome, play, validate

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceType",
    "RejectionReason",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MoveOutcome",
    "Piece",
    "Position",
    "RuleOptions",
    "Rules",
    # Engine operations
    "apply_move",
    "candidate_squares",
    "classify_move",
    "initial_position",
    "legal_moves",
    "play",
    "validate",
    # Errors
    "ChessRulesError",
    "IllegalMoveError",
    "MoveContractError",
    # Notation
    "STARTING_FEN",
    "move_to_san",
    "parse_san",
    "position_from_fen",
    "position_to_fen",
]
