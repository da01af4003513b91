"""SAN (Standard Algebraic Notation) conversion and parsing."""

from __future__ import annotations

from chessrules.core.applier import apply_move, captured_piece, classify_move
from chessrules.core.enums import MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.options import STANDARD, RuleOptions
from chessrules.core.position import Position
from chessrules.core.types import file_of, parse_square, rank_of, square_name

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_SAN_PIECE_REV: dict[str, PieceType] = {v: k for k, v in _SAN_PIECE.items()}
_FILES = "abcdefgh"


def _disambiguation(
    position: Position, move: Move, piece_type: PieceType, options: RuleOptions
) -> str:
    board = position.board
    rivals = {
        m.from_sq
        for m in MoveGenerator(position, options).generate_legal_moves()
        if m.to_sq == move.to_sq
        and m.from_sq != move.from_sq
        and board[m.from_sq] is not None
        and board[m.from_sq].piece_type == piece_type  # type: ignore[union-attr]
    }
    if not rivals:
        return ""
    if all(file_of(sq) != file_of(move.from_sq) for sq in rivals):
        return _FILES[file_of(move.from_sq)]
    if all(rank_of(sq) != rank_of(move.from_sq) for sq in rivals):
        return str(rank_of(move.from_sq) + 1)
    return square_name(move.from_sq)


def move_to_san(position: Position, move: Move, options: RuleOptions = STANDARD) -> str:
    """Convert a legal *move* to SAN given the *position* before the move."""
    piece = position.board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece at source square: {square_name(move.from_sq)}")

    flag = classify_move(position, move, options)
    if flag == MoveFlag.CASTLE_KINGSIDE:
        san = "O-O"
    elif flag == MoveFlag.CASTLE_QUEENSIDE:
        san = "O-O-O"
    else:
        is_capture = captured_piece(position, move, options) is not None
        if piece.piece_type == PieceType.PAWN:
            san = _FILES[file_of(move.from_sq)] if is_capture else ""
        else:
            san = _SAN_PIECE[piece.piece_type]
            san += _disambiguation(position, move, piece.piece_type, options)
        if is_capture:
            san += "x"
        san += square_name(move.to_sq)
        if flag == MoveFlag.PROMOTION:
            san += "=" + _SAN_PIECE[move.promotion or PieceType.QUEEN]

    after = apply_move(position, move, options)
    gen_after = MoveGenerator(after, options)
    if gen_after.is_in_check(after.side_to_move):
        san += "+" if gen_after.has_legal_move() else "#"
    return san


def parse_san(position: Position, san: str, options: RuleOptions = STANDARD) -> Move:
    """Parse a SAN string into a :class:`Move` given the current *position*."""
    legal = MoveGenerator(position, options).generate_legal_moves()
    clean = san.strip().rstrip("+#!?")

    if clean in ("O-O", "0-0", "O-O-O", "0-0-0"):
        wanted = MoveFlag.CASTLE_KINGSIDE if len(clean) == 3 else MoveFlag.CASTLE_QUEENSIDE
        for m in legal:
            if classify_move(position, m, options) == wanted:
                return m
        raise ValueError(f"Illegal move: {san}")

    promotion: PieceType | None = None
    if "=" in clean:
        clean, _, promo_char = clean.partition("=")
        promotion = _SAN_PIECE_REV.get(promo_char)
        if promotion is None or promotion == PieceType.KING:
            raise ValueError(f"Invalid promotion in SAN: {san!r}")

    if len(clean) < 2:
        raise ValueError(f"Invalid SAN: {san!r}")
    to_sq = parse_square(clean[-2:])
    clean = clean[:-2].removesuffix("x")

    if clean and clean[0] in _SAN_PIECE_REV:
        piece_type = _SAN_PIECE_REV[clean[0]]
        clean = clean[1:]
    else:
        piece_type = PieceType.PAWN

    from_file: int | None = None
    from_rank: int | None = None
    for ch in clean:
        if ch in _FILES:
            from_file = _FILES.index(ch)
        elif ch in "12345678":
            from_rank = int(ch) - 1
        else:
            raise ValueError(f"Invalid SAN: {san!r}")

    candidates: list[Move] = []
    for m in legal:
        p = position.board[m.from_sq]
        if p is None or p.piece_type != piece_type or m.to_sq != to_sq:
            continue
        if m.promotion is not None and m.promotion != (promotion or PieceType.QUEEN):
            continue
        if from_file is not None and file_of(m.from_sq) != from_file:
            continue
        if from_rank is not None and rank_of(m.from_sq) != from_rank:
            continue
        candidates.append(m)

    if len(candidates) == 1:
        return candidates[0]
    if not candidates:
        raise ValueError(f"Illegal move: {san}")
    raise ValueError(f"Ambiguous move: {san} → {[str(m) for m in candidates]}")
