"""Movement rule set: the squares each piece kind could reach on an empty board.

Everything here is pure geometry. Blocking, captures and turn ownership are
judged by :mod:`chessrules.core.validator`; this module only says which
destinations a piece's pattern can name at all.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.types import Square, file_of, make_square, rank_of

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Rank indexes (0-based) per colour.
PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}
PROMOTION_RANK: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


def pawn_direction(color: Color) -> int:
    """Rank delta of a single forward step for *color*."""
    return 1 if color == Color.WHITE else -1


# -- Castling routes --------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CastlingRoute:
    """Squares involved in one castling move."""

    color: Color
    right: CastlingRights
    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square
    must_be_empty: tuple[Square, ...]
    king_path: tuple[Square, ...]  # squares the king crosses, destination last


def _route(color: Color, kingside: bool) -> CastlingRoute:
    rank = 0 if color == Color.WHITE else 7
    if kingside:
        right = (
            CastlingRights.WHITE_KINGSIDE
            if color == Color.WHITE
            else CastlingRights.BLACK_KINGSIDE
        )
        king_to, rook_from, rook_to = 6, 7, 5
        empty_files, path_files = (5, 6), (5, 6)
    else:
        right = (
            CastlingRights.WHITE_QUEENSIDE
            if color == Color.WHITE
            else CastlingRights.BLACK_QUEENSIDE
        )
        king_to, rook_from, rook_to = 2, 0, 3
        empty_files, path_files = (1, 2, 3), (3, 2)
    return CastlingRoute(
        color=color,
        right=right,
        king_from=make_square(4, rank),
        king_to=make_square(king_to, rank),
        rook_from=make_square(rook_from, rank),
        rook_to=make_square(rook_to, rank),
        must_be_empty=tuple(make_square(f, rank) for f in empty_files),
        king_path=tuple(make_square(f, rank) for f in path_files),
    )


CASTLING_ROUTES: dict[Square, CastlingRoute] = {
    route.king_to: route
    for route in (
        _route(Color.WHITE, True),
        _route(Color.WHITE, False),
        _route(Color.BLACK, True),
        _route(Color.BLACK, False),
    )
}
KING_HOME: dict[Color, Square] = {
    Color.WHITE: make_square(4, 0),
    Color.BLACK: make_square(4, 7),
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        moves: list[Square] = []
        for df, dr in offsets:
            af = file_of(sq) + df
            ar = rank_of(sq) + dr
            if 0 <= af < 8 and 0 <= ar < 8:
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_of(sq) + df
            ar = rank_of(sq) + dr
            ray: list[Square] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_tables(
    color: Color,
) -> tuple[tuple[tuple[Square, ...], ...], tuple[tuple[Square, ...], ...]]:
    step = pawn_direction(color)
    pushes: list[tuple[Square, ...]] = []
    captures: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        ahead = rank_of(sq) + step
        if not 0 <= ahead < 8:
            pushes.append(())
            captures.append(())
            continue
        push = [make_square(file_idx, ahead)]
        if rank_of(sq) == PAWN_START_RANK[color]:
            push.append(make_square(file_idx, ahead + step))
        pushes.append(tuple(push))
        captures.append(
            tuple(
                make_square(file_idx + df, ahead)
                for df in (-1, 1)
                if 0 <= file_idx + df < 8
            )
        )
    return tuple(pushes), tuple(captures)


def _flatten(
    rays_table: tuple[tuple[tuple[Square, ...], ...], ...],
) -> tuple[tuple[Square, ...], ...]:
    return tuple(tuple(sq for ray in rays for sq in ray) for rays in rays_table)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)
_BISHOP_TARGETS = _flatten(_BISHOP_RAYS)
_ROOK_TARGETS = _flatten(_ROOK_RAYS)
_QUEEN_TARGETS = _flatten(_QUEEN_RAYS)

_PAWN_TABLES = {color: _build_pawn_tables(color) for color in Color}


# -- Public API -------------------------------------------------------------


def knight_targets(sq: Square) -> tuple[Square, ...]:
    return _KNIGHT_TARGETS[sq]


def king_targets(sq: Square) -> tuple[Square, ...]:
    return _KING_TARGETS[sq]


def pawn_pushes(color: Color, sq: Square) -> tuple[Square, ...]:
    """Non-capturing forward candidates (two-step only from the start rank)."""
    return _PAWN_TABLES[color][0][sq]


def pawn_captures(color: Color, sq: Square) -> tuple[Square, ...]:
    """Capture-only forward-diagonal candidates."""
    return _PAWN_TABLES[color][1][sq]


def rays(piece_type: PieceType, sq: Square) -> tuple[tuple[Square, ...], ...]:
    """Rays from *sq*, nearest square first, for a sliding piece kind."""
    match piece_type:
        case PieceType.BISHOP:
            return _BISHOP_RAYS[sq]
        case PieceType.ROOK:
            return _ROOK_RAYS[sq]
        case PieceType.QUEEN:
            return _QUEEN_RAYS[sq]
        case _:
            return ()


def candidate_squares(
    piece_type: PieceType,
    color: Color,
    sq: Square,
    *,
    castling: bool = False,
) -> tuple[Square, ...]:
    """Every square the piece's pattern reaches from *sq*, ignoring occupancy.

    With *castling* set, a king on its home square also lists the two
    castling destinations.
    """
    match piece_type:
        case PieceType.PAWN:
            return pawn_pushes(color, sq) + pawn_captures(color, sq)
        case PieceType.KNIGHT:
            return _KNIGHT_TARGETS[sq]
        case PieceType.BISHOP:
            return _BISHOP_TARGETS[sq]
        case PieceType.ROOK:
            return _ROOK_TARGETS[sq]
        case PieceType.QUEEN:
            return _QUEEN_TARGETS[sq]
        case PieceType.KING:
            if castling and sq == KING_HOME[color]:
                return _KING_TARGETS[sq] + tuple(
                    route.king_to
                    for route in CASTLING_ROUTES.values()
                    if route.color == color
                )
            return _KING_TARGETS[sq]
        case _:
            raise TypeError(f"Unknown piece type: {piece_type!r}")


def squares_between(from_sq: Square, to_sq: Square) -> tuple[Square, ...]:
    """Squares strictly between two squares on a shared line, else ``()``."""
    df = file_of(to_sq) - file_of(from_sq)
    dr = rank_of(to_sq) - rank_of(from_sq)
    if not (df == 0 or dr == 0 or abs(df) == abs(dr)):
        return ()
    steps = max(abs(df), abs(dr))
    step_f = (df > 0) - (df < 0)
    step_r = (dr > 0) - (dr < 0)
    return tuple(
        make_square(file_of(from_sq) + step_f * i, rank_of(from_sq) + step_r * i)
        for i in range(1, steps)
    )
