"""Board - immutable piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Fixed 64-slot array of ``Piece | None`` indexed by square.

    A board never changes after construction: :meth:`replace` returns a new
    board with the given squares overwritten.
    """

    __slots__ = ("_squares", "_hash")

    def __init__(self, squares: tuple[Piece | None, ...] | None = None) -> None:
        if squares is None:
            squares = (None,) * 64
        elif len(squares) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(squares)}")
        self._squares: tuple[Piece | None, ...] = tuple(squares)
        self._hash: int | None = None

    @classmethod
    def from_mapping(cls, pieces: Mapping[Square, Piece]) -> Board:
        """Build a board from ``{square: piece}`` (absent squares are empty)."""
        squares: list[Piece | None] = [None] * 64
        for sq, piece in pieces.items():
            squares[sq] = piece
        return cls(tuple(squares))

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, a1 first."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in enumerate(self._squares) if piece == target]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def has_piece(self, color: Color, piece_type: PieceType) -> bool:
        return Piece(color, piece_type) in self._squares

    def king_square(self, color: Color) -> Square | None:
        """First square holding *color*'s king, or ``None`` when it is missing."""
        king = Piece(color, PieceType.KING)
        for sq, piece in enumerate(self._squares):
            if piece == king:
                return sq
        return None

    def piece_count(self) -> int:
        return sum(1 for piece in self._squares if piece is not None)

    # -- Derivation ---------------------------------------------------------

    def replace(self, changes: Mapping[Square, Piece | None]) -> Board:
        """Return a copy with *changes* applied (``None`` clears a square)."""
        squares = list(self._squares)
        for sq, piece in changes.items():
            squares[sq] = piece
        return Board(tuple(squares))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting arrangement."""
        squares: list[Piece | None] = [None] * 64
        for f, pt in enumerate(_BACK_RANK):
            squares[make_square(f, 0)] = Piece(Color.WHITE, pt)
            squares[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            squares[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            squares[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return cls(tuple(squares))

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(self._squares)
        return self._hash

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
