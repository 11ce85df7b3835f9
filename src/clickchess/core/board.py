"""Board - 64 addressable squares and their occupants."""

from __future__ import annotations

from clickchess.core.enums import Color, PieceType
from clickchess.core.piece import Piece
from clickchess.core.position import BOARD_SIZE, Position

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

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


def _home_ranks(color: Color) -> tuple[int, int]:
    """(back rank, pawn rank) for *color*."""
    return (1, 2) if color == Color.WHITE else (8, 7)


def _on_home_square(kind: PieceType, color: Color, position: Position) -> bool:
    back_rank, pawn_rank = _home_ranks(color)
    if kind == PieceType.PAWN:
        return position.h == pawn_rank
    return position.h == back_rank and _BACK_RANK[position.v - 1] == kind


class Square:
    """One cell of the board: fixed position, derived shade, optional piece.

    ``set_piece`` only changes occupancy; keeping the piece's own position in
    sync is the caller's job.
    """

    __slots__ = ("_position", "_color", "_piece")

    def __init__(self, position: Position) -> None:
        self._position = position
        # a1 is dark: even coordinate sum → black.
        self._color = Color.BLACK if (position.v + position.h) % 2 == 0 else Color.WHITE
        self._piece: Piece | None = None

    @property
    def position(self) -> Position:
        return self._position

    @property
    def color(self) -> Color:
        return self._color

    @property
    def piece(self) -> Piece | None:
        return self._piece

    def has_piece(self) -> bool:
        return self._piece is not None

    def set_piece(self, piece: Piece | None = None) -> None:
        self._piece = piece

    def __repr__(self) -> str:
        occupant = str(self._piece) if self._piece is not None else "."
        return f"Square({self._position}, {self._color}, {occupant})"


class Board:
    """Fixed set of 64 squares, addressed by :class:`Position`."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        # Row-major: a1, b1, ..., h1, a2, ..., h8.
        self._squares: tuple[Square, ...] = tuple(
            Square(Position(v, h))
            for h in range(1, BOARD_SIZE + 1)
            for v in range(1, BOARD_SIZE + 1)
        )

    # -- Element access -----------------------------------------------------

    def square_at(self, position: Position) -> Square | None:
        """The unique square at *position*, or ``None`` when off the board."""
        if not position.on_board:
            return None
        return self._squares[position.index]

    def piece_at(self, position: Position) -> Piece | None:
        square = self.square_at(position)
        return square.piece if square is not None else None

    def is_empty(self, position: Position) -> bool:
        """Whether *position* is on the board and unoccupied."""
        square = self.square_at(position)
        return square is not None and not square.has_piece()

    def all_squares(self) -> tuple[Square, ...]:
        return self._squares

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """Pieces on the board in square order, optionally of one *color*."""
        return [
            sq.piece
            for sq in self._squares
            if sq.piece is not None and (color is None or sq.piece.color == color)
        ]

    def place(self, piece: Piece) -> Piece:
        """Put *piece* on the square matching its stored position."""
        square = self.square_at(piece.position)
        if square is None:
            raise ValueError(f"Cannot place piece off the board: {piece!r}")
        square.set_piece(piece)
        return piece

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for v, kind in enumerate(_BACK_RANK, start=1):
            b.place(Piece(kind, Color.WHITE, Position(v, 1)))
            b.place(Piece(PieceType.PAWN, Color.WHITE, Position(v, 2)))
            b.place(Piece(PieceType.PAWN, Color.BLACK, Position(v, 7)))
            b.place(Piece(kind, Color.BLACK, Position(v, 8)))
        return b

    @classmethod
    def from_placement(cls, placement: str) -> Board:
        """Build a board from the piece-placement field of a FEN string.

        Pieces standing off their standard home square start with
        ``has_moved`` set, so injected positions behave like reached ones.
        """
        ranks = placement.strip().split("/")
        if len(ranks) != BOARD_SIZE:
            raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")
        b = cls()
        for rank_idx, rank_text in enumerate(ranks):
            h = BOARD_SIZE - rank_idx
            v = 1
            for ch in rank_text:
                if ch.isdigit():
                    step = int(ch)
                    if not (1 <= step <= BOARD_SIZE):
                        raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                    v += step
                else:
                    if v > BOARD_SIZE:
                        raise ValueError(f"Invalid placement rank width: {placement!r}")
                    pos = Position(v, h)
                    piece = Piece.from_char(ch, pos)
                    if not _on_home_square(piece.kind, piece.color, pos):
                        piece = Piece.from_char(ch, pos, has_moved=True)
                    b.place(piece)
                    v += 1
                if v > BOARD_SIZE + 1:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
            if v != BOARD_SIZE + 1:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        return b

    def placement(self) -> str:
        """Serialise occupancy as a FEN piece-placement field."""
        rows: list[str] = []
        for h in range(BOARD_SIZE, 0, -1):
            empty = 0
            row = ""
            for v in range(1, BOARD_SIZE + 1):
                piece = self._squares[Position(v, h).index].piece
                if piece is None:
                    empty += 1
                else:
                    if empty:
                        row += str(empty)
                        empty = 0
                    row += str(piece)
            if empty:
                row += str(empty)
            rows.append(row)
        return "/".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for h in range(BOARD_SIZE, 0, -1):
            row = []
            for v in range(1, BOARD_SIZE + 1):
                p = self._squares[Position(v, h).index].piece
                row.append(str(p) if p else ".")
            rows.append(f"{h} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
