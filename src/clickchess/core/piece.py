"""Piece — a chess man standing somewhere on the board."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from clickchess.core import movement
from clickchess.core.enums import Color, PieceType
from clickchess.core.position import Position

if TYPE_CHECKING:
    from clickchess.core.board import Board

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class PieceId:
    """Selection identity of a piece: (kind, color, position).

    Derived from the current position, so it changes the moment the piece
    moves.
    """

    kind: PieceType
    color: Color
    position: Position

    def __str__(self) -> str:
        return f"{self.kind}_{self.color}_{self.position.v}_{self.position.h}"


class Piece:
    """Mutable chess piece: fixed kind and color, moving position.

    The piece does not know its board; rule queries take the board as an
    argument.
    """

    __slots__ = ("_kind", "_color", "_position", "_has_moved")

    def __init__(
        self,
        kind: PieceType,
        color: Color,
        position: Position,
        has_moved: bool = False,
    ) -> None:
        self._kind = kind
        self._color = color
        self._position = position
        self._has_moved = has_moved

    # ── Read access ──────────────────────────────────────────────────────

    @property
    def kind(self) -> PieceType:
        return self._kind

    @property
    def color(self) -> Color:
        return self._color

    @property
    def position(self) -> Position:
        return self._position

    @property
    def has_moved(self) -> bool:
        return self._has_moved

    @property
    def identity(self) -> PieceId:
        return PieceId(self._kind, self._color, self._position)

    # ── Mutation ─────────────────────────────────────────────────────────

    def set_position(self, position: Position) -> None:
        """Relocate the piece. Marks it as moved, even for a null move."""
        self._position = position
        self._has_moved = True

    # ── Rules ────────────────────────────────────────────────────────────

    def movable_positions(self, board: Board) -> list[Position] | None:
        """Non-capturing destinations; ``None`` when the way is blocked."""
        return movement.movable_positions(self, board)

    def catchable_positions(
        self, board: Board, restrict_to_enemy: bool = False
    ) -> Sequence[Position]:
        """Capture targets; all geometric ones unless *restrict_to_enemy*."""
        return movement.catchable_positions(self, board, restrict_to_enemy)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self._color, self._kind)]

    def __repr__(self) -> str:
        moved = ", moved" if self._has_moved else ""
        return f"Piece({self._color} {self._kind} @ {self._position}{moved})"

    @classmethod
    def from_char(cls, char: str, position: Position, has_moved: bool = False) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, color, position, has_moved)
