"""Position — a (file, rank) coordinate pair on the 8x8 grid.

Coordinates are 1-based: ``v`` is the file (1 = a .. 8 = h) and ``h`` the
rank (1 .. 8).  A :class:`Position` may hold off-board coordinates (pawn
capture geometry can point past the edge); use :attr:`Position.on_board`
before treating it as a square.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

BOARD_SIZE = 8
_FILES = "abcdefgh"


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable coordinate pair, equal iff both coordinates match."""

    v: int
    h: int

    @property
    def on_board(self) -> bool:
        return 1 <= self.v <= BOARD_SIZE and 1 <= self.h <= BOARD_SIZE

    def offset(self, dv: int, dh: int) -> Position:
        return Position(self.v + dv, self.h + dh)

    @property
    def index(self) -> int:
        """Row-major index 0–63 (a1=0, h1=7, a8=56). Only valid on the board."""
        return (self.h - 1) * BOARD_SIZE + (self.v - 1)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``Position(5, 4)`` → ``'e4'``."""
        if not self.on_board:
            return f"({self.v},{self.h})"
        return f"{_FILES[self.v - 1]}{self.h}"

    def __str__(self) -> str:
        return self.name


def parse_square(name: str) -> Position:
    """Parse square name, e.g. 'e4' → Position(5, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Position(_FILES.index(name[0]) + 1, int(name[1]))


def dedupe_positions(positions: Iterable[Position]) -> list[Position]:
    """Drop repeated coordinates, keeping first-seen order."""
    seen: set[tuple[int, int]] = set()
    result: list[Position] = []
    for pos in positions:
        key = (pos.v, pos.h)
        if key in seen:
            continue
        seen.add(key)
        result.append(pos)
    return result
