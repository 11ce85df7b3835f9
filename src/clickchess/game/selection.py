"""Selection state — which piece is focused and where it may go."""

from __future__ import annotations

from dataclasses import dataclass

from clickchess.core.piece import PieceId
from clickchess.core.position import Position
from clickchess.game.interfaces import SelectionPhase


@dataclass(frozen=True, slots=True)
class Selection:
    """Immutable snapshot of the selection.

    ``destinations`` is ``None`` both when idle and when the focused piece
    has nowhere to go; it is never an empty tuple.
    """

    focused: PieceId | None = None
    destinations: tuple[Position, ...] | None = None

    @property
    def phase(self) -> SelectionPhase:
        return SelectionPhase.IDLE if self.focused is None else SelectionPhase.FOCUSED

    @property
    def is_idle(self) -> bool:
        return self.focused is None

    def is_destination(self, position: Position) -> bool:
        if not self.destinations:
            return False
        return position in self.destinations

    @classmethod
    def focus(cls, focused: PieceId, destinations: list[Position]) -> Selection:
        return cls(focused, tuple(destinations) if destinations else None)


IDLE = Selection()
