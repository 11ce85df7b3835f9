"""Abstract interfaces for the game layer.

The presentation layer talks to the controller only through
:class:`IGameController`: it forwards clicks and reads the query surface
once per interaction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clickchess.core.board import Square
    from clickchess.core.piece import Piece


# ── Selection FSM states ─────────────────────────────────────────────────────


class SelectionPhase(IntEnum):
    """Finite-state-machine states of the selection controller."""

    IDLE = auto()
    FOCUSED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the click-driven game orchestrator."""

    @abstractmethod
    def on_piece_clicked(self, piece: Piece) -> bool:
        """Focus, unfocus or capture *piece*. Returns True if state changed."""

    @abstractmethod
    def on_square_clicked(self, square: Square, is_destination: bool | None = None) -> bool:
        """Move the focused piece to *square* if it is a destination."""

    @abstractmethod
    def is_destination(self, square: Square) -> bool:
        """Whether *square* is highlighted as a destination."""

    @abstractmethod
    def is_focused(self, piece: Piece) -> bool:
        """Whether *piece* is the focused piece."""
