"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from clickchess.core.board import Board
from clickchess.core.enums import Color, PieceType
from clickchess.core.piece import Piece
from clickchess.core.position import parse_square

PlaceFn = Callable[..., Piece]


@pytest.fixture
def board() -> Board:
    """An empty board for hand-built positions."""
    return Board.empty()


@pytest.fixture
def place(board: Board) -> PlaceFn:
    """Put a piece on the ``board`` fixture by square name, e.g. ``place(PAWN, WHITE, "e2")``."""

    def _place(
        kind: PieceType, color: Color, square: str, has_moved: bool = False
    ) -> Piece:
        return board.place(Piece(kind, color, parse_square(square), has_moved))

    return _place
