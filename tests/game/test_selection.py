"""Tests for the Selection snapshot."""

from clickchess.core.enums import Color, PieceType
from clickchess.core.piece import PieceId
from clickchess.core.position import Position
from clickchess.game.interfaces import SelectionPhase
from clickchess.game.selection import IDLE, Selection

_PAWN = PieceId(PieceType.PAWN, Color.WHITE, Position(4, 2))


class TestSelection:
    def test_idle(self) -> None:
        assert IDLE.is_idle
        assert IDLE.phase == SelectionPhase.IDLE
        assert IDLE.destinations is None
        assert not IDLE.is_destination(Position(4, 3))

    def test_focus_with_destinations(self) -> None:
        sel = Selection.focus(_PAWN, [Position(4, 3), Position(4, 4)])
        assert sel.phase == SelectionPhase.FOCUSED
        assert sel.destinations == (Position(4, 3), Position(4, 4))
        assert sel.is_destination(Position(4, 4))
        assert not sel.is_destination(Position(5, 3))

    def test_focus_without_destinations_is_none(self) -> None:
        sel = Selection.focus(_PAWN, [])
        assert not sel.is_idle
        assert sel.destinations is None
        assert not sel.is_destination(Position(4, 3))
