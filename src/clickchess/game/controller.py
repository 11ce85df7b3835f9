"""GameController — turns piece and square clicks into board changes.

Holds the board, the selection and the captured pieces.  Each click is a
single synchronous transaction: the move is planned against the current
board, applied in one step, and only then are listeners notified.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from clickchess.core.board import Board, Square
from clickchess.core.enums import Color, PieceType
from clickchess.core.movement import CASTLING_ROOK_FILES
from clickchess.core.piece import Piece
from clickchess.core.position import Position, dedupe_positions
from clickchess.game.interfaces import IGameController, SelectionPhase
from clickchess.game.selection import IDLE, Selection

_LOGGER = logging.getLogger(__name__)


# ── Records ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """What a completed move did to the board."""

    piece: Piece
    source: Position
    destination: Position
    captured: Piece | None = None
    rook: Piece | None = None
    rook_source: Position | None = None
    rook_destination: Position | None = None

    @property
    def is_castling(self) -> bool:
        return self.rook is not None


@dataclass(frozen=True, slots=True)
class SquareView:
    """Everything a renderer needs to draw one square."""

    position: Position
    color: Color
    piece: Piece | None
    is_destination: bool
    is_focused: bool


@dataclass(frozen=True, slots=True)
class _RookRelocation:
    rook: Piece
    source: Square
    destination: Square


@dataclass(frozen=True, slots=True)
class _MovePlan:
    """Everything a move will change, computed before touching the board."""

    piece: Piece
    source: Square
    destination: Square
    captured: Piece | None
    castling: _RookRelocation | None


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
CaptureCallback = Callable[[Piece], None]
SelectionCallback = Callable[[Selection], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


def _make_board(board: Board | None, placement: str | None) -> Board:
    if board is not None and placement is not None:
        raise ValueError("Pass either a board or a placement, not both")
    if placement is not None:
        return Board.from_placement(placement)
    return board if board is not None else Board.initial()


class GameController(IGameController):
    """Selection/move state machine over a single board.

    States are *idle* (nothing focused) and *focused*; a focused piece may
    have no destinations at all.  Clicking the focused piece again unfocuses
    it, clicking a destination moves there (capturing whatever stands on
    it), clicking any other piece focuses that piece instead.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread), one click at a time.
    """

    __slots__ = ("_board", "_selection", "_captured", "events")

    def __init__(self, board: Board | None = None, placement: str | None = None) -> None:
        self._board = _make_board(board, placement)
        self._selection: Selection = IDLE
        self._captured: list[Piece] = []
        self.events = GameEvents()

    def reset(self, board: Board | None = None, placement: str | None = None) -> None:
        """Start over on a fresh board with an empty selection."""
        self._board = _make_board(board, placement)
        self._captured = []
        self._set_selection(IDLE)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def phase(self) -> SelectionPhase:
        return self._selection.phase

    @property
    def captured(self) -> tuple[Piece, ...]:
        return tuple(self._captured)

    @property
    def focused_piece(self) -> Piece | None:
        square = self._focused_square()
        return square.piece if square is not None else None

    # ── Query surface ────────────────────────────────────────────────────

    def is_destination(self, square: Square) -> bool:
        return self._selection.is_destination(square.position)

    def is_focused(self, piece: Piece) -> bool:
        focused = self._selection.focused
        return focused is not None and piece.identity == focused

    def destinations_for(self, piece: Piece) -> list[Position]:
        """Move and capture squares of *piece*, without duplicates."""
        movable = piece.movable_positions(self._board) or []
        catchable = piece.catchable_positions(self._board, True)
        return dedupe_positions([*movable, *catchable])

    def square_views(self) -> list[SquareView]:
        """One view per square, in :meth:`Board.all_squares` order."""
        views: list[SquareView] = []
        for square in self._board.all_squares():
            piece = square.piece
            views.append(
                SquareView(
                    position=square.position,
                    color=square.color,
                    piece=piece,
                    is_destination=self.is_destination(square),
                    is_focused=piece is not None and self.is_focused(piece),
                )
            )
        return views

    # ── IGameController impl ─────────────────────────────────────────────

    def on_piece_clicked(self, piece: Piece) -> bool:
        identity = piece.identity

        # Re-click deselects
        if identity == self._selection.focused:
            _LOGGER.debug("Unfocused %s", identity)
            self._set_selection(IDLE)
            return True

        # Clicked an enemy standing on a destination: capture it
        if self._selection.is_destination(piece.position):
            square = self._board.square_at(piece.position)
            if square is None:
                return False
            return self._execute(square)

        destinations = self.destinations_for(piece)
        _LOGGER.debug("Focused %s with %d destinations", identity, len(destinations))
        self._set_selection(Selection.focus(identity, destinations))
        return True

    def on_square_clicked(self, square: Square, is_destination: bool | None = None) -> bool:
        if is_destination is None:
            is_destination = self.is_destination(square)
        if not is_destination:
            return False
        return self._execute(square)

    # ── Move transaction ─────────────────────────────────────────────────

    def _execute(self, destination: Square) -> bool:
        source = self._focused_square()
        if source is None:
            _LOGGER.warning(
                "Focused piece %s not found on the board; ignoring move to %s",
                self._selection.focused,
                destination.position,
            )
            return False
        if destination is source:
            _LOGGER.debug("Ignoring move of %s onto its own square", self._selection.focused)
            return False
        plan = self._plan_move(source, destination)
        record = self._apply(plan)
        self._emit_move(record)
        return True

    def _focused_square(self) -> Square | None:
        focused = self._selection.focused
        if focused is None:
            return None
        for square in self._board.all_squares():
            piece = square.piece
            if piece is not None and piece.identity == focused:
                return square
        return None

    def _plan_move(self, source: Square, destination: Square) -> _MovePlan:
        piece = source.piece
        assert piece is not None
        captured = destination.piece
        return _MovePlan(
            piece=piece,
            source=source,
            destination=destination,
            captured=captured,
            castling=self._plan_castling(piece, destination),
        )

    def _plan_castling(self, piece: Piece, destination: Square) -> _RookRelocation | None:
        """Rook relocation for an unmoved king landing on file 7 or 3.

        Only the king's moved flag and the destination file are looked at.
        """
        if piece.kind != PieceType.KING or piece.has_moved:
            return None
        files = CASTLING_ROOK_FILES.get(destination.position.v)
        if files is None:
            return None
        rook_file, rook_to_file = files
        h = piece.position.h
        rook_square = self._board.square_at(Position(rook_file, h))
        rook_to = self._board.square_at(Position(rook_to_file, h))
        if rook_square is None or rook_to is None:
            return None
        rook = rook_square.piece
        if rook is None or rook is piece:
            return None
        return _RookRelocation(rook, rook_square, rook_to)

    def _apply(self, plan: _MovePlan) -> MoveRecord:
        piece, source, destination = plan.piece, plan.source, plan.destination
        from_pos = source.position

        if plan.captured is not None:
            self._captured.append(plan.captured)
            destination.set_piece(None)

        piece.set_position(destination.position)
        self._selection = IDLE
        destination.set_piece(piece)
        source.set_piece(None)

        castling = plan.castling
        if castling is None:
            record = MoveRecord(piece, from_pos, destination.position, plan.captured)
        else:
            rook = castling.rook
            rook_from = castling.source.position
            rook.set_position(castling.destination.position)
            castling.destination.set_piece(rook)
            castling.source.set_piece(None)
            record = MoveRecord(
                piece,
                from_pos,
                destination.position,
                plan.captured,
                rook,
                rook_from,
                castling.destination.position,
            )

        _LOGGER.debug(
            "Moved %s %s -> %s%s%s",
            piece.kind,
            from_pos,
            destination.position,
            f", captured {plan.captured!r}" if plan.captured is not None else "",
            ", castled" if castling is not None else "",
        )
        return record

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_selection(self, selection: Selection) -> None:
        self._selection = selection
        self._emit_selection()

    def _emit_move(self, record: MoveRecord) -> None:
        if record.captured is not None:
            for cb in self.events.on_capture:
                cb(record.captured)
        for cb in self.events.on_move:
            cb(record)
        self._emit_selection()

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._selection)
