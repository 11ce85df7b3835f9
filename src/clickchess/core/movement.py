"""Pseudo-legal move and capture geometry, one rule pair per piece kind.

Every kind answers two questions about a piece on a board:

* ``movable_positions`` -- squares it can step onto without capturing.  The
  pawn returns ``None`` when its forward square is blocked; this is a
  distinct answer from an empty list and callers must keep it apart.
* ``catchable_positions`` -- squares it could capture on.  With
  ``restrict_to_enemy=False`` this is the raw capture geometry, ignoring
  occupancy; with ``True`` only squares holding an enemy piece are kept.

King safety is never considered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clickchess.core.enums import PieceType
from clickchess.core.position import Position

if TYPE_CHECKING:
    from collections.abc import Callable

    from clickchess.core.board import Board
    from clickchess.core.piece import Piece

    MovableRule = Callable[[Piece, Board], list[Position] | None]
    CatchableRule = Callable[[Piece, Board, bool], list[Position]]


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

# Castling, keyed by the king's destination file.
CASTLING_ROOK_FILES: dict[int, tuple[int, int]] = {7: (8, 6), 3: (1, 4)}  # rook from, to


# -- Shared helpers ---------------------------------------------------------


def _is_enemy(piece: Piece, board: Board, pos: Position) -> bool:
    target = board.piece_at(pos)
    return target is not None and target.color != piece.color


def _ray(origin: Position, dv: int, dh: int) -> list[Position]:
    """On-board squares from *origin* (exclusive) to the edge."""
    ray: list[Position] = []
    pos = origin.offset(dv, dh)
    while pos.on_board:
        ray.append(pos)
        pos = pos.offset(dv, dh)
    return ray


def _step_targets(origin: Position, offsets: tuple[tuple[int, int], ...]) -> list[Position]:
    targets = (origin.offset(dv, dh) for dv, dh in offsets)
    return [pos for pos in targets if pos.on_board]


def _step_movable(
    piece: Piece, board: Board, offsets: tuple[tuple[int, int], ...]
) -> list[Position]:
    return [pos for pos in _step_targets(piece.position, offsets) if board.is_empty(pos)]


def _step_catchable(
    piece: Piece,
    board: Board,
    restrict_to_enemy: bool,
    offsets: tuple[tuple[int, int], ...],
) -> list[Position]:
    targets = _step_targets(piece.position, offsets)
    if not restrict_to_enemy:
        return targets
    return [pos for pos in targets if _is_enemy(piece, board, pos)]


def _sliding_movable(
    piece: Piece, board: Board, directions: tuple[tuple[int, int], ...]
) -> list[Position]:
    result: list[Position] = []
    for dv, dh in directions:
        for pos in _ray(piece.position, dv, dh):
            if not board.is_empty(pos):
                break
            result.append(pos)
    return result


def _sliding_catchable(
    piece: Piece,
    board: Board,
    restrict_to_enemy: bool,
    directions: tuple[tuple[int, int], ...],
) -> list[Position]:
    result: list[Position] = []
    for dv, dh in directions:
        ray = _ray(piece.position, dv, dh)
        if not restrict_to_enemy:
            result.extend(ray)
            continue
        for pos in ray:
            if board.is_empty(pos):
                continue
            if _is_enemy(piece, board, pos):
                result.append(pos)
            break
    return result


# -- Pawn -------------------------------------------------------------------


def _pawn_movable(piece: Piece, board: Board) -> list[Position] | None:
    step = piece.color.forward
    one_step = piece.position.offset(0, step)
    # The board edge blocks like an occupied square.
    if not board.is_empty(one_step):
        return None
    result = [one_step]
    two_step = one_step.offset(0, step)
    if not piece.has_moved and board.is_empty(two_step):
        result.append(two_step)
    return result


def _pawn_catchable(piece: Piece, board: Board, restrict_to_enemy: bool) -> list[Position]:
    step = piece.color.forward
    result: list[Position] = []
    for dv in (1, -1):
        target = piece.position.offset(dv, step)
        if not restrict_to_enemy or _is_enemy(piece, board, target):
            result.append(target)
    return result


# -- Pieces -----------------------------------------------------------------


def _knight_movable(piece: Piece, board: Board) -> list[Position]:
    return _step_movable(piece, board, KNIGHT_OFFSETS)


def _knight_catchable(piece: Piece, board: Board, restrict_to_enemy: bool) -> list[Position]:
    return _step_catchable(piece, board, restrict_to_enemy, KNIGHT_OFFSETS)


def _bishop_movable(piece: Piece, board: Board) -> list[Position]:
    return _sliding_movable(piece, board, BISHOP_DIRS)


def _bishop_catchable(piece: Piece, board: Board, restrict_to_enemy: bool) -> list[Position]:
    return _sliding_catchable(piece, board, restrict_to_enemy, BISHOP_DIRS)


def _rook_movable(piece: Piece, board: Board) -> list[Position]:
    return _sliding_movable(piece, board, ROOK_DIRS)


def _rook_catchable(piece: Piece, board: Board, restrict_to_enemy: bool) -> list[Position]:
    return _sliding_catchable(piece, board, restrict_to_enemy, ROOK_DIRS)


def _queen_movable(piece: Piece, board: Board) -> list[Position]:
    return _sliding_movable(piece, board, QUEEN_DIRS)


def _queen_catchable(piece: Piece, board: Board, restrict_to_enemy: bool) -> list[Position]:
    return _sliding_catchable(piece, board, restrict_to_enemy, QUEEN_DIRS)


def _king_movable(piece: Piece, board: Board) -> list[Position]:
    result = _step_movable(piece, board, KING_OFFSETS)
    if not piece.has_moved:
        result.extend(castling_targets(piece, board))
    return result


def _king_catchable(piece: Piece, board: Board, restrict_to_enemy: bool) -> list[Position]:
    return _step_catchable(piece, board, restrict_to_enemy, KING_OFFSETS)


def castling_targets(king: Piece, board: Board) -> list[Position]:
    """King destinations that would castle, given the rooks and empty squares.

    Requires an unmoved king and an unmoved rook of the same color on the
    corner of the king's rank, every square strictly between them empty and
    an empty destination.  Attacked squares are not checked.
    """
    if king.kind != PieceType.KING or king.has_moved:
        return []
    h = king.position.h
    result: list[Position] = []
    for dest_file, (rook_file, _) in CASTLING_ROOK_FILES.items():
        destination = Position(dest_file, h)
        if dest_file == king.position.v or not board.is_empty(destination):
            continue
        rook = board.piece_at(Position(rook_file, h))
        if (
            rook is None
            or rook.kind != PieceType.ROOK
            or rook.color != king.color
            or rook.has_moved
        ):
            continue
        low, high = sorted((king.position.v, rook_file))
        between = (Position(v, h) for v in range(low + 1, high))
        if all(board.is_empty(pos) for pos in between):
            result.append(destination)
    return result


# -- Dispatch ---------------------------------------------------------------

_MOVABLE_RULES: dict[PieceType, MovableRule] = {
    PieceType.PAWN: _pawn_movable,
    PieceType.KNIGHT: _knight_movable,
    PieceType.BISHOP: _bishop_movable,
    PieceType.ROOK: _rook_movable,
    PieceType.QUEEN: _queen_movable,
    PieceType.KING: _king_movable,
}

_CATCHABLE_RULES: dict[PieceType, CatchableRule] = {
    PieceType.PAWN: _pawn_catchable,
    PieceType.KNIGHT: _knight_catchable,
    PieceType.BISHOP: _bishop_catchable,
    PieceType.ROOK: _rook_catchable,
    PieceType.QUEEN: _queen_catchable,
    PieceType.KING: _king_catchable,
}


def movable_positions(piece: Piece, board: Board) -> list[Position] | None:
    """Non-capturing destinations of *piece* on *board* (``None`` = blocked)."""
    return _MOVABLE_RULES[piece.kind](piece, board)


def catchable_positions(
    piece: Piece, board: Board, restrict_to_enemy: bool = False
) -> list[Position]:
    """Capture squares of *piece* on *board*."""
    return _CATCHABLE_RULES[piece.kind](piece, board, restrict_to_enemy)
