"""Core domain layer — board, pieces and movement rules, no dependencies.

Quick start::

    from clickchess.core import Board, parse_square

    board = Board.initial()
    pawn = board.piece_at(parse_square("e2"))
    print(pawn.movable_positions(board))
"""

from clickchess.core.board import STARTING_PLACEMENT, Board, Square
from clickchess.core.enums import Color, PieceType
from clickchess.core.movement import (
    castling_targets,
    catchable_positions,
    movable_positions,
)
from clickchess.core.piece import Piece, PieceId
from clickchess.core.position import Position, dedupe_positions, parse_square

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Coordinates
    "Position",
    "dedupe_positions",
    "parse_square",
    # Domain objects
    "Board",
    "Piece",
    "PieceId",
    "Square",
    "STARTING_PLACEMENT",
    # Rules
    "castling_targets",
    "catchable_positions",
    "movable_positions",
]
