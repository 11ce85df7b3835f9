"""Game layer — click-driven selection and move state machine.

Quick start::

    from clickchess.core import parse_square
    from clickchess.game import GameController

    ctrl = GameController()
    pawn = ctrl.board.piece_at(parse_square("e2"))
    ctrl.on_piece_clicked(pawn)
    ctrl.on_square_clicked(ctrl.board.square_at(parse_square("e4")))
"""

from clickchess.game.controller import GameController, GameEvents, MoveRecord, SquareView
from clickchess.game.interfaces import IGameController, SelectionPhase
from clickchess.game.selection import IDLE, Selection

__all__ = [
    # Interfaces
    "IGameController",
    "SelectionPhase",
    # Concrete
    "GameController",
    "GameEvents",
    "MoveRecord",
    "Selection",
    "SquareView",
    "IDLE",
]
