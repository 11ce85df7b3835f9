"""Tests for per-piece movement and capture geometry."""

from clickchess.core.board import Board
from clickchess.core.enums import Color, PieceType
from clickchess.core.movement import (
    _CATCHABLE_RULES,
    _MOVABLE_RULES,
    castling_targets,
    catchable_positions,
    movable_positions,
)
from clickchess.core.position import Position, parse_square

WHITE, BLACK = Color.WHITE, Color.BLACK
PAWN, KNIGHT, BISHOP = PieceType.PAWN, PieceType.KNIGHT, PieceType.BISHOP
ROOK, QUEEN, KING = PieceType.ROOK, PieceType.QUEEN, PieceType.KING


def _names(positions: list[Position] | None) -> set[str]:
    assert positions is not None
    return {p.name for p in positions}


class TestDispatch:
    def test_every_kind_has_rules(self) -> None:
        assert set(_MOVABLE_RULES) == set(PieceType)
        assert set(_CATCHABLE_RULES) == set(PieceType)


# ── Pawn ─────────────────────────────────────────────────────────────────────


class TestPawnMoves:
    def test_unmoved_single_and_double(self, board: Board, place) -> None:
        pawn = place(PAWN, WHITE, "d2")
        assert pawn.movable_positions(board) == [Position(4, 3), Position(4, 4)]

    def test_black_moves_down(self, board: Board, place) -> None:
        pawn = place(PAWN, BLACK, "e7")
        assert pawn.movable_positions(board) == [Position(5, 6), Position(5, 5)]

    def test_moved_pawn_single_step_only(self, board: Board, place) -> None:
        pawn = place(PAWN, WHITE, "d2")
        board.square_at(pawn.position).set_piece(None)  # type: ignore[union-attr]
        pawn.set_position(parse_square("d3"))
        board.place(pawn)
        assert pawn.movable_positions(board) == [Position(4, 4)]

    def test_double_step_blocked(self, board: Board, place) -> None:
        pawn = place(PAWN, WHITE, "d2")
        place(KNIGHT, BLACK, "d4")
        assert pawn.movable_positions(board) == [Position(4, 3)]

    def test_blocked_by_own_piece_is_none(self, board: Board, place) -> None:
        pawn = place(PAWN, WHITE, "d2")
        place(KNIGHT, WHITE, "d3")
        assert pawn.movable_positions(board) is None

    def test_blocked_by_enemy_is_none(self, board: Board, place) -> None:
        pawn = place(PAWN, WHITE, "d2")
        place(PAWN, BLACK, "d3")
        assert pawn.movable_positions(board) is None

    def test_blocked_even_with_capture_available(self, board: Board, place) -> None:
        pawn = place(PAWN, WHITE, "d2")
        place(PAWN, BLACK, "d3")
        place(PAWN, BLACK, "e3")
        assert pawn.movable_positions(board) is None
        assert pawn.catchable_positions(board, True) == [Position(5, 3)]

    def test_last_rank_is_blocked(self, board: Board, place) -> None:
        pawn = place(PAWN, WHITE, "c8", has_moved=True)
        assert pawn.movable_positions(board) is None

    def test_unmoved_pawn_near_edge_skips_off_board_double(self, board: Board, place) -> None:
        pawn = place(PAWN, WHITE, "c7")
        assert pawn.movable_positions(board) == [Position(3, 8)]


class TestPawnCaptures:
    def test_geometry_ignores_occupancy(self, board: Board, place) -> None:
        pawn = place(PAWN, WHITE, "d2")
        assert pawn.catchable_positions(board) == [Position(5, 3), Position(3, 3)]

    def test_geometry_without_bounds_check(self, board: Board, place) -> None:
        pawn = place(PAWN, WHITE, "a2")
        assert pawn.catchable_positions(board, False) == [Position(2, 3), Position(0, 3)]

    def test_restricted_to_enemies(self, board: Board, place) -> None:
        pawn = place(PAWN, WHITE, "d4")
        place(PAWN, BLACK, "e5")
        place(PAWN, WHITE, "c5")
        assert pawn.catchable_positions(board, True) == [Position(5, 5)]

    def test_black_captures_down(self, board: Board, place) -> None:
        pawn = place(PAWN, BLACK, "e5")
        place(KNIGHT, WHITE, "d4")
        assert pawn.catchable_positions(board, True) == [Position(4, 4)]

    def test_nothing_to_capture(self, board: Board, place) -> None:
        pawn = place(PAWN, WHITE, "d4")
        assert pawn.catchable_positions(board, True) == []


# ── Knight / King ────────────────────────────────────────────────────────────


class TestKnight:
    def test_center(self, board: Board, place) -> None:
        knight = place(KNIGHT, WHITE, "d4")
        assert _names(movable_positions(knight, board)) == {
            "b3", "b5", "c2", "c6", "e2", "e6", "f3", "f5",
        }

    def test_corner(self, board: Board, place) -> None:
        knight = place(KNIGHT, WHITE, "a1")
        assert _names(movable_positions(knight, board)) == {"b3", "c2"}

    def test_jumps_but_not_onto_pieces(self, board: Board, place) -> None:
        knight = place(KNIGHT, WHITE, "b1")
        place(PAWN, WHITE, "d2")
        place(PAWN, BLACK, "c3")
        assert _names(movable_positions(knight, board)) == {"a3"}
        assert _names(catchable_positions(knight, board, True)) == {"c3"}
        assert _names(catchable_positions(knight, board, False)) == {"a3", "c3", "d2"}


class TestKing:
    def test_moved_king_steps(self, board: Board, place) -> None:
        king = place(KING, WHITE, "e4", has_moved=True)
        assert len(movable_positions(king, board)) == 8  # type: ignore[arg-type]

    def test_edge(self, board: Board, place) -> None:
        king = place(KING, BLACK, "h8", has_moved=True)
        assert _names(movable_positions(king, board)) == {"g8", "g7", "h7"}

    def test_captures(self, board: Board, place) -> None:
        king = place(KING, WHITE, "e4", has_moved=True)
        place(PAWN, BLACK, "d5")
        place(PAWN, WHITE, "f5")
        assert _names(catchable_positions(king, board, True)) == {"d5"}


# ── Sliders ──────────────────────────────────────────────────────────────────


class TestSliders:
    def test_rook_open_board(self, board: Board, place) -> None:
        rook = place(ROOK, WHITE, "d4")
        assert len(movable_positions(rook, board)) == 14  # type: ignore[arg-type]

    def test_bishop_open_board(self, board: Board, place) -> None:
        bishop = place(BISHOP, WHITE, "d4")
        assert len(movable_positions(bishop, board)) == 13  # type: ignore[arg-type]

    def test_queen_open_board(self, board: Board, place) -> None:
        queen = place(QUEEN, WHITE, "d4")
        assert len(movable_positions(queen, board)) == 27  # type: ignore[arg-type]

    def test_rook_stops_at_blockers(self, board: Board, place) -> None:
        rook = place(ROOK, WHITE, "a1")
        place(PAWN, WHITE, "a3")
        place(KNIGHT, BLACK, "d1")
        assert _names(movable_positions(rook, board)) == {"a2", "b1", "c1"}
        assert _names(catchable_positions(rook, board, True)) == {"d1"}

    def test_bishop_captures_first_enemy_only(self, board: Board, place) -> None:
        bishop = place(BISHOP, WHITE, "c1")
        place(PAWN, BLACK, "e3")
        place(QUEEN, BLACK, "f4")
        place(PAWN, WHITE, "b2")
        assert _names(catchable_positions(bishop, board, True)) == {"e3"}
        assert _names(movable_positions(bishop, board)) == {"d2"}

    def test_geometry_ignores_blockers(self, board: Board, place) -> None:
        rook = place(ROOK, WHITE, "a1")
        place(PAWN, WHITE, "a2")
        assert len(catchable_positions(rook, board, False)) == 14

    def test_empty_moves_is_list_not_none(self) -> None:
        board = Board.initial()
        rook = board.piece_at(parse_square("a1"))
        assert rook is not None
        assert movable_positions(rook, board) == []


# ── Castling targets ─────────────────────────────────────────────────────────


class TestCastlingTargets:
    def test_both_sides_open(self, board: Board, place) -> None:
        king = place(KING, WHITE, "e1")
        place(ROOK, WHITE, "a1")
        place(ROOK, WHITE, "h1")
        assert _names(castling_targets(king, board)) == {"g1", "c1"}
        assert {"g1", "c1"} <= _names(movable_positions(king, board))

    def test_black_kingside(self, board: Board, place) -> None:
        king = place(KING, BLACK, "e8")
        place(ROOK, BLACK, "h8")
        assert _names(castling_targets(king, board)) == {"g8"}

    def test_blocked_lane(self, board: Board, place) -> None:
        king = place(KING, WHITE, "e1")
        place(ROOK, WHITE, "a1")
        place(KNIGHT, WHITE, "b1")
        place(ROOK, WHITE, "h1")
        place(BISHOP, WHITE, "f1")
        assert castling_targets(king, board) == []

    def test_moved_rook(self, board: Board, place) -> None:
        king = place(KING, WHITE, "e1")
        place(ROOK, WHITE, "h1", has_moved=True)
        assert castling_targets(king, board) == []

    def test_moved_king(self, board: Board, place) -> None:
        king = place(KING, WHITE, "e1", has_moved=True)
        place(ROOK, WHITE, "h1")
        assert castling_targets(king, board) == []
        assert "g1" not in _names(movable_positions(king, board))

    def test_enemy_rook_ignored(self, board: Board, place) -> None:
        king = place(KING, WHITE, "e1")
        place(ROOK, BLACK, "h1")
        assert castling_targets(king, board) == []

    def test_king_off_e_file(self, board: Board, place) -> None:
        king = place(KING, WHITE, "f1")
        place(ROOK, WHITE, "h1")
        place(ROOK, WHITE, "a1")
        assert _names(castling_targets(king, board)) == {"g1", "c1"}

    def test_occupied_destination(self, board: Board, place) -> None:
        king = place(KING, WHITE, "b1")
        place(ROOK, WHITE, "a1")
        place(KNIGHT, WHITE, "c1")
        assert castling_targets(king, board) == []

    def test_piece_between_king_and_rook(self, board: Board, place) -> None:
        king = place(KING, WHITE, "f1")
        place(ROOK, WHITE, "a1")
        place(BISHOP, WHITE, "b1")
        assert castling_targets(king, board) == []

    def test_initial_position_closed(self) -> None:
        board = Board.initial()
        king = board.piece_at(parse_square("e1"))
        assert king is not None
        assert castling_targets(king, board) == []
        assert movable_positions(king, board) == []
