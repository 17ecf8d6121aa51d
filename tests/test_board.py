"""
Tests for the board model and win/draw detection.
"""

import pytest

from logic.errors import OutOfBounds, CellOccupied, InvalidConfiguration
from logic.game_state import Board, Side
from logic.win_checker import WinChecker, GameStatus
from logic.move_validator import MoveValidator


# ════════════════════════════════════════════════════════════════════════════
#  BOARD TESTS
# ════════════════════════════════════════════════════════════════════════════

class TestBoard:
    def test_new_board_is_empty(self):
        b = Board()
        assert (b.rows, b.cols, b.win_length) == (3, 3, 3)
        assert all(b.get(r, c) is None for r in range(3) for c in range(3))
        assert b.move_count == 0
        assert not b.is_full()
        assert b.winner() is None

    @pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, 3), (0, 0)])
    def test_degenerate_board_rejected(self, rows, cols):
        with pytest.raises(InvalidConfiguration):
            Board(rows, cols)

    @pytest.mark.parametrize("win_length", [0, 4, -2])
    def test_bad_win_length_rejected(self, win_length):
        with pytest.raises(InvalidConfiguration):
            Board(3, 3, win_length)

    @pytest.mark.parametrize("rows, cols, win_length", [
        (True, 3, None),
        (3, True, None),
        (True, True, None),
        (3, 3, True),
    ])
    def test_bool_sizes_rejected(self, rows, cols, win_length):
        with pytest.raises(InvalidConfiguration):
            Board(rows, cols, win_length)

    def test_set_and_get(self):
        b = Board()
        b.set(1, 2, Side.X)
        assert b.get(1, 2) == Side.X
        assert b.get(2, 1) is None
        assert not b.is_empty(1, 2)
        assert b.is_empty(2, 1)
        assert b.move_count == 1

    def test_set_occupied_cell(self):
        b = Board()
        b.set(0, 0, Side.X)
        with pytest.raises(CellOccupied) as exc:
            b.set(0, 0, Side.O)
        assert exc.value.occupant == Side.X
        assert b.get(0, 0) == Side.X
        assert b.move_count == 1

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
    def test_out_of_bounds(self, row, col):
        b = Board()
        with pytest.raises(OutOfBounds):
            b.get(row, col)
        with pytest.raises(OutOfBounds):
            b.set(row, col, Side.X)
        with pytest.raises(OutOfBounds):
            b.clear(row, col)

    def test_out_of_bounds_is_index_error(self):
        with pytest.raises(IndexError):
            Board().get(3, 3)

    def test_set_requires_side(self):
        b = Board()
        with pytest.raises(TypeError):
            b.set(0, 0, 1)
        assert b.get(0, 0) is None

    def test_set_then_clear_restores_board(self):
        b = Board.from_rows([
            ["X", None, "O"],
            [None, "X", None],
            [None, None, None],
        ])
        before = b.copy()
        before_cells = b.to_list()

        b.set(2, 1, Side.O)
        assert b != before
        b.clear(2, 1)

        assert b == before
        assert b.to_list() == before_cells
        assert b.move_count == before.move_count

    def test_clear_empty_cell_is_noop(self):
        b = Board()
        b.clear(1, 1)
        assert b.move_count == 0

    def test_is_full(self):
        b = Board()
        cells = [(r, c) for r in range(3) for c in range(3)]
        side = Side.X
        for r, c in cells:
            assert not b.is_full()
            b.set(r, c, side)
            side = side.opposite()
        assert b.is_full()

    def test_reset(self):
        b = Board.from_rows([["X", "O", "X"], ["O", "X", "O"], ["O", "X", "O"]])
        assert b.is_full()
        b.reset()
        assert b == Board()
        assert b.get_empty_cells() == [(r, c) for r in range(3) for c in range(3)]

    def test_empty_cells_row_major(self):
        b = Board.from_rows([
            ["X", None, "O"],
            [None, "X", None],
            ["O", None, None],
        ])
        assert b.get_empty_cells() == [(0, 1), (1, 0), (1, 2), (2, 1), (2, 2)]

    def test_copy_is_independent(self):
        b = Board()
        b.set(0, 0, Side.X)
        c = b.copy()
        c.set(1, 1, Side.O)
        assert b.get(1, 1) is None
        assert c.get(0, 0) == Side.X

    def test_from_rows_rejects_ragged_rows(self):
        with pytest.raises(InvalidConfiguration):
            Board.from_rows([["X", None], [None]])

    def test_from_rows_rejects_unknown_mark(self):
        with pytest.raises(InvalidConfiguration):
            Board.from_rows([["Z"]])

    def test_str(self):
        b = Board.from_rows([["X", None, "O"], [None] * 3, [None] * 3])
        text = str(b)
        assert text.splitlines()[0] == "   0   1   2"
        assert text.splitlines()[1] == "0  X |   | O "


# ════════════════════════════════════════════════════════════════════════════
#  WINNER TESTS
# ════════════════════════════════════════════════════════════════════════════

LINES_3X3 = [
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
]


class TestWinner:
    @pytest.mark.parametrize("line", LINES_3X3)
    @pytest.mark.parametrize("side", [Side.X, Side.O])
    def test_every_line_wins(self, line, side):
        b = Board()
        for r, c in line:
            b.set(r, c, side)
        assert b.winner() == side
        assert b.winning_line() == line

    @pytest.mark.parametrize("line", LINES_3X3)
    def test_mixed_line_does_not_win(self, line):
        b = Board()
        (r0, c0), (r1, c1), (r2, c2) = line
        b.set(r0, c0, Side.X)
        b.set(r1, c1, Side.O)
        b.set(r2, c2, Side.X)
        assert b.winner() is None

    def test_two_in_a_row_then_three(self):
        b = Board()
        b.set(0, 0, Side.X)
        b.set(0, 1, Side.X)
        assert b.winner() is None
        b.set(0, 2, Side.X)
        assert b.winner() == Side.X

    def test_full_board_draw(self):
        b = Board.from_rows([
            ["X", "O", "X"],
            ["X", "O", "O"],
            ["O", "X", "X"],
        ])
        assert b.is_full()
        assert b.winner() is None

    def test_4x4_needs_whole_line(self):
        b = Board(4, 4)
        for c in range(3):
            b.set(0, c, Side.O)
        assert b.winner() is None
        b.set(0, 3, Side.O)
        assert b.winner() == Side.O

    def test_4x4_anti_diagonal(self):
        b = Board(4, 4)
        for i in range(4):
            b.set(i, 3 - i, Side.X)
        assert b.winner() == Side.X
        assert b.winning_line() == [(0, 3), (1, 2), (2, 1), (3, 0)]

    def test_4x4_with_win_length_three(self):
        b = Board(4, 4, win_length=3)
        b.set(1, 1, Side.X)
        b.set(2, 2, Side.X)
        assert b.winner() is None
        b.set(3, 3, Side.X)
        assert b.winner() == Side.X

    def test_rectangular_board(self):
        b = Board(3, 5)
        assert b.win_length == 3
        for c in (2, 3, 4):
            b.set(1, c, Side.O)
        assert b.winner() == Side.O

    def test_one_by_one(self):
        b = Board(1, 1)
        assert b.winner() is None
        b.set(0, 0, Side.X)
        assert b.winner() == Side.X
        assert b.is_full()


# ════════════════════════════════════════════════════════════════════════════
#  WIN CHECKER / VALIDATOR TESTS
# ════════════════════════════════════════════════════════════════════════════

class TestWinChecker:
    def test_outcomes(self):
        checker = WinChecker()

        ongoing = Board.from_rows([["X", None, None], [None, "O", None], [None, None, None]])
        assert checker.get_outcome(ongoing).status == GameStatus.ONGOING
        assert not checker.get_outcome(ongoing).is_game_over

        won = Board.from_rows([["O", "X", "X"], [None, "O", "X"], [None, None, "O"]])
        outcome = checker.get_outcome(won)
        assert outcome.status == GameStatus.WIN
        assert outcome.winner == Side.O
        assert checker.get_winning_line(won) == [(0, 0), (1, 1), (2, 2)]

        drawn = Board.from_rows([["X", "O", "X"], ["X", "O", "O"], ["O", "X", "X"]])
        assert checker.check_draw(drawn)
        assert checker.get_outcome(drawn).is_draw

    def test_win_on_last_cell_is_not_draw(self):
        b = Board.from_rows([["X", "O", "X"], ["O", "X", "O"], ["O", "X", "X"]])
        checker = WinChecker()
        assert b.is_full()
        assert checker.check_winner(b) == Side.X
        assert not checker.check_draw(b)


class TestMoveValidator:
    def test_valid_move(self):
        result = MoveValidator().validate_move(Board(), 1, 1)
        assert result.is_valid
        assert result.error_message is None

    def test_occupied(self):
        b = Board()
        b.set(1, 1, Side.X)
        result = MoveValidator().validate_move(b, 1, 1)
        assert not result.is_valid
        assert "occupied" in result.error_message

    def test_out_of_range(self):
        result = MoveValidator().validate_move(Board(), 5, 5)
        assert not result.is_valid
        assert "Invalid position" in result.error_message

    def test_game_over(self):
        b = Board.from_rows([["X", "X", "X"], ["O", "O", None], [None, None, None]])
        validator = MoveValidator()
        assert not validator.validate_move(b, 2, 2).is_valid
        assert validator.get_valid_moves(b) == []

    def test_valid_moves(self):
        b = Board()
        b.set(0, 0, Side.X)
        assert MoveValidator().get_valid_moves(b) == b.get_empty_cells()
        assert len(MoveValidator().get_valid_moves(b)) == 8
