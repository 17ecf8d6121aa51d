"""
Board model for TicTacToe.
Holds the cell grid, places and clears marks, and finds winning lines.
"""

from enum import Enum
from typing import Optional, List, Tuple, Sequence, Union

import numpy as np

from .errors import OutOfBounds, CellOccupied, InvalidConfiguration


class Side(Enum):
    """The two sides in the game. X always moves first."""
    X = 1
    O = -1

    def opposite(self) -> "Side":
        """Get the opposite side."""
        return Side.O if self == Side.X else Side.X


# Cell value stored in the grid for an empty cell
EMPTY = 0

# Line directions, in the order lines are checked:
# rows, columns, diagonals, anti-diagonals
DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]

Move = Tuple[int, int]


def _build_lines(rows: int, cols: int, win_length: int) -> np.ndarray:
    """
    Build every winning line as flat cell indices.

    Returns:
        Array of shape (num_lines, win_length).
    """
    # A single cell is the same line in every direction
    directions = DIRECTIONS[:1] if win_length == 1 else DIRECTIONS

    lines = []
    for dr, dc in directions:
        for row in range(rows):
            for col in range(cols):
                end_row = row + dr * (win_length - 1)
                end_col = col + dc * (win_length - 1)
                if not (0 <= end_row < rows and 0 <= end_col < cols):
                    continue
                lines.append([
                    (row + dr * i) * cols + (col + dc * i)
                    for i in range(win_length)
                ])

    return np.array(lines, dtype=np.intp).reshape(-1, win_length)


class Board:
    """
    An R x C TicTacToe board.

    Cells are stored in a numpy int8 grid: 0 is empty, 1 is X, -1 is O.
    A side wins by holding `win_length` consecutive cells in a row,
    column or diagonal. For an N x N board the default win length is N,
    so a win needs a whole row, column or main diagonal.
    """

    def __init__(self, rows: int = 3, cols: int = 3, win_length: Optional[int] = None):
        """
        Create an empty board.

        Args:
            rows: Board height (at least 1).
            cols: Board width (at least 1).
            win_length: Marks in a line needed to win (default: min(rows, cols)).
        """
        if isinstance(rows, bool) or isinstance(cols, bool) \
           or not isinstance(rows, int) or not isinstance(cols, int) or rows < 1 or cols < 1:
            raise InvalidConfiguration(
                f"Board must be at least 1x1, got {rows}x{cols}"
            )

        if win_length is None:
            win_length = min(rows, cols)

        if isinstance(win_length, bool) or not isinstance(win_length, int) \
           or not 1 <= win_length <= max(rows, cols):
            raise InvalidConfiguration(
                f"Win length must be between 1 and {max(rows, cols)}, got {win_length}"
            )

        self.rows = rows
        self.cols = cols
        self.win_length = win_length

        self._grid = np.zeros((rows, cols), dtype=np.int8)
        self._lines = _build_lines(rows, cols, win_length)

        # Number of non-empty cells, so is_full() doesn't scan the grid
        self._filled = 0

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Union[str, Side, None]]],
        win_length: Optional[int] = None
    ) -> "Board":
        """
        Build a board from nested rows of 'X', 'O', Side or None.

        Empty strings, '.', ' ' and '-' also count as empty cells.
        """
        height = len(rows)
        width = len(rows[0]) if height else 0

        if any(len(row) != width for row in rows):
            raise InvalidConfiguration("All rows must have the same length")

        board = cls(height, width, win_length)

        for r, row in enumerate(rows):
            for c, cell in enumerate(row):
                side = _parse_cell(cell)
                if side is not None:
                    board.set(r, c, side)

        return board

    # ==================== CELL ACCESS ====================

    def in_bounds(self, row: int, col: int) -> bool:
        """True if (row, col) is on the board."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_bounds(self, row: int, col: int):
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.rows, self.cols)

    def get(self, row: int, col: int) -> Optional[Side]:
        """
        Get the mark in a cell.

        Returns:
            The Side in the cell, or None if it is empty.
        """
        self._check_bounds(row, col)
        value = int(self._grid[row, col])
        return Side(value) if value != EMPTY else None

    def is_empty(self, row: int, col: int) -> bool:
        """True if the cell holds no mark."""
        self._check_bounds(row, col)
        return bool(self._grid[row, col] == EMPTY)

    def set(self, row: int, col: int, side: Side):
        """
        Place a side's mark in an empty cell.

        Raises:
            OutOfBounds: (row, col) is not on the board.
            CellOccupied: The cell already holds a mark.
        """
        if not isinstance(side, Side):
            raise TypeError(f"Expected a Side, got {side!r}")

        self._check_bounds(row, col)

        current = int(self._grid[row, col])
        if current != EMPTY:
            raise CellOccupied(row, col, Side(current))

        self._grid[row, col] = side.value
        self._filled += 1

    def clear(self, row: int, col: int):
        """
        Reset a cell to empty.

        Used to undo speculative moves during search.
        """
        self._check_bounds(row, col)

        if self._grid[row, col] != EMPTY:
            self._grid[row, col] = EMPTY
            self._filled -= 1

    def reset(self):
        """Clear every cell for a new round."""
        self._grid.fill(EMPTY)
        self._filled = 0

    # ==================== BOARD QUERIES ====================

    @property
    def move_count(self) -> int:
        """How many marks are on the board."""
        return self._filled

    def is_full(self) -> bool:
        """True if no empty cell remains."""
        return self._filled == self.rows * self.cols

    def get_empty_cells(self) -> List[Move]:
        """
        Get all empty cells in row-major order.

        Returns:
            List of (row, col) tuples.
        """
        return [(int(r), int(c)) for r, c in np.argwhere(self._grid == EMPTY)]

    def _winning_line_index(self) -> Optional[int]:
        """Index of the first line held entirely by one side, if any."""
        sums = self._grid.ravel()[self._lines].sum(axis=1, dtype=np.int32)
        hits = np.flatnonzero(np.abs(sums) == self.win_length)
        return int(hits[0]) if hits.size else None

    def winner(self) -> Optional[Side]:
        """
        Get the side holding a complete winning line.

        Returns:
            The winning Side, or None if no line is complete.
        """
        index = self._winning_line_index()
        if index is None:
            return None

        first_cell = self._lines[index][0]
        return Side(int(self._grid.flat[first_cell]))

    def winning_line(self) -> Optional[List[Move]]:
        """
        Get the cells of the winning line.

        Returns:
            List of (row, col) along the line, or None.
        """
        index = self._winning_line_index()
        if index is None:
            return None

        return [divmod(int(cell), self.cols) for cell in self._lines[index]]

    # ==================== COPY / DISPLAY ====================

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board(self.rows, self.cols, self.win_length)
        new_board._grid = self._grid.copy()
        new_board._filled = self._filled
        return new_board

    def to_list(self) -> List[List[Optional[Side]]]:
        """The board as nested lists of Side or None."""
        return [
            [Side(int(v)) if v != EMPTY else None for v in row]
            for row in self._grid
        ]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.win_length == other.win_length
            and self._grid.shape == other._grid.shape
            and np.array_equal(self._grid, other._grid)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols}, win_length={self.win_length})"

    def __str__(self) -> str:
        header = "   " + "   ".join(str(c) for c in range(self.cols))
        separator = "  " + "+".join(["---"] * self.cols)

        lines = [header]
        for r in range(self.rows):
            cells = []
            for value in self._grid[r]:
                cells.append(f" {Side(int(value)).name} " if value != EMPTY else "   ")
            lines.append(f"{r} " + "|".join(cells))
            if r < self.rows - 1:
                lines.append(separator)

        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self)


def _parse_cell(cell: Union[str, Side, None]) -> Optional[Side]:
    """Convert a cell written as 'X', 'O', Side or None to a Side."""
    if cell is None or isinstance(cell, Side):
        return cell

    text = str(cell).strip().upper()
    if text in ("", ".", "-"):
        return None
    if text in Side.__members__:
        return Side[text]

    raise InvalidConfiguration(f"Unknown cell value: {cell!r}")
