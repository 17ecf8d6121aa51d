"""
Errors raised by the TicTacToe game logic.
"""


class TicTacToeError(Exception):
    """Base class for all game logic errors."""


class OutOfBounds(TicTacToeError, IndexError):
    """A (row, col) coordinate lies outside the board."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        self.row = row
        self.col = col
        super().__init__(
            f"Invalid position ({row}, {col}). "
            f"Must be within 0-{rows - 1} x 0-{cols - 1}."
        )


class CellOccupied(TicTacToeError, ValueError):
    """A move targeted a cell that already holds a mark."""

    def __init__(self, row: int, col: int, occupant):
        self.row = row
        self.col = col
        self.occupant = occupant
        super().__init__(f"Cell ({row}, {col}) is already occupied by {occupant.name}")


class InvalidConfiguration(TicTacToeError, ValueError):
    """Board or game settings that cannot be played."""
