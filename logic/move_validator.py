"""
Move validator for TicTacToe.
Checks a move before it is placed, without raising.
"""

from typing import Optional, List
from dataclasses import dataclass

from .game_state import Board, Move
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark.
            col: Column to place the mark.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if self.win_checker.get_outcome(board).is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not board.in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Invalid position ({row}, {col}). "
                    f"Row must be 0-{board.rows - 1}, column 0-{board.cols - 1}."
                )
            )

        occupant = board.get(row, col)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.name}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[Move]:
        """
        Get all valid moves for the side to move.

        Returns:
            List of (row, col) valid move positions, empty once the game is over.
        """
        if self.win_checker.get_outcome(board).is_game_over:
            return []

        return board.get_empty_cells()
