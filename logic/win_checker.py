"""
Win checker for TicTacToe.
Checks if a side has won or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, List

from .game_state import Board, Side, Move


class GameStatus(Enum):
    """Where a round stands."""
    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    The result of a position. Derived from the board, never stored on it.
    """
    status: GameStatus
    winner: Optional[Side] = None

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.ONGOING

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAW

    def __str__(self) -> str:
        if self.status == GameStatus.WIN:
            return f"{self.winner.name} wins"
        return self.status.value


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: the board's win length of marks from one side in a
    line (horizontally, vertically, or diagonally).
    """

    def check_winner(self, board: Board) -> Optional[Side]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Side, or None if no winner yet.
        """
        return board.winner()

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw is a full board with no winner.
        """
        return board.is_full() and board.winner() is None

    def get_outcome(self, board: Board) -> Outcome:
        """
        Work out whether the round is won, drawn or still going.

        Args:
            board: The board to check.

        Returns:
            Outcome for the position.
        """
        winner = board.winner()

        if winner is not None:
            return Outcome(GameStatus.WIN, winner)
        if board.is_full():
            return Outcome(GameStatus.DRAW)

        return Outcome(GameStatus.ONGOING)

    def get_winning_line(self, board: Board) -> Optional[List[Move]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        return board.winning_line()
