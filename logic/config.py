"""
Game configuration for TicTacToe.
Board size, side assignment and search settings.
"""

from typing import Optional

from .errors import InvalidConfiguration
from .game_state import Side


class GameConfig:
    """
    Configuration class for a game.

    The class attributes are the defaults; pass keyword arguments to
    override them for one game. Settings don't change during a round.
    """

    # ==================== BOARD SETTINGS ====================
    ROWS = 3
    COLS = 3

    # Marks in a line needed to win. None means min(ROWS, COLS),
    # i.e. a whole row, column or main diagonal on a square board.
    WIN_LENGTH = None

    # ==================== SIDES ====================
    # X always moves first
    HUMAN_SIDE = Side.X
    COMPUTER_SIDE = Side.O

    # ==================== SEARCH SETTINGS ====================
    # Alpha-beta pruning gives the same moves, only faster
    USE_ALPHA_BETA = True

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False

    def __init__(
        self,
        rows: Optional[int] = None,
        cols: Optional[int] = None,
        human_side: Optional[Side] = None,
        computer_side: Optional[Side] = None,
        win_length: Optional[int] = None,
        use_alpha_beta: Optional[bool] = None,
        debug_mode: Optional[bool] = None
    ):
        """
        Build a configuration, falling back to the class defaults.

        If only human_side is given, the computer gets the other side.

        Raises:
            InvalidConfiguration: The settings can't make a playable game.
        """
        self.rows = self.ROWS if rows is None else rows
        self.cols = self.COLS if cols is None else cols
        self.win_length = self.WIN_LENGTH if win_length is None else win_length

        self.human_side = self.HUMAN_SIDE if human_side is None else human_side
        if computer_side is None:
            if isinstance(self.human_side, Side):
                computer_side = self.human_side.opposite()
            else:
                computer_side = self.COMPUTER_SIDE
        self.computer_side = computer_side

        self.use_alpha_beta = self.USE_ALPHA_BETA if use_alpha_beta is None else use_alpha_beta
        self.debug_mode = self.DEBUG_MODE if debug_mode is None else debug_mode

        self.validate()

    def validate(self):
        """
        Check the settings.

        Raises:
            InvalidConfiguration: On a non-positive board size, a bad win
                length, or sides that aren't two different Sides.
        """
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidConfiguration(f"{name} must be a positive integer, got {value!r}")

        if self.win_length is not None:
            longest = max(self.rows, self.cols)
            if isinstance(self.win_length, bool) or not isinstance(self.win_length, int) \
               or not 1 <= self.win_length <= longest:
                raise InvalidConfiguration(
                    f"win_length must be between 1 and {longest}, got {self.win_length!r}"
                )

        for name in ("human_side", "computer_side"):
            value = getattr(self, name)
            if not isinstance(value, Side):
                raise InvalidConfiguration(f"{name} must be a Side, got {value!r}")

        if self.human_side == self.computer_side:
            raise InvalidConfiguration(
                f"Human and computer can't both play {self.human_side.name}"
            )

    @property
    def human_first(self) -> bool:
        """True if the human makes the first move of each round."""
        return self.human_side == Side.X

    def __repr__(self) -> str:
        return (
            f"GameConfig(rows={self.rows}, cols={self.cols}, "
            f"human_side={self.human_side.name}, computer_side={self.computer_side.name}, "
            f"win_length={self.win_length})"
        )
