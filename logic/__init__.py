"""
Logic module for TicTacToe.
Handles the board, rules, and AI opponent.
"""

from .errors import TicTacToeError, OutOfBounds, CellOccupied, InvalidConfiguration
from .game_state import Board, Side, Move
from .win_checker import WinChecker, Outcome, GameStatus
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, SearchResult, best_move, minimax
from .config import GameConfig
