"""
TicTacToe vs Minimax
====================
A TicTacToe game where the computer plays a perfect game by searching
the whole game tree with Minimax.

Board size is configurable (3x3 by default). X always moves first.
"""

__version__ = "1.0.0"
