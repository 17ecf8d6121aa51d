"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from dataclasses import dataclass
from typing import Optional

from .game_state import Board, Side, Move


# Score of a win found right away; each extra ply costs one point
WIN_SCORE = 10

INF = float('inf')


@dataclass(frozen=True)
class SearchResult:
    """Best move found by a search and its game-theoretic score."""
    move: Optional[Move]
    score: Optional[int]
    nodes: int


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    Search mutates the board it is given and undoes every speculative
    move before returning, so the caller's board comes back unchanged.
    """

    def __init__(
        self,
        player: Side = Side.O,
        use_alpha_beta: bool = True,
        verbose: bool = False
    ):
        """
        Initialize the AI player.

        Args:
            player: Which side the AI controls (default: O).
            use_alpha_beta: Skip branches that cannot change the result.
            verbose: Print search statistics after each move.
        """
        if not isinstance(player, Side):
            raise TypeError(f"Expected a Side, got {player!r}")

        self.player = player
        self.opponent = player.opposite()
        self.use_alpha_beta = use_alpha_beta
        self.verbose = verbose

        # How many positions the last search visited (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, board: Board) -> Optional[Move]:
        """
        Get the best move for the current position.

        Args:
            board: Current board, with the AI to move.

        Returns:
            (row, col) of best move, or None if no moves available.
        """
        return self.search(board).move

    def search(self, board: Board) -> SearchResult:
        """
        Run a full-depth search from the current position.

        Candidates are tried in row-major order and the first one with
        the strictly greatest score is kept.

        Returns:
            SearchResult with the move, its score and nodes visited.
        """
        self.moves_evaluated = 0

        valid_moves = board.get_empty_cells()

        if not valid_moves:
            return SearchResult(move=None, score=None, nodes=0)

        best_score = -INF
        best_move = None

        for row, col in valid_moves:
            # Try this move
            board.set(row, col, self.player)
            try:
                # A pruned sibling returns at most best_score, never more
                alpha = best_score if self.use_alpha_beta else -INF
                score = self.minimax(board, depth=1, is_maximizing=False, alpha=alpha, beta=INF)
            finally:
                board.clear(row, col)

            if score > best_score:
                best_score = score
                best_move = (row, col)

        if self.verbose:
            print(f"AI evaluated {self.moves_evaluated} positions. Best move: {best_move} (score: {best_score})")

        return SearchResult(move=best_move, score=int(best_score), nodes=self.moves_evaluated)

    def minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: float = -INF,
        beta: float = INF
    ) -> int:
        """
        Minimax algorithm with optional alpha-beta pruning.

        Args:
            board: Position to evaluate.
            depth: Plies played since the root position.
            is_maximizing: True if it's the AI's turn.
            alpha: Best score the AI is already assured of.
            beta: Best score the opponent is already assured of.

        Returns:
            10 - depth for an AI win, depth - 10 for a loss, 0 for a draw.
        """
        self.moves_evaluated += 1

        # Check terminal states
        winner = board.winner()

        if winner == self.player:
            return WIN_SCORE - depth  # Win (prefer faster wins)
        elif winner == self.opponent:
            return depth - WIN_SCORE  # Loss (prefer slower losses)
        elif board.is_full():
            return 0  # Draw

        side = self.player if is_maximizing else self.opponent
        best_score = -INF if is_maximizing else INF

        for row, col in board.get_empty_cells():
            board.set(row, col, side)
            try:
                score = self.minimax(board, depth + 1, not is_maximizing, alpha, beta)
            finally:
                board.clear(row, col)

            if is_maximizing:
                best_score = max(best_score, score)
                alpha = max(alpha, score)
            else:
                best_score = min(best_score, score)
                beta = min(beta, score)

            if self.use_alpha_beta and beta <= alpha:
                break  # Prune

        return best_score


def best_move(board: Board, computer_side: Side) -> Optional[Move]:
    """Optimal move for `computer_side` on `board`, or None if it is full."""
    return AIPlayer(computer_side).get_best_move(board)


def minimax(board: Board, depth: int, maximizing: bool, computer_side: Side) -> int:
    """Exact minimax score of `board` from `computer_side`'s point of view."""
    return AIPlayer(computer_side, use_alpha_beta=False).minimax(board, depth, maximizing)


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(Side.O, verbose=True)

    # X is about to win with (0, 2)
    board = Board.from_rows([
        ["X", "X", None],
        [None, "O", None],
        [None, None, None],
    ])
    board.print_board()

    move = ai.get_best_move(board)
    assert move == (0, 2), f"Expected (0, 2), got {move}"
    print("✓ AI correctly blocks the win!")

    print("\nAIPlayer test done!")
