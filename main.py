"""
Main orchestration script for TicTacToe.

This script ties together:
- A move source (where the human's moves come from)
- Logic (board, move validation, win checking, AI)
- A display (where board updates and results go)

Run this script to play TicTacToe against the computer in a terminal!
"""

from typing import Optional, List

from logic.config import GameConfig
from logic.errors import InvalidConfiguration
from logic.game_state import Board, Side, Move
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker, Outcome
from logic.ai_player import AIPlayer


class MoveSource:
    """
    Supplies the human's moves.

    Return None from get_move() to stop playing.
    """

    def get_move(self, board: Board, side: Side) -> Optional[Move]:
        """Next (row, col) for `side`, or None to quit."""
        raise NotImplementedError


class DisplaySink:
    """
    Receives board updates and round results.

    The default methods do nothing, so a display only overrides what it shows.
    """

    def show_board(self, board: Board):
        pass

    def show_message(self, message: str):
        pass

    def show_game_over(self, outcome: Outcome, human_side: Side):
        pass


class ConsoleMoveSource(MoveSource):
    """Reads moves typed as 'row,col' from the terminal. 'q' quits."""

    def __init__(self, input_func=None):
        self.input_func = input_func or input

    def get_move(self, board: Board, side: Side) -> Optional[Move]:
        while True:
            text = self.input_func(
                f"Your turn ({side.name}). Enter move (row,col) from "
                f"0-{board.rows - 1},0-{board.cols - 1} or 'q' to quit: "
            ).strip()

            if text.lower() in ("q", "quit", "exit"):
                return None

            parts = text.replace(",", " ").split()
            if len(parts) != 2:
                print("!! Invalid input format. Use row,col (e.g., 0,0 or 1,2).")
                continue

            try:
                return int(parts[0]), int(parts[1])
            except ValueError:
                print("!! Invalid input. Please enter numbers for row and column (e.g., 1,1).")


class ConsoleDisplay(DisplaySink):
    """Prints the game to the terminal."""

    def show_board(self, board: Board):
        board.print_board()

    def show_message(self, message: str):
        print(f"!! {message}")

    def show_game_over(self, outcome: Outcome, human_side: Side):
        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        if outcome.winner is None:
            print("\n🤝 It's a draw! Good game!")
        elif outcome.winner == human_side:
            print("\n🎉 Congratulations! You won!")
        else:
            print("\n🤖 Computer wins! Better luck next time!")

        print("\n" + "="*40)


class TicTacToeGame:
    """
    Main controller for a game against the computer.

    Game flow:
    1. X moves first (human or computer, depending on the config)
    2. Human moves come from the move source and are validated
    3. The computer answers with the AI's best move
    4. After every move the board is checked for a win or draw
    5. A finished round is reported and the board is reset
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        move_source: Optional[MoveSource] = None,
        display: Optional[DisplaySink] = None
    ):
        """
        Initialize the game.

        Args:
            config: Board size and side assignment.
            move_source: Where human moves come from (default: terminal).
            display: Where updates go (default: terminal).
        """
        self.config = config or GameConfig()
        self.move_source = move_source or ConsoleMoveSource()
        self.display = display or ConsoleDisplay()

        self.board = Board(self.config.rows, self.config.cols, self.config.win_length)
        self.win_checker = WinChecker()
        self.validator = MoveValidator(self.win_checker)
        self.ai = AIPlayer(
            self.config.computer_side,
            use_alpha_beta=self.config.use_alpha_beta,
            verbose=self.config.debug_mode
        )

        # X always starts a round
        self.side_to_move = Side.X
        self.rounds_played = 0

    def reset(self):
        """Reset the board for a new round."""
        self.board.reset()
        self.side_to_move = Side.X

    def play_turn(self) -> Optional[Outcome]:
        """
        Play one move for the side to move.

        Returns:
            The outcome after the move, or None if the human quit.
        """
        outcome = self.win_checker.get_outcome(self.board)
        if outcome.is_game_over:
            return outcome

        side = self.side_to_move

        if side == self.config.human_side:
            move = self._get_human_move(side)
            if move is None:
                return None
        else:
            move = self.ai.get_best_move(self.board)

        row, col = move
        self.board.set(row, col, side)
        self.side_to_move = side.opposite()

        self.display.show_board(self.board)

        return self.win_checker.get_outcome(self.board)

    def _get_human_move(self, side: Side) -> Optional[Move]:
        """Ask the move source until it gives a valid move or quits."""
        while True:
            move = self.move_source.get_move(self.board, side)
            if move is None:
                return None

            row, col = move
            result = self.validator.validate_move(self.board, row, col)
            if result.is_valid:
                return move

            self.display.show_message(result.error_message)

    def play_round(self) -> Optional[Outcome]:
        """
        Play until the round is won or drawn, then reset the board.

        Returns:
            The round's outcome, or None if the human quit.
        """
        self.display.show_board(self.board)

        while True:
            outcome = self.play_turn()

            if outcome is None:
                return None

            if outcome.is_game_over:
                self.display.show_game_over(outcome, self.config.human_side)
                self.rounds_played += 1
                self.reset()
                return outcome

    def play(self, rounds: int = 1) -> List[Outcome]:
        """
        Play several rounds.

        Returns:
            Outcomes of the finished rounds. Stops early if the human quits.
        """
        outcomes = []

        for _ in range(rounds):
            outcome = self.play_round()
            if outcome is None:
                break
            outcomes.append(outcome)

        return outcomes


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against a minimax AI")
    parser.add_argument("--rows", type=int, default=GameConfig.ROWS, help="Board height")
    parser.add_argument("--cols", type=int, default=GameConfig.COLS, help="Board width")
    parser.add_argument(
        "--win-length",
        type=int,
        default=None,
        help="Marks in a line needed to win (default: smaller board side)"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument("--rounds", type=int, default=1, help="Number of rounds to play")
    parser.add_argument(
        "--no-pruning",
        action="store_true",
        help="Search without alpha-beta pruning (same moves, slower)"
    )
    parser.add_argument("--debug", action="store_true", help="Print search statistics")

    args = parser.parse_args(argv)

    human_side = Side.O if args.computer_first else Side.X

    try:
        config = GameConfig(
            rows=args.rows,
            cols=args.cols,
            human_side=human_side,
            win_length=args.win_length,
            use_alpha_beta=not args.no_pruning,
            debug_mode=args.debug
        )
    except InvalidConfiguration as e:
        parser.error(str(e))

    print("\n" + "="*40)
    print("   TicTacToe")
    print(f"   Human plays: {config.human_side.name}")
    print(f"   Computer plays: {config.computer_side.name}")
    print("="*40)

    game = TicTacToeGame(config)

    try:
        game.play(args.rounds)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
