"""
Main entry point for console TicTacToe.

This script ties together:
- Logic (board, game state, move validation, computer opponent)
- Console input and output

Run this script to play TicTacToe against a friend or the computer!
"""

import sys
from typing import Callable, Optional, Tuple

from logic.config import GameConfig
from logic.game_state import GameState, GameStatus, MoveResult
from logic.move_validator import MoveValidator
from logic.players import make_players


class TicTacToeConsole:
    """
    Console controller for a TicTacToe game.

    Game flow:
    1. Show the board and whose turn it is
    2. Human players type "row column"; the computer picks its own cell
    3. Apply the move and check for a win or a draw
    4. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        mode: int,
        verbose: bool = GameConfig.VERBOSE,
        input_func: Optional[Callable[[str], str]] = None
    ):
        """
        Initialize the console game.

        Args:
            mode: 1 for human vs human, 2 for human vs computer.
            verbose: Print which rule picked each computer move.
            input_func: Where typed lines come from (default: input).
        """
        self.input_func = input_func or input
        self.validator = MoveValidator()

        player1, player2 = make_players(mode)
        self.game_state = GameState(player1, player2, verbose=verbose)

    def start(self) -> GameStatus:
        """Play the game to the end and show the result."""
        self._show_turn()

        while not self.game_state.is_game_over:
            player = self.game_state.current_player
            move, result = self.game_state.play_turn(self._read_human_move, self._invalid_move)

            if player.is_automatic:
                print(f"{player.name} chooses position: {move[0]} {move[1]}")

            if result == MoveResult.CONTINUE:
                self._show_turn()

        self._show_game_result()
        return self.game_state.status

    def _show_turn(self):
        """Print the board and whose turn it is."""
        player = self.game_state.current_player
        self.game_state.board.print_board()
        print(f"{player.name}'s turn ({player.mark}).")

    def _read_human_move(self, game_state: GameState) -> Tuple[int, int]:
        """
        Read "row column" from the console until it parses and is on the board.

        Args:
            game_state: The game being played.

        Returns:
            (row, col) typed by the player. The cell may still be taken.
        """
        prompt = GameConfig.MOVE_PROMPT

        while True:
            result = self.validator.parse_input(self.input_func(prompt))
            if result.is_valid:
                return result.position

            prompt = GameConfig.INVALID_INPUT

    def _invalid_move(self, move: Tuple[int, int]):
        """Report a refused move and ask the same player again."""
        print(GameConfig.INVALID_MOVE)
        self._show_turn()

    def _show_game_result(self):
        """Show the final game result."""
        self.game_state.board.print_board()

        winner = self.game_state.winning_player()
        if winner is not None:
            print(f"{winner.name} wins!")
        else:
            print(GameConfig.DRAW_MESSAGE)


def read_mode(input_func: Optional[Callable[[str], str]] = None) -> int:
    """
    Ask for the game mode until the answer is 1 or 2.

    Returns:
        The chosen mode.
    """
    input_func = input_func or input
    print(GameConfig.MENU)
    prompt = ""

    while True:
        answer = input_func(prompt).strip()
        try:
            mode = int(answer)
        except ValueError:
            mode = None

        if mode in GameConfig.VALID_MODES:
            return mode

        prompt = GameConfig.INVALID_CHOICE


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Console TicTacToe")
    parser.add_argument(
        "--mode",
        type=int,
        choices=GameConfig.VALID_MODES,
        help="1 for human vs human, 2 for human vs computer (skips the menu)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print which rule picked each computer move"
    )

    args = parser.parse_args(argv)

    print(GameConfig.WELCOME)

    try:
        mode = args.mode if args.mode is not None else read_mode()

        game = TicTacToeConsole(mode, verbose=args.verbose or GameConfig.VERBOSE)
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
