"""
AI player for console TicTacToe.
Uses a fixed priority of simple rules to choose a move.
"""

from typing import Optional, Tuple

from .board import Board, Mark
from .config import GameConfig
from .players import PlayerIdentity


# Names of the rules, in the order they are tried
RULE_WIN = "win"
RULE_BLOCK = "block"
RULE_CENTER = "center"
RULE_CORNER = "corner"
RULE_ANY = "any"


class ComputerNoMoveError(RuntimeError):
    """Raised when the computer is asked to move on a full board."""


def _winning_cell(board: Board, mark: Mark) -> Optional[Tuple[int, int]]:
    """First empty cell (row-major) where `mark` would complete a line."""
    for row, col in board.empty_cells():
        trial = board.copy()
        trial.place(row, col, mark)
        if trial.has_win(mark):
            return (row, col)
    return None


def explain_move(board: Board, mark: Mark) -> Tuple[Tuple[int, int], str]:
    """
    Choose a move and report which rule chose it.

    Rules, first match wins:
    1. Win now
    2. Block the opponent's win
    3. Take the center
    4. Take a corner: (0,0), (0,2), (2,0), (2,2)
    5. Take the first empty cell

    Args:
        board: Board to inspect. It is never modified.
        mark: The mark the computer plays.

    Returns:
        ((row, col), rule name)

    Raises:
        ComputerNoMoveError: If the board has no empty cell.
    """
    empty = board.empty_cells()
    if not empty:
        raise ComputerNoMoveError("Computer failed to find a valid move")

    move = _winning_cell(board, mark)
    if move is not None:
        return move, RULE_WIN

    move = _winning_cell(board, mark.opposite())
    if move is not None:
        return move, RULE_BLOCK

    if board.is_empty(*GameConfig.CENTER):
        return GameConfig.CENTER, RULE_CENTER

    for corner in GameConfig.CORNERS:
        if board.is_empty(*corner):
            return corner, RULE_CORNER

    return empty[0], RULE_ANY


def choose_move(board: Board, mark: Mark) -> Tuple[int, int]:
    """Choose the computer's move for `mark` on `board`."""
    move, _ = explain_move(board, mark)
    return move


class AIPlayer:
    """
    The computer opponent.

    Wraps the rule-based move choice for one player identity. The same
    board always gives the same move.
    """

    def __init__(self, identity: PlayerIdentity, verbose: bool = GameConfig.VERBOSE):
        """
        Initialize the AI player.

        Args:
            identity: The player the AI controls.
            verbose: Print which rule picked each move.
        """
        self.identity = identity
        self.verbose = verbose

        # Rule that picked the last move (for debugging)
        self.last_rule: Optional[str] = None

    @property
    def mark(self) -> Mark:
        return self.identity.mark

    def get_best_move(self, board: Board) -> Tuple[int, int]:
        """
        Get the move for the current position.

        Args:
            board: Current board.

        Returns:
            (row, col) of the chosen move.
        """
        move, self.last_rule = explain_move(board, self.mark)

        if self.verbose:
            print(f"AI ({self.mark}) rule: {self.last_rule}. Move: {move}")

        return move

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.

        Returns:
            A string describing the suggested move.
        """
        if board.is_full():
            return "No moves available!"

        row, col = self.get_best_move(board)
        return f"Place {self.mark} at position ({row}, {col})"
