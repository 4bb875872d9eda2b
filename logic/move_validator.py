"""
Move validator for console TicTacToe.
Validates typed moves before they reach the board.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from .board import Board, in_range, BOARD_SIZE


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    row: Optional[int] = None
    col: Optional[int] = None

    @property
    def position(self) -> Optional[Tuple[int, int]]:
        if self.row is None or self.col is None:
            return None
        return (self.row, self.col)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Input must be two whole numbers, row then column
    2. Both must be in 0-2
    3. Can only place on empty cells
    """

    def parse_input(self, text: str) -> ValidationResult:
        """
        Parse a "row column" line typed by a human.

        Args:
            text: Raw input line.

        Returns:
            ValidationResult carrying the parsed row/col when valid.
        """
        parts = text.split()

        if len(parts) < 2:
            return ValidationResult(
                is_valid=False,
                error_message="Expected two numbers: row and column."
            )

        try:
            row, col = int(parts[0]), int(parts[1])
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"Not a number: {text.strip()!r}"
            )

        if not in_range(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{BOARD_SIZE - 1}."
            )

        return ValidationResult(is_valid=True, row=row, col=col)

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move against the board.

        Args:
            board: Current board.
            row: Row to place mark (0-2).
            col: Column to place mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not in_range(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{BOARD_SIZE - 1}."
            )

        if not board.is_empty(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {board.cell(row, col)}"
            )

        return ValidationResult(is_valid=True, row=row, col=col)
