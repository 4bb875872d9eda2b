"""
Board for console TicTacToe.
Stores the 3x3 grid of marks and answers win/full queries.
"""

from enum import Enum
from typing import Optional, List, Tuple

import numpy as np

from .config import GameConfig


BOARD_SIZE = GameConfig.BOARD_SIZE

# Grid value for a cell nobody has played
EMPTY = 0


class Mark(Enum):
    """The two marks a player can place."""
    X = 1
    O = 2

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X

    def __str__(self) -> str:
        return self.name


class OutOfRangeError(IndexError):
    """Raised when a cell outside the board is queried."""

    def __init__(self, row: int, col: int):
        super().__init__(
            f"Invalid board position ({row}, {col}). Must be 0-{BOARD_SIZE - 1}."
        )
        self.row = row
        self.col = col


def in_range(row: int, col: int) -> bool:
    """True if (row, col) is on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Board:
    """
    The 3x3 TicTacToe grid.

    Cells hold EMPTY or a Mark value. A cell is only ever written once:
    place() refuses occupied or off-board cells without touching the grid.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize the board.

        Args:
            grid: Existing grid to copy (default: empty board).
        """
        if grid is None:
            self.grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        else:
            self.grid = np.array(grid, dtype=np.int8, copy=True)

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Board":
        """
        Build a board from text rows, e.g. ["XX ", " O ", "   "].

        Any character other than X or O is an empty cell.
        """
        board = cls()
        for row, line in enumerate(rows):
            for col, char in enumerate(line):
                if char in ("X", "O"):
                    board.grid[row, col] = Mark[char].value
        return board

    def place(self, row: int, col: int, mark: Mark) -> bool:
        """
        Place a mark on the board.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            mark: Mark to place.

        Returns:
            True if the cell was empty and is now taken, False otherwise.
        """
        if not in_range(row, col):
            return False

        if self.grid[row, col] != EMPTY:
            return False

        self.grid[row, col] = mark.value
        return True

    def cell(self, row: int, col: int) -> Optional[Mark]:
        """
        Get the mark in a cell.

        Returns:
            The Mark, or None if the cell is empty.

        Raises:
            OutOfRangeError: If (row, col) is not on the board.
        """
        if not in_range(row, col):
            raise OutOfRangeError(row, col)

        value = int(self.grid[row, col])
        return None if value == EMPTY else Mark(value)

    def is_empty(self, row: int, col: int) -> bool:
        """True if (row, col) is on the board and nobody has played there."""
        return in_range(row, col) and self.grid[row, col] == EMPTY

    def has_win(self, mark: Mark) -> bool:
        """True if any row, column or diagonal is all `mark`."""
        owned = self.grid == mark.value

        if owned.all(axis=1).any() or owned.all(axis=0).any():
            return True

        return bool(np.diag(owned).all() or np.diag(np.fliplr(owned)).all())

    def is_full(self) -> bool:
        """True if no empty cell remains."""
        return bool(np.all(self.grid != EMPTY))

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        return [(int(row), int(col)) for row, col in np.argwhere(self.grid == EMPTY)]

    def count(self, mark: Mark) -> int:
        """Number of cells holding `mark`."""
        return int(np.count_nonzero(self.grid == mark.value))

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(self.grid)

    def render(self) -> str:
        """Render the board as text with a column header and row indices."""
        lines = ["  " + " ".join(str(col) for col in range(BOARD_SIZE))]

        for row in range(BOARD_SIZE):
            cells = ""
            for col in range(BOARD_SIZE):
                mark = self.cell(row, col)
                cells += (" " if mark is None else str(mark)) + " "
            lines.append(f"{row} {cells}")

        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print(self.render())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __repr__(self) -> str:
        rows = [
            "".join(" " if v == EMPTY else Mark(int(v)).name for v in row)
            for row in self.grid
        ]
        return f"Board.from_rows({rows!r})"
