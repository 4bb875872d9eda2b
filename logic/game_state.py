"""
Game state management for console TicTacToe.
Tracks the board, whose turn it is, move history and the result.
"""

from enum import Enum
from typing import Callable, Optional, List, Tuple
from dataclasses import dataclass, field

from .board import Board, Mark
from .players import PlayerIdentity
from .ai_player import AIPlayer
from .win_checker import WinChecker
from .config import GameConfig


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class MoveResult(Enum):
    """Outcome of a single move request."""
    INVALID = "invalid"
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"


@dataclass
class Move:
    """
    A move in the game.
    """
    player: str             # Name of the player who moved
    mark: Mark              # Mark placed
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is (0-8)


# Asked for a human player's move; returns (row, col)
MoveProvider = Callable[["GameState"], Tuple[int, int]]


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 3x3 board
    - The two players and whose turn it is
    - Move history
    - Game status (in progress, won, draw)
    """

    player1: PlayerIdentity
    player2: PlayerIdentity

    board: Board = field(default_factory=Board)

    # Index into players of the player to move (0 or 1)
    current_index: int = 0

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Mark] = None
    winning_line: Optional[List[Tuple[int, int]]] = None

    # Print which rule picked each computer move
    verbose: bool = GameConfig.VERBOSE

    def __post_init__(self):
        if self.player1.mark == self.player2.mark:
            raise ValueError(f"Both players use mark {self.player1.mark}")

        self.win_checker = WinChecker()
        self._ais = {
            player.mark: AIPlayer(player, verbose=self.verbose)
            for player in self.players if player.is_automatic
        }

    @property
    def players(self) -> Tuple[PlayerIdentity, PlayerIdentity]:
        return (self.player1, self.player2)

    @property
    def current_player(self) -> PlayerIdentity:
        """The player whose turn it is."""
        return self.players[self.current_index]

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAW

    def winning_player(self) -> Optional[PlayerIdentity]:
        """The player holding the winning mark, or None."""
        for player in self.players:
            if player.mark == self.winner:
                return player
        return None

    def make_move(self, row: int, col: int) -> MoveResult:
        """
        Make a move for the current player.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            MoveResult.INVALID if the move was refused (same player goes again),
            otherwise the result of the move.
        """
        if self.is_game_over:
            return MoveResult.INVALID

        player = self.current_player
        if not self.board.place(row, col, player.mark):
            return MoveResult.INVALID

        self.moves.append(Move(
            player=player.name,
            mark=player.mark,
            row=row,
            col=col,
            move_number=len(self.moves)
        ))

        if self.board.has_win(player.mark):
            self.status = GameStatus.WON
            self.winner = player.mark
            self.winning_line = self.win_checker.get_winning_line(self.board)
            return MoveResult.WIN

        if self.board.is_full():
            self.status = GameStatus.DRAW
            return MoveResult.DRAW

        # Switch turns
        self.current_index = 1 - self.current_index
        return MoveResult.CONTINUE

    def computer_move(self) -> Tuple[int, int]:
        """
        Ask the current (automatic) player for its move.

        The board is checked for a result after every move, so an
        in-progress game always has an empty cell here.
        """
        player = self.current_player
        if not player.is_automatic:
            raise ValueError(f"{player.name} is not a computer player")

        return self._ais[player.mark].get_best_move(self.board)

    def play_turn(
        self,
        human_move: MoveProvider,
        on_invalid: Optional[Callable[[Tuple[int, int]], None]] = None
    ) -> Tuple[Tuple[int, int], MoveResult]:
        """
        Play one turn for the current player.

        Computer players choose through the heuristic; human players are
        asked through `human_move` until they give a move the board accepts.
        Each refused move is passed to `on_invalid` first.

        Returns:
            ((row, col), result) for the move that was applied.
        """
        if self.is_game_over:
            raise ValueError("Game is already over!")

        while True:
            if self.current_player.is_automatic:
                move = self.computer_move()
            else:
                move = human_move(self)

            result = self.make_move(*move)
            if result != MoveResult.INVALID:
                return move, result

            if self.current_player.is_automatic:
                raise RuntimeError(f"Computer chose an occupied cell {move}")
            if on_invalid is not None:
                on_invalid(move)

    def run(
        self,
        human_move: MoveProvider,
        on_invalid: Optional[Callable[[Tuple[int, int]], None]] = None
    ) -> GameStatus:
        """Play turns until someone wins or the board is full."""
        while not self.is_game_over:
            self.play_turn(human_move, on_invalid)
        return self.status
