"""
Logic module for console TicTacToe.
Handles the board, game state, rules, and computer opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .board import Board, Mark, OutOfRangeError
from .players import PlayerIdentity, PlayerKind, make_players
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer, ComputerNoMoveError, choose_move, explain_move
from .game_state import GameState, GameStatus, MoveResult, Move
