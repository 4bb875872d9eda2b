"""
Player identities for console TicTacToe.
A player is a name and a mark; computer players pick their own moves.
"""

from enum import Enum
from typing import Tuple
from dataclasses import dataclass

from .board import Mark
from .config import GameConfig


class PlayerKind(Enum):
    """Who supplies a player's moves."""
    HUMAN = "human"
    COMPUTER = "computer"


@dataclass(frozen=True)
class PlayerIdentity:
    """
    A player taking part in the game.

    Human players get their moves from the console. Computer players
    are asked for a move through the heuristic in ai_player.
    """
    name: str
    mark: Mark
    kind: PlayerKind = PlayerKind.HUMAN

    @property
    def is_automatic(self) -> bool:
        return self.kind == PlayerKind.COMPUTER

    @classmethod
    def human(cls, name: str, mark: Mark) -> "PlayerIdentity":
        return cls(name=name, mark=mark, kind=PlayerKind.HUMAN)

    @classmethod
    def computer(cls, mark: Mark, name: str = GameConfig.COMPUTER_NAME) -> "PlayerIdentity":
        return cls(name=name, mark=mark, kind=PlayerKind.COMPUTER)

    def __str__(self) -> str:
        return f"{self.name} ({self.mark})"


def make_players(mode: int) -> Tuple[PlayerIdentity, PlayerIdentity]:
    """
    Build the two players for a game mode.

    Args:
        mode: 1 for human vs human, 2 for human vs computer.

    Returns:
        (player1, player2). Player 1 always plays X.
    """
    player1 = PlayerIdentity.human(GameConfig.PLAYER1_NAME, Mark.X)

    if mode == GameConfig.MODE_HUMAN_VS_HUMAN:
        player2 = PlayerIdentity.human(GameConfig.PLAYER2_NAME, Mark.O)
    elif mode == GameConfig.MODE_HUMAN_VS_COMPUTER:
        player2 = PlayerIdentity.computer(Mark.O)
    else:
        raise ValueError(f"Unknown game mode: {mode}")

    return player1, player2
