"""Game orchestration: players and the turn-by-turn controller."""

from othello.game.controller import GameController, GameEvents
from othello.game.interfaces import IGameController, IPlayer
from othello.game.player import AIPlayer, HumanPlayer, create_player

__all__ = [
    "AIPlayer",
    "GameController",
    "GameEvents",
    "HumanPlayer",
    "IGameController",
    "IPlayer",
    "create_player",
]
