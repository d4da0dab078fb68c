"""Core domain layer: pure Othello logic with zero external dependencies.

Quick start::

    from othello.core import GameEngine, Move, PlayerInfo, Player

    engine = GameEngine()
    state = engine.new_game(PlayerInfo.human(Player.BLACK), PlayerInfo.human(Player.WHITE))
    for pos in engine.available_moves(state):
        print(pos)
"""

from othello.core.board import Board, Score
from othello.core.enums import AIDifficulty, CellState, GamePhase, Player, PlayerType
from othello.core.move import Move, MoveResult
from othello.core.rules import EvaluationWeights, GameEngine, PositionAnalysis
from othello.core.state import GameResult, GameState, PlayerInfo
from othello.core.types import (
    BOARD_SIZE,
    CORNERS,
    DIRECTIONS,
    EDGES,
    BoardPosition,
    all_positions,
)

__all__ = [
    # Enums
    "AIDifficulty",
    "CellState",
    "GamePhase",
    "Player",
    "PlayerType",
    # Types / helpers
    "BOARD_SIZE",
    "CORNERS",
    "DIRECTIONS",
    "EDGES",
    "BoardPosition",
    "all_positions",
    # Domain objects
    "Board",
    "EvaluationWeights",
    "GameEngine",
    "GameResult",
    "GameState",
    "Move",
    "MoveResult",
    "PlayerInfo",
    "PositionAnalysis",
    "Score",
]
