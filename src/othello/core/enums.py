"""Core enumerations for the Othello domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class CellState(IntEnum):
    """Occupancy of a single board cell."""

    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def opposite(self) -> CellState | None:
        if self is CellState.EMPTY:
            return None
        return CellState(3 - self.value)

    @property
    def has_piece(self) -> bool:
        return self is not CellState.EMPTY

    def __str__(self) -> str:
        return self.name.lower()


class Player(IntEnum):
    """Side color. Values line up with :class:`CellState`."""

    BLACK = 1
    WHITE = 2

    @property
    def opposite(self) -> Player:
        return Player(3 - self.value)

    @property
    def cell_state(self) -> CellState:
        return CellState(self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PlayerType(StrEnum):
    """Who controls a side."""

    HUMAN = "human"
    AI = "ai"


class AIDifficulty(StrEnum):
    """Computer opponent strength, weakest first."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class GamePhase(StrEnum):
    """Finite-state-machine states for a game. FINISHED is terminal."""

    PLAYING = "playing"
    FINISHED = "finished"
