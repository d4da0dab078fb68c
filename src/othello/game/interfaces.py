"""Abstract interfaces for the game layer.

The :class:`~othello.game.controller.GameController` depends on these ABCs,
not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from othello.core.enums import Player
    from othello.core.move import MoveResult
    from othello.core.state import GameState, PlayerInfo
    from othello.core.types import BoardPosition


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def player(self) -> Player: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def info(self) -> PlayerInfo:
        """Seat metadata recorded in the game state."""

    @abstractmethod
    def request_move(self, state: GameState) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via the UI).
        For AI this kicks off background search.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move computation (AI only, no-op for human)."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        black: IPlayer | None = None,
        white: IPlayer | None = None,
        state: GameState | None = None,
    ) -> GameState:
        """Set up a new game, optionally from a prepared *state*.

        A side given no participant is seated from the state's player info.
        """

    @abstractmethod
    def submit_move(self, position: BoardPosition) -> MoveResult | None:
        """Play *position* for the side to move. None if illegal."""

    @abstractmethod
    def cancel(self) -> None:
        """Abort any AI computation in progress."""
