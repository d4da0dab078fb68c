"""Shared search models and the rules protocol the search runs against."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from othello.core.enums import Player
    from othello.core.move import Move, MoveResult
    from othello.core.rules import PositionAnalysis
    from othello.core.state import GameState
    from othello.core.types import BoardPosition

CancelCheck = Callable[[], bool]


def never_cancelled() -> bool:
    return False


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by a single best-move search."""

    best_move: BoardPosition | None
    score: float
    nodes: int
    depth: int = 0


class IRules(Protocol):
    """Rules and evaluation capability consumed by the search.

    :class:`~othello.core.rules.GameEngine` satisfies it; tests may pass
    any object with the same methods.
    """

    def available_moves(
        self, state: GameState, player: Player | None = None
    ) -> list[BoardPosition]: ...

    def apply_move(self, move: Move, state: GameState) -> MoveResult | None: ...

    def next_turn(self, state: GameState) -> GameState: ...

    def is_game_over(self, state: GameState) -> bool: ...

    def evaluate_position(self, state: GameState, player: Player) -> float: ...

    def analyze_position(self, state: GameState) -> PositionAnalysis: ...
