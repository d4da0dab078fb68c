"""Move value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from othello.core.enums import Player
from othello.core.types import BoardPosition

if TYPE_CHECKING:
    from othello.core.state import GameState


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object: *player* places a disc at *position*."""

    position: BoardPosition
    player: Player

    @classmethod
    def at(cls, row: int, col: int, player: Player) -> Move:
        return cls(BoardPosition(row, col), player)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.player} {self.position}"

    @property
    def notation(self) -> str:
        """Algebraic square of the placement, e.g. ``D3``."""
        return str(self.position)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a legal move: flipped discs and the state that follows.

    A legal move always flips at least one disc, so an empty
    *captured_positions* is rejected.
    """

    move: Move
    captured_positions: tuple[BoardPosition, ...]
    new_state: GameState

    def __post_init__(self) -> None:
        if not self.captured_positions:
            raise ValueError(f"Move {self.move} captured nothing")

    @property
    def capture_count(self) -> int:
        return len(self.captured_positions)
