"""Pure-Python depth-bounded minimax search with alpha-beta pruning."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from othello.core.move import Move
from othello.engine.search import CancelCheck, IRules, SearchResult, never_cancelled

if TYPE_CHECKING:
    from othello.core.enums import Player
    from othello.core.state import GameState
    from othello.core.types import BoardPosition

_INF = math.inf


class AlphaBetaSearch:
    """Fixed-depth alpha-beta searcher over an :class:`IRules` oracle.

    Scores are always taken from the perspective of the player the search
    was started for; plies alternate between maximizing and minimizing.
    A side forced to pass still consumes one ply of depth.
    """

    __slots__ = ("_rules", "_cancel_check")

    def __init__(self, rules: IRules) -> None:
        self._rules = rules
        self._cancel_check: CancelCheck = never_cancelled

    @property
    def rules(self) -> IRules:
        return self._rules

    def calculate_best_move(
        self,
        state: GameState,
        player: Player,
        depth: int,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        """Pick the move for *player* that maximizes the searched score.

        Ties keep the earliest candidate in enumeration order. When
        *is_cancelled* fires, the best move found so far is returned
        (``None`` if no candidate had been searched yet).
        """
        if depth <= 0:
            raise ValueError("Search depth must be >= 1")

        self._cancel_check = is_cancelled or never_cancelled
        rules = self._rules

        candidates = rules.available_moves(state, player)
        if not candidates:
            return SearchResult(None, rules.evaluate_position(state, player), 1, depth)

        best_move: BoardPosition | None = None
        best_score = -_INF
        alpha = -_INF
        nodes = 1

        for position in candidates:
            if self._cancel_check():
                break

            result = rules.apply_move(Move(position, player), state)
            if result is None:
                continue

            # No beta bound at the root: every sibling is searched.
            score, child_nodes = self._search(
                result.new_state,
                depth - 1,
                alpha,
                _INF,
                maximizing=False,
                target=player,
            )
            nodes += child_nodes

            if score > best_score:
                best_score = score
                best_move = position
            alpha = max(alpha, score)

        if best_move is None:
            return SearchResult(None, rules.evaluate_position(state, player), nodes, depth)
        return SearchResult(best_move, best_score, nodes, depth)

    def search(
        self,
        state: GameState,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        target: Player,
        is_cancelled: CancelCheck | None = None,
    ) -> tuple[float, int]:
        """Score *state* for *target*; returns ``(score, nodes_evaluated)``."""
        self._cancel_check = is_cancelled or never_cancelled
        return self._search(state, depth, alpha, beta, maximizing=maximizing, target=target)

    def _search(
        self,
        state: GameState,
        depth: int,
        alpha: float,
        beta: float,
        *,
        maximizing: bool,
        target: Player,
    ) -> tuple[float, int]:
        rules = self._rules
        if depth <= 0 or rules.is_game_over(state):
            return rules.evaluate_position(state, target), 1

        mover = state.current_player
        moves = rules.available_moves(state, mover)

        if not moves:
            passed = rules.next_turn(state)
            if rules.is_game_over(passed):
                return rules.evaluate_position(passed, target), 1
            score, child_nodes = self._search(
                passed,
                depth - 1,
                alpha,
                beta,
                maximizing=not maximizing,
                target=target,
            )
            return score, 1 + child_nodes

        best = -_INF if maximizing else _INF
        nodes = 1

        for position in moves:
            if self._cancel_check():
                break

            result = rules.apply_move(Move(position, mover), state)
            if result is None:
                continue

            score, child_nodes = self._search(
                result.new_state,
                depth - 1,
                alpha,
                beta,
                maximizing=not maximizing,
                target=target,
            )
            nodes += child_nodes

            if maximizing:
                best = max(best, score)
                alpha = max(alpha, score)
            else:
                best = min(best, score)
                beta = min(beta, score)
            if beta <= alpha:
                break

        if math.isinf(best):
            # Cancelled before any child finished.
            return rules.evaluate_position(state, target), nodes
        return best, nodes
