"""Tests for the alpha-beta search."""

from __future__ import annotations

import math

import pytest

from othello.core.board import Board
from othello.core.enums import Player
from othello.core.move import Move
from othello.core.rules import GameEngine
from othello.core.state import GameState
from othello.core.types import BoardPosition
from othello.engine import AlphaBetaSearch


class _FlatEngine(GameEngine):
    """Every position evaluates to zero."""

    def evaluate_position(self, state: GameState, player: Player) -> float:
        return 0.0


class _Countdown:
    """Cancel check that fires after *budget* polls."""

    def __init__(self, budget: int) -> None:
        self.budget = budget
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        return self.calls > self.budget


def _minimax(
    engine: GameEngine, state: GameState, depth: int, maximizing: bool, target: Player
) -> float:
    if depth <= 0 or engine.is_game_over(state):
        return engine.evaluate_position(state, target)
    mover = state.current_player
    moves = engine.available_moves(state, mover)
    if not moves:
        passed = engine.next_turn(state)
        if engine.is_game_over(passed):
            return engine.evaluate_position(passed, target)
        return _minimax(engine, passed, depth - 1, not maximizing, target)
    scores = []
    for pos in moves:
        result = engine.apply_move(Move(pos, mover), state)
        assert result is not None
        scores.append(_minimax(engine, result.new_state, depth - 1, not maximizing, target))
    return max(scores) if maximizing else min(scores)


def _root_minimax(engine: GameEngine, state: GameState, depth: int) -> float:
    player = state.current_player
    best = -math.inf
    for pos in engine.available_moves(state, player):
        result = engine.apply_move(Move(pos, player), state)
        assert result is not None
        best = max(best, _minimax(engine, result.new_state, depth - 1, False, player))
    return best


def _midgame(engine: GameEngine, plies: int) -> GameState:
    state = GameState.new_human_vs_human()
    for _ in range(plies):
        moves = engine.available_moves(state)
        result = engine.apply_move(Move(moves[-1], state.current_player), state)
        assert result is not None
        state = result.new_state
    return state


class TestCalculateBestMove:
    def test_depth_one_is_greedy(self, engine: GameEngine) -> None:
        state = _midgame(engine, 5)
        player = state.current_player
        moves = engine.available_moves(state)

        best_pos, best_score = None, -math.inf
        for pos in moves:
            result = engine.apply_move(Move(pos, player), state)
            assert result is not None
            score = engine.evaluate_position(result.new_state, player)
            if score > best_score:
                best_pos, best_score = pos, score

        result = AlphaBetaSearch(engine).calculate_best_move(state, player, 1)
        assert result.best_move == best_pos
        assert result.score == best_score
        assert result.nodes == 1 + len(moves)
        assert result.depth == 1

    def test_ties_keep_first_candidate(self, opening: GameState) -> None:
        search = AlphaBetaSearch(_FlatEngine())
        result = search.calculate_best_move(opening, Player.BLACK, 3)
        assert result.best_move == BoardPosition(2, 3)
        assert result.score == 0.0

    @pytest.mark.parametrize("plies", [0, 4, 9])
    def test_matches_plain_minimax(self, engine: GameEngine, plies: int) -> None:
        state = _midgame(engine, plies)
        result = AlphaBetaSearch(engine).calculate_best_move(
            state, state.current_player, 3
        )
        assert result.score == _root_minimax(engine, state, 3)
        assert result.best_move in engine.available_moves(state)

    def test_matches_minimax_through_pass(
        self, engine: GameEngine, pass_state: GameState
    ) -> None:
        result = AlphaBetaSearch(engine).calculate_best_move(pass_state, Player.BLACK, 3)
        assert result.score == _root_minimax(engine, pass_state, 3)

    def test_no_moves(self, engine: GameEngine) -> None:
        board = Board.from_rows(["...X...."] + ["........"] * 6 + ["O......."])
        state = engine.create_test_state(board)
        result = AlphaBetaSearch(engine).calculate_best_move(state, Player.BLACK, 3)
        assert result.best_move is None
        assert result.nodes == 1
        assert result.score == engine.evaluate_position(state, Player.BLACK)

    def test_rejects_non_positive_depth(
        self, engine: GameEngine, opening: GameState
    ) -> None:
        with pytest.raises(ValueError):
            AlphaBetaSearch(engine).calculate_best_move(opening, Player.BLACK, 0)


class TestCancellation:
    def test_cancelled_before_start(self, engine: GameEngine, opening: GameState) -> None:
        result = AlphaBetaSearch(engine).calculate_best_move(
            opening, Player.BLACK, 4, is_cancelled=lambda: True
        )
        assert result.best_move is None
        assert result.nodes == 1
        assert result.score == engine.evaluate_position(opening, Player.BLACK)

    @pytest.mark.parametrize("budget", [1, 3, 10, 40])
    def test_cancelled_mid_search(
        self, engine: GameEngine, opening: GameState, budget: int
    ) -> None:
        check = _Countdown(budget)
        result = AlphaBetaSearch(engine).calculate_best_move(
            opening, Player.BLACK, 5, is_cancelled=check
        )
        assert result.best_move is None or result.best_move in engine.available_moves(opening)
        assert math.isfinite(result.score)
        assert check.calls > budget

    def test_check_reset_between_searches(
        self, engine: GameEngine, opening: GameState
    ) -> None:
        search = AlphaBetaSearch(engine)
        search.calculate_best_move(opening, Player.BLACK, 2, is_cancelled=lambda: True)
        result = search.calculate_best_move(opening, Player.BLACK, 2)
        assert result.best_move is not None


class TestSubtreeSearch:
    def test_leaf_counts_one_node(self, engine: GameEngine, opening: GameState) -> None:
        score, nodes = AlphaBetaSearch(engine).search(
            opening, 0, -math.inf, math.inf, maximizing=True, target=Player.BLACK
        )
        assert nodes == 1
        assert score == engine.evaluate_position(opening, Player.BLACK)

    def test_forced_pass_consumes_depth(self, engine: GameEngine) -> None:
        board = Board.from_rows(["OX......"] + ["........"] * 7)
        state = engine.create_test_state(board, Player.BLACK)
        assert engine.available_moves(state) == []

        score, nodes = AlphaBetaSearch(engine).search(
            state, 1, -math.inf, math.inf, maximizing=True, target=Player.BLACK
        )
        assert nodes == 2
        assert score == engine.evaluate_position(engine.next_turn(state), Player.BLACK)
