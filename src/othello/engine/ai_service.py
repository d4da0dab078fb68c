"""Computer-opponent service: difficulty profiles, move selection and advice."""

from __future__ import annotations

import logging
import math
import random
import threading
from collections.abc import Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import StrEnum
from time import perf_counter
from typing import TYPE_CHECKING

from othello.core.enums import AIDifficulty, GamePhase, Player
from othello.core.move import Move
from othello.core.rules import GameEngine, PositionAnalysis
from othello.engine.alpha_beta import AlphaBetaSearch

if TYPE_CHECKING:
    from othello.core.state import GameState, PlayerInfo
    from othello.core.types import BoardPosition
    from othello.engine.search import IRules

_LOGGER = logging.getLogger(__name__)

_HIGH_CAPTURE_MIN = 7
_GOOD_CAPTURE_MIN = 4
_HIGH_MOBILITY_MIN = 8
_CONFIDENCE_OFFSET = 100.0
_CONFIDENCE_SPAN = 200.0


@dataclass(frozen=True, slots=True)
class SearchProfile:
    """Search configuration for one difficulty level.

    Args:
        depth: Plies searched by alpha-beta.
        confidence: Reported confidence in the chosen move.
        randomized: Pick a weighted-random legal move instead of searching.
        corner_weight: Relative weight of corner moves when randomized.
    """

    depth: int
    confidence: float
    randomized: bool = False
    corner_weight: int = 1


DIFFICULTY_PROFILES: Mapping[AIDifficulty, SearchProfile] = {
    AIDifficulty.EASY: SearchProfile(depth=1, confidence=0.3, randomized=True, corner_weight=3),
    AIDifficulty.MEDIUM: SearchProfile(depth=3, confidence=0.7),
    AIDifficulty.HARD: SearchProfile(depth=4, confidence=0.9),
}


class MoveRationale(StrEnum):
    """Short tag explaining why a move looks attractive."""

    CORNER = "corner"
    HIGH_CAPTURE = "high-capture"
    GOOD_CAPTURE = "good-capture"
    HIGH_MOBILITY = "high-mobility"
    EDGE = "edge"
    SOLID = "solid"


@dataclass(frozen=True, slots=True)
class AIAnalysis:
    """Search-backed assessment of a position for one player.

    *position* holds the static features of the searched state; *cancelled*
    is set when the request was superseded before the search completed.
    """

    best_move: BoardPosition | None
    score: float
    confidence: float
    nodes_evaluated: int
    search_depth: int
    calculation_time_ms: int
    position: PositionAnalysis
    cancelled: bool = False


@dataclass(frozen=True, slots=True)
class MoveRecommendation:
    """One legal move with its evaluation and rationale."""

    position: BoardPosition
    evaluation: float
    confidence: float
    rationale: MoveRationale
    capture_count: int


class AIService:
    """Runs at most one cancellable search at a time.

    Every request gets a cancellation token when it is issued; issuing
    another request sets it. ``_active`` is the token of the newest request,
    queued or running, and ``_running`` the token of the search executing
    right now. Both are guarded by one lock so they can be read and set from
    any thread.
    """

    __slots__ = (
        "_rules",
        "_profiles",
        "_rng",
        "_lock",
        "_active",
        "_running",
        "_pending",
        "_executor",
    )

    def __init__(
        self,
        rules: IRules | None = None,
        *,
        profiles: Mapping[AIDifficulty, SearchProfile] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._rules: IRules = rules or GameEngine()
        self._profiles = dict(profiles or DIFFICULTY_PROFILES)
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._active: threading.Event | None = None
        self._running: threading.Event | None = None
        self._pending: Future[Move | None] | None = None
        self._executor: ThreadPoolExecutor | None = None

    # ── Configuration ────────────────────────────────────────────────────

    def profile_for(self, difficulty: AIDifficulty) -> SearchProfile:
        try:
            return self._profiles[difficulty]
        except KeyError:
            raise ValueError(f"No search profile for difficulty {difficulty!r}") from None

    # ── Busy flag / cancellation ─────────────────────────────────────────

    @property
    def is_calculating(self) -> bool:
        """True while a search that has not been cancelled is executing."""
        with self._lock:
            return self._running is not None and not self._running.is_set()

    def cancel_calculation(self) -> None:
        """Signal the newest request (running or queued) to stop."""
        with self._lock:
            token, self._active = self._active, None
        if token is not None and not token.is_set():
            token.set()
            _LOGGER.debug("AI calculation cancelled")

    def _begin(self) -> threading.Event:
        """Issue a token for a new request and cancel the previous one."""
        token = threading.Event()
        with self._lock:
            previous, self._active = self._active, token
        if previous is not None:
            previous.set()
        return token

    def _start(self, token: threading.Event) -> None:
        with self._lock:
            self._running = token

    def _end(self, token: threading.Event) -> None:
        with self._lock:
            if self._active is token:
                self._active = None
            if self._running is token:
                self._running = None

    # ── Move selection ───────────────────────────────────────────────────

    def calculate_move(
        self,
        state: GameState,
        player: Player,
        difficulty: AIDifficulty,
        rules: IRules | None = None,
    ) -> Move | None:
        """Choose a move for *player*; None when no legal move exists or the
        search was cancelled before any candidate completed."""
        analysis = self.analyze_position(state, player, difficulty, rules)
        if analysis.best_move is None:
            return None
        return Move(analysis.best_move, player)

    def calculate_move_for(
        self,
        state: GameState,
        player_info: PlayerInfo,
        rules: IRules | None = None,
    ) -> Move | None:
        """Convenience wrapper; human seats never get a computed move."""
        if not player_info.is_ai or player_info.difficulty is None:
            return None
        return self.calculate_move(state, player_info.player, player_info.difficulty, rules)

    def submit_move(
        self,
        state: GameState,
        player: Player,
        difficulty: AIDifficulty,
        rules: IRules | None = None,
    ) -> Future[Move | None]:
        """Compute a move on the background worker.

        The new request supersedes the previous one: a running search is
        told to stop, and a request still waiting in the queue is cancelled
        outright (its future reports ``cancelled()``).
        """
        self.profile_for(difficulty)
        token = self._begin()
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="othello-ai")
        future = self._executor.submit(
            self._run_submitted, token, state, player, difficulty, rules
        )
        with self._lock:
            previous, self._pending = self._pending, future
        if previous is not None and previous.cancel():
            _LOGGER.debug("Dropped queued AI request")
        return future

    def shutdown(self) -> None:
        """Cancel any search and stop the background worker."""
        self.cancel_calculation()
        with self._lock:
            pending, self._pending = self._pending, None
        if pending is not None:
            pending.cancel()
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def _run_submitted(
        self,
        token: threading.Event,
        state: GameState,
        player: Player,
        difficulty: AIDifficulty,
        rules: IRules | None,
    ) -> Move | None:
        if token.is_set():
            self._end(token)
            return None
        analysis = self._analyze(token, state, player, difficulty, rules)
        if analysis.best_move is None:
            return None
        return Move(analysis.best_move, player)

    # ── Analysis ─────────────────────────────────────────────────────────

    def analyze_position(
        self,
        state: GameState,
        player: Player,
        difficulty: AIDifficulty,
        rules: IRules | None = None,
    ) -> AIAnalysis:
        """Search *state* for *player* on the calling thread."""
        self.profile_for(difficulty)
        return self._analyze(self._begin(), state, player, difficulty, rules)

    def _analyze(
        self,
        token: threading.Event,
        state: GameState,
        player: Player,
        difficulty: AIDifficulty,
        rules: IRules | None,
    ) -> AIAnalysis:
        rules = rules or self._rules
        profile = self.profile_for(difficulty)
        self._start(token)
        start = perf_counter()
        try:
            best_move: BoardPosition | None = None
            score = 0.0
            nodes = 0
            moves = _legal_moves(rules, state, player)
            if not moves:
                score = rules.evaluate_position(state, player)
            elif profile.randomized:
                best_move = self._weighted_choice(moves, profile.corner_weight)
                nodes = len(moves)
            else:
                result = AlphaBetaSearch(rules).calculate_best_move(
                    state, player, profile.depth, is_cancelled=token.is_set
                )
                best_move, score, nodes = result.best_move, result.score, result.nodes
        finally:
            self._end(token)

        elapsed_ms = int((perf_counter() - start) * 1000)
        cancelled = token.is_set()
        _LOGGER.debug(
            "AI %s (%s) chose %s: score=%.1f nodes=%d depth=%d in %d ms%s",
            player,
            difficulty,
            best_move,
            score,
            nodes,
            profile.depth,
            elapsed_ms,
            " (cancelled)" if cancelled else "",
        )
        return AIAnalysis(
            best_move=best_move,
            score=score,
            confidence=profile.confidence if best_move is not None else 0.0,
            nodes_evaluated=nodes,
            search_depth=profile.depth,
            calculation_time_ms=elapsed_ms,
            position=rules.analyze_position(state),
            cancelled=cancelled,
        )

    def get_move_recommendations(
        self,
        state: GameState,
        player: Player,
        difficulty: AIDifficulty,
        rules: IRules | None = None,
    ) -> list[MoveRecommendation]:
        """Every legal move, best evaluation first (ties in board order)."""
        rules = rules or self._rules
        profile = self.profile_for(difficulty)
        token = self._begin()
        searcher = AlphaBetaSearch(rules)
        recommendations: list[MoveRecommendation] = []
        try:
            for position in _legal_moves(rules, state, player):
                if token.is_set():
                    break
                result = rules.apply_move(Move(position, player), state)
                if result is None:
                    continue
                evaluation, _nodes = searcher.search(
                    result.new_state,
                    profile.depth - 1,
                    -math.inf,
                    math.inf,
                    maximizing=False,
                    target=player,
                    is_cancelled=token.is_set,
                )
                mobility = len(rules.available_moves(result.new_state, player))
                recommendations.append(
                    MoveRecommendation(
                        position=position,
                        evaluation=evaluation,
                        confidence=_normalized_confidence(evaluation),
                        rationale=_rationale(position, result.capture_count, mobility),
                        capture_count=result.capture_count,
                    )
                )
        finally:
            self._end(token)

        recommendations.sort(key=lambda rec: rec.evaluation, reverse=True)
        return recommendations

    def _weighted_choice(self, moves: list[BoardPosition], corner_weight: int) -> BoardPosition:
        weights = [corner_weight if pos.is_corner else 1 for pos in moves]
        return self._rng.choices(moves, weights=weights, k=1)[0]


def _legal_moves(rules: IRules, state: GameState, player: Player) -> list[BoardPosition]:
    """Only the side to move in a live game has legal moves."""
    if state.game_phase != GamePhase.PLAYING or state.current_player != player:
        return []
    return rules.available_moves(state, player)


def _normalized_confidence(evaluation: float) -> float:
    return min(1.0, max(0.0, (evaluation + _CONFIDENCE_OFFSET) / _CONFIDENCE_SPAN))


def _rationale(position: BoardPosition, capture_count: int, mobility: int) -> MoveRationale:
    if position.is_corner:
        return MoveRationale.CORNER
    if capture_count >= _HIGH_CAPTURE_MIN:
        return MoveRationale.HIGH_CAPTURE
    if capture_count >= _GOOD_CAPTURE_MIN:
        return MoveRationale.GOOD_CAPTURE
    if mobility >= _HIGH_MOBILITY_MIN:
        return MoveRationale.HIGH_MOBILITY
    if position.is_edge:
        return MoveRationale.EDGE
    return MoveRationale.SOLID
