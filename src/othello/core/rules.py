"""Othello rules: legality, capture, turn flow, termination and evaluation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from othello.core.board import Board
from othello.core.enums import CellState, GamePhase, Player
from othello.core.move import Move, MoveResult
from othello.core.state import GameResult, GameState, PlayerInfo
from othello.core.types import BOARD_SIZE, CORNERS, EDGES, BoardPosition

_MAX_PIECES = BOARD_SIZE * BOARD_SIZE

# Directions that walk away from each corner along its two edges.
_CORNER_EDGE_WALKS: tuple[tuple[BoardPosition, tuple[tuple[int, int], ...]], ...] = (
    (CORNERS[0], ((0, 1), (1, 0))),
    (CORNERS[1], ((0, -1), (1, 0))),
    (CORNERS[2], ((-1, 0), (0, 1))),
    (CORNERS[3], ((-1, 0), (0, -1))),
)


@dataclass(frozen=True, slots=True)
class EvaluationWeights:
    """Per-feature weights of the static evaluation."""

    pieces: float = 1.0
    mobility: float = 10.0
    corners: float = 100.0
    edges: float = 5.0
    stability: float = 20.0


@dataclass(frozen=True, slots=True)
class PositionAnalysis:
    """Strategic features of a position, keyed by player.

    Compared by value; the per-player dicts make it unhashable.
    """

    __hash__ = None  # type: ignore[assignment]

    mobility: dict[Player, int]
    corner_control: dict[Player, int]
    edge_control: dict[Player, int]
    stability: dict[Player, float]
    evaluation: dict[Player, float]

    @property
    def mobility_difference(self) -> int:
        """Black mobility minus white mobility."""
        return self.mobility[Player.BLACK] - self.mobility[Player.WHITE]

    @property
    def corner_advantage(self) -> Player | None:
        return _leader(self.corner_control)

    @property
    def advantage(self) -> Player | None:
        return _leader(self.evaluation)


def _leader(values: dict[Player, int] | dict[Player, float]) -> Player | None:
    black, white = values[Player.BLACK], values[Player.WHITE]
    if black > white:
        return Player.BLACK
    if white > black:
        return Player.WHITE
    return None


class GameEngine:
    """Sole authority for Othello rules over immutable :class:`GameState` values.

    All methods are pure; a single instance can be shared between threads.
    Illegal requests are answered with ``None`` or ``False``, never with an
    exception.
    """

    __slots__ = ("_weights",)

    def __init__(self, weights: EvaluationWeights | None = None) -> None:
        self._weights = weights or EvaluationWeights()

    @property
    def weights(self) -> EvaluationWeights:
        return self._weights

    # ── Construction ─────────────────────────────────────────────────────

    def new_game(self, black_player: PlayerInfo, white_player: PlayerInfo) -> GameState:
        return GameState.new(black_player, white_player)

    @staticmethod
    def create_test_state(
        board: Board,
        current_player: Player = Player.BLACK,
        game_phase: GamePhase = GamePhase.PLAYING,
    ) -> GameState:
        """Wrap an arbitrary *board* (possibly malformed) in a human-vs-human state."""
        return GameState(
            board=board,
            current_player=current_player,
            game_phase=game_phase,
        )

    # ── Legality ─────────────────────────────────────────────────────────

    def is_valid_move(self, move: Move, state: GameState) -> bool:
        if state.game_phase != GamePhase.PLAYING:
            return False
        if move.player != state.current_player:
            return False
        if not move.position.is_valid:
            return False
        return state.board.is_valid_move(move.player, move.position)

    def captured_positions(self, move: Move, state: GameState) -> frozenset[BoardPosition]:
        if not move.position.is_valid:
            return frozenset()
        return state.board.captured_positions(move.player, move.position)

    def available_moves(
        self, state: GameState, player: Player | None = None
    ) -> list[BoardPosition]:
        """Legal placements in row-major order for *player* (default: side to move)."""
        return state.board.valid_moves(state.current_player if player is None else player)

    def has_valid_moves(self, player: Player, state: GameState) -> bool:
        board = state.board
        return any(board.is_valid_move(player, pos) for pos in board.empty_positions())

    # ── Move application / turn flow ─────────────────────────────────────

    def apply_move(self, move: Move, state: GameState) -> MoveResult | None:
        if not self.is_valid_move(move, state):
            return None
        applied = state.board.applying_move(move)
        if applied is None:
            return None
        board, captured = applied

        placed = state.with_changes(
            board=board,
            move_count=state.move_count + 1,
            move_history=(*state.move_history, move),
        )
        return MoveResult(
            move=move,
            captured_positions=tuple(sorted(captured)),
            new_state=self.next_turn(placed),
        )

    def next_turn(self, state: GameState) -> GameState:
        """Hand the turn to the opponent, or keep it on a pass, or finish."""
        if state.game_phase == GamePhase.FINISHED:
            return state
        mover = state.current_player
        opponent = mover.opposite
        if self.has_valid_moves(opponent, state):
            return state.with_changes(current_player=opponent)
        if self.has_valid_moves(mover, state):
            return state
        return state.with_changes(game_phase=GamePhase.FINISHED)

    # ── Termination ──────────────────────────────────────────────────────

    def is_game_over(self, state: GameState) -> bool:
        if state.game_phase == GamePhase.FINISHED:
            return True
        if state.board.piece_count >= _MAX_PIECES:
            return True
        return not (
            self.has_valid_moves(Player.BLACK, state)
            or self.has_valid_moves(Player.WHITE, state)
        )

    def winner(self, state: GameState) -> Player | None:
        """Side with more discs; None on a tie."""
        return state.score.leader

    def game_result(self, state: GameState) -> GameResult | None:
        if not self.is_game_over(state):
            return None
        return GameResult(
            winner=self.winner(state),
            final_score=state.score,
            move_count=state.move_count,
        )

    # ── Evaluation ───────────────────────────────────────────────────────

    def evaluate_position(self, state: GameState, player: Player) -> float:
        """Weighted feature score for *player* minus the same for the opponent."""
        return self.analyze_position(state).evaluation[player]

    def analyze_position(self, state: GameState) -> PositionAnalysis:
        board = state.board
        score = board.score
        stable = _stable_edge_positions(board)

        mobility: dict[Player, int] = {}
        corners: dict[Player, int] = {}
        edges: dict[Player, int] = {}
        stability: dict[Player, float] = {}
        raw: dict[Player, float] = {}
        for player in Player:
            disc = player.cell_state
            owned = board.positions_with(disc)
            mobility[player] = len(board.valid_moves(player))
            corners[player] = sum(1 for pos in CORNERS if board[pos] is disc)
            edges[player] = sum(1 for pos in EDGES if board[pos] is disc)
            stability[player] = (
                sum(1 for pos in owned if pos in stable) / len(owned) if owned else 0.0
            )
            raw[player] = self._weighted(
                pieces=score.for_player(player),
                mobility=mobility[player],
                corners=corners[player],
                edges=edges[player],
                stability=stability[player],
            )

        evaluation = {
            player: _finite(raw[player] - raw[player.opposite]) for player in Player
        }
        return PositionAnalysis(
            mobility=mobility,
            corner_control=corners,
            edge_control=edges,
            stability=stability,
            evaluation=evaluation,
        )

    def _weighted(
        self,
        *,
        pieces: int,
        mobility: int,
        corners: int,
        edges: int,
        stability: float,
    ) -> float:
        w = self._weights
        return (
            pieces * w.pieces
            + mobility * w.mobility
            + corners * w.corners
            + edges * w.edges
            + stability * w.stability
        )

    # ── Diagnostics ──────────────────────────────────────────────────────

    def validate_game_state(self, state: GameState) -> list[str]:
        """Describe logically impossible combinations in *state*. Never raises."""
        issues: list[str] = []
        board_score = state.board.score
        score = state.score

        if board_score != score:
            issues.append(f"Board score ({board_score}) doesn't match state score ({score})")
        if score.total > _MAX_PIECES:
            issues.append(f"Board holds {score.total} pieces (max {_MAX_PIECES})")
        if len(state.move_history) != state.move_count:
            issues.append(
                f"Move history length ({len(state.move_history)}) "
                f"doesn't match move count ({state.move_count})"
            )

        black_moves = self.has_valid_moves(Player.BLACK, state)
        white_moves = self.has_valid_moves(Player.WHITE, state)
        if state.game_phase == GamePhase.PLAYING and not (black_moves or white_moves):
            issues.append("Game is playing but neither player has moves")
        if state.game_phase == GamePhase.FINISHED and (black_moves or white_moves):
            issues.append("Game marked as finished but moves are still available")

        for info, side in (
            (state.black_player_info, Player.BLACK),
            (state.white_player_info, Player.WHITE),
        ):
            if info.player != side:
                issues.append(f"{side} seat is assigned to {info.player}")
        return issues


def _stable_edge_positions(board: Board) -> set[BoardPosition]:
    """Occupied corners plus same-colour edge runs extending from them."""
    stable: set[BoardPosition] = set()
    for corner, walks in _CORNER_EDGE_WALKS:
        owner = board[corner]
        if owner is CellState.EMPTY:
            continue
        stable.add(corner)
        for d_row, d_col in walks:
            current = corner.offset(d_row, d_col)
            while current is not None and board[current] is owner:
                stable.add(current)
                current = current.offset(d_row, d_col)
    return stable


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0
