"""GameController: the central orchestrator of an Othello game.

Coordinates: Players, GameEngine, AIService.
Emits events via simple callbacks so a UI or tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from othello.core.enums import Player
from othello.core.move import Move, MoveResult
from othello.core.rules import GameEngine
from othello.core.state import GameResult, GameState
from othello.core.types import BoardPosition
from othello.engine.ai_service import AIService
from othello.game.interfaces import IGameController, IPlayer
from othello.game.player import create_player

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveResult], None]
PassCallback = Callable[[Player], None]  # the side that had to pass
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_pass: list[PassCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Owns the current :class:`GameState`, applies moves and prompts the
    next player.

    Thread-safety: call from a single thread. AI results computed elsewhere
    must be handed back on that thread through :meth:`submit_move`.
    """

    __slots__ = ("_engine", "_ai_service", "_state", "_players", "events")

    def __init__(
        self,
        engine: GameEngine | None = None,
        ai_service: AIService | None = None,
    ) -> None:
        self._engine = engine or GameEngine()
        self._ai_service = ai_service or AIService(self._engine)
        self._state = GameState.new_human_vs_human()
        self._players: dict[Player, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> GameEngine:
        return self._engine

    @property
    def ai_service(self) -> AIService:
        return self._ai_service

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.current_player)

    def player(self, side: Player) -> IPlayer | None:
        return self._players.get(side)

    @property
    def available_moves(self) -> list[BoardPosition]:
        if self._state.is_game_over:
            return []
        return self._engine.available_moves(self._state)

    @property
    def game_result(self) -> GameResult | None:
        return self._engine.game_result(self._state)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        black: IPlayer | None = None,
        white: IPlayer | None = None,
        state: GameState | None = None,
    ) -> GameState:
        self.cancel()
        base = state or GameState.new_human_vs_human()
        black = black or create_player(base.black_player_info)
        white = white or create_player(base.white_player_info)
        self._players = {Player.BLACK: black, Player.WHITE: white}
        if state is None:
            self._state = self._engine.new_game(black.info(), white.info())
        else:
            self._state = state.with_changes(
                black_player_info=black.info(),
                white_player_info=white.info(),
            )
        _LOGGER.debug("New game: %s vs %s", black.name, white.name)
        self._prompt_current_player()
        return self._state

    def submit_move(self, position: BoardPosition) -> MoveResult | None:
        state = self._state
        mover = state.current_player
        result = self._engine.apply_move(Move(position, mover), state)
        if result is None:
            _LOGGER.debug("Rejected move %s for %s", position, mover)
            return None

        self._state = result.new_state
        for on_move in list(self.events.on_move):
            on_move(result)

        if self._state.is_game_over:
            outcome = self._engine.game_result(self._state)
            _LOGGER.debug("Game over: %s", outcome)
            if outcome is not None:
                for on_game_over in list(self.events.on_game_over):
                    on_game_over(outcome)
            return result

        if self._state.current_player == mover:
            _LOGGER.debug("%s has no legal move and passes", mover.opposite)
            for on_pass in list(self.events.on_pass):
                on_pass(mover.opposite)

        self._prompt_current_player()
        return result

    def cancel(self) -> None:
        for participant in self._players.values():
            participant.cancel()
        self._ai_service.cancel_calculation()

    # ── AI turns ─────────────────────────────────────────────────────────

    def request_ai_move(self) -> Move | None:
        """Search a move for the side to move if it is an AI seat.

        Blocks the calling thread for the duration of the search and leaves
        the game untouched.
        """
        state = self._state
        info = state.current_player_info
        if state.is_game_over or not info.is_ai:
            return None
        return self._ai_service.calculate_move_for(state, info, self._engine)

    def play_ai_turn(self) -> MoveResult | None:
        """Apply :meth:`request_ai_move` unless the game moved on meanwhile."""
        state = self._state
        move = self.request_ai_move()
        if move is None or self._state is not state:
            return None
        return self.submit_move(move.position)

    def _prompt_current_player(self) -> None:
        participant = self.current_player
        if participant is not None:
            participant.request_move(self._state)
