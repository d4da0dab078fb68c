"""Qt bridge to run AI move selection in a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from othello.core.enums import AIDifficulty, Player
from othello.core.move import Move
from othello.core.state import GameState
from othello.engine.ai_service import AIService

_LOGGER = logging.getLogger(__name__)


class AIWorker(QObject):
    """Thread-affine worker that computes AI moves on demand.

    Move it to a ``QThread`` and connect a signal to :meth:`request_move`;
    results come back through the signals below, tagged with the caller's
    request id.
    """

    move_ready = pyqtSignal(int, object, int)
    no_move = pyqtSignal(int)
    search_cancelled = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_service", "_difficulty")

    def __init__(
        self,
        *,
        difficulty: AIDifficulty = AIDifficulty.MEDIUM,
        service: AIService | None = None,
    ) -> None:
        super().__init__()
        self._service = service or AIService()
        self._difficulty = difficulty

    @property
    def service(self) -> AIService:
        return self._service

    @pyqtSlot(object, int)
    def request_move(self, state_obj: object, request_id: int) -> None:
        """Compute a move for the side to move in *state_obj* and emit it."""
        if not isinstance(state_obj, GameState):
            self.search_error.emit(request_id, "AI received invalid game state")
            return

        player: Player = state_obj.current_player
        try:
            analysis = self._service.analyze_position(state_obj, player, self._difficulty)
        except Exception as exc:
            _LOGGER.warning("AI request %d failed: %s", request_id, exc)
            self.search_error.emit(request_id, str(exc))
            return

        if analysis.cancelled:
            self.search_cancelled.emit(request_id)
            return

        if analysis.best_move is None:
            self.no_move.emit(request_id)
            return

        self.move_ready.emit(
            request_id,
            Move(analysis.best_move, player),
            analysis.nodes_evaluated,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Request cancellation of the current search."""
        self._service.cancel_calculation()

    @pyqtSlot(str)
    def set_difficulty(self, difficulty: str) -> None:
        """Update difficulty (takes effect on the next request)."""
        self._difficulty = AIDifficulty(difficulty)
