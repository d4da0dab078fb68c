"""Seat participants built on :class:`~othello.core.state.PlayerInfo`.

A participant is the live counterpart of a seat's ``PlayerInfo``: the info
says who sits on a side, the participant is what the controller prompts
when that side is to move.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from othello.core.enums import AIDifficulty, Player
from othello.core.state import PlayerInfo
from othello.game.interfaces import IPlayer

if TYPE_CHECKING:
    from othello.core.state import GameState

RequestMoveCallback = Callable[["GameState"], None]
CancelCallback = Callable[[], None]


class _Seat(IPlayer):
    """Shared plumbing: a display name over an immutable seat record."""

    __slots__ = ("_info", "_name")

    def __init__(self, info: PlayerInfo, name: str) -> None:
        self._info = info
        self._name = name

    @property
    def player(self) -> Player:
        return self._info.player

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return self._info.is_human

    def info(self) -> PlayerInfo:
        return self._info


class HumanPlayer(_Seat):
    """A human seat. Placements arrive through ``GameController.submit_move``."""

    __slots__ = ()

    def __init__(self, player: Player, name: str = "") -> None:
        super().__init__(PlayerInfo.human(player), name or f"Player ({player})")

    def request_move(self, state: GameState) -> None:
        pass

    def cancel(self) -> None:
        pass


class AIPlayer(_Seat):
    """A computer seat that hands its turn to a search callback.

    In a Qt front end *on_request_move* forwards the state to an
    ``AIWorker`` on a ``QThread`` and *on_cancel* wires to its ``cancel``
    slot. Headless callers leave both unset and drive turns with
    ``GameController.play_ai_turn``.
    """

    __slots__ = ("_on_request_move", "_on_cancel")

    def __init__(
        self,
        player: Player,
        difficulty: AIDifficulty = AIDifficulty.MEDIUM,
        name: str = "Computer",
        on_request_move: RequestMoveCallback | None = None,
        on_cancel: CancelCallback | None = None,
    ) -> None:
        super().__init__(PlayerInfo.ai(player, difficulty), name)
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def difficulty(self) -> AIDifficulty:
        return self._info.difficulty or AIDifficulty.MEDIUM

    def request_move(self, state: GameState) -> None:
        if self._on_request_move is not None:
            self._on_request_move(state)

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()


def create_player(
    info: PlayerInfo,
    name: str = "",
    on_request_move: RequestMoveCallback | None = None,
    on_cancel: CancelCallback | None = None,
) -> IPlayer:
    """Participant matching *info*: callbacks only apply to AI seats."""
    if info.is_human:
        return HumanPlayer(info.player, name)
    return AIPlayer(
        info.player,
        info.difficulty or AIDifficulty.MEDIUM,
        name or f"Computer ({info.difficulty})",
        on_request_move=on_request_move,
        on_cancel=on_cancel,
    )
