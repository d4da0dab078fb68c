"""Game state aggregate: board, side to move, phase and player metadata."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from othello.core.board import Board, Score
from othello.core.enums import AIDifficulty, GamePhase, Player, PlayerType
from othello.core.move import Move

_DEFAULT_AI_DIFFICULTY = AIDifficulty.MEDIUM


@dataclass(frozen=True, slots=True)
class PlayerInfo:
    """Who controls one side. Difficulty is kept only for AI players."""

    player: Player
    type: PlayerType = PlayerType.HUMAN
    difficulty: AIDifficulty | None = None

    def __post_init__(self) -> None:
        if self.type == PlayerType.AI:
            if self.difficulty is None:
                object.__setattr__(self, "difficulty", _DEFAULT_AI_DIFFICULTY)
        elif self.difficulty is not None:
            object.__setattr__(self, "difficulty", None)

    @classmethod
    def human(cls, player: Player) -> PlayerInfo:
        return cls(player, PlayerType.HUMAN)

    @classmethod
    def ai(cls, player: Player, difficulty: AIDifficulty) -> PlayerInfo:
        return cls(player, PlayerType.AI, difficulty)

    @property
    def is_human(self) -> bool:
        return self.type == PlayerType.HUMAN

    @property
    def is_ai(self) -> bool:
        return self.type == PlayerType.AI

    @property
    def display_name(self) -> str:
        name = self.player.name.capitalize()
        if self.is_ai:
            return f"{name} ({self.difficulty} AI)"
        return name


@dataclass(frozen=True, slots=True)
class GameResult:
    """Final outcome of a finished game."""

    winner: Player | None
    final_score: Score
    move_count: int

    @property
    def is_tied(self) -> bool:
        return self.winner is None

    def __str__(self) -> str:
        if self.winner is None:
            return f"Tie game ({self.final_score})"
        return f"{self.winner.name.capitalize()} wins ({self.final_score})"


@dataclass(frozen=True, slots=True)
class GameState:
    """Immutable snapshot of a game.

    Transitions never mutate a state; :class:`~othello.core.rules.GameEngine`
    builds a new one for every move or turn change.
    """

    board: Board
    current_player: Player
    game_phase: GamePhase
    black_player_info: PlayerInfo = field(
        default_factory=lambda: PlayerInfo.human(Player.BLACK)
    )
    white_player_info: PlayerInfo = field(
        default_factory=lambda: PlayerInfo.human(Player.WHITE)
    )
    move_count: int = 0
    move_history: tuple[Move, ...] = ()

    # ── Derived ──────────────────────────────────────────────────────────

    @property
    def score(self) -> Score:
        return self.board.score

    @property
    def is_game_over(self) -> bool:
        return self.game_phase == GamePhase.FINISHED

    @property
    def last_move(self) -> Move | None:
        return self.move_history[-1] if self.move_history else None

    def player_info(self, player: Player) -> PlayerInfo:
        if player == Player.BLACK:
            return self.black_player_info
        return self.white_player_info

    @property
    def current_player_info(self) -> PlayerInfo:
        return self.player_info(self.current_player)

    def with_changes(self, **changes: Any) -> GameState:
        """Copy of this state with *changes* applied."""
        return replace(self, **changes)

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def new(cls, black: PlayerInfo, white: PlayerInfo) -> GameState:
        return cls(
            board=Board.initial(),
            current_player=Player.BLACK,
            game_phase=GamePhase.PLAYING,
            black_player_info=black,
            white_player_info=white,
        )

    @classmethod
    def new_human_vs_human(cls) -> GameState:
        return cls.new(PlayerInfo.human(Player.BLACK), PlayerInfo.human(Player.WHITE))

    @classmethod
    def new_human_vs_ai(cls, human: Player, difficulty: AIDifficulty) -> GameState:
        infos = {
            human: PlayerInfo.human(human),
            human.opposite: PlayerInfo.ai(human.opposite, difficulty),
        }
        return cls.new(infos[Player.BLACK], infos[Player.WHITE])

    @classmethod
    def new_ai_vs_ai(
        cls, black_difficulty: AIDifficulty, white_difficulty: AIDifficulty
    ) -> GameState:
        return cls.new(
            PlayerInfo.ai(Player.BLACK, black_difficulty),
            PlayerInfo.ai(Player.WHITE, white_difficulty),
        )

    def __str__(self) -> str:
        suffix = " (finished)" if self.is_game_over else ""
        return f"{self.current_player} to move{suffix}, {self.score}"
