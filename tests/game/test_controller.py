"""Tests for GameController, the orchestrator."""

from othello.core.enums import AIDifficulty, GamePhase, Player
from othello.core.move import MoveResult
from othello.core.state import GameResult, GameState
from othello.core.types import BoardPosition
from othello.game.controller import GameController
from othello.game.player import AIPlayer, HumanPlayer

D3 = BoardPosition(2, 3)


def _make_hh_controller(state: GameState | None = None) -> GameController:
    """Helper: human vs human game."""
    ctrl = GameController()
    ctrl.new_game(HumanPlayer(Player.BLACK, "B"), HumanPlayer(Player.WHITE, "W"), state)
    return ctrl


class TestNewGame:
    def test_initial_position(self) -> None:
        ctrl = _make_hh_controller()
        assert ctrl.state.game_phase == GamePhase.PLAYING
        assert ctrl.state.current_player == Player.BLACK
        assert len(ctrl.available_moves) == 4

    def test_players_assigned(self) -> None:
        ctrl = _make_hh_controller()
        black = ctrl.player(Player.BLACK)
        assert black is not None and black.name == "B"
        cp = ctrl.current_player
        assert cp is not None and cp.player == Player.BLACK

    def test_seat_info_recorded(self) -> None:
        ctrl = GameController()
        ctrl.new_game(HumanPlayer(Player.BLACK), AIPlayer(Player.WHITE, AIDifficulty.HARD))
        assert ctrl.state.black_player_info.is_human
        assert ctrl.state.white_player_info.difficulty == AIDifficulty.HARD

    def test_prompts_first_player(self) -> None:
        prompted: list[GameState] = []
        ctrl = GameController()
        ctrl.new_game(
            AIPlayer(Player.BLACK, on_request_move=prompted.append),
            HumanPlayer(Player.WHITE),
        )
        assert prompted == [ctrl.state]

    def test_custom_state(self, pass_state: GameState) -> None:
        ctrl = _make_hh_controller(pass_state)
        assert ctrl.state.board == pass_state.board
        assert ctrl.available_moves == [BoardPosition(0, 0), BoardPosition(7, 2)]


    def test_seats_from_state_infos(self) -> None:
        ctrl = GameController()
        ctrl.new_game(state=GameState.new_human_vs_ai(Player.BLACK, AIDifficulty.EASY))
        black, white = ctrl.player(Player.BLACK), ctrl.player(Player.WHITE)
        assert isinstance(black, HumanPlayer)
        assert isinstance(white, AIPlayer)
        assert white.difficulty == AIDifficulty.EASY
        assert ctrl.state.white_player_info.is_ai

    def test_default_seats_are_human(self) -> None:
        ctrl = GameController()
        ctrl.new_game()
        black = ctrl.player(Player.BLACK)
        assert black is not None and black.is_human


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = _make_hh_controller()
        result = ctrl.submit_move(D3)
        assert result is not None
        assert result.capture_count == 1
        assert ctrl.state.current_player == Player.WHITE
        assert ctrl.state.move_count == 1

    def test_illegal_move_rejected(self) -> None:
        ctrl = _make_hh_controller()
        before = ctrl.state
        assert ctrl.submit_move(BoardPosition(0, 0)) is None
        assert ctrl.state is before

    def test_move_event_fires(self) -> None:
        ctrl = _make_hh_controller()
        events: list[MoveResult] = []
        ctrl.events.on_move.append(events.append)
        ctrl.submit_move(D3)
        assert [r.move.position for r in events] == [D3]

    def test_next_player_prompted(self) -> None:
        prompted: list[GameState] = []
        ctrl = GameController()
        ctrl.new_game(
            HumanPlayer(Player.BLACK),
            AIPlayer(Player.WHITE, on_request_move=prompted.append),
        )
        ctrl.submit_move(D3)
        assert prompted == [ctrl.state]


class TestPassAndGameOver:
    def test_pass_event(self, pass_state: GameState) -> None:
        ctrl = _make_hh_controller(pass_state)
        passes: list[Player] = []
        ctrl.events.on_pass.append(passes.append)

        ctrl.submit_move(BoardPosition(0, 0))

        assert passes == [Player.WHITE]
        assert ctrl.state.current_player == Player.BLACK

    def test_game_over_event(self, pass_state: GameState) -> None:
        ctrl = _make_hh_controller(pass_state)
        outcomes: list[GameResult] = []
        ctrl.events.on_game_over.append(outcomes.append)

        ctrl.submit_move(BoardPosition(0, 0))
        ctrl.submit_move(BoardPosition(7, 2))

        assert len(outcomes) == 1
        assert outcomes[0].winner == Player.BLACK
        assert ctrl.available_moves == []
        assert ctrl.game_result == outcomes[0]
        assert ctrl.submit_move(BoardPosition(5, 5)) is None


class TestAITurns:
    def test_human_turn_is_skipped(self) -> None:
        ctrl = _make_hh_controller()
        assert ctrl.play_ai_turn() is None
        assert ctrl.state.move_count == 0

    def test_request_ai_move_leaves_game_untouched(self) -> None:
        ctrl = GameController()
        ctrl.new_game(AIPlayer(Player.BLACK, AIDifficulty.MEDIUM), HumanPlayer(Player.WHITE))
        before = ctrl.state
        move = ctrl.request_ai_move()
        assert move is not None
        assert move.player == Player.BLACK
        assert move.position in ctrl.available_moves
        assert ctrl.state is before

    def test_ai_turn_plays_legal_move(self) -> None:
        ctrl = GameController()
        ctrl.new_game(AIPlayer(Player.BLACK, AIDifficulty.MEDIUM), HumanPlayer(Player.WHITE))
        legal = ctrl.available_moves
        result = ctrl.play_ai_turn()
        assert result is not None
        assert result.move.position in legal
        assert ctrl.state.current_player == Player.WHITE

    def test_ai_vs_ai_completes(self) -> None:
        ctrl = GameController()
        ctrl.new_game(
            AIPlayer(Player.BLACK, AIDifficulty.EASY),
            AIPlayer(Player.WHITE, AIDifficulty.EASY),
        )
        outcomes: list[GameResult] = []
        ctrl.events.on_game_over.append(outcomes.append)

        for _ in range(60):
            if ctrl.play_ai_turn() is None:
                break

        assert ctrl.state.game_phase == GamePhase.FINISHED
        assert len(outcomes) == 1
        assert ctrl.state.move_count <= 60

    def test_cancel_reaches_players(self) -> None:
        cancelled: list[Player] = []
        ctrl = GameController()
        ctrl.new_game(
            AIPlayer(Player.BLACK, on_cancel=lambda: cancelled.append(Player.BLACK)),
            AIPlayer(Player.WHITE, on_cancel=lambda: cancelled.append(Player.WHITE)),
        )
        cancelled.clear()
        ctrl.cancel()
        assert sorted(cancelled) == [Player.BLACK, Player.WHITE]
        assert not ctrl.ai_service.is_calculating
