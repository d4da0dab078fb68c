"""Tests for Move and MoveResult value objects."""

import pytest

from othello.core.enums import Player
from othello.core.move import Move, MoveResult
from othello.core.state import GameState
from othello.core.types import BoardPosition


class TestMove:
    def test_at(self) -> None:
        move = Move.at(2, 3, Player.BLACK)
        assert move.position == BoardPosition(2, 3)
        assert move.player == Player.BLACK

    def test_notation(self) -> None:
        move = Move.at(2, 3, Player.WHITE)
        assert move.notation == "D6"
        assert str(move) == "white D6"


class TestMoveResult:
    def test_requires_a_capture(self) -> None:
        with pytest.raises(ValueError):
            MoveResult(Move.at(2, 3, Player.BLACK), (), GameState.new_human_vs_human())

    def test_capture_count(self) -> None:
        captured = (BoardPosition(3, 3), BoardPosition(3, 4))
        result = MoveResult(
            Move.at(2, 3, Player.BLACK), captured, GameState.new_human_vs_human()
        )
        assert result.capture_count == 2
        assert result.captured_positions == captured
