"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from othello.core.board import Board
from othello.core.enums import Player
from othello.core.rules import GameEngine
from othello.core.state import GameState

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal/slot tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def engine() -> GameEngine:
    return GameEngine()


@pytest.fixture
def opening() -> GameState:
    return GameState.new_human_vs_human()


@pytest.fixture
def pass_state(engine: GameEngine) -> GameState:
    """Black to move; after A8 white is left without a reply."""
    board = Board.from_rows(
        [
            ".OX.....",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "XO......",
        ]
    )
    return engine.create_test_state(board, Player.BLACK)
