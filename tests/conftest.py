"""Shared fixtures for the connect4bot test suite."""

import pytest

from connect4bot.debug import debug, DebugLevel
from connect4bot.game.board import Board
from tests.helpers import draw_board


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def full_draw_board():
    return draw_board()


@pytest.fixture(autouse=True)
def quiet_debug():
    """Restore the logging configuration after every test."""
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])
