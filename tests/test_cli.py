"""
Tests for the command-line tools.
"""

import io

import pytest

from connect4bot.interfaces.cli import Connect4BotCLI, play_bot_game, side_to_move
from connect4bot.ai.bots import BotTier
from connect4bot.debug import debug, DebugLevel
from connect4bot.game.board import Board
from tests.helpers import F, S


def run_cli(*argv):
    out = io.StringIO()
    code = Connect4BotCLI(out=out).run(list(argv))
    return code, out.getvalue()


class TestAnalyze:

    def test_finds_winning_column(self):
        code, output = run_cli('analyze', '--moves', '1,6,2,6,3,5', '--tier', 'easy')
        assert code == 0
        assert "Side to move: FIRST" in output
        assert "plays column 0" in output

    def test_stupid_tier(self):
        code, output = run_cli('analyze', '--moves', '0,0,0,0,0,0', '--tier', 'stupid')
        assert code == 0
        assert "STUPID plays column 1" in output

    def test_finished_position(self):
        code, output = run_cli('analyze', '--moves', '0,1,0,1,0,1,0')
        assert code == 0
        assert "FIRST wins" in output

    def test_invalid_moves(self):
        code, output = run_cli('analyze', '--moves', '0,9')
        assert code == 2
        assert output == ""

    def test_unknown_tier_rejected(self):
        with pytest.raises(SystemExit):
            run_cli('analyze', '--tier', 'grandmaster')


class TestArena:

    def test_stupid_mirror(self):
        code, output = run_cli('arena', '--first', 'stupid', '--second', 'stupid', '--games', '1')
        assert code == 0
        assert "STUPID (FIRST) wins: 1" in output
        assert "Draws: 0" in output

    def test_games_must_be_positive(self):
        code, _ = run_cli('arena', '--games', '0')
        assert code == 2

    def test_play_bot_game_result(self):
        import random
        assert play_bot_game(BotTier.STUPID, BotTier.STUPID, random.Random(0)) == F


def test_no_command():
    code, _ = run_cli()
    assert code == 1


def test_side_to_move():
    assert side_to_move(Board()) == F
    assert side_to_move(Board.from_moves([3])) == S


class TestLoggingOptions:

    def test_debug_level_and_components(self):
        cli = Connect4BotCLI(out=io.StringIO())
        cli.parse_args(['--debug-level', 'info', '--components', 'cli, search', 'arena'])
        assert debug.level == DebugLevel.INFO
        assert debug.is_enabled_for(DebugLevel.INFO, 'search')
        assert not debug.is_enabled_for(DebugLevel.INFO, 'match')

    def test_unknown_component_rejected(self):
        with pytest.raises(SystemExit):
            run_cli('--components', 'search,renderer', 'arena')
