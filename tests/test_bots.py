"""
Tests for bot tiers and their move-selection policies.
"""

import random
import time
from collections import Counter

import pytest

from connect4bot.ai.bots import BotTier, TIER_DEPTHS, choose_bot_move
from connect4bot.game.board import Board
from tests.helpers import F, S, DRAW_MOVES, place


class TestBotTier:

    def test_depths(self):
        assert TIER_DEPTHS == {BotTier.EASY: 1, BotTier.NORMAL: 3, BotTier.CHEAT: 8}

    def test_search_tiers(self):
        assert {t for t in BotTier if t.uses_search} == {BotTier.EASY, BotTier.NORMAL, BotTier.CHEAT}

    @pytest.mark.parametrize("name, tier", [
        ("easy", BotTier.EASY),
        ("NORMAL", BotTier.NORMAL),
        (" Cheat ", BotTier.CHEAT),
    ])
    def test_from_string(self, name, tier):
        assert BotTier.from_string(name) == tier

    def test_from_string_unknown(self):
        with pytest.raises(ValueError):
            BotTier.from_string("grandmaster")


class TestStupidBot:

    def test_plays_first_free_column(self, board):
        assert choose_bot_move(board, BotTier.STUPID, S) == 0

    def test_skips_full_columns(self, board):
        place(board, 0, F, S, F, S, F, S)
        place(board, 1, S, F, S, F, S, F)
        assert choose_bot_move(board, BotTier.STUPID, F) == board.free_columns()[0] == 2


class TestRandomBot:

    def test_only_free_columns(self, board):
        place(board, 2, F, S, F, S, F, S)
        rng = random.Random(7)
        picks = {choose_bot_move(board, BotTier.RANDOM, F, rng) for _ in range(300)}
        assert picks == {0, 1, 3, 4, 5, 6}

    def test_uniform_over_free_columns(self, board):
        rng = random.Random(1234)
        trials = 7000
        counts = Counter(choose_bot_move(board, BotTier.RANDOM, F, rng) for _ in range(trials))
        assert set(counts) == set(range(7))
        # expected 1000 per column, standard deviation is about 30
        assert all(850 <= n <= 1150 for n in counts.values())


class TestSearchBots:

    @pytest.mark.parametrize("tier", [BotTier.EASY, BotTier.NORMAL])
    def test_takes_immediate_win(self, board, tier):
        place(board, 4, F, F, F)
        place(board, 0, S)
        place(board, 1, S)
        assert choose_bot_move(board, tier, F) == 4

    def test_normal_blocks(self, board):
        board.drop(0, S)
        board.drop(6, S)
        for column in (1, 2, 3):
            board.drop(column, F)
        assert choose_bot_move(board, BotTier.NORMAL, S) == 4

    @pytest.mark.parametrize("tier", list(BotTier))
    def test_board_not_mutated(self, tier):
        board = Board.from_moves([3, 3, 2])
        before = board.clone()
        choose_bot_move(board, tier, S, random.Random(0))
        assert board == before

    @pytest.mark.parametrize("tier", list(BotTier))
    def test_no_free_column(self, full_draw_board, tier):
        with pytest.raises(ValueError):
            choose_bot_move(full_draw_board, tier, F)

    def test_cheat_on_nearly_full_board(self):
        board = Board.from_moves(DRAW_MOVES[:34])
        before = board.clone()
        assert board.free_columns() == [4, 5, 6]
        assert choose_bot_move(board, BotTier.CHEAT, F) in (4, 5, 6)
        assert board == before

    def test_cheat_on_early_position(self):
        board = Board.from_moves([3])
        start = time.perf_counter()
        column = choose_bot_move(board, BotTier.CHEAT, S)
        assert time.perf_counter() - start < 15
        assert column in board.free_columns()
