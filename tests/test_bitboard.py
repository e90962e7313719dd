"""
Tests for the bitboard positions used by the search.

Winners and scores must agree with the numpy rules and evaluator on every
board, including boards no legal game can reach.
"""

import random

import pytest

from connect4bot.ai.bitboard import Position, layout
from connect4bot.ai.evaluation import score_position
from connect4bot.game.board import Board
from connect4bot.game.rules import winner
from tests.helpers import F, S, DRAW_MOVES, draw_board, place


def random_board(rng, rows=6, cols=7, marks=None):
    """Drop marks of random sides into random free columns."""
    board = Board(rows, cols)
    if marks is None:
        marks = rng.randrange(rows * cols + 1)
    for _ in range(marks):
        board.drop(rng.choice(board.free_columns()), rng.choice((F, S)))
    return board


def winner_value(board):
    w = winner(board)
    return w.value if w is not None else 0


class TestLayout:

    def test_window_count(self):
        lay = layout(7, 6)
        # 21 vertical, 24 horizontal, 12 per diagonal
        assert sum(starts.bit_count() for _, starts in lay.lines) == 69

    def test_narrow_board_has_no_vertical_windows(self):
        lay = layout(4, 1)
        assert len(lay.lines) == 1
        assert lay.lines[0][1].bit_count() == 1


class TestAgreement:
    """Bitboard results match the numpy implementation."""

    @pytest.mark.parametrize("seed", range(40))
    def test_random_boards(self, seed):
        board = random_board(random.Random(seed))
        position = Position.from_board(board)
        assert position.winner() == winner_value(board)
        assert position.score(F.value) == score_position(board, F)
        assert position.score(S.value) == score_position(board, S)

    @pytest.mark.parametrize("rows, cols", [(4, 4), (5, 9), (8, 5), (1, 6)])
    def test_other_shapes(self, rows, cols):
        rng = random.Random(rows * 100 + cols)
        for _ in range(10):
            board = random_board(rng, rows, cols)
            position = Position.from_board(board)
            assert position.winner() == winner_value(board)
            assert position.score(F.value) == score_position(board, F)

    def test_both_sides_have_lines(self, board):
        place(board, 0, S, S, S, S)
        for column in range(1, 5):
            board.drop(column, F)
        # the vertical SECOND line is found before the horizontal FIRST line
        assert winner(board) == S
        assert Position.from_board(board).winner() == S.value

    def test_same_direction_leftmost_window_wins(self, board):
        place(board, 0, F, F)
        for column in range(1, 5):
            board.drop(column, S)
        for column in range(1, 4):
            board.drop(column, F)
        # FIRST holds row 1 from column 0, SECOND row 0 from column 1
        assert winner(board) == F
        assert Position.from_board(board).winner() == F.value

    def test_draw_board(self):
        board = draw_board()
        position = Position.from_board(board)
        assert position.is_full()
        assert position.winner() == 0
        assert position.score(F.value) == score_position(board, F)


class TestPlayUndo:

    def test_play_matches_drop(self):
        board = Board()
        position = Position(7, 6)
        side = F
        for column in DRAW_MOVES:
            board.drop(column, side)
            position.play(column, side.value)
            side = side.other()
        assert position.key() == Position.from_board(board).key()
        assert position.free_columns() == []
        assert position.is_full()

    def test_undo_restores(self):
        board = Board.from_moves([3, 3, 2])
        position = Position.from_board(board)
        key, heights = position.key(), list(position.heights)
        position.play(2, S.value)
        position.play(6, F.value)
        position.undo(6, F.value)
        position.undo(2, S.value)
        assert position.key() == key
        assert position.heights == heights
        assert position.moves == 3

    def test_free_columns(self, board):
        place(board, 4, F, S, F, S, F, S)
        assert Position.from_board(board).free_columns() == [0, 1, 2, 3, 5, 6]
