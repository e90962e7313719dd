"""
evaluation.py - Heuristic position scoring for connect4bot

The score combines a center-column bonus with sliding 4-cell window scoring
across all four orientations. It is only meaningful when comparing candidate
moves at the same search depth; it is not a probability and is not bounded.

Windows are classified by (empty cells, cells owned by the scored side).
Windows holding marks of both sides score 0, as do any combinations not
listed in the table below.
"""

import numpy as np

from connect4bot.game.board import Board
from connect4bot.utils import (CONNECT_N, CENTER_POINTS, WIN_POINTS, OPP_WIN_POINTS,
                               LINES3_POINTS, OPP_LINES3_POINTS, LINES2_POINTS,
                               OPP_LINES2_POINTS, Side, window_indices)

# (empty count, own count) -> points
WINDOW_POINTS = {
    (0, 4): WIN_POINTS,
    (0, 0): OPP_WIN_POINTS,
    (1, 3): LINES3_POINTS,
    (1, 0): OPP_LINES3_POINTS,
    (2, 2): LINES2_POINTS,
    (2, 0): OPP_LINES2_POINTS,
}

# Same table as a dense lookup array indexed [empty, own]
_SCORE_TABLE = np.zeros((CONNECT_N + 1, CONNECT_N + 1), dtype=np.int64)
for (_empty, _own), _points in WINDOW_POINTS.items():
    _SCORE_TABLE[_empty, _own] = _points


def score_window(empty: int, own: int) -> int:
    """Points for one window with `empty` empty cells and `own` cells of the scored side."""
    return WINDOW_POINTS.get((empty, own), 0)


def center_score(board: Board, side: Side) -> int:
    """CENTER_POINTS for every center-column cell occupied by `side`."""
    center = board.grid[board.center_column]
    return int(np.count_nonzero(center == side.value)) * CENTER_POINTS


def window_score(board: Board, side: Side) -> int:
    """Sum of the window table over every window of every orientation."""
    total = 0
    for cidx, ridx in window_indices(board.cols, board.rows).values():
        if cidx.size == 0:
            continue
        windows = board.grid[cidx, ridx]
        empty = np.count_nonzero(windows == Side.EMPTY.value, axis=1)
        own = np.count_nonzero(windows == side.value, axis=1)
        total += int(_SCORE_TABLE[empty, own].sum())
    return total


def score_position(board: Board, side: Side) -> int:
    """
    Estimate how favorable `board` is for `side`.

    Args:
        board: The board to score
        side: The side the score is computed for

    Returns:
        Center bonus plus window scores
    """
    if not side.is_mark:
        raise ValueError("Cannot score a board for an empty side.")
    return center_score(board, side) + window_score(board, side)
