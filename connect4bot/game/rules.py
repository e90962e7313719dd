"""
rules.py - Win and draw detection for connect4bot

The scan is exhaustive: every 4-cell window of every orientation is checked,
not only the neighbourhood of the last move, so the functions here are
correct for any board, including the hypothetical ones built during search.
"""

from typing import List, Optional, Tuple

import numpy as np

from connect4bot.game.board import Board
from connect4bot.utils import Direction, Side, window_indices


def _find_winning_window(board: Board) -> Optional[Tuple[Direction, int]]:
    """Locate the first full single-side window as (direction, window index)."""
    for direction, (cidx, ridx) in window_indices(board.cols, board.rows).items():
        if cidx.size == 0:
            continue
        windows = board.grid[cidx, ridx]
        lead = windows[:, :1]
        full = (lead[:, 0] != Side.EMPTY.value) & np.all(windows == lead, axis=1)
        hits = np.flatnonzero(full)
        if hits.size:
            return direction, int(hits[0])
    return None


def winner(board: Board) -> Optional[Side]:
    """
    Get the side owning a line of four.

    Returns:
        The winning Side, or None if no line of four exists
    """
    found = _find_winning_window(board)
    if found is None:
        return None
    direction, index = found
    cidx, ridx = window_indices(board.cols, board.rows)[direction]
    return Side(int(board.grid[cidx[index, 0], ridx[index, 0]]))


def winning_line(board: Board) -> List[Tuple[int, int]]:
    """
    Get the (column, row) cells of a winning line.

    Returns:
        The four cells of the line, or an empty list if there is no winner
    """
    found = _find_winning_window(board)
    if found is None:
        return []
    direction, index = found
    cidx, ridx = window_indices(board.cols, board.rows)[direction]
    return [(int(c), int(r)) for c, r in zip(cidx[index], ridx[index])]


def is_over(board: Board) -> bool:
    """The game is over when a side has four in a row or no column is free."""
    return board.is_full() or winner(board) is not None


def is_draw(board: Board) -> bool:
    return board.is_full() and winner(board) is None
