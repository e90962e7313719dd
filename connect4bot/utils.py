"""
utils.py - Constants, enumerations and window helpers for connect4bot

This module provides the board dimensions, the scoring constants used by the
heuristic evaluator, the Side enumeration used for both marks and cell states,
and the precomputed 4-cell windows shared by win detection and evaluation.
"""

from enum import Enum, auto
from functools import lru_cache
from typing import Dict, List, Tuple

import numpy as np

# Board constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win

# Heuristic scoring constants
CENTER_POINTS = 4
LINES2_POINTS = 2
LINES3_POINTS = 5
WIN_POINTS = 10000
OPP_LINES2_POINTS = -2
OPP_LINES3_POINTS = -5
OPP_WIN_POINTS = -1000


class Side(Enum):
    """Enumeration of the two marks; EMPTY is the state of an unoccupied cell."""
    EMPTY = 0
    FIRST = 1
    SECOND = 2

    def other(self) -> 'Side':
        """Get the opposing mark."""
        if self == Side.FIRST:
            return Side.SECOND
        elif self == Side.SECOND:
            return Side.FIRST
        return Side.EMPTY

    @property
    def is_mark(self) -> bool:
        return self != Side.EMPTY


class Direction(Enum):
    """The four line orientations scanned for windows."""
    VERTICAL = auto()
    HORIZONTAL = auto()
    DIAGONAL = auto()  # bottom-left to top-right
    ANTI_DIAGONAL = auto()  # bottom-right to top-left


# Direction vectors (column delta, row delta); row 0 is the bottom row
DIRECTION_VECTORS = {
    Direction.VERTICAL: (0, 1),
    Direction.HORIZONTAL: (1, 0),
    Direction.DIAGONAL: (1, 1),
    Direction.ANTI_DIAGONAL: (-1, 1),
}


def is_valid_position(column: int, row: int, cols: int = COLS, rows: int = ROWS) -> bool:
    """Check if a (column, row) position is within the board boundaries."""
    return 0 <= column < cols and 0 <= row < rows


def window_cells(cols: int, rows: int, direction: Direction,
                 length: int = CONNECT_N) -> List[List[Tuple[int, int]]]:
    """
    List every run of `length` consecutive (column, row) cells in one direction.

    Args:
        cols: Board width
        rows: Board height
        direction: Orientation to scan
        length: Window length

    Returns:
        List of windows, each a list of (column, row) pairs
    """
    dc, dr = DIRECTION_VECTORS[direction]
    windows = []
    for col in range(cols):
        for row in range(rows):
            end_col = col + (length - 1) * dc
            end_row = row + (length - 1) * dr
            if not is_valid_position(end_col, end_row, cols, rows):
                continue
            windows.append([(col + i * dc, row + i * dr) for i in range(length)])
    return windows


@lru_cache(maxsize=None)
def window_indices(cols: int, rows: int,
                   length: int = CONNECT_N) -> Dict[Direction, Tuple[np.ndarray, np.ndarray]]:
    """
    Precompute numpy fancy-index arrays for every window of a board shape.

    For each direction the result holds a (column_index, row_index) pair of
    arrays of shape (n_windows, length), so `grid[cidx, ridx]` yields all
    windows of that direction at once.
    """
    result = {}
    for direction in Direction:
        windows = window_cells(cols, rows, direction, length)
        if windows:
            cells = np.array(windows, dtype=np.intp)
            cidx, ridx = cells[:, :, 0], cells[:, :, 1]
        else:
            cidx = ridx = np.empty((0, length), dtype=np.intp)
        cidx.setflags(write=False)
        ridx.setflags(write=False)
        result[direction] = (cidx, ridx)
    return result


def parse_moves(text: str) -> List[int]:
    """
    Parse a comma separated list of column indices ("3,3,4").

    Raises:
        ValueError: if an entry is not an integer
    """
    text = text.strip()
    if not text:
        return []
    return [int(part) for part in text.split(',')]
