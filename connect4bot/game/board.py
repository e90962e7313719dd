"""
board.py - Board representation and gravity-drop mechanics for connect4bot

This module implements the Board class: a fixed-size, column-major grid of
cells with column-drop semantics, free-slot queries and cloning. Row 0 is
the bottom row, so within a column occupied cells always form a contiguous
run starting at row 0.
"""

from typing import Iterable, List

import numpy as np

from connect4bot.debug import debug
from connect4bot.exceptions import ColumnFullError, InvalidColumnError, InvalidRowError
from connect4bot.utils import ROWS, COLS, CONNECT_N, Side


def _as_index(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class Board:
    """
    Represents a connect-four board.

    Cells are stored in a numpy int8 array of shape (cols, rows) holding
    Side values; `heights[c]` is the number of marks in column c, which is
    also the row the next drop in that column lands on.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """
        Initialize an empty board.

        Args:
            rows: Board height
            cols: Board width

        Raises:
            ValueError: if the board cannot hold a line of CONNECT_N cells
        """
        if rows < 1 or cols < 1 or max(rows, cols) < CONNECT_N:
            raise ValueError(f"Board {cols}x{rows} cannot hold a line of {CONNECT_N}.")
        self.rows = rows
        self.cols = cols
        self.grid = np.zeros((cols, rows), dtype=np.int8)
        self.heights = np.zeros(cols, dtype=np.intp)

    @classmethod
    def from_moves(cls, moves: Iterable[int], rows: int = ROWS, cols: int = COLS) -> 'Board':
        """
        Build a board by replaying alternating drops, FIRST moving first.

        Raises:
            InvalidColumnError, ColumnFullError: on an illegal move in the list
        """
        board = cls(rows, cols)
        side = Side.FIRST
        for column in moves:
            board.drop(column, side)
            side = side.other()
        return board

    def _check_column(self, column) -> int:
        if not _as_index(column) or not 0 <= column < self.cols:
            raise InvalidColumnError(column, self.cols)
        return int(column)

    def _check_row(self, row) -> int:
        if not _as_index(row) or not 0 <= row < self.rows:
            raise InvalidRowError(row, self.rows)
        return int(row)

    def drop(self, column: int, side: Side) -> int:
        """
        Drop a mark into a column.

        Args:
            column: The column to play (0-indexed)
            side: The mark to place

        Returns:
            The row the mark landed on

        Raises:
            InvalidColumnError: if the column is out of range
            ColumnFullError: if the column has no empty cell
            ValueError: if side is Side.EMPTY
        """
        column = self._check_column(column)
        if not isinstance(side, Side) or not side.is_mark:
            raise ValueError("Cannot set the value of a cell as empty.")

        row = int(self.heights[column])
        if row >= self.rows:
            raise ColumnFullError(column)

        self.grid[column, row] = side.value
        self.heights[column] = row + 1
        debug.trace(f"Placed {side.name} at ({column}, {row})", "board")
        return row

    def free_columns(self) -> List[int]:
        """Ascending indices of the columns that still have an empty cell."""
        return [int(c) for c in np.flatnonzero(self.heights < self.rows)]

    def is_column_free(self, column: int) -> bool:
        """
        Check whether a column can take another mark.

        Raises:
            InvalidColumnError: if the column is out of range
        """
        column = self._check_column(column)
        return int(self.heights[column]) < self.rows

    def lowest_empty_row(self, column: int) -> int:
        """
        The row the next drop in `column` would occupy.

        Raises:
            InvalidColumnError: if the column is out of range
            ColumnFullError: if the column has no empty cell
        """
        column = self._check_column(column)
        row = int(self.heights[column])
        if row >= self.rows:
            raise ColumnFullError(column)
        return row

    def cell_at(self, column: int, row: int) -> Side:
        """
        Get the state of one cell.

        Raises:
            InvalidColumnError: if the column is out of range
            InvalidRowError: if the row is out of range
        """
        column = self._check_column(column)
        row = self._check_row(row)
        return Side(int(self.grid[column, row]))

    def clone(self) -> 'Board':
        """Create an independent copy sharing no cell storage with this board."""
        new_board = Board.__new__(Board)
        new_board.rows = self.rows
        new_board.cols = self.cols
        new_board.grid = self.grid.copy()
        new_board.heights = self.heights.copy()
        return new_board

    def swapped(self) -> 'Board':
        """A clone with every FIRST mark replaced by SECOND and vice versa."""
        new_board = self.clone()
        first = self.grid == Side.FIRST.value
        second = self.grid == Side.SECOND.value
        new_board.grid[first] = Side.SECOND.value
        new_board.grid[second] = Side.FIRST.value
        return new_board

    def is_full(self) -> bool:
        return bool(np.all(self.heights >= self.rows))

    @property
    def move_count(self) -> int:
        return int(self.heights.sum())

    @property
    def center_column(self) -> int:
        return self.cols // 2

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the cell values as a (cols, rows) numpy array.

        Returns:
            2D numpy array of Side values, row 0 at the bottom
        """
        return self.grid.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.rows, self.cols) == (other.rows, other.cols) and np.array_equal(self.grid, other.grid)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Board(cols={self.cols}, rows={self.rows}, moves={self.move_count})"
