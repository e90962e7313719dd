"""
exceptions.py - Error types raised by the rules engine and the match state machine

Every error is raised synchronously to the caller and leaves the board or
match untouched. Move errors also subclass ValueError so code that already
catches ValueError around a drop keeps working.
"""

from typing import Optional


class Connect4Error(Exception):
    """Base class for connect4bot errors."""


class InvalidMoveError(Connect4Error, ValueError):
    """A move or cell lookup that the board cannot accept."""


class InvalidColumnError(InvalidMoveError):
    """Column index outside the board width."""

    def __init__(self, column, cols: int):
        self.column = column
        self.cols = cols
        super().__init__(f"Column {column} is invalid, expected 0 to {cols - 1}.")


class InvalidRowError(InvalidMoveError):
    """Row index outside the board height."""

    def __init__(self, row, rows: int):
        self.row = row
        self.rows = rows
        super().__init__(f"Row {row} is invalid, expected 0 to {rows - 1}.")


class ColumnFullError(InvalidMoveError):
    """The targeted column has no empty cell."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} has no free cell.")


class GameInProgressError(Connect4Error):
    """The winner was queried before the match ended."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Cannot get the winner while the game is in progress.")


class GameOverError(Connect4Error):
    """A move was attempted on a finished match."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "The game is over, no more moves can be played.")
