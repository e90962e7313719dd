"""Board builders shared by the connect4bot tests."""

from connect4bot.game.board import Board
from connect4bot.utils import Side

F = Side.FIRST
S = Side.SECOND

# Alternating-turn column sequence that fills a 7x6 board without any line of
# four: cell (c, r) ends up FIRST when (c // 2 + r) is even.
DRAW_MOVES = [0, 2, 2, 0] * 3 + [1, 3, 3, 1] * 3 + [4, 6, 6, 4] * 3 + [5] * 6


def place(board: Board, column: int, *sides: Side) -> Board:
    """Drop the given marks into one column, bottom-up."""
    for side in sides:
        board.drop(column, side)
    return board


def draw_board() -> Board:
    """A full board with no winner, filled directly cell by cell."""
    board = Board()
    for column in range(board.cols):
        for row in range(board.rows):
            board.drop(column, F if (column // 2 + row) % 2 == 0 else S)
    return board
