"""
bitboard.py - Integer bitboard positions used inside the search

Each side's marks are packed into one Python int with one bit per cell.
Column c occupies bits c * (rows + 1) up to c * (rows + 1) + rows - 1, and
the spare bit on top of every column stays clear. A window of four cells is
then four bits spaced by a fixed shift per direction, so every window of a
direction is tested at once with a few shifts and ANDs.

Nothing here replaces the Board: positions are built from a Board at the
start of a search and mutated in place with play/undo while the tree is
explored. Winners and scores agree with game.rules.winner and
evaluation.score_position on every position.
"""

from functools import lru_cache
from typing import List, Tuple

from connect4bot.game.board import Board
from connect4bot.utils import (CENTER_POINTS, WIN_POINTS, OPP_WIN_POINTS, LINES3_POINTS,
                               OPP_LINES3_POINTS, LINES2_POINTS, OPP_LINES2_POINTS,
                               Direction, Side, window_cells)

_FIRST = Side.FIRST.value
_SECOND = Side.SECOND.value


class Layout:
    """
    Bit masks for one board shape.

    `lines` holds one (shift, starts) pair per direction, in Direction order:
    `starts` has a bit set on the lowest cell of every window of that
    direction and the other three cells sit at shift, 2*shift and 3*shift.
    """

    def __init__(self, cols: int, rows: int):
        self.cols = cols
        self.rows = rows
        self.stride = rows + 1
        self.size = cols * rows

        self.cells = 0
        for column in range(cols):
            self.cells |= ((1 << rows) - 1) << (column * self.stride)
        self.center = ((1 << rows) - 1) << ((cols // 2) * self.stride)

        self.lines: List[Tuple[int, int]] = []
        for direction in Direction:
            windows = window_cells(cols, rows, direction)
            if not windows:
                continue
            starts = 0
            shift = 0
            for window in windows:
                bits = sorted(self.bit(column, row) for column, row in window)
                shift = bits[1] - bits[0]
                starts |= 1 << bits[0]
            self.lines.append((shift, starts))

    def bit(self, column: int, row: int) -> int:
        return column * self.stride + row


@lru_cache(maxsize=None)
def layout(cols: int, rows: int) -> Layout:
    return Layout(cols, rows)


def _window_counts(bits: int, clear: int, shift: int, starts: int) -> Tuple[int, int, int]:
    """
    Count windows by how many of their cells are set in `bits`.

    Returns:
        (windows with 4 marks, windows with exactly 3, windows with exactly 2),
        the last two restricted to windows lying entirely inside `clear`
    """
    b1 = bits >> shift
    b2 = bits >> 2 * shift
    b3 = bits >> 3 * shift
    inside = clear & (clear >> shift) & (clear >> 2 * shift) & (clear >> 3 * shift) & starts

    # per-window sum of four bit planes, as binary digits
    pair_lo = bits & b1
    odd_lo = bits ^ b1
    pair_hi = b2 & b3
    odd_hi = b2 ^ b3
    ones = odd_lo ^ odd_hi
    twos = pair_lo ^ pair_hi ^ (odd_lo & odd_hi)

    fours = pair_lo & pair_hi & starts
    threes = twos & ones & inside
    pairs = twos & ~ones & inside
    return fours.bit_count(), threes.bit_count(), pairs.bit_count()


class Position:
    """
    A mutable bitboard copy of a Board.

    `marks` is indexed by Side value; index 0 is unused.
    """

    __slots__ = ("layout", "marks", "heights", "moves")

    def __init__(self, cols: int, rows: int):
        self.layout = layout(cols, rows)
        self.marks = [0, 0, 0]
        self.heights = [0] * cols
        self.moves = 0

    @classmethod
    def from_board(cls, board: Board) -> 'Position':
        position = cls(board.cols, board.rows)
        stride = position.layout.stride
        for column in range(board.cols):
            height = int(board.heights[column])
            for row in range(height):
                position.marks[int(board.grid[column, row])] |= 1 << (column * stride + row)
            position.heights[column] = height
        position.moves = sum(position.heights)
        return position

    def key(self) -> Tuple[int, int]:
        return self.marks[_FIRST], self.marks[_SECOND]

    def free_columns(self) -> List[int]:
        rows = self.layout.rows
        return [column for column, height in enumerate(self.heights) if height < rows]

    def is_full(self) -> bool:
        return self.moves >= self.layout.size

    def play(self, column: int, side: int) -> None:
        """Drop a mark of Side value `side`; the column must have room."""
        self.marks[side] |= 1 << (column * self.layout.stride + self.heights[column])
        self.heights[column] += 1
        self.moves += 1

    def undo(self, column: int, side: int) -> None:
        """Take back the top mark of `column`, which must belong to `side`."""
        self.heights[column] -= 1
        self.moves -= 1
        self.marks[side] ^= 1 << (column * self.layout.stride + self.heights[column])

    def winner(self) -> int:
        """
        Side value owning a line of four, or 0.

        Directions are scanned in Direction order and, within one direction,
        the window on the lowest cell wins, the same order rules.winner uses.
        """
        first, second = self.marks[_FIRST], self.marks[_SECOND]
        for shift, starts in self.layout.lines:
            a = first & (first >> shift)
            a &= (a >> 2 * shift) & starts
            b = second & (second >> shift)
            b &= (b >> 2 * shift) & starts
            if a and b:
                return _FIRST if (a & -a) < (b & -b) else _SECOND
            if a:
                return _FIRST
            if b:
                return _SECOND
        return 0

    def score(self, side: int) -> int:
        """Center bonus plus window table for Side value `side`."""
        lay = self.layout
        own = self.marks[side]
        opp = (self.marks[_FIRST] | self.marks[_SECOND]) ^ own
        not_own = lay.cells ^ own
        not_opp = lay.cells ^ opp

        total = (own & lay.center).bit_count() * CENTER_POINTS
        for shift, starts in lay.lines:
            fours, threes, pairs = _window_counts(own, not_opp, shift, starts)
            total += fours * WIN_POINTS + threes * LINES3_POINTS + pairs * LINES2_POINTS
            fours, threes, pairs = _window_counts(opp, not_own, shift, starts)
            total += fours * OPP_WIN_POINTS + threes * OPP_LINES3_POINTS + pairs * OPP_LINES2_POINTS
        return total
