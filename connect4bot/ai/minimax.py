"""
minimax.py - Minimax algorithm with alpha-beta pruning for connect4bot

This module provides a MinimaxPlayer class that picks a column by searching
the game tree up to a configurable depth. The search runs on a bitboard copy
of the board (see bitboard.Position), so the caller's board is never mutated.

Columns are explored in ascending order, which is also the tie-break: the
first column reaching the best value is the one returned.
"""

import math

from connect4bot.ai.bitboard import Position
from connect4bot.debug import debug, DebugLevel
from connect4bot.game.board import Board
from connect4bot.utils import WIN_POINTS, OPP_WIN_POINTS, Side


class MinimaxPlayer:
    """
    A player that uses the minimax algorithm with alpha-beta pruning.

    Terminal positions score WIN_POINTS / OPP_WIN_POINTS / 0 from the point of
    view of the searching side; positions at the depth limit are scored with
    the heuristic evaluator.
    """

    def __init__(self, depth: int = 3):
        """
        Initialize the minimax player.

        Args:
            depth: Maximum search depth (higher = stronger but slower)
        """
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}.")
        self.depth = depth
        self.nodes_evaluated = 0  # For performance tracking
        self.last_score = None
        self._side = Side.FIRST.value
        self._opponent = Side.SECOND.value
        self._scores = {}  # Leaf scores of the current search, keyed by position

    def _start(self, side: Side, opponent: Side) -> None:
        if not side.is_mark:
            raise ValueError("Cannot search for an empty side.")
        self._side = side.value
        self._opponent = opponent.value
        self._scores = {}

    def get_move(self, board: Board, side: Side, opponent: Side = None) -> int:
        """
        Get the best move for `side`.

        Args:
            board: The current game board (left untouched)
            side: The side to move
            opponent: The other side, defaults to side.other()

        Returns:
            The column index of the best move

        Raises:
            ValueError: if the board has no free column
        """
        if opponent is None:
            opponent = side.other()

        valid_moves = board.free_columns()
        if not valid_moves:
            raise ValueError("No valid moves.")

        self._start(side, opponent)
        self.nodes_evaluated = 0
        position = Position.from_board(board)
        debug.start_timer("search")

        best_score = -math.inf
        best_column = valid_moves[0]
        alpha = -math.inf
        beta = math.inf

        for column in valid_moves:
            position.play(column, self._side)
            score = self._minimax(position, self.depth - 1, alpha, beta, False)
            position.undo(column, self._side)

            if score > best_score:
                best_score = score
                best_column = column
            alpha = max(alpha, score)

        self.last_score = best_score
        self._scores = {}

        elapsed = debug.end_timer("search", "search")
        if debug.is_enabled_for(DebugLevel.DEBUG, "search"):
            debug.debug(f"depth={self.depth} side={side.name} column={best_column} "
                        f"score={best_score} nodes={self.nodes_evaluated} "
                        f"time={elapsed * 1000:.1f}ms", "search")
        return best_column

    def evaluate(self, board: Board, depth: int, alpha: float, beta: float,
                 is_maximizing: bool, side: Side, opponent: Side = None) -> float:
        """
        Value of `board` for `side`, searching `depth` plies.

        Args:
            board: Board to evaluate
            depth: Remaining search depth
            alpha: Best score the maximizer can guarantee so far
            beta: Best score the minimizer can guarantee so far
            is_maximizing: True if `side` is to move on this board
            side: The side the search is run for
            opponent: The other side, defaults to side.other()

        Returns:
            The minimax value of the position
        """
        if opponent is None:
            opponent = side.other()
        self._start(side, opponent)
        try:
            return self._minimax(Position.from_board(board), depth, alpha, beta, is_maximizing)
        finally:
            self._scores = {}

    def _minimax(self, position: Position, depth: int, alpha: float, beta: float,
                 is_maximizing: bool) -> float:
        self.nodes_evaluated += 1

        # Terminal conditions take precedence over the depth limit
        w = position.winner()
        if w:
            if w == self._side:
                return WIN_POINTS
            if w == self._opponent:
                return OPP_WIN_POINTS
            return 0
        if position.is_full():
            return 0

        if depth <= 0:
            key = position.key()
            score = self._scores.get(key)
            if score is None:
                score = self._scores[key] = position.score(self._side)
            return score

        if is_maximizing:
            max_score = -math.inf
            for column in position.free_columns():
                position.play(column, self._side)
                score = self._minimax(position, depth - 1, alpha, beta, False)
                position.undo(column, self._side)

                max_score = max(max_score, score)
                alpha = max(alpha, score)

                # Beta cutoff
                if beta <= alpha:
                    break
            return max_score

        else:  # Minimizing
            min_score = math.inf
            for column in position.free_columns():
                position.play(column, self._opponent)
                score = self._minimax(position, depth - 1, alpha, beta, True)
                position.undo(column, self._opponent)

                min_score = min(min_score, score)
                beta = min(beta, score)

                # Alpha cutoff
                if beta <= alpha:
                    break
            return min_score


def choose_move(board: Board, depth: int, side: Side, opponent: Side = None) -> int:
    """Search `depth` plies and return the best column for `side`."""
    return MinimaxPlayer(depth).get_move(board, side, opponent)
