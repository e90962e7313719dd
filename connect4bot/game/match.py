"""
match.py - Turn and session state machine for connect4bot

A Match owns a private Board and two Players and orchestrates human moves
and bot replies. Callers only ever see copies of the board.

`play` is synchronous: a human move and any bot move it triggers are
applied before the call returns, and the caller can wrap it in whatever
notification mechanism its platform needs.
"""

import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Hashable, List, Optional

from connect4bot.ai.bots import BotTier, choose_bot_move
from connect4bot.debug import debug
from connect4bot.exceptions import GameInProgressError, GameOverError
from connect4bot.game.board import Board
from connect4bot.game.rules import is_over, winner
from connect4bot.utils import Side


class MatchState(Enum):
    IN_PROGRESS = auto()
    OVER = auto()


@dataclass(frozen=True)
class Player:
    """A human reference or bot name paired with its mark."""
    identity: Hashable
    side: Side
    tier: Optional[BotTier] = None

    @property
    def is_bot(self) -> bool:
        return self.tier is not None


@dataclass(frozen=True)
class PlayedMove:
    side: Side
    column: int
    row: int


@dataclass
class MoveOutcome:
    """Moves applied by one `play` call, in order, and the resulting status."""
    moves: List[PlayedMove] = field(default_factory=list)
    over: bool = False
    winner: Optional[Side] = None


class Match:
    """
    A connect-four session between a human and a human or a bot.

    The first identity is always human-controlled. Against a bot the human
    moves first; between two humans the starting player is drawn at random.
    Whoever starts plays Side.FIRST.
    """

    def __init__(self, first: Hashable, second: Optional[Hashable] = None,
                 second_tier: Optional[BotTier] = None, rng=None, board: Optional[Board] = None):
        """
        Initialize a match.

        Args:
            first: Identity of the human player
            second: Identity of the opponent (defaults to the tier name for bots)
            second_tier: Bot tier of the opponent, None for a human
            rng: Random source for the first-turn draw, RANDOM bots and pass_turn
            board: Optional empty board giving non-default dimensions, copied
        """
        if second is None:
            if second_tier is None:
                raise ValueError("A human opponent needs an identity.")
            second = f"{second_tier.value} bot"

        self._rng = rng if rng is not None else random
        self._board = board.clone() if board is not None else Board()
        if self._board.move_count:
            raise ValueError("A match must start on an empty board.")

        self._current = self._rng.randrange(2) if second_tier is None else 0
        first_side = Side.FIRST if self._current == 0 else Side.SECOND
        self._players = (
            Player(first, first_side),
            Player(second, first_side.other(), second_tier),
        )
        self._state = MatchState.IN_PROGRESS
        self._winner: Optional[Side] = None
        self.history: List[PlayedMove] = []

        debug.info(f"New match: {self._players[0].identity} vs {self._players[1].identity}, "
                   f"{self.current_player.identity} starts", "match")

    @property
    def board(self) -> Board:
        """A snapshot of the board; changing it does not affect the match."""
        return self._board.clone()

    @property
    def players(self) -> tuple:
        return self._players

    @property
    def current_player(self) -> Player:
        return self._players[self._current]

    @property
    def opponent_player(self) -> Player:
        return self._players[(self._current + 1) % 2]

    @property
    def state(self) -> MatchState:
        return self._state

    def cell_at(self, column: int, row: int) -> Side:
        return self._board.cell_at(column, row)

    def is_over(self) -> bool:
        return self._state == MatchState.OVER

    def winner(self) -> Optional[Side]:
        """
        Get the winning side.

        Returns:
            The Side owning the winning line, or None on a draw

        Raises:
            GameInProgressError: if the match is not over
        """
        if not self.is_over():
            raise GameInProgressError()
        return self._winner

    def winning_player(self) -> Optional[Player]:
        """The Player owning the winning side, or None on a draw."""
        side = self.winner()
        if side is None:
            return None
        return next(p for p in self._players if p.side == side)

    def play(self, column: int) -> MoveOutcome:
        """
        Play a column for the current player, then any bot replies.

        Args:
            column: The column to play (0-indexed)

        Returns:
            The moves applied by this call and the resulting status

        Raises:
            GameOverError: if the match is already over
            InvalidColumnError: if the column is out of range
            ColumnFullError: if the column has no empty cell
        """
        if self.is_over():
            raise GameOverError()

        outcome = MoveOutcome()
        outcome.moves.append(self._apply(column))

        while not self.is_over() and self.current_player.is_bot:
            bot = self.current_player
            bot_column = choose_bot_move(self._board.clone(), bot.tier, bot.side, self._rng)
            outcome.moves.append(self._apply(bot_column))

        outcome.over = self.is_over()
        outcome.winner = self._winner
        return outcome

    def pass_turn(self) -> MoveOutcome:
        """Play a uniformly random free column for the current player."""
        if self.is_over():
            raise GameOverError()
        return self.play(self._rng.choice(self._board.free_columns()))

    def _apply(self, column: int) -> PlayedMove:
        player = self.current_player
        row = self._board.drop(column, player.side)
        move = PlayedMove(player.side, int(column), row)
        self.history.append(move)
        debug.debug(f"{player.identity} ({player.side.name}) played ({column}, {row})", "match")

        if is_over(self._board):
            self._state = MatchState.OVER
            self._winner = winner(self._board)
            if self._winner is None:
                debug.info("Match over: draw", "match")
            else:
                debug.info(f"Match over: {player.identity} ({self._winner.name}) wins", "match")
        else:
            self._current = (self._current + 1) % 2
        return move
