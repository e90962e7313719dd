"""
connect4bot - Connect-four rules engine and bot opponent

This package provides the board model with gravity-drop semantics, win and
draw detection, a heuristic evaluator, minimax search with alpha-beta pruning
across five bot tiers, and the Match state machine a presentation layer
drives through `play`.
"""

# Version number
__version__ = '0.1.0'

from connect4bot.utils import Side
from connect4bot.exceptions import (Connect4Error, InvalidMoveError, InvalidColumnError,
                                    InvalidRowError, ColumnFullError, GameInProgressError,
                                    GameOverError)
from connect4bot.game.board import Board
from connect4bot.game.match import Match, MatchState, Player, PlayedMove, MoveOutcome
from connect4bot.ai.bots import BotTier

__all__ = ['Side', 'Board', 'Match', 'MatchState', 'Player', 'PlayedMove', 'MoveOutcome',
           'BotTier', 'Connect4Error', 'InvalidMoveError', 'InvalidColumnError',
           'InvalidRowError', 'ColumnFullError', 'GameInProgressError', 'GameOverError']
