"""
connect4bot.game - Core game mechanics

This package contains the board representation, win/draw detection and the
match state machine. Match lives in connect4bot.game.match and is not
imported here, since it depends on the ai package which depends on us.
"""

from connect4bot.game.board import Board
from connect4bot.game.rules import winner, winning_line, is_over, is_draw

__all__ = ['Board', 'winner', 'winning_line', 'is_over', 'is_draw']
