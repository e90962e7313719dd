"""
connect4bot.ai - Position evaluation, minimax search and bot tiers

Don't import anything here to avoid circular imports with connect4bot.game.
"""

__all__ = ['evaluation', 'bitboard', 'minimax', 'bots']
