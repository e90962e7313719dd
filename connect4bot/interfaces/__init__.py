"""
connect4bot.interfaces - Command-line tools built on the public query surface
"""

# Don't import anything here to avoid circular imports
__all__ = []
