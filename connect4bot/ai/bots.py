"""
bots.py - Bot difficulty tiers and their move-selection policies

EASY, NORMAL and CHEAT search with minimax at increasing depth; STUPID always
plays the leftmost free column and RANDOM a uniformly random free column.
"""

import random
from enum import Enum
from typing import Dict, Optional

from connect4bot.ai.minimax import MinimaxPlayer
from connect4bot.debug import debug
from connect4bot.game.board import Board
from connect4bot.utils import Side


class BotTier(Enum):
    """Enumerated bot difficulty."""
    EASY = "easy"
    NORMAL = "normal"
    STUPID = "stupid"
    RANDOM = "random"
    CHEAT = "cheat"

    @property
    def uses_search(self) -> bool:
        return self in TIER_DEPTHS

    @classmethod
    def from_string(cls, name: str) -> 'BotTier':
        """Look a tier up by value or name, case-insensitively."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown bot tier: {name!r}. "
                             f"Expected one of {', '.join(t.value for t in cls)}.") from None


# Search depth per tier
TIER_DEPTHS: Dict[BotTier, int] = {
    BotTier.EASY: 1,
    BotTier.NORMAL: 3,
    BotTier.CHEAT: 8,
}


def choose_bot_move(board: Board, tier: BotTier, side: Side,
                    rng: Optional[random.Random] = None) -> int:
    """
    Select a column for a bot of the given tier.

    Args:
        board: The live board; search works on its own copy
        tier: The bot's difficulty tier
        side: The mark the bot plays
        rng: Random source for the RANDOM tier (defaults to the random module)

    Returns:
        A column taken from board.free_columns()

    Raises:
        ValueError: if the board has no free column
    """
    free = board.free_columns()
    if not free:
        raise ValueError("No valid moves.")

    if tier in TIER_DEPTHS:
        column = MinimaxPlayer(TIER_DEPTHS[tier]).get_move(board, side, side.other())
    elif tier == BotTier.STUPID:
        column = free[0]
    elif tier == BotTier.RANDOM:
        column = (rng or random).choice(free)
    else:
        raise ValueError(f"Unsupported bot tier: {tier!r}")

    debug.debug(f"{tier.name} bot ({side.name}) plays column {column}", "bots")
    return column
