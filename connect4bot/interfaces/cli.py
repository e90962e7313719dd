"""
cli.py - Command-line interface for exercising the rules engine and the bots

Subcommands:
    analyze   replay a list of moves and show the move a bot tier would pick
    arena     play bot tiers against each other and print a tally

No board is rendered here; output is limited to columns, scores and results.
"""

import argparse
import random
import sys
from collections import Counter
from typing import List, Optional

from connect4bot.ai.bots import BotTier, TIER_DEPTHS, choose_bot_move
from connect4bot.ai.evaluation import score_position
from connect4bot.ai.minimax import MinimaxPlayer
from connect4bot.debug import debug, DebugLevel, COMPONENTS
from connect4bot.game.board import Board
from connect4bot.game.rules import is_over, winner, winning_line
from connect4bot.utils import ROWS, COLS, Side, parse_moves


def side_to_move(board: Board) -> Side:
    """FIRST moves on even move counts, SECOND on odd ones."""
    return Side.FIRST if board.move_count % 2 == 0 else Side.SECOND


def play_bot_game(first: BotTier, second: BotTier, rng: random.Random,
                  rows: int = ROWS, cols: int = COLS) -> Optional[Side]:
    """
    Play one bot-vs-bot game, `first` playing Side.FIRST.

    Returns:
        The winning Side, or None on a draw
    """
    board = Board(rows, cols)
    tiers = {Side.FIRST: first, Side.SECOND: second}
    side = Side.FIRST
    while not is_over(board):
        board.drop(choose_bot_move(board, tiers[side], side, rng), side)
        side = side.other()
    return winner(board)


class Connect4BotCLI:
    """Simple command-line interface for the connect4bot engine."""

    def __init__(self, out=None):
        self.args = None
        self.out = out or sys.stdout

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='connect4bot command-line tools')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging verbosity')
        parser.add_argument('--log-file', default=None, help='Also log to this file')
        parser.add_argument('--components', default=None,
                            help=f"Comma separated components to log ({', '.join(COMPONENTS)})")

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        tiers = [tier.value for tier in BotTier]

        analyze_parser = subparsers.add_parser('analyze', help='Pick a move for a position')
        analyze_parser.add_argument('--moves', default='',
                                    help='Comma separated columns played so far, FIRST starting')
        analyze_parser.add_argument('--tier', choices=tiers, default=BotTier.NORMAL.value,
                                    help='Bot tier picking the move')
        analyze_parser.add_argument('--seed', type=int, default=None, help='Seed for the random tier')

        arena_parser = subparsers.add_parser('arena', help='Play bot tiers against each other')
        arena_parser.add_argument('--first', choices=tiers, default=BotTier.EASY.value,
                                  help='Tier playing the first side')
        arena_parser.add_argument('--second', choices=tiers, default=BotTier.NORMAL.value,
                                  help='Tier playing the second side')
        arena_parser.add_argument('--games', type=int, default=10, help='Number of games')
        arena_parser.add_argument('--seed', type=int, default=None, help='Seed for random tiers')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        parser = self.build_parser()
        self.args = parser.parse_args(argv)

        components = None
        if self.args.components:
            components = [c.strip() for c in self.args.components.split(',') if c.strip()]
            unknown = sorted(set(components) - set(COMPONENTS))
            if unknown:
                parser.error(f"unknown components: {', '.join(unknown)}")

        debug.set_from_string(self.args.debug_level)
        debug.configure(log_file=self.args.log_file, components=components)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'analyze':
            return self.analyze()
        elif self.args.command == 'arena':
            return self.arena()

        print("Please specify a command. Use --help for options.", file=sys.stderr)
        return 1

    def _print(self, message: str) -> None:
        print(message, file=self.out)

    def analyze(self) -> int:
        """Replay the given moves and report the chosen column."""
        try:
            board = Board.from_moves(parse_moves(self.args.moves))
        except ValueError as e:
            print(f"Invalid move list: {e}", file=sys.stderr)
            return 2

        if is_over(board):
            w = winner(board)
            if w is None:
                self._print("Game over: draw")
            else:
                self._print(f"Game over: {w.name} wins with {winning_line(board)}")
            return 0

        side = side_to_move(board)
        tier = BotTier.from_string(self.args.tier)
        self._print(f"Side to move: {side.name}")
        self._print(f"Position score: {score_position(board, side)}")

        debug.start_timer("analyze")
        if tier in TIER_DEPTHS:
            player = MinimaxPlayer(TIER_DEPTHS[tier])
            column = player.get_move(board, side)
            self._print(f"{tier.name} (depth {player.depth}) plays column {column}, "
                        f"search score {player.last_score}, {player.nodes_evaluated} nodes")
        else:
            column = choose_bot_move(board, tier, side, random.Random(self.args.seed))
            self._print(f"{tier.name} plays column {column}")
        debug.end_timer("analyze", "cli")
        return 0

    def arena(self) -> int:
        """Play the requested number of bot-vs-bot games and print the tally."""
        if self.args.games < 1:
            print("--games must be at least 1", file=sys.stderr)
            return 2

        first = BotTier.from_string(self.args.first)
        second = BotTier.from_string(self.args.second)
        rng = random.Random(self.args.seed)

        tally = Counter()
        for game in range(self.args.games):
            result = play_bot_game(first, second, rng)
            tally[result] += 1
            debug.info(f"game {game + 1}: {result.name if result else 'draw'}", "cli")

        self._print(f"{first.name} (FIRST) wins: {tally[Side.FIRST]}")
        self._print(f"{second.name} (SECOND) wins: {tally[Side.SECOND]}")
        self._print(f"Draws: {tally[None]}")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    return Connect4BotCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
