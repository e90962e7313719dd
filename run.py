#!/usr/bin/env python3
"""
run.py - Main entry point for the connect4bot command-line tools
"""

import sys

from connect4bot.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
