#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--rows N] [--cols N] [--mines N] [--seed N]
"""
from src.minesweeper.cli import main


if __name__ == "__main__":
    main()
