#!/usr/bin/env python3
"""
Play the stock trading game.

Usage:
    python run_game.py                              # Dashboard, collapse mode
    python run_game.py --mode endless               # Game never ends, wider price walk
    python run_game.py --cash 5000 --seed 7         # Custom cash, reproducible prices
    python run_game.py --headless --ticks 300       # No UI, print a summary

Modes:
    1. collapse (default): the game ends when the price reaches 0, held shares are lost
    2. endless: prices keep walking (even below 0), the game never ends
"""

from trader.ui.cli import main

if __name__ == "__main__":
    main()
