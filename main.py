"""
Wordle - Main Entry Point

Plays Wordle in the terminal. See `python main.py help`.
"""

import sys

from wordle_engine.cli import main

if __name__ == '__main__':
    sys.exit(main())
