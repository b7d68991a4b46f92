"""
Wordle Game Engine Package

This package contains the rules of a Wordle game, following a layered layout:
- models: game states, letter hints and errors
- services: the game itself, the game registry and word pickers
- config: runtime configuration and game constants
- utils: structured game logging
- cli: the terminal front end
"""

__version__ = "0.1.0"

from .config import DEFAULT_ATTEMPT_LIMIT
from .models import (
    WordleError,
    GameCreationError,
    EmptyTargetError,
    InvalidAttemptLimitError,
    GuessError,
    LengthMismatchError,
    AlreadyGuessedError,
    GameNotFoundError,
    InvalidWordListError,
    NoWordsError,
    GameState,
    Pending,
    Won,
    Lost,
    GameSnapshot,
    LetterHint,
    GuessHint,
    compute_letter_hints,
)
from .services import Game, GameService, ListWordPicker, RandomWordPicker, WordPicker

__all__ = [
    '__version__', 'DEFAULT_ATTEMPT_LIMIT',
    'WordleError', 'GameCreationError', 'EmptyTargetError', 'InvalidAttemptLimitError',
    'GuessError', 'LengthMismatchError', 'AlreadyGuessedError', 'GameNotFoundError', 'NoWordsError',
    'InvalidWordListError',
    'GameState', 'Pending', 'Won', 'Lost', 'GameSnapshot',
    'LetterHint', 'GuessHint', 'compute_letter_hints',
    'Game', 'GameService', 'ListWordPicker', 'RandomWordPicker', 'WordPicker'
]
