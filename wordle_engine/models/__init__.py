"""
Data Models Package

Contains all data models, hint computation and errors used throughout the engine.
"""

from .errors import (
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
)
from .game import GameState, Pending, Won, Lost, GameSnapshot
from .hint import LetterHint, GuessHint, compute_letter_hints

__all__ = [
    'WordleError', 'GameCreationError', 'EmptyTargetError', 'InvalidAttemptLimitError',
    'GuessError', 'LengthMismatchError', 'AlreadyGuessedError', 'GameNotFoundError', 'NoWordsError',
    'InvalidWordListError',
    'GameState', 'Pending', 'Won', 'Lost', 'GameSnapshot',
    'LetterHint', 'GuessHint', 'compute_letter_hints'
]
