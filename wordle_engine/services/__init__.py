"""
Services Package

Contains the game rules, the game registry and the word pickers.
"""

from .game_service import Game, GameService
from .word_picker import WordPicker, ListWordPicker, RandomWordPicker, read_words

__all__ = [
    'Game', 'GameService',
    'WordPicker', 'ListWordPicker', 'RandomWordPicker', 'read_words'
]
