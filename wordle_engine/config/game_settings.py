"""
Game Configuration Constants Module

Game rules shared by the engine, the word pickers and the terminal front end.
"""

from typing import Final, Iterable, List

DEFAULT_ATTEMPT_LIMIT: Final[int] = 6
"""
Number of guesses allowed per game when no explicit limit is given.
Type: Final[int] - Immutable to prevent accidental modification
"""

MIN_ATTEMPT_LIMIT: Final[int] = 1


def normalize_word(word: str) -> str:
    """Return the canonical (uppercase) form used for every comparison."""
    return word.upper()


def validate_word_list(words: Iterable[str]) -> List[str]:
    """
    Validates a word list and returns its canonical form.

    This function performs validation to ensure:
    1. The list is not empty
    2. No entry is empty or contains whitespace
    3. Every word is normalized to uppercase

    Duplicates are kept; they only weigh the random draw.

    Returns:
        List[str]: Uppercase words in their original order

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    normalized = []
    for index, word in enumerate(words):
        if not word:
            raise ValueError(f"Word at index {index} is empty")
        if any(char.isspace() for char in word):
            raise ValueError(f"Word at index {index} '{word}' contains whitespace")
        normalized.append(normalize_word(word))

    if not normalized:
        raise ValueError("Word list cannot be empty")

    return normalized
