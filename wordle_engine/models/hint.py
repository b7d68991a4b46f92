"""
Guess Hints

Per-letter feedback computed from a guessed word and the word to guess.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Tuple


class LetterHint(Enum):
    """Hint for one letter of a guessed word."""
    CORRECT = "CORRECT"
    PLACEMENT_INCORRECT = "PLACEMENT_INCORRECT"
    INCORRECT = "INCORRECT"


def _count_letters(letters: Iterable[str]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for letter in letters:
        counts[letter] = counts.get(letter, 0) + 1
    return counts


def compute_letter_hints(guessed: str, word_to_guess: str) -> List[LetterHint]:
    """
    Implements the duplicate-aware Wordle letter evaluation.

    Exact matches are marked first. Remaining guessed letters are then
    credited left to right, each letter at most as many times as it occurs
    in the non-matched positions of the word to guess.

    Both words must be non-empty, of equal length and in the same case.

    Example:
        Guessing "AAAAB" against "AACBB" gives
        CORRECT, CORRECT, INCORRECT, INCORRECT, CORRECT.
    """
    result = [LetterHint.INCORRECT] * len(guessed)

    # First pass: exact position matches
    for i, (guessed_letter, target_letter) in enumerate(zip(guessed, word_to_guess)):
        if guessed_letter == target_letter:
            result[i] = LetterHint.CORRECT

    remaining = _count_letters(
        target_letter
        for target_letter, hint in zip(word_to_guess, result)
        if hint is not LetterHint.CORRECT
    )

    # Second pass: misplaced letters, limited by the remaining occurrences
    consumed: Dict[str, int] = {}
    for i, guessed_letter in enumerate(guessed):
        if result[i] is LetterHint.CORRECT:
            continue
        consumed[guessed_letter] = consumed.get(guessed_letter, 0) + 1
        if consumed[guessed_letter] <= remaining.get(guessed_letter, 0):
            result[i] = LetterHint.PLACEMENT_INCORRECT

    return result


@dataclass(frozen=True)
class GuessHint:
    """
    Read-only view pairing a guessed word with the word to guess.

    Hints are recomputed on every call; nothing is cached.

    Raises:
        ValueError: If either word is empty, the lengths differ or the
            guessed word is not uppercase. The game never builds such a view.
    """
    guessed: str
    word_to_guess: str

    def __post_init__(self):
        if not self.guessed:
            raise ValueError("Guessed word must not be empty.")
        if not self.word_to_guess:
            raise ValueError("Word to guess must not be empty.")
        if len(self.guessed) != len(self.word_to_guess):
            raise ValueError("Guess and target words must have the same length.")
        if self.guessed != self.guessed.upper():
            raise ValueError("Guessed word must be uppercase.")

    def letter_hints(self) -> List[LetterHint]:
        """Get the letter hints for the guessed word."""
        return compute_letter_hints(self.guessed, self.word_to_guess)

    def guessed_letters_and_hints(self) -> List[Tuple[str, LetterHint]]:
        """Associate each guessed letter with its hint."""
        return list(zip(self.guessed, self.letter_hints()))

    @property
    def is_correct(self) -> bool:
        return self.guessed == self.word_to_guess
