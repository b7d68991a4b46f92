"""
Word Pickers

Sources of target words. The engine never picks words itself; a picker is
handed to whoever creates games.
"""

import random
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Optional, Protocol, Union

from ..config import validate_word_list
from ..models.errors import InvalidWordListError, NoWordsError


class WordPicker(Protocol):
    """Anything that produces the next word to guess."""

    def pick_word(self) -> str:
        ...


class _IterablePicker(ABC):
    """Iterating a picker yields words forever."""

    @abstractmethod
    def pick_word(self) -> str:
        ...

    def __iter__(self) -> Iterator[str]:
        while True:
            yield self.pick_word()


def read_words(lines: Iterable[str]) -> List[str]:
    """Strip each line and drop the empty ones."""
    return [line.strip() for line in lines if line.strip()]


class ListWordPicker(_IterablePicker):
    """
    Picks words in order, going back to the first one after the last.

    Raises:
        NoWordsError: If no words are given
    """

    def __init__(self, words: Iterable[str]):
        self.words = list(words)
        if not self.words:
            raise NoWordsError()
        self.current_word_index = 0

    def pick_word(self) -> str:
        word = self.words[self.current_word_index]
        self.current_word_index = (self.current_word_index + 1) % len(self.words)
        return word


class RandomWordPicker(_IterablePicker):
    """
    Picks a word uniformly at random on every call.

    Raises:
        NoWordsError: If no words are given
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None):
        self.words = list(words)
        if not self.words:
            raise NoWordsError()
        self.rng = rng or random.Random()

    @classmethod
    def from_lines(cls, lines: Iterable[str], rng: Optional[random.Random] = None) -> "RandomWordPicker":
        """
        One word per line; empty lines are discarded and words are uppercased.

        Raises:
            NoWordsError: If no line holds a word
            InvalidWordListError: If a line holds more than one word
        """
        words = read_words(lines)
        if not words:
            raise NoWordsError("Provided input did not contain any word")
        try:
            words = validate_word_list(words)
        except ValueError as e:
            raise InvalidWordListError(str(e)) from e
        return cls(words, rng)

    @classmethod
    def from_stream(cls, stream: IO[str], rng: Optional[random.Random] = None) -> "RandomWordPicker":
        return cls.from_lines(stream, rng)

    @classmethod
    def from_path(cls, path: Union[str, Path], rng: Optional[random.Random] = None) -> "RandomWordPicker":
        """
        Load words from a text file.

        Raises:
            OSError: If the file cannot be read
            NoWordsError: If the file holds no words
        """
        with open(path, 'r', encoding='utf-8') as f:
            return cls.from_stream(f, rng)

    def pick_word(self) -> str:
        return self.rng.choice(self.words)
