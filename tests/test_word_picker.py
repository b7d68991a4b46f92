"""
Unit tests for the word pickers.
"""

import io
import itertools
import random

import pytest

from wordle_engine.models import InvalidWordListError, NoWordsError
from wordle_engine.services import ListWordPicker, RandomWordPicker, read_words
from wordle_engine.services.word_picker import _IterablePicker


class TestListWordPicker:
    """Tests for ListWordPicker."""

    def test_empty_list(self):
        with pytest.raises(NoWordsError):
            ListWordPicker([])

    def test_picks_in_order_and_wraps(self):
        picker = ListWordPicker(["one", "two", "three"])
        assert [picker.pick_word() for _ in range(7)] == [
            "one", "two", "three", "one", "two", "three", "one",
        ]

    def test_iteration_never_ends(self):
        picker = ListWordPicker(["one"])
        assert list(itertools.islice(picker, 4)) == ["one"] * 4


class TestRandomWordPicker:
    """Tests for RandomWordPicker."""

    def test_empty_list(self):
        with pytest.raises(NoWordsError):
            RandomWordPicker([])

    def test_picks_from_the_list(self):
        words = ["crane", "slate", "adieu"]
        picker = RandomWordPicker(words, rng=random.Random(7))
        assert all(picker.pick_word() in words for _ in range(50))

    def test_seeded_rng_is_reproducible(self):
        words = ["crane", "slate", "adieu", "pious"]
        first = RandomWordPicker(words, rng=random.Random(42))
        second = RandomWordPicker(words, rng=random.Random(42))
        assert list(itertools.islice(first, 10)) == list(itertools.islice(second, 10))

    def test_from_stream_discards_empty_lines(self):
        picker = RandomWordPicker.from_stream(io.StringIO("crane\n\nslate\n   \n"))
        assert picker.words == ["CRANE", "SLATE"]

    def test_from_stream_without_words(self):
        with pytest.raises(NoWordsError):
            RandomWordPicker.from_stream(io.StringIO("\n\n"))

    def test_from_stream_rejects_entries_with_spaces(self):
        with pytest.raises(InvalidWordListError) as excinfo:
            RandomWordPicker.from_stream(io.StringIO("crane\nice cream\n"))
        assert "ice cream" in str(excinfo.value)
        assert isinstance(excinfo.value, ValueError)

    def test_from_path(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("crane\r\nslate\r\n", encoding="utf-8")
        assert RandomWordPicker.from_path(path).words == ["CRANE", "SLATE"]

    def test_from_missing_path(self, tmp_path):
        with pytest.raises(OSError):
            RandomWordPicker.from_path(tmp_path / "missing.txt")


def test_read_words_strips_lines():
    assert read_words([" crane \n", "\n", "slate"]) == ["crane", "slate"]


def test_picker_base_requires_pick_word():
    class NoPick(_IterablePicker):
        pass

    with pytest.raises(TypeError):
        NoPick()
