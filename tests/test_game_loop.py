"""
Tests for the interactive terminal game loop.

The loop is driven with in-memory streams; assertions look for the player
facing messages and ignore the escape codes around them.
"""

import io

import pytest

from wordle_engine.cli.game_loop import GameLoop, get_attempts_text
from wordle_engine.config import TestingConfig
from wordle_engine.models import Lost, Won
from wordle_engine.services import ListWordPicker


class SingleAttemptConfig(TestingConfig):
    ATTEMPT_LIMIT = 1


def make_loop(lines, words=("crane",), settings=TestingConfig, sleeps=None):
    output = io.StringIO()
    loop = GameLoop(
        ListWordPicker(words),
        io.StringIO("".join(line + "\n" for line in lines)),
        output,
        settings=settings,
        sleep=(sleeps.append if sleeps is not None else lambda seconds: None),
    )
    return loop, output


class TestGetAttemptsText:
    """Tests for get_attempts_text."""

    def test_singular(self):
        assert get_attempts_text(1) == "attempt"

    @pytest.mark.parametrize("n", [0, 2, 3, 10])
    def test_plural(self, n):
        assert get_attempts_text(n) == "attempts"


class TestPlayOneGame:
    """Tests for a single round."""

    def test_win(self):
        loop, output = make_loop(["slate", "crane"])
        assert loop.play_one_game() == Won(attempts=2)
        text = output.getvalue()
        assert "----- (5 characters)" in text
        assert "5 attempts remaining" in text
        assert "You win with 2 attempts :)" in text

    def test_win_first_try(self):
        loop, output = make_loop(["Crane"])
        assert loop.play_one_game() == Won(attempts=1)
        assert "You win with 1 attempt :)" in output.getvalue()

    def test_loss(self):
        loop, output = make_loop(["slate"], settings=SingleAttemptConfig)
        assert loop.play_one_game() == Lost()
        assert "You lost :(\nThe word to guess was CRANE." in output.getvalue()

    def test_invalid_guesses_are_asked_again(self):
        loop, output = make_loop(["", "cran", "slate", "SLATE", "crane"])
        assert loop.play_one_game() == Won(attempts=2)
        text = output.getvalue()
        assert "Please provide a guess word." in text
        assert "Please type a 5-letter word." in text
        assert "This word has already been played." in text

    def test_game_is_released_when_done(self):
        loop, _ = make_loop(["crane"])
        loop.play_one_game()
        assert loop.service.active_game_ids() == []

    def test_closed_input_ends_the_round(self):
        loop, _ = make_loop(["slate"])
        with pytest.raises(EOFError):
            loop.play_one_game()
        assert loop.service.active_game_ids() == []


class TestRun:
    """Tests for the full session."""

    def test_welcome_and_goodbye(self):
        sleeps = []
        loop, output = make_loop(["crane", "n"], sleeps=sleeps)
        loop.run()
        text = output.getvalue()
        assert "Welcome to WORDLE" in text
        assert "Thanks for playing WORDLE.\n\nSee you soon!" in text
        assert sleeps == [TestingConfig.WELCOME_SCREEN_SLEEP_SECONDS, TestingConfig.GOODBYE_SCREEN_SLEEP_SECONDS]

    def test_keep_playing(self):
        loop, output = make_loop(["crane", "maybe", "yes", "slate", "no"], words=("crane", "slate"))
        loop.run()
        text = output.getvalue()
        assert text.count("Playing one game of wordle") == 2
        assert text.count("Do you want to keep playing? (y/n)") == 3

    def test_closed_input_says_goodbye(self):
        loop, output = make_loop(["slate"])
        loop.run()
        assert "See you soon!" in output.getvalue()
