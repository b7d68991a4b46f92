"""
Shared fixtures for the Wordle engine tests.
"""

import pytest

from wordle_engine.services import Game, GameService, ListWordPicker


@pytest.fixture
def game():
    """A fresh game guessing CRANE with the default attempt limit."""
    return Game("crane")


@pytest.fixture
def picker():
    return ListWordPicker(["crane", "slate", "adieu"])


@pytest.fixture
def service(picker):
    return GameService(picker)
