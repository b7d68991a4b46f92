"""
Unit tests for configuration and game settings.
"""

import pytest

from wordle_engine.config import (
    DEFAULT_ATTEMPT_LIMIT,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
    normalize_word,
    validate_word_list,
)


class TestGameSettings:
    """Tests for game_settings helpers."""

    def test_default_attempt_limit(self):
        assert DEFAULT_ATTEMPT_LIMIT == 6

    def test_normalize_word(self):
        assert normalize_word("Crane") == "CRANE"

    def test_validate_word_list(self):
        assert validate_word_list(["crane", "Slate"]) == ["CRANE", "SLATE"]

    def test_validate_empty_list(self):
        with pytest.raises(ValueError):
            validate_word_list([])

    @pytest.mark.parametrize("words", [["crane", ""], ["two words"]])
    def test_validate_bad_entries(self, words):
        with pytest.raises(ValueError):
            validate_word_list(words)


class TestAppConfig:
    """Tests for configuration selection."""

    def test_get_config_by_name(self):
        assert get_config("testing") is TestingConfig
        assert get_config("development") is DevelopmentConfig

    def test_get_config_from_environment(self, monkeypatch):
        monkeypatch.setenv("WORDLE_ENV", "testing")
        assert get_config() is TestingConfig

    def test_unknown_name_falls_back_to_default(self):
        assert get_config("staging") is ProductionConfig

    def test_testing_config_does_not_sleep(self):
        assert TestingConfig.WELCOME_SCREEN_SLEEP_SECONDS == 0.0
        assert TestingConfig.GOODBYE_SCREEN_SLEEP_SECONDS == 0.0
