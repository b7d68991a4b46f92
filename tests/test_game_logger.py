"""
Unit tests for the structured game logger.
"""

import json
import logging

import pytest

from wordle_engine.config import Config
from wordle_engine.utils.game_logger import GameLogger


@pytest.fixture(autouse=True)
def restore_global_logger():
    """Every GameLogger configures the same logger; put the global setup back."""
    yield
    GameLogger(log_dir=Config.LOG_DIR, level=Config.LOG_LEVEL)


def read_entries(game_logger):
    for handler in game_logger.logger.handlers:
        handler.flush()
    lines = game_logger.log_file_path().read_text(encoding="utf-8").splitlines()
    return [json.loads(line.split(" | ", 2)[2]) for line in lines]


class TestGameLogger:
    """Tests for GameLogger."""

    def test_no_file_without_log_dir(self):
        game_logger = GameLogger()
        assert game_logger.log_file_path() is None
        assert not any(isinstance(h, logging.FileHandler) for h in game_logger.logger.handlers)

    def test_game_event_entry(self, tmp_path):
        game_logger = GameLogger(log_dir=str(tmp_path / "logs"))
        game_logger.log_game_event("game-1", "game_won", attempts=3)
        entry = read_entries(game_logger)[-1]
        assert entry["event_type"] == "GAME_EVENT"
        assert entry["action"] == "game_won"
        assert entry["details"] == {"game_id": "game-1", "attempts": 3}

    def test_guess_entries(self, tmp_path):
        game_logger = GameLogger(log_dir=str(tmp_path), level="DEBUG")
        game_logger.log_guess("game-1", "CRANE", accepted=True)
        game_logger.log_guess("game-1", "CRAN", accepted=False, reason="LengthMismatchError")
        entries = read_entries(game_logger)
        assert [e["event_type"] for e in entries] == ["GUESS_ACCEPTED", "GUESS_REJECTED"]
        assert entries[1]["details"]["reason"] == "LengthMismatchError"

    def test_error_entry(self, tmp_path):
        game_logger = GameLogger(log_dir=str(tmp_path))
        game_logger.log_error(ValueError("boom"), "create_game")
        entry = read_entries(game_logger)[-1]
        assert entry["details"]["error_type"] == "ValueError"
        assert entry["details"]["error_message"] == "boom"
