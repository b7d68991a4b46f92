"""
Game Logger Module for the Wordle engine

This module provides structured logging for game events, guesses and errors.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import Config


class GameLogger:
    """
    Centralized logging system for Wordle games.

    Features:
    - Game event logging (created, won, lost, deleted)
    - Guess logging, accepted or rejected
    - JSON structured logs for easy parsing
    - Optional dated log file, warnings always echoed to the console
    """

    def __init__(self, log_dir: Optional[str] = None, level: str = "INFO"):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.logger = self._setup_logger(level)

    def _setup_logger(self, level: str) -> logging.Logger:
        """Setup the game logger with console and optional file handlers."""
        logger = logging.getLogger('wordle_engine.game')
        logger.setLevel(level)
        logger.propagate = False

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        if self.log_dir is not None:
            log_file = self.log_file_path()
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        return logger

    def log_file_path(self) -> Optional[Path]:
        """Path of today's log file, or None when file logging is disabled."""
        if self.log_dir is None:
            return None
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       **kwargs):
        """
        Log game-specific events.

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_created', 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        details = {
            'game_id': game_id,
            **kwargs
        }

        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_guess(self,
                  game_id: Optional[str],
                  guess: str,
                  accepted: bool,
                  **kwargs):
        """
        Log a submitted guess.

        Rejected guesses are ordinary player input and only logged at debug level.
        """
        details = {
            'game_id': game_id,
            'guess': guess,
            'accepted': accepted,
            **kwargs
        }

        event_type = 'GUESS_ACCEPTED' if accepted else 'GUESS_REJECTED'
        log_message = self._create_log_entry(event_type, 'submit_guess', details)

        if accepted:
            self.logger.info(log_message)
        else:
            self.logger.debug(log_message)

    def log_error(self,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            game_id: Game identifier if applicable
        """
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }

        self.logger.error(self._create_log_entry('ERROR', action, details))


# Global logger instance
game_logger = GameLogger(log_dir=Config.LOG_DIR, level=Config.LOG_LEVEL)
