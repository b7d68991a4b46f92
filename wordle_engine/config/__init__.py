"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: game rules and constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    DEFAULT_ATTEMPT_LIMIT,
    MIN_ATTEMPT_LIMIT,
    normalize_word,
    validate_word_list,
)

__all__ = [
    # Runtime configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'DEFAULT_ATTEMPT_LIMIT', 'MIN_ATTEMPT_LIMIT', 'normalize_word',
    'validate_word_list'
]
