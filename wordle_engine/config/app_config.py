"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from a .env file in the working directory, if any
load_dotenv()


def _get_float(name: str, default: float) -> float:
    return float(os.getenv(name, default))


class Config:
    """Base configuration class with all settings."""

    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Game Settings
    ATTEMPT_LIMIT = int(os.getenv('WORDLE_ATTEMPT_LIMIT', 6))

    # Terminal Settings
    WELCOME_SCREEN_SLEEP_SECONDS = _get_float('WELCOME_SCREEN_SLEEP_SECONDS', 0.7)
    GOODBYE_SCREEN_SLEEP_SECONDS = _get_float('GOODBYE_SCREEN_SLEEP_SECONDS', 0.8)

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR')  # No file logging unless set


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    WELCOME_SCREEN_SLEEP_SECONDS = 0.0
    GOODBYE_SCREEN_SLEEP_SECONDS = 0.0
    LOG_DIR = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(name: str = None):
    """Return the configuration class selected by name or the WORDLE_ENV variable."""
    name = name or os.getenv('WORDLE_ENV', 'default')
    return config.get(name, config['default'])
