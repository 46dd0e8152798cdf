"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env
load_dotenv('config.env')

_CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_flag(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).lower() == 'true'


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_flag('DEBUG')
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 3001))

    # Database Settings (unset: in-memory users, JSON file word queue)
    MONGO_URI = os.getenv('MONGO_URI') or None
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'wordle_activity')

    # Word Settings
    VALID_WORDS_PATH = os.getenv('VALID_WORDS_PATH') or os.path.join(_CONFIG_DIR, 'valid_words.txt')
    SECRET_WORDS = os.getenv('SECRET_WORDS')  # comma separated; unset uses secret_words.json
    WORD_SUPPLY = os.getenv('WORD_SUPPLY', 'pool')  # "pool" or "paired"
    PAIRINGS = os.getenv('PAIRINGS', '')  # e.g. "alice:bob,carol:dave"
    WORD_QUEUE_PATH = os.getenv('WORD_QUEUE_PATH') or 'word_queue.json'

    # Game Settings
    SINGLE_USE_SECRET = _env_flag('SINGLE_USE_SECRET')
    REVEAL_ON_WIN = _env_flag('REVEAL_ON_WIN')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    MONGO_URI = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
