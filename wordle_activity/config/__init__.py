"""
Configuration Package

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import MAX_ROUNDS, WORD_LENGTH, load_secret_pool, validate_word_list

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'MAX_ROUNDS', 'WORD_LENGTH', 'load_secret_pool', 'validate_word_list'
]
