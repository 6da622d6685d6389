"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: application configuration (environment-based)
- game_settings.py: Game rules, constants and word list loading
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    ALPHABET, MAX_ROUNDS, WORD_LENGTH, DEFAULT_WORD_LIST_PATH,
    load_word_list, validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'ALPHABET', 'MAX_ROUNDS', 'WORD_LENGTH', 'DEFAULT_WORD_LIST_PATH',
    'load_word_list', 'validate_word_list_integrity', 'get_word_statistics'
]
