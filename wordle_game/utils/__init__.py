"""
Utilities Package

Contains utility functions and helper modules.
"""

from .game_logger import GameLogger, get_game_logger, initialize_game_logger

__all__ = ['GameLogger', 'get_game_logger', 'initialize_game_logger']
