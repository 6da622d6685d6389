"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import Dictionary, get_default_dictionary
from .game_service import GameService, GameSession, get_game_service, initialize_game_service
from .messages import format_end_message
from .scoring import score
from .termination import check_over
from .validator import GuessValidator

__all__ = [
    'Dictionary', 'get_default_dictionary',
    'GameService', 'GameSession', 'get_game_service', 'initialize_game_service',
    'format_end_message', 'score', 'check_over', 'GuessValidator'
]
