"""
Data Models Package

Contains all data models, schemas and error types used throughout the application.
"""

from .game import (
    GameState, GameStatus, Guess, LetterAccuracy, ScoredLetter,
    TurnOutcome, TurnResult, ValidationResult
)
from .errors import (
    WordleError, GuessError, LengthError, UnknownWordError, DuplicateGuessError,
    GameAlreadyOverError, InvalidSolutionError
)

__all__ = [
    'GameState', 'GameStatus', 'Guess', 'LetterAccuracy', 'ScoredLetter',
    'TurnOutcome', 'TurnResult', 'ValidationResult',
    'WordleError', 'GuessError', 'LengthError', 'UnknownWordError', 'DuplicateGuessError',
    'GameAlreadyOverError', 'InvalidSolutionError'
]
