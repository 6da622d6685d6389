"""
Game Errors

Every error a turn or a session construction can fail with. All of them are
recoverable: the caller re-prompts or reports, and session state is untouched.
"""


class WordleError(Exception):
    """Base class for game errors. ``code`` is stable for API clients."""
    code = "wordle_error"


class GuessError(WordleError):
    """A submitted word was rejected before scoring."""
    code = "invalid_guess"

    def __init__(self, message: str, word: str = ""):
        super().__init__(message)
        self.word = word


class LengthError(GuessError):
    code = "invalid_length"


class UnknownWordError(GuessError):
    code = "unknown_word"


class DuplicateGuessError(GuessError):
    code = "duplicate_guess"


class GameAlreadyOverError(WordleError):
    code = "game_over"


class InvalidSolutionError(WordleError):
    """An explicitly supplied solution failed the checks a guess must pass."""
    code = "invalid_solution"
