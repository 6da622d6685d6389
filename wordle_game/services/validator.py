"""
Guess Validator

Decides whether a raw guess may be scored: right length, a known word, and
not already guessed in this session.
"""

from typing import Iterable

from ..models.errors import DuplicateGuessError, LengthError, UnknownWordError
from ..models.game import ValidationResult
from .dictionary import Dictionary


def normalize(raw: str) -> str:
    return raw.strip().upper()


class GuessValidator:
    """Pure checks over a dictionary; holds no game state."""

    def __init__(self, dictionary: Dictionary):
        self.dictionary = dictionary

    def check(self, raw: str, history: Iterable[str] = ()) -> ValidationResult:
        """
        Validate a guess without raising.

        Args:
            raw: The word as typed by the player
            history: Words already guessed this session

        Returns:
            ValidationResult holding either the normalized word or the error
        """
        if not isinstance(raw, str):
            return ValidationResult(error=LengthError("Guess must be a valid string"))

        word = normalize(raw)
        length = self.dictionary.word_length

        if len(word) != length:
            return ValidationResult(error=LengthError(
                f"Guess must be exactly {length} letters", word))

        if word not in self.dictionary:
            return ValidationResult(error=UnknownWordError("Word not in word list", word))

        if word in {normalize(previous) for previous in history}:
            return ValidationResult(error=DuplicateGuessError(
                f"{word} has already been guessed", word))

        return ValidationResult(word=word)

    def validate(self, raw: str, history: Iterable[str] = ()) -> str:
        """Like ``check`` but raises the error kind; returns the normalized word."""
        result = self.check(raw, history)
        if not result.ok:
            raise result.error
        return result.word
