"""Game-over detection."""

from ..config.game_settings import MAX_ROUNDS
from ..models.game import GameStatus, Guess


def check_over(turn_number: int, latest_guess: Guess, max_rounds: int = MAX_ROUNDS) -> GameStatus:
    """
    Decide the status after a scored turn.

    A fully correct guess wins on any turn, the first included. Otherwise the
    game is lost once ``turn_number`` reaches ``max_rounds``.
    """
    if turn_number < 1:
        raise ValueError(f"Turn number must be positive, got {turn_number}")

    if latest_guess.is_all_correct:
        return GameStatus.WON
    if turn_number >= max_rounds:
        return GameStatus.LOST
    return GameStatus.IN_PROGRESS
