"""End-of-game messages."""

from typing import Union

from ..models.game import GameStatus


def format_end_message(status: Union[GameStatus, int, None], turn_number: int, solution: str) -> str:
    """
    Message revealing the solution and the outcome of the game.

    ``status`` may be a GameStatus or its integer code (1 won, 2 lost);
    anything else yields the invalid status message.
    """
    if status == GameStatus.WON:
        return f"The word was {solution}! You got it in {turn_number} guesses."
    if status == GameStatus.LOST:
        return f"So close! The word was {solution}."
    return "Invalid status code."
