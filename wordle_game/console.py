"""
Console Front End

Prompts for guesses, prints the coloured board after every scored turn and
the end message once the game is decided.
"""

from typing import Callable

from colorama import Fore, Style, just_fix_windows_console

from .models.game import GameState, GameStatus, LetterAccuracy
from .services.game_service import GameSession

SEPARATOR = '-' * 28

ACCURACY_COLOURS = {
    LetterAccuracy.CORRECT.value: Fore.GREEN,
    LetterAccuracy.WRONG_POSITION.value: Fore.YELLOW,
    LetterAccuracy.INCORRECT.value: Style.RESET_ALL,
}


def render_guess(letters) -> str:
    return ''.join(
        ACCURACY_COLOURS[accuracy] + character for character, accuracy in letters
    ) + Style.RESET_ALL


def render_board(state: GameState) -> str:
    """Guesses so far, then the wrong and unused letters."""
    lines = [SEPARATOR]
    lines.extend(render_guess(letters) for letters in state.guess_results)
    lines.append(SEPARATOR)
    lines.append('Wrong: ' + ', '.join(state.wrong_letters))
    lines.append('Unused: ' + ', '.join(state.unused_letters))
    lines.append(SEPARATOR)
    return '\n'.join(lines)


def run_game(session: GameSession,
             input_fn: Callable[[str], str] = input,
             output_fn: Callable[[str], None] = print) -> GameStatus:
    """
    Play ``session`` to the end.

    A rejected guess re-prompts the same turn. Returns the final status, or
    IN_PROGRESS if input ran out first.
    """
    just_fix_windows_console()
    while not session.is_over:
        turn = session.current_turn
        try:
            raw = input_fn(f'Guess {turn}: ')
        except EOFError:
            break

        outcome = session.try_submit_guess(raw, turn)
        if not outcome.ok:
            output_fn(f'Invalid guess! {outcome.error}')
            continue

        output_fn(render_board(session.get_state()))
        if outcome.result.status.is_terminal:
            output_fn(session.end_message(outcome.result.status, turn))

    return session.status


