import random

import pytest

from wordle_game.config.game_settings import ALPHABET
from wordle_game.models.errors import (
    DuplicateGuessError, GameAlreadyOverError, InvalidSolutionError, LengthError,
    UnknownWordError
)
from wordle_game.models.game import GameStatus, LetterAccuracy
from wordle_game.services.game_service import GameService, GameSession

LOSING_GUESSES = ["SNOUT", "BLIMP", "DOWNY", "FUZZY", "GIPSY"]


def test_initial_state(session):
    assert session.status is GameStatus.IN_PROGRESS
    assert session.guesses == ()
    assert session.wrong_letters == frozenset()
    assert session.unused_letters == frozenset(ALPHABET)
    assert session.current_turn == 1

    state = session.get_state()
    assert state.answer is None
    assert state.end_message is None
    assert state.game_over is False


def test_random_solution_comes_from_dictionary(dictionary):
    session = GameSession(dictionary, rng=random.Random(7))
    session.submit_guess("REACH")
    assert session.get_state().guesses == ["REACH"]
    # Seeded sessions choose the same word
    first = GameSession(dictionary, rng=random.Random(3))
    second = GameSession(dictionary, rng=random.Random(3))
    assert first.end_message(GameStatus.LOST, 6) == second.end_message(GameStatus.LOST, 6)


@pytest.mark.parametrize("solution,error", [
    ("reac", LengthError),
    ("aaaaa", UnknownWordError),
])
def test_invalid_explicit_solution_rejected(dictionary, solution, error):
    with pytest.raises(InvalidSolutionError) as excinfo:
        GameSession(dictionary, solution=solution)
    assert isinstance(excinfo.value.__cause__, error)


def test_explicit_solution_is_normalized(dictionary):
    session = GameSession.create("reach", dictionary=dictionary)
    assert session.submit_guess("REACH").status is GameStatus.WON


def test_win_on_first_turn(session):
    result = session.submit_guess("reach", 1)
    assert result.status is GameStatus.WON
    assert result.guess.is_all_correct
    assert result.turn_number == 1
    assert session.is_over


def test_win_message_through_session(session):
    session.submit_guess("SNOUT", 1)
    session.submit_guess("BLIMP", 2)
    result = session.submit_guess("REACH", 3)
    assert result.status is GameStatus.WON
    assert session.end_message(result.status, 3) == "The word was REACH! You got it in 3 guesses."
    state = session.get_state()
    assert state.answer == "REACH"
    assert state.won is True
    assert state.end_message == "The word was REACH! You got it in 3 guesses."


def test_incorrect_guess_updates_letter_sets(session):
    session.submit_guess("SNOUT")
    assert session.wrong_letters == frozenset("SNOUT")
    assert session.unused_letters == frozenset(ALPHABET) - frozenset("SNOUT")


def test_anagram_guess(session):
    result = session.submit_guess("ARCHE")
    assert all(letter.accuracy is LetterAccuracy.WRONG_POSITION for letter in result.guess)
    assert session.wrong_letters == frozenset()


def test_extra_copy_of_present_letter_is_not_wrong(session):
    session.submit_guess("EERIE")
    assert session.wrong_letters == frozenset("I")
    assert not {"E", "R", "I"} & session.unused_letters


def test_loss_after_six_turns(session):
    for turn, word in enumerate(LOSING_GUESSES, start=1):
        assert session.submit_guess(word, turn).status is GameStatus.IN_PROGRESS

    result = session.submit_guess("TOUCH", 6)
    assert result.status is GameStatus.LOST
    assert session.end_message(GameStatus.LOST, 6) == "So close! The word was REACH."
    assert session.get_state().answer == "REACH"


def test_turn_number_defaults_to_next_turn(session):
    for word in LOSING_GUESSES:
        session.submit_guess(word)
    assert session.current_turn == 6
    assert session.submit_guess("TOUCH").status is GameStatus.LOST


def test_termination_is_stable(session):
    session.submit_guess("REACH")
    for word in ["SNOUT", "REACH", "nope"]:
        with pytest.raises(GameAlreadyOverError):
            session.submit_guess(word)
    assert session.status is GameStatus.WON
    assert len(session.guesses) == 1


def test_duplicate_guess_rejected(session):
    session.submit_guess("SNOUT")
    with pytest.raises(DuplicateGuessError):
        session.submit_guess("snout")
    with pytest.raises(DuplicateGuessError):
        session.submit_guess("SNOUT")


def test_failed_validation_does_not_mutate(session):
    session.submit_guess("SNOUT")
    before = session.get_state()

    for raw in ["ape", "nights", "aaaaa", "snout"]:
        with pytest.raises((LengthError, UnknownWordError, DuplicateGuessError)):
            session.submit_guess(raw, 2)

    assert session.get_state() == before
    assert session.current_turn == 2


def test_try_submit_guess_returns_errors(session):
    outcome = session.try_submit_guess("ape")
    assert not outcome.ok
    assert isinstance(outcome.error, LengthError)
    assert outcome.result is None

    outcome = session.try_submit_guess("reach")
    assert outcome.ok
    assert outcome.result.status is GameStatus.WON

    outcome = session.try_submit_guess("snout")
    assert isinstance(outcome.error, GameAlreadyOverError)


def test_letter_sets_are_monotonic(session):
    wrong_sizes = []
    unused_sizes = []
    for word in ["SNOUT", "EERIE", "TOUCH", "ARCHE"]:
        session.submit_guess(word)
        wrong_sizes.append(len(session.wrong_letters))
        unused_sizes.append(len(session.unused_letters))
    assert wrong_sizes == sorted(wrong_sizes)
    assert unused_sizes == sorted(unused_sizes, reverse=True)
    guessed = set("".join(session.guess_words))
    assert not guessed & session.unused_letters
    assert not session.wrong_letters & set("REACH")


def test_keyboard_status_only_improves(session):
    session.submit_guess("TOUCH")
    session.submit_guess("SNOUT")
    status = session.get_state().letter_status
    assert status["C"] == "correct"
    assert status["T"] == "incorrect"
    assert status["Z"] == "unused"
    session.submit_guess("ARCHE")
    status = session.get_state().letter_status
    assert status["C"] == "correct"
    assert status["A"] == "wrong_position"


def test_display_data_is_read_only(session):
    session.submit_guess("SNOUT")
    with pytest.raises(AttributeError):
        session.wrong_letters.add("Q")
    session.get_state().guesses.append("HACKS")
    assert session.guess_words == ["SNOUT"]


def test_non_positive_turn_rejected(session):
    with pytest.raises(ValueError):
        session.submit_guess("SNOUT", 0)
    assert session.guesses == ()


def test_replayed_turn_rejected(session):
    session.submit_guess("SNOUT", 1)
    with pytest.raises(ValueError):
        session.submit_guess("BLIMP", 1)
    assert session.guess_words == ["SNOUT"]
    assert session.current_turn == 2


def test_history_never_exceeds_max_rounds(session):
    session.submit_guess("SNOUT", 1)
    for word in LOSING_GUESSES[1:] + ["TOUCH", "SMART", "ARTSY"]:
        with pytest.raises(ValueError):
            session.submit_guess(word, 1)
    assert len(session.guesses) == 1
    assert session.status is GameStatus.IN_PROGRESS


def test_sessions_share_no_state(dictionary):
    first = GameSession(dictionary, solution="REACH")
    second = GameSession(dictionary, solution="REACH")
    first.submit_guess("SNOUT")
    assert second.guesses == ()
    assert second.unused_letters == frozenset(ALPHABET)


class TestGameService:

    def test_create_and_play(self, dictionary):
        service = GameService(dictionary)
        game_id = service.create_new_game("smart")
        assert service.get_game_state(game_id).status == "in_progress"

        result = service.make_guess(game_id, "artsy")
        assert result.status is GameStatus.IN_PROGRESS
        assert service.active_games == 1

        service.make_guess(game_id, "smart")
        assert service.get_game_state(game_id).answer == "SMART"
        assert service.active_games == 0

    def test_unknown_game(self, dictionary):
        service = GameService(dictionary)
        assert service.get_game_state("missing") is None
        assert service.make_guess("missing", "REACH") is None
        assert service.delete_game("missing") is False

    def test_invalid_solution(self, dictionary):
        service = GameService(dictionary)
        with pytest.raises(InvalidSolutionError):
            service.create_new_game("zzzzz")
        assert service.games == {}

    def test_delete(self, dictionary):
        service = GameService(dictionary)
        game_id = service.create_new_game()
        assert service.get_session(game_id) is not None
        assert service.delete_game(game_id) is True
        assert service.get_session(game_id) is None
