from collections import Counter

import pytest

from wordle_game.models.game import LetterAccuracy
from wordle_game.services.scoring import score
from tests.conftest import WORDS

C = LetterAccuracy.CORRECT
W = LetterAccuracy.WRONG_POSITION
X = LetterAccuracy.INCORRECT


def test_exact_match_all_correct():
    guess = score("REACH", "REACH")
    assert guess.accuracies() == [C] * 5
    assert guess.is_all_correct
    assert guess.word == "REACH"


def test_anagram_all_wrong_position():
    assert score("ARCHE", "REACH").accuracies() == [W] * 5


def test_no_shared_letters_all_incorrect():
    assert score("SNOUT", "REACH").accuracies() == [X] * 5


@pytest.mark.parametrize("guess,solution,expected", [
    # Every solution letter is credited once
    ("ARTSY", "SMART", [W, W, W, W, X]),
    ("MAMMA", "SMART", [W, W, X, X, X]),
    ("SASSY", "SMART", [C, W, X, X, X]),
    # Exact match consumes the letter before a mispositioned copy can
    ("EERIE", "REACH", [X, C, W, X, X]),
    ("BELLE", "LEVEL", [X, C, W, W, W]),
    ("COOLS", "SCOOP", [W, W, C, X, W]),
    ("SPEED", "ABBEY", [X, X, X, C, X]),
])
def test_duplicate_letters(guess, solution, expected):
    assert score(guess, solution).accuracies() == expected


def test_result_is_in_guess_order():
    guess = score("TOUCH", "REACH")
    assert [letter.character for letter in guess] == list("TOUCH")
    assert guess.accuracies() == [X, X, X, C, C]


def test_accepts_solution_as_letter_sequence():
    assert score("REACH", tuple("REACH")).is_all_correct


def test_length_mismatch():
    with pytest.raises(ValueError):
        score("REACH", "REACHES")


def test_credits_never_exceed_solution_multiplicity():
    for solution in WORDS:
        available = Counter(solution)
        for word in WORDS:
            credited = Counter(
                letter.character for letter in score(word, solution)
                if letter.accuracy is not X
            )
            for character, count in credited.items():
                assert count <= available[character], (word, solution)
