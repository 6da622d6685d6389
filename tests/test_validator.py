import pytest

from wordle_game.models.errors import DuplicateGuessError, LengthError, UnknownWordError
from wordle_game.services.validator import GuessValidator


@pytest.fixture
def validator(dictionary):
    return GuessValidator(dictionary)


@pytest.mark.parametrize("raw,expected", [
    ("reach", "REACH"),
    ("TOucH", "TOUCH"),
    ("  snout\n", "SNOUT"),
])
def test_validate_normalizes(validator, raw, expected):
    assert validator.validate(raw) == expected


@pytest.mark.parametrize("raw,error", [
    ("ape", LengthError),
    ("nights", LengthError),
    ("", LengthError),
    ("aaaaa", UnknownWordError),
    ("12345", UnknownWordError),
    ("re@ch", UnknownWordError),
])
def test_validate_rejects(validator, raw, error):
    with pytest.raises(error):
        validator.validate(raw)


def test_rejection_is_idempotent(validator):
    first = validator.check("aaaaa")
    second = validator.check("aaaaa")
    assert type(first.error) is type(second.error) is UnknownWordError


def test_duplicate_guess_rejected(validator):
    with pytest.raises(DuplicateGuessError):
        validator.validate("smart", ["SMART"])


def test_duplicate_check_is_case_insensitive(validator):
    result = validator.check("Smart", ["smart"])
    assert isinstance(result.error, DuplicateGuessError)


def test_length_checked_before_dictionary(validator):
    result = validator.check("zzzzzz")
    assert isinstance(result.error, LengthError)


def test_check_success_result(validator):
    result = validator.check("crane", ["REACH"])
    assert result.ok
    assert result.word == "CRANE"
    assert result.error is None


def test_non_string_rejected(validator):
    assert not validator.check(None).ok
