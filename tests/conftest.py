import pytest

from wordle_game.services.dictionary import Dictionary
from wordle_game.services.game_service import GameSession
from wordle_game.utils.game_logger import initialize_game_logger

WORDS = [
    "REACH", "ARCHE", "SNOUT", "BLIMP", "DOWNY", "FUZZY", "GIPSY", "TOUCH",
    "SMART", "ARTSY", "MAMMA", "SASSY", "EERIE", "NIGHT", "CRANE", "LEVEL",
    "BELLE", "SCOOP", "COOLS", "SPEED", "ABBEY", "KEBAB",
]


@pytest.fixture(autouse=True)
def game_logger(tmp_path):
    return initialize_game_logger(str(tmp_path / "logs"), "INFO")


@pytest.fixture
def dictionary():
    return Dictionary(WORDS)


@pytest.fixture
def session(dictionary):
    return GameSession(dictionary, solution="REACH", game_id="test-game")
