"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import WordleError


class LetterAccuracy(Enum):
    """Per-letter evaluation of a guess against the solution."""
    CORRECT = "correct"
    WRONG_POSITION = "wrong_position"
    INCORRECT = "incorrect"


class GameStatus(IntEnum):
    """Session status. WON and LOST are terminal."""
    IN_PROGRESS = 0
    WON = 1
    LOST = 2

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class ScoredLetter:
    """A guessed character together with its accuracy."""
    character: str
    accuracy: LetterAccuracy


@dataclass(frozen=True)
class Guess:
    """One submitted word as scored against the solution."""
    letters: Tuple[ScoredLetter, ...]

    @property
    def word(self) -> str:
        return ''.join(letter.character for letter in self.letters)

    @property
    def is_all_correct(self) -> bool:
        return all(letter.accuracy is LetterAccuracy.CORRECT for letter in self.letters)

    def accuracies(self) -> List[LetterAccuracy]:
        return [letter.accuracy for letter in self.letters]

    def to_pairs(self) -> List[Tuple[str, str]]:
        """Letter/accuracy pairs as strings for JSON serialization."""
        return [(letter.character, letter.accuracy.value) for letter in self.letters]

    def __len__(self) -> int:
        return len(self.letters)

    def __iter__(self):
        return iter(self.letters)


@dataclass(frozen=True)
class TurnResult:
    """Outcome of a successfully scored turn."""
    guess: Guess
    status: GameStatus
    turn_number: int


@dataclass(frozen=True)
class ValidationResult:
    """Result of checking a raw guess: either the normalized word or an error."""
    word: Optional[str] = None
    error: Optional["WordleError"] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class TurnOutcome:
    """Result-type form of a turn: exactly one of ``result`` and ``error`` is set."""
    result: Optional[TurnResult] = None
    error: Optional["WordleError"] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class GameState:
    """Snapshot of a session for display and JSON serialization."""
    game_id: str
    current_turn: int
    max_rounds: int
    status: str
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Accuracy as string for JSON serialization
    wrong_letters: List[str]
    unused_letters: List[str]
    answer: Optional[str] = None  # Only included when game is over
    end_message: Optional[str] = None
    letter_status: Dict[str, str] = field(default_factory=dict)
