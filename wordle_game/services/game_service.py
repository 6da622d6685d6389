"""
Game Service

Contains the single-player game session state machine and the registry that
keeps sessions alive for the HTTP API.
"""

import random
import uuid
from typing import Dict, List, Optional, Set, Tuple

from ..config.game_settings import ALPHABET, MAX_ROUNDS
from ..models.errors import GameAlreadyOverError, GuessError, InvalidSolutionError, WordleError
from ..models.game import (
    GameState, GameStatus, Guess, LetterAccuracy, TurnOutcome, TurnResult
)
from ..utils.game_logger import get_game_logger
from .dictionary import Dictionary, get_default_dictionary
from .messages import format_end_message
from .scoring import score
from .termination import check_over
from .validator import GuessValidator

UNUSED = "unused"

# Keyboard status can only progress in this order
_STATUS_PRIORITY = {
    UNUSED: 0,
    LetterAccuracy.INCORRECT.value: 1,
    LetterAccuracy.WRONG_POSITION.value: 2,
    LetterAccuracy.CORRECT.value: 3,
}


class GameSession:
    """
    One game, from solution selection to a terminal status.

    This class handles:
    - Secret solution storage (never exposed while the game is running)
    - Guess validation, scoring and history
    - Wrong/unused letter bookkeeping
    - Turn and termination tracking
    """

    def __init__(self,
                 dictionary: Optional[Dictionary] = None,
                 solution: Optional[str] = None,
                 rng: Optional[random.Random] = None,
                 max_rounds: int = MAX_ROUNDS,
                 game_id: Optional[str] = None):
        self.dictionary = dictionary if dictionary is not None else get_default_dictionary()
        self.validator = GuessValidator(self.dictionary)
        self.game_id = game_id or str(uuid.uuid4())
        self.max_rounds = max_rounds

        if solution is not None:
            result = self.validator.check(solution)
            if not result.ok:
                raise InvalidSolutionError(f"Invalid solution: {result.error}") from result.error
            chosen = result.word
        else:
            chosen = self.dictionary.random_word(rng)

        self.__solution: Tuple[str, ...] = tuple(chosen)
        self._guesses: List[Guess] = []
        self._wrong_letters: Set[str] = set()
        self._unused_letters: Set[str] = set(ALPHABET)
        self._letter_status: Dict[str, str] = {letter: UNUSED for letter in ALPHABET}
        self._status = GameStatus.IN_PROGRESS
        self._last_turn = 0

        get_game_logger().log_game_event(
            self.game_id, 'game_started',
            explicit_solution=solution is not None, max_rounds=max_rounds
        )

    @classmethod
    def create(cls, explicit_solution: Optional[str] = None, **kwargs) -> "GameSession":
        return cls(solution=explicit_solution, **kwargs)

    # Read-only display data

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status.is_terminal

    @property
    def guesses(self) -> Tuple[Guess, ...]:
        return tuple(self._guesses)

    @property
    def guess_words(self) -> List[str]:
        return [guess.word for guess in self._guesses]

    @property
    def wrong_letters(self) -> frozenset:
        return frozenset(self._wrong_letters)

    @property
    def unused_letters(self) -> frozenset:
        return frozenset(self._unused_letters)

    @property
    def current_turn(self) -> int:
        """The turn number the next guess will be played on."""
        return self._last_turn + 1

    # Turns

    def submit_guess(self, raw: str, turn_number: Optional[int] = None) -> TurnResult:
        """
        Validate, score and record a guess, then update the status.

        Args:
            raw: The word as entered by the player
            turn_number: Turn being played; defaults to the next turn

        Returns:
            TurnResult with the scored guess and the new status

        Raises:
            GameAlreadyOverError: The game already ended
            GuessError: The guess was rejected; no state was changed
            ValueError: The turn number is not positive or was already played
        """
        if self.is_over:
            raise GameAlreadyOverError(f"Game is already over ({self._status.label})")

        if turn_number is None:
            turn_number = self.current_turn
        if turn_number < 1:
            raise ValueError(f"Turn number must be positive, got {turn_number}")
        if turn_number < self.current_turn:
            raise ValueError(
                f"Turn {turn_number} was already played; the next turn is {self.current_turn}")

        logger = get_game_logger()
        try:
            word = self.validator.validate(raw, self.guess_words)
        except GuessError as e:
            logger.log_game_event(
                self.game_id, 'guess_rejected', turn=turn_number,
                reason=e.code, attempted_guess=raw
            )
            raise

        guess = score(word, self.__solution)
        self._record(guess)
        self._status = check_over(turn_number, guess, self.max_rounds)
        self._last_turn = turn_number

        logger.log_game_event(
            self.game_id, 'guess_scored', turn=turn_number, guess=word,
            result=[accuracy.value for accuracy in guess.accuracies()]
        )
        if self._status is GameStatus.WON:
            logger.log_game_event(
                self.game_id, 'game_won', rounds_used=turn_number,
                target_word=self._solution_word()
            )
        elif self._status is GameStatus.LOST:
            logger.log_game_event(
                self.game_id, 'game_lost', rounds_used=turn_number,
                target_word=self._solution_word(), final_guess=word
            )

        return TurnResult(guess=guess, status=self._status, turn_number=turn_number)

    def try_submit_guess(self, raw: str, turn_number: Optional[int] = None) -> TurnOutcome:
        """Result-type form of ``submit_guess``: game errors are returned, not raised."""
        try:
            return TurnOutcome(result=self.submit_guess(raw, turn_number))
        except WordleError as e:
            return TurnOutcome(error=e)

    def _record(self, guess: Guess) -> None:
        """Append to history and update the letter sets and keyboard status."""
        self._guesses.append(guess)
        for letter in guess:
            self._unused_letters.discard(letter.character)
            if (letter.accuracy is LetterAccuracy.INCORRECT
                    and letter.character not in self.__solution):
                self._wrong_letters.add(letter.character)

            current = self._letter_status[letter.character]
            if _STATUS_PRIORITY[letter.accuracy.value] > _STATUS_PRIORITY[current]:
                self._letter_status[letter.character] = letter.accuracy.value

    # Output

    def _solution_word(self) -> str:
        return ''.join(self.__solution)

    def end_message(self, status, turn_number: int) -> str:
        """Human-readable end-of-game text; does not change the session."""
        return format_end_message(status, turn_number, self._solution_word())

    def get_state(self) -> GameState:
        """
        Snapshot of the session for rendering (without revealing the answer
        unless the game is over).
        """
        answer = None
        end_message = None
        if self.is_over:
            answer = self._solution_word()
            end_message = self.end_message(self._status, self._last_turn)

        return GameState(
            game_id=self.game_id,
            current_turn=self.current_turn,
            max_rounds=self.max_rounds,
            status=self._status.label,
            game_over=self.is_over,
            won=self._status is GameStatus.WON,
            guesses=self.guess_words,
            guess_results=[guess.to_pairs() for guess in self._guesses],
            wrong_letters=sorted(self._wrong_letters),
            unused_letters=sorted(self._unused_letters),
            answer=answer,
            end_message=end_message,
            letter_status=self._letter_status.copy()
        )


class GameService:
    """
    Registry of game sessions keyed by a unique game id.

    Sessions are independent; the service only creates, finds and drops them.
    """

    def __init__(self, dictionary: Optional[Dictionary] = None, max_rounds: int = MAX_ROUNDS):
        self.dictionary = dictionary if dictionary is not None else get_default_dictionary()
        self.max_rounds = max_rounds
        self.games: Dict[str, GameSession] = {}

    def create_new_game(self, solution: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            solution: Optional explicit solution; must be a valid dictionary word

        Returns:
            str: Unique game ID for this session

        Raises:
            InvalidSolutionError: If ``solution`` is given but not acceptable
        """
        session = GameSession(self.dictionary, solution=solution, max_rounds=self.max_rounds)
        self.games[session.game_id] = session
        return session.game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """Returns the current game state, or None if the game is not found."""
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.get_state()

    def make_guess(self, game_id: str, guess: str) -> Optional[TurnResult]:
        """
        Processes a guess for a session.

        Returns:
            TurnResult, or None if the game is not found

        Raises:
            WordleError: The guess was rejected or the game is over
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.submit_guess(guess)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False

    @property
    def active_games(self) -> int:
        return sum(1 for session in self.games.values() if not session.is_over)


# Global service instance
_game_service: Optional[GameService] = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Optional[Dictionary] = None,
                            max_rounds: int = MAX_ROUNDS) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary, max_rounds)
    return _game_service
