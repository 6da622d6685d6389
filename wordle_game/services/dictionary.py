"""
Dictionary Service

The immutable set of accepted words. The game core only needs membership
testing and uniform sampling from it.
"""

import random
from typing import FrozenSet, Iterable, Iterator, List, Optional

from ..config.game_settings import (
    DEFAULT_WORD_LIST_PATH, WORD_LENGTH, load_word_list, validate_word_list_integrity
)


class Dictionary:
    """Case-normalized, read-only collection of accepted words."""

    def __init__(self, words: Iterable[str]):
        normalized = [word.strip().upper() for word in words]
        validate_word_list_integrity(normalized)
        self._words: FrozenSet[str] = frozenset(normalized)
        # Sorted copy so random selection is reproducible for a seeded rng
        self._ordered: List[str] = sorted(self._words)

    @classmethod
    def from_file(cls, path: str = DEFAULT_WORD_LIST_PATH) -> "Dictionary":
        return cls(load_word_list(path))

    @property
    def word_length(self) -> int:
        return WORD_LENGTH

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return word.upper() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def random_word(self, rng: Optional[random.Random] = None) -> str:
        """Pick a word uniformly at random."""
        return (rng or random).choice(self._ordered)


_default_dictionary: Optional[Dictionary] = None


def get_default_dictionary() -> Dictionary:
    """Load the bundled word list once and share it."""
    global _default_dictionary
    if _default_dictionary is None:
        _default_dictionary = Dictionary.from_file()
    return _default_dictionary
