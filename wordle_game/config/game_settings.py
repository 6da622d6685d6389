"""
Game Configuration Constants Module

Game rules and the word list loaders live here so that every component
(validator, scorer, session, front ends) agrees on the same parameters.
"""

import json
import os
from typing import Dict, Final, Iterable, List

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""Number of letters in the solution and in every accepted guess."""

MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.txt'
)


def load_word_list(path: str = DEFAULT_WORD_LIST_PATH) -> List[str]:
    """
    Load a word list from a text file (one word per line) or a JSON array.

    Args:
        path: Location of a ``.txt`` or ``.json`` word file

    Returns:
        List[str]: List of uppercase 5-letter words

    Raises:
        FileNotFoundError: If the word file is not found
        ValueError: If the file is malformed, empty or contains invalid words
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Word list file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        if path.lower().endswith('.json'):
            try:
                word_list = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e
            if not isinstance(word_list, list):
                raise ValueError("JSON file must contain an array of words")
        else:
            word_list = [line.strip() for line in f]

    # Convert all words to uppercase, dropping blank lines
    uppercase_words = [str(word).strip().upper() for word in word_list if str(word).strip()]
    validate_word_list_integrity(uppercase_words)
    return uppercase_words


def validate_word_list_integrity(words: Iterable[str]) -> bool:
    """
    Validates the integrity and consistency of a word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only alphabetic characters allowed
    3. Format validation: Consistent uppercase formatting

    Duplicate entries are tolerated; the dictionary collapses them into a set.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    words = list(words)
    if not words:
        raise ValueError("Word list cannot be empty")

    # Validate each word meets game requirements
    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    return True


def get_word_statistics(words: Iterable[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters, ties alphabetical
    """
    words = list(words)
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    # Calculate letter frequency distribution
    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: (-x[1], x[0]))[:5]
    }
