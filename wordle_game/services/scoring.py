"""
Scoring Engine

Implements the authentic Wordle letter evaluation algorithm.
"""

from typing import List, Optional, Sequence

from ..models.game import Guess, LetterAccuracy, ScoredLetter


def score(guess: str, solution: Sequence[str]) -> Guess:
    """
    Compare a validated guess with the solution, letter by letter.

    Exact matches are resolved first so that a letter in the right place is
    never also credited to another position. Each solution letter is then
    consumed at most once, so a guess with two 'A's against a solution with one
    'A' gets a single WRONG_POSITION (or CORRECT) and one INCORRECT.

    Args:
        guess: Normalized uppercase guess
        solution: Solution letters, same length as the guess

    Returns:
        Guess: Scored letters in guess order
    """
    if len(guess) != len(solution):
        raise ValueError(f"Guess '{guess}' and solution differ in length")

    # Create working copy to track letter consumption
    remaining: List[Optional[str]] = list(solution)
    results: List[Optional[LetterAccuracy]] = [None] * len(guess)

    # First pass: Mark all exact position matches
    for i, letter in enumerate(guess):
        if remaining[i] == letter:
            results[i] = LetterAccuracy.CORRECT
            remaining[i] = None

    # Second pass: Mark present letters and misses
    for i, letter in enumerate(guess):
        if results[i] is not None:
            continue
        if letter in remaining:
            results[i] = LetterAccuracy.WRONG_POSITION
            # Consume first occurrence to prevent double-counting
            remaining[remaining.index(letter)] = None
        else:
            results[i] = LetterAccuracy.INCORRECT

    return Guess(tuple(
        ScoredLetter(letter, accuracy)
        for letter, accuracy in zip(guess, results)
    ))
