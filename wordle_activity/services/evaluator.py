"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm.
"""

from typing import List, Optional

from ..models.progress import Verdict


def evaluate(secret: str, guess: str) -> List[Verdict]:
    """
    Scores a guess against the secret, letter by letter.

    Exact matches are resolved first; remaining guess letters then consume the
    leftmost unmatched occurrence in the secret, so a letter is never reported
    more often than the secret contains it.

    Args:
        secret: Uppercase answer word
        guess: Uppercase guessed word of the same length

    Returns:
        List[Verdict]: One verdict per position
    """
    result = [Verdict.ABSENT] * len(secret)

    # Working copy to track letter consumption
    remaining: List[Optional[str]] = list(secret)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == remaining[i]:
            result[i] = Verdict.CORRECT
            remaining[i] = None

    # Second pass: letters present elsewhere
    for i, letter in enumerate(guess):
        if result[i] == Verdict.CORRECT:
            continue
        if letter in remaining:
            result[i] = Verdict.PRESENT
            remaining[remaining.index(letter)] = None

    return result


def is_winning(result: List[Verdict]) -> bool:
    return all(verdict == Verdict.CORRECT for verdict in result)
