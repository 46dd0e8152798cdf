"""
Game Configuration Constants Module

This module defines the game constants and loads the default secret pool.
All game parameters are centralized here to enable easy modification.
"""

import json
import os
from typing import Iterable, List, Final, Optional

# Core Game Configuration Constants
MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = 5

SECRET_WORDS_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'secret_words.json'
)


def validate_word_list(words: Iterable[str]) -> List[str]:
    """
    Normalizes and validates a list of candidate secrets.

    Args:
        words: Raw words in any case

    Returns:
        List[str]: Uppercase words in their original order

    Raises:
        ValueError: If the list is empty or a word is not 5 letters
    """
    uppercase_words = [word.strip().upper() for word in words if word and word.strip()]

    if not uppercase_words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(uppercase_words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

    return uppercase_words


def load_secret_pool(raw: Optional[str] = None, path: str = SECRET_WORDS_FILE) -> List[str]:
    """
    Load the random secret pool.

    Args:
        raw: Comma separated override (the SECRET_WORDS setting)
        path: JSON file holding an array of words, used when raw is empty

    Returns:
        List[str]: Validated uppercase 5-letter words

    Raises:
        FileNotFoundError: If the JSON file is missing
        ValueError: If the JSON is not an array or a word is invalid
    """
    if raw:
        return validate_word_list(raw.split(','))

    with open(path, 'r', encoding='utf-8') as f:
        word_list = json.load(f)

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    return validate_word_list(word_list)
