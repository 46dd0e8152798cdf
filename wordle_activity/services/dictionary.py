"""
Word Dictionary

The set of words accepted as guesses, loaded once at startup.
"""

from pathlib import Path
from typing import Iterable, Union

from ..config.game_settings import WORD_LENGTH


class WordDictionary:
    """Uppercase membership set of valid guesses."""

    def __init__(self, words: Iterable[str]):
        self._words = frozenset(
            word.strip().upper() for word in words if len(word.strip()) == WORD_LENGTH
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'WordDictionary':
        """
        Load a newline-delimited word list.

        Entries are stripped and uppercased; anything that is not exactly
        WORD_LENGTH characters is dropped.

        Raises:
            FileNotFoundError: If the list does not exist
        """
        text = Path(path).read_text(encoding='utf-8')
        return cls(text.splitlines())

    def contains(self, word: str) -> bool:
        return word.upper() in self._words

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._words)
