"""
Progress Data Models

In-flight game state as saved by the client, with the consistency rules the
session layer enforces before anything is stored.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH
from ..errors import InvalidProgress


class Verdict(str, Enum):
    """Per-letter evaluation result."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


@dataclass
class GuessEntry:
    """One scored row of the board."""
    word: str
    result: List[Verdict]

    @property
    def is_win(self) -> bool:
        return all(verdict == Verdict.CORRECT for verdict in self.result)

    def to_dict(self) -> Dict[str, Any]:
        return {'word': self.word, 'result': [verdict.value for verdict in self.result]}


@dataclass
class Progress:
    """Serialized board: guesses so far, next row and completion flag."""
    guesses: List[GuessEntry] = field(default_factory=list)
    row: int = 0
    game_over: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'guesses': [entry.to_dict() for entry in self.guesses],
            'row': self.row,
            'gameOver': self.game_over
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], max_rounds: int = MAX_ROUNDS,
                  word_length: int = WORD_LENGTH) -> Optional['Progress']:
        """
        Builds a Progress from its wire form and checks it is consistent.

        Args:
            data: ``{guesses, row, gameOver}`` mapping, or None to clear
            max_rounds: Maximum number of guesses per game
            word_length: Letters per word

        Returns:
            Progress, or None when data is None

        Raises:
            InvalidProgress: If the shape or the game rules are violated
        """
        if data is None:
            return None
        if not isinstance(data, dict):
            raise InvalidProgress("Progress must be an object")

        raw_guesses = data.get('guesses', [])
        if not isinstance(raw_guesses, list):
            raise InvalidProgress("guesses must be a list")
        if len(raw_guesses) > max_rounds:
            raise InvalidProgress(f"At most {max_rounds} guesses are allowed")

        guesses = [_parse_guess(raw, index, word_length) for index, raw in enumerate(raw_guesses)]

        row = data.get('row', len(guesses))
        if isinstance(row, bool) or not isinstance(row, int):
            raise InvalidProgress("row must be an integer")
        if not 0 <= row <= max_rounds:
            raise InvalidProgress(f"row must be between 0 and {max_rounds}")
        if row not in (len(guesses), max(len(guesses) - 1, 0)):
            raise InvalidProgress("row does not match the number of guesses")

        game_over = data.get('gameOver', False)
        if not isinstance(game_over, bool):
            raise InvalidProgress("gameOver must be a boolean")

        # Only the final guess may be a win
        if any(entry.is_win for entry in guesses[:-1]):
            raise InvalidProgress("Guesses continue after a winning guess")

        finished = bool(guesses) and (guesses[-1].is_win or len(guesses) == max_rounds)
        if game_over != finished:
            raise InvalidProgress("gameOver is inconsistent with guesses")

        return cls(guesses=guesses, row=row, game_over=game_over)


def _parse_guess(raw: Any, index: int, word_length: int) -> GuessEntry:
    if not isinstance(raw, dict):
        raise InvalidProgress(f"Guess {index} must be an object")

    word = raw.get('word')
    if not isinstance(word, str) or len(word) != word_length or not word.isalpha():
        raise InvalidProgress(f"Guess {index} word must be {word_length} letters")

    result = raw.get('result')
    if not isinstance(result, list) or len(result) != word_length:
        raise InvalidProgress(f"Guess {index} result must have {word_length} entries")
    try:
        verdicts = [Verdict(value) for value in result]
    except ValueError:
        raise InvalidProgress(f"Guess {index} result has an unknown verdict") from None

    return GuessEntry(word=word.upper(), result=verdicts)
