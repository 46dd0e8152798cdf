"""
Word Supply

Sources of new secrets: a fixed random pool, or per-user queues fed by a
paired opponent.
"""

import random
from typing import Dict, List, Optional, Tuple

from ..errors import PairingUnavailable


class PairingRoster:
    """Symmetric opponent table."""

    def __init__(self, pairs: List[Tuple[str, str]] = None):
        self._opponents: Dict[str, str] = {}
        for first, second in pairs or []:
            if first == second:
                raise ValueError(f"User '{first}' cannot be paired with themselves")
            for user in (first, second):
                if user in self._opponents:
                    raise ValueError(f"User '{user}' appears in more than one pairing")
            self._opponents[first] = second
            self._opponents[second] = first

    @classmethod
    def parse(cls, raw: str) -> 'PairingRoster':
        """
        Parse ``"alice:bob,carol:dave"`` into a roster.

        Raises:
            ValueError: If an entry is not of the form ``a:b``
        """
        pairs = []
        for entry in (raw or '').split(','):
            entry = entry.strip()
            if not entry:
                continue
            parts = [part.strip() for part in entry.split(':')]
            if len(parts) != 2 or not all(parts):
                raise ValueError(f"Invalid pairing '{entry}', expected 'user:opponent'")
            pairs.append((parts[0], parts[1]))
        return cls(pairs)

    def opponent_of(self, user_id: str) -> Optional[str]:
        return self._opponents.get(user_id)

    def __len__(self) -> int:
        return len(self._opponents) // 2


class RandomPoolSupply:
    """Draws secrets uniformly from a fixed pool; never runs dry."""

    kind = 'pool'

    def __init__(self, words: List[str], rng: random.Random = None):
        if not words:
            raise ValueError("Secret pool cannot be empty")
        self.words = list(words)
        self._rng = rng or random.Random()

    def next_word(self, user_id: str) -> Optional[str]:
        return self._rng.choice(self.words)

    def return_word(self, user_id: str, word: str) -> None:
        """Pool words are never used up, so there is nothing to put back."""

    def push_for_opponent(self, from_user: str, word: str) -> Tuple[str, int]:
        raise PairingUnavailable("Opponent words are only used with the paired supply")

    def pending(self, user_id: str) -> int:
        raise PairingUnavailable("Opponent words are only used with the paired supply")


class PairedQueueSupply:
    """Secrets come from the word queue an opponent fills."""

    kind = 'paired'

    def __init__(self, queue, roster: PairingRoster):
        self.queue = queue
        self.roster = roster

    def next_word(self, user_id: str) -> Optional[str]:
        return self.queue.pop_next(user_id)

    def return_word(self, user_id: str, word: str) -> None:
        """Put back a word that was drawn but could not be assigned."""
        self.queue.push_front(user_id, word)

    def push_for_opponent(self, from_user: str, word: str) -> Tuple[str, int]:
        """
        Queue a word for the opponent of from_user.

        Returns:
            Tuple of (opponent_id, opponent_queue_length)

        Raises:
            PairingUnavailable: If from_user has no opponent
        """
        target = self.roster.opponent_of(from_user)
        if target is None:
            raise PairingUnavailable(f"No opponent configured for '{from_user}'")
        return target, self.queue.push_word(target, word)

    def pending(self, user_id: str) -> int:
        return self.queue.pending(user_id)
