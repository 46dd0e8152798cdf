"""
Session Service

Contains the per-user game lifecycle: session start, guess scoring, progress
persistence and session reset.

States per user:
    NO_GAME      no secret assigned
    IN_PROGRESS  secret assigned, game not over
    COMPLETE     secret solved, or every round used
A reset (end_session) assigns a new secret and clears progress.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH
from ..errors import (
    GameAlreadyOver, InvalidWord, NoActiveGame, StorageFailure, SupplyExhausted,
    UserNotFound
)
from ..models.progress import Progress, Verdict
from ..models.user import UserRecord
from ..utils.locks import KeyedLocks
from .evaluator import evaluate, is_winning


@dataclass
class GuessOutcome:
    """Scored guess returned to the client."""
    result: List[Verdict]
    won: bool
    secret: Optional[str] = None  # only set when revealing on a win

    def to_dict(self) -> Dict[str, Any]:
        data = {'result': [verdict.value for verdict in self.result]}
        if self.secret is not None:
            data['secret'] = self.secret
        return data


class SessionService:
    """
    Game lifecycle for every player.

    This class handles:
    - Lazy user creation and idempotent session resume
    - Dictionary validation and guess scoring
    - Win accounting, with single-use or reusable secrets
    - Progress validation before it is stored
    - Drawing new secrets from the configured supply

    Read-modify-write sequences for one user are serialized with a per-user lock.
    """

    def __init__(self, store, supply, dictionary,
                 single_use_secret: bool = False,
                 reveal_on_win: bool = False,
                 max_rounds: int = MAX_ROUNDS):
        self.store = store
        self.supply = supply
        self.dictionary = dictionary
        self.single_use_secret = single_use_secret
        self.reveal_on_win = reveal_on_win
        self.max_rounds = max_rounds
        self._locks = KeyedLocks()

    def _require_user(self, user_id: str) -> UserRecord:
        record = self.store.get(user_id)
        if record is None:
            raise UserNotFound()
        return record

    def _normalize_word(self, raw_word: Any) -> str:
        word = raw_word.strip().upper() if isinstance(raw_word, str) else ''
        if not self.dictionary.contains(word):
            raise InvalidWord()
        return word

    def _assign_secret(self, user_id: str, secret: str, create: bool = False) -> None:
        """
        Store a freshly drawn secret, resetting the board and round counters.

        The word goes back to the supply when the write fails.
        """
        fresh_game = {'current_secret': secret, 'progress': None, 'solved': False, 'rounds_used': 0}
        try:
            if create:
                self.store.insert_if_absent(user_id, dict(fresh_game, total_words=1, total_correct=0))
            else:
                self.store.update(user_id, fresh_game, increment={'total_words': 1})
        except StorageFailure:
            self.supply.return_word(user_id, secret)
            raise

    def start_session(self, user_id: str) -> UserRecord:
        """
        Creates or resumes the user's session.

        A new user gets a secret from the supply. A user with an active secret
        is returned unchanged. A user without one is assigned a new secret when
        the supply has one; otherwise the record is returned as-is and the user
        waits.

        Returns:
            UserRecord including any stored progress
        """
        with self._locks.hold(user_id):
            record = self.store.get(user_id)

            if record is None:
                secret = self.supply.next_word(user_id)
                if secret is None:
                    self.store.insert_if_absent(user_id, {'current_secret': None})
                else:
                    self._assign_secret(user_id, secret, create=True)
                return self._require_user(user_id)

            if record.current_secret:
                return record

            secret = self.supply.next_word(user_id)
            if secret is None:
                return record

            self._assign_secret(user_id, secret)
            return self._require_user(user_id)

    def submit_guess(self, user_id: str, raw_word: Any) -> GuessOutcome:
        """
        Scores a guess against the user's secret.

        Every scored guess counts against the round limit for the current
        secret. The board itself is not touched; the client saves it separately.

        Raises:
            InvalidWord: If the word is not in the dictionary
            UserNotFound: If the user has no record
            NoActiveGame: If no secret is assigned
            GameAlreadyOver: If the secret was solved or all rounds are used
        """
        word = self._normalize_word(raw_word)
        self._require_user(user_id)

        with self._locks.hold(user_id):
            record = self._require_user(user_id)
            if not record.current_secret:
                raise NoActiveGame()

            progress = record.progress
            if (record.solved or record.rounds_used >= self.max_rounds or
                    (progress and progress.game_over)):
                raise GameAlreadyOver()

            secret = record.current_secret
            result = evaluate(secret, word)
            won = is_winning(result)

            if won:
                changes = {'solved': True}
                if self.single_use_secret:
                    changes['current_secret'] = None
                self.store.update(user_id, changes, increment={'total_correct': 1, 'rounds_used': 1})
            else:
                self.store.update(user_id, increment={'rounds_used': 1})

            return GuessOutcome(
                result=result,
                won=won,
                secret=secret if won and self.reveal_on_win else None
            )

    def save_progress(self, user_id: str,
                      payload: Optional[Dict[str, Any]]) -> Tuple[Optional[Progress], bool]:
        """
        Overwrites the stored progress after checking it is consistent.

        Returns:
            Tuple of (saved_progress, finished_by_this_save)

        Raises:
            InvalidProgress: If the payload breaks the board rules
            UserNotFound: If the user has no record
        """
        progress = Progress.from_dict(payload, max_rounds=self.max_rounds, word_length=WORD_LENGTH)
        self._require_user(user_id)

        with self._locks.hold(user_id):
            stored = self._require_user(user_id).progress
            was_over = bool(stored and stored.game_over)
            if not self.store.update(user_id, {'progress': progress}):
                raise UserNotFound()
        return progress, bool(progress and progress.game_over) and not was_over

    def load_progress(self, user_id: str) -> Optional[Progress]:
        return self._require_user(user_id).progress

    def end_session(self, user_id: str) -> Tuple[UserRecord, str]:
        """
        Resets the user onto a fresh secret.

        Returns:
            Tuple of (updated_record, new_secret)

        Raises:
            UserNotFound: If the user has no record
            SupplyExhausted: If no word is available; nothing is changed
        """
        self._require_user(user_id)

        with self._locks.hold(user_id):
            self._require_user(user_id)

            secret = self.supply.next_word(user_id)
            if secret is None:
                raise SupplyExhausted()

            self._assign_secret(user_id, secret)
            return self._require_user(user_id), secret

    def get_user(self, user_id: str) -> UserRecord:
        return self._require_user(user_id)

    def submit_word(self, from_user: str, raw_word: Any) -> Tuple[str, int]:
        """
        Queues a word for the opponent of from_user.

        Returns:
            Tuple of (opponent_id, opponent_queue_length)

        Raises:
            InvalidWord: If the word is not in the dictionary
            PairingUnavailable: If the supply is not paired or from_user has no opponent
        """
        word = self._normalize_word(raw_word)
        return self.supply.push_for_opponent(from_user, word)

    def pending_words(self, user_id: str) -> int:
        return self.supply.pending(user_id)


# Global service instance
_session_service = None


def get_session_service() -> Optional[SessionService]:
    """Get the global session service instance."""
    return _session_service


def initialize_session_service(store, supply, dictionary, **options) -> SessionService:
    """Initialize the global session service instance."""
    return install_session_service(SessionService(store, supply, dictionary, **options))


def install_session_service(service: SessionService) -> SessionService:
    """Install an already built service as the global instance."""
    global _session_service
    _session_service = service
    return _session_service
