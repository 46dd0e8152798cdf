"""
Pytest fixtures for the Wordle activity tests.
"""

import random

import pytest

from wordle_activity import create_app
from wordle_activity.config import TestingConfig
from wordle_activity.services.dictionary import WordDictionary
from wordle_activity.services.session_service import SessionService
from wordle_activity.services.word_supply import (
    PairedQueueSupply, PairingRoster, RandomPoolSupply
)
from wordle_activity.storage.user_store import InMemoryUserStore
from wordle_activity.storage.word_queue import JsonFileWordQueue

WORDS = [
    "APPLE", "PAPAW", "CRANE", "SLATE", "STONE", "GRAPE", "LIGHT", "BRAIN",
    "CHAIR", "MUSIC", "WATER", "PLANT", "BOOKS", "TRACE", "ROBIN", "LEVEL"
]


@pytest.fixture
def dictionary() -> WordDictionary:
    return WordDictionary(WORDS)


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def pool_supply() -> RandomPoolSupply:
    """Single-word pool so every assignment is CRANE."""
    return RandomPoolSupply(["CRANE"], rng=random.Random(7))


@pytest.fixture
def word_queue(tmp_path) -> JsonFileWordQueue:
    return JsonFileWordQueue(str(tmp_path / "word_queue.json"))


@pytest.fixture
def paired_supply(word_queue) -> PairedQueueSupply:
    return PairedQueueSupply(word_queue, PairingRoster.parse("alice:bob"))


@pytest.fixture
def service(store, pool_supply, dictionary) -> SessionService:
    return SessionService(store, pool_supply, dictionary)


@pytest.fixture
def paired_service(store, paired_supply, dictionary) -> SessionService:
    return SessionService(store, paired_supply, dictionary)


@pytest.fixture
def make_app(tmp_path):
    """Build a Flask app around a prepared session service."""
    class _Config(TestingConfig):
        LOG_DIR = str(tmp_path / "logs")

    def _make(session_service):
        app, socketio = create_app(_Config, session_service=session_service)
        return app, socketio

    return _make


def progress_payload(guesses, game_over=False, row=None):
    """Client-style progress body for a list of (word, verdicts) pairs."""
    if row is None:
        row = len(guesses) - 1 if game_over else len(guesses)
    return {
        "guesses": [{"word": word, "result": list(result)} for word, result in guesses],
        "row": row,
        "gameOver": game_over
    }
