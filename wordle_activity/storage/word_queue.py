"""
Word Queues

Per-user FIFO queues of words submitted by an opponent. Each pop is atomic
with respect to the check that decided there was something to pop.
"""

import json
import os
import tempfile
import threading
from typing import Dict, List, Optional

from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from ..errors import StorageFailure


class JsonFileWordQueue:
    """
    Queues persisted as a JSON object ``{user_id: [word, ...]}``.

    Every push and pop rewrites the file through a temporary file and an
    atomic rename while holding the queue lock.
    """

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, List[str]]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageFailure(f"Failed to read word queue: {e}") from e
        if not isinstance(data, dict):
            raise StorageFailure("Word queue file must contain an object")
        return data

    def _write(self, data: Dict[str, List[str]]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix='.tmp')
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StorageFailure(f"Failed to write word queue: {e}") from e

    def push_word(self, user_id: str, word: str) -> int:
        """Append a word to the user's queue and return the new queue length."""
        with self._lock:
            data = self._read()
            queue = data.setdefault(user_id, [])
            queue.append(word)
            self._write(data)
            return len(queue)

    def push_front(self, user_id: str, word: str) -> int:
        """Put a word back at the head of the user's queue."""
        with self._lock:
            data = self._read()
            queue = data.setdefault(user_id, [])
            queue.insert(0, word)
            self._write(data)
            return len(queue)

    def pop_next(self, user_id: str) -> Optional[str]:
        """Remove and return the oldest queued word, or None if the queue is empty."""
        with self._lock:
            data = self._read()
            queue = data.get(user_id) or []
            if not queue:
                return None
            word = queue.pop(0)
            data[user_id] = queue
            self._write(data)
            return word

    def pending(self, user_id: str) -> int:
        with self._lock:
            return len(self._read().get(user_id) or [])


class MongoWordQueue:
    """Queues stored as ``{_id: user_id, words: [...]}`` documents."""

    def __init__(self, collection):
        self.collection = collection

    def push_word(self, user_id: str, word: str) -> int:
        try:
            doc = self.collection.find_one_and_update(
                {'_id': user_id},
                {'$push': {'words': word}},
                upsert=True,
                return_document=ReturnDocument.AFTER
            )
        except PyMongoError as e:
            raise StorageFailure(str(e)) from e
        return len(doc['words'])

    def push_front(self, user_id: str, word: str) -> int:
        try:
            doc = self.collection.find_one_and_update(
                {'_id': user_id},
                {'$push': {'words': {'$each': [word], '$position': 0}}},
                upsert=True,
                return_document=ReturnDocument.AFTER
            )
        except PyMongoError as e:
            raise StorageFailure(str(e)) from e
        return len(doc['words'])

    def pop_next(self, user_id: str) -> Optional[str]:
        try:
            doc = self.collection.find_one_and_update(
                {'_id': user_id, 'words.0': {'$exists': True}},
                {'$pop': {'words': -1}},
                return_document=ReturnDocument.BEFORE
            )
        except PyMongoError as e:
            raise StorageFailure(str(e)) from e
        if doc is None:
            return None
        return doc['words'][0]

    def pending(self, user_id: str) -> int:
        try:
            doc = self.collection.find_one({'_id': user_id})
        except PyMongoError as e:
            raise StorageFailure(str(e)) from e
        return len(doc['words']) if doc else 0
