"""
User Stores

Persistence for user records. Two implementations share one contract:

- ``get(user_id)`` returns a UserRecord or None
- ``insert_if_absent(user_id, fields)`` creates the record only if missing
- ``update(user_id, set_fields, increment)`` partial update with atomic
  counter increments; returns False when the record does not exist

Field names are the UserRecord attribute names. ``progress`` is stored in its
wire form.
"""

import copy
import threading
from typing import Any, Dict, Optional

from pymongo import MongoClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from ..errors import StorageFailure
from ..models.progress import Progress
from ..models.user import UserRecord

COUNTER_FIELDS = ('total_words', 'total_correct', 'rounds_used')


def _document_to_record(user_id: str, doc: Dict[str, Any]) -> UserRecord:
    return UserRecord(
        id=user_id,
        current_secret=doc.get('current_secret'),
        total_words=doc.get('total_words', 0),
        total_correct=doc.get('total_correct', 0),
        progress=Progress.from_dict(doc.get('progress')),
        solved=doc.get('solved', False),
        rounds_used=doc.get('rounds_used', 0)
    )


def _prepare_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    prepared = dict(fields)
    if isinstance(prepared.get('progress'), Progress):
        prepared['progress'] = prepared['progress'].to_dict()
    return prepared


def _check_increment(increment: Dict[str, int]) -> None:
    unknown = set(increment) - set(COUNTER_FIELDS)
    if unknown:
        raise ValueError(f"Cannot increment non-counter fields: {sorted(unknown)}")


class InMemoryUserStore:
    """Process-local store used for development and tests."""

    def __init__(self):
        self._users: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> Optional[UserRecord]:
        with self._lock:
            doc = self._users.get(user_id)
            if doc is None:
                return None
            return _document_to_record(user_id, copy.deepcopy(doc))

    def insert_if_absent(self, user_id: str, fields: Dict[str, Any]) -> bool:
        with self._lock:
            if user_id in self._users:
                return False
            doc = {'current_secret': None, 'total_words': 0, 'total_correct': 0,
                   'progress': None, 'solved': False, 'rounds_used': 0}
            doc.update(copy.deepcopy(_prepare_fields(fields)))
            self._users[user_id] = doc
            return True

    def update(self, user_id: str, set_fields: Optional[Dict[str, Any]] = None,
               increment: Optional[Dict[str, int]] = None) -> bool:
        increment = increment or {}
        _check_increment(increment)
        with self._lock:
            doc = self._users.get(user_id)
            if doc is None:
                return False
            doc.update(copy.deepcopy(_prepare_fields(set_fields or {})))
            for name, amount in increment.items():
                doc[name] = doc.get(name, 0) + amount
            return True

    def count(self) -> int:
        with self._lock:
            return len(self._users)


class MongoUserStore:
    """
    MongoDB-backed store. One document per user with ``_id`` set to the user id.
    """

    def __init__(self, collection):
        self.collection = collection

    @classmethod
    def connect(cls, mongo_uri: str, db_name: str) -> 'MongoUserStore':
        """
        Connect to MongoDB and return a store over the ``users`` collection.

        Raises:
            StorageFailure: If the server cannot be reached
        """
        client = MongoClient(mongo_uri, server_api=ServerApi('1'))
        try:
            client.admin.command('ping')
        except PyMongoError as e:
            raise StorageFailure(f"MongoDB connection error: {e}") from e
        return cls(client[db_name].users)

    def get(self, user_id: str) -> Optional[UserRecord]:
        try:
            doc = self.collection.find_one({'_id': user_id})
        except PyMongoError as e:
            raise StorageFailure(str(e)) from e
        if doc is None:
            return None
        return _document_to_record(user_id, doc)

    def insert_if_absent(self, user_id: str, fields: Dict[str, Any]) -> bool:
        doc = {'current_secret': None, 'total_words': 0, 'total_correct': 0,
               'progress': None, 'solved': False, 'rounds_used': 0}
        doc.update(_prepare_fields(fields))
        try:
            result = self.collection.update_one(
                {'_id': user_id},
                {'$setOnInsert': doc},
                upsert=True
            )
        except PyMongoError as e:
            raise StorageFailure(str(e)) from e
        return result.upserted_id is not None

    def update(self, user_id: str, set_fields: Optional[Dict[str, Any]] = None,
               increment: Optional[Dict[str, int]] = None) -> bool:
        increment = increment or {}
        _check_increment(increment)
        changes: Dict[str, Any] = {}
        if set_fields:
            changes['$set'] = _prepare_fields(set_fields)
        if increment:
            changes['$inc'] = dict(increment)
        try:
            if not changes:
                return self.collection.count_documents({'_id': user_id}, limit=1) > 0
            result = self.collection.update_one({'_id': user_id}, changes)
        except PyMongoError as e:
            raise StorageFailure(str(e)) from e
        return result.matched_count > 0

    def count(self) -> int:
        try:
            return self.collection.count_documents({})
        except PyMongoError as e:
            raise StorageFailure(str(e)) from e
