"""
Storage Package

User record stores and opponent word queues.
"""

from .user_store import InMemoryUserStore, MongoUserStore
from .word_queue import JsonFileWordQueue, MongoWordQueue

__all__ = ['InMemoryUserStore', 'MongoUserStore', 'JsonFileWordQueue', 'MongoWordQueue']
