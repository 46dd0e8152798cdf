"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_session_service
from .game_logger import game_logger
from .helpers import error_response, request_user, require_json_body
from .locks import KeyedLocks

__all__ = ['require_session_service', 'game_logger', 'error_response', 'request_user', 'require_json_body', 'KeyedLocks']
