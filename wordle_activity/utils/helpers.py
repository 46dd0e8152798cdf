"""
Helper Functions

Contains request helpers shared by the controllers.
"""

from typing import Any, Dict

from flask import jsonify, request

from ..errors import WordleError
from .game_logger import game_logger


def require_json_body() -> Dict[str, Any]:
    """Return the JSON body as a dict; missing or non-object bodies become {}."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def request_user(data: Dict[str, Any]) -> str:
    """Player id from a request body, defaulting to 'unknown'."""
    user = data.get('user')
    if not user or not isinstance(user, str):
        return 'unknown'
    return user


def error_response(action: str, error: Exception, user_id: str = None, **log_details):
    """
    Build the JSON error reply for a failed action and log it.

    WordleError subclasses answer with their own status; anything else is a 500.
    """
    if isinstance(error, WordleError):
        status = error.status_code
        message = error.message
    else:
        status = 500
        message = str(error)

    if status >= 500:
        game_logger.log_error(request, error, action, user_id)

    body = {
        'success': False,
        'error': message
    }
    game_logger.log_server_response(request, action, False, body, user_id, **log_details)
    return jsonify(body), status
