"""
Controller Decorators

Contains decorators shared by the HTTP endpoints.
"""

from functools import wraps
from flask import jsonify


def require_session_service(f):
    """
    Decorator to pass the session service into an endpoint.

    Answers 500 when the service has not been initialized.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.session_service import get_session_service

        session_service = get_session_service()
        if not session_service:
            return jsonify({
                'success': False,
                'error': 'Session service unavailable'
            }), 500

        return f(session_service, *args, **kwargs)

    return decorated_function
