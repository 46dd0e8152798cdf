"""
WebSocket Event Handlers

Players join a room named after their user id to hear when an opponent has
queued a word for them.
"""

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.session_service import get_session_service
from ..utils.game_logger import game_logger


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join')
    def handle_join(data):
        """Subscribe this connection to the user's room."""
        user_id = (data or {}).get('user')
        if not user_id or not isinstance(user_id, str):
            emit('error', {'error': 'user is required'})
            return

        join_room(user_id)

        pending = None
        session_service = get_session_service()
        if session_service and session_service.supply.kind == 'paired':
            pending = session_service.pending_words(user_id)

        game_logger.log_game_event(user_id, 'socket_joined', request.remote_addr, sid=request.sid)
        emit('joined', {'user': user_id, 'pending': pending})

    @socketio.on('leave')
    def handle_leave(data):
        """Unsubscribe this connection from the user's room."""
        user_id = (data or {}).get('user')
        if not user_id or not isinstance(user_id, str):
            emit('error', {'error': 'user is required'})
            return

        leave_room(user_id)
        emit('left', {'user': user_id})
