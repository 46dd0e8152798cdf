"""
User Controller

Handles user lookup, progress persistence and opponent word endpoints.
"""

from flask import Blueprint, current_app, request, jsonify
from ..utils.decorators import require_session_service
from ..utils.game_logger import game_logger
from ..utils.helpers import error_response, require_json_body

user_bp = Blueprint('user', __name__)


@user_bp.route('/user/<user_id>', methods=['GET'])
@require_session_service
def get_user(session_service, user_id):
    """Return the stored user record."""
    try:
        record = session_service.get_user(user_id)
        return jsonify({
            'success': True,
            'user': record.to_dict()
        })

    except Exception as e:
        return error_response('get_user', e, user_id)


@user_bp.route('/user/<user_id>/progress', methods=['POST'])
@require_session_service
def save_progress(session_service, user_id):
    """Overwrite the user's saved board."""
    data = require_json_body()
    try:
        game_logger.log_user_action(request, 'save_progress', user_id)

        progress, just_finished = session_service.save_progress(user_id, data.get('progress'))

        response_data = {
            'success': True,
            'progress': progress.to_dict() if progress else None
        }

        game_logger.log_server_response(request, 'save_progress', True, response_data, user_id)
        if just_finished and not progress.guesses[-1].is_win:
            game_logger.log_game_event(user_id, 'game_lost', request.remote_addr,
                                       rounds_used=len(progress.guesses))

        return jsonify(response_data)

    except Exception as e:
        return error_response('save_progress', e, user_id)


@user_bp.route('/user/<user_id>/progress', methods=['GET'])
@require_session_service
def load_progress(session_service, user_id):
    """Return the user's saved board, or null."""
    try:
        progress = session_service.load_progress(user_id)
        return jsonify({
            'success': True,
            'progress': progress.to_dict() if progress else None
        })

    except Exception as e:
        return error_response('load_progress', e, user_id)


@user_bp.route('/user/<user_id>/words', methods=['POST'])
@require_session_service
def submit_word(session_service, user_id):
    """Queue a word for the user's opponent and notify the opponent's room."""
    data = require_json_body()
    try:
        game_logger.log_user_action(request, 'submit_word', user_id)

        target, pending = session_service.submit_word(user_id, data.get('word'))

        current_app.socketio.emit('word_available', {
            'user': target,
            'pending': pending
        }, to=target)

        response_data = {
            'success': True,
            'target': target,
            'pending': pending
        }

        game_logger.log_server_response(request, 'submit_word', True, response_data, user_id)
        game_logger.log_game_event(user_id, 'word_queued', request.remote_addr,
                                   target=target, pending=pending)

        return jsonify(response_data)

    except Exception as e:
        return error_response('submit_word', e, user_id)


@user_bp.route('/user/<user_id>/words', methods=['GET'])
@require_session_service
def pending_words(session_service, user_id):
    """Number of opponent words waiting for the user."""
    try:
        return jsonify({
            'success': True,
            'pending': session_service.pending_words(user_id)
        })

    except Exception as e:
        return error_response('pending_words', e, user_id)
