"""
Session Controller

Handles session lifecycle and guess endpoints.
"""

from flask import Blueprint, request, jsonify
from ..utils.decorators import require_session_service
from ..utils.game_logger import game_logger
from ..utils.helpers import error_response, request_user, require_json_body

session_bp = Blueprint('session', __name__)


@session_bp.route('/session/start', methods=['POST'])
@require_session_service
def start_session(session_service):
    """Create the user on first visit, or resume the stored game."""
    user_id = request_user(require_json_body())
    try:
        game_logger.log_user_action(request, 'start_session', user_id)

        record = session_service.start_session(user_id)

        response_data = {
            'success': True,
            'user': record.to_dict()
        }

        game_logger.log_server_response(
            request, 'start_session', True, response_data, user_id,
            waiting=record.current_secret is None,
            resumed=record.progress is not None
        )
        game_logger.log_game_event(user_id, 'session_started', request.remote_addr,
                                   total_words=record.total_words)

        return jsonify(response_data)

    except Exception as e:
        return error_response('start_session', e, user_id)


@session_bp.route('/guess', methods=['POST'])
@require_session_service
def submit_guess(session_service):
    """Score a guess against the user's secret."""
    data = require_json_body()
    user_id = request_user(data)
    word = data.get('word') or ''
    try:
        game_logger.log_user_action(request, 'submit_guess', user_id, guess=word)

        outcome = session_service.submit_guess(user_id, word)

        response_data = {
            'success': True,
            **outcome.to_dict()
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, user_id,
            guess=word.upper(), won=outcome.won
        )
        if outcome.won:
            game_logger.log_game_event(user_id, 'game_won', request.remote_addr,
                                       winning_guess=word.upper())

        return jsonify(response_data)

    except Exception as e:
        return error_response('submit_guess', e, user_id, attempted_guess=word)


@session_bp.route('/session/end', methods=['POST'])
@require_session_service
def end_session(session_service):
    """Reset the user onto a new secret."""
    user_id = request_user(require_json_body())
    try:
        game_logger.log_user_action(request, 'end_session', user_id)

        record, new_secret = session_service.end_session(user_id)

        response_data = {
            'success': True,
            'user': record.to_dict(),
            'newSecret': new_secret
        }

        game_logger.log_server_response(
            request, 'end_session', True, response_data, user_id,
            total_words=record.total_words
        )
        game_logger.log_game_event(user_id, 'session_reset', request.remote_addr,
                                   total_words=record.total_words,
                                   total_correct=record.total_correct)

        return jsonify(response_data)

    except Exception as e:
        return error_response('end_session', e, user_id)


@session_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    from ..services.session_service import get_session_service

    try:
        session_service = get_session_service()

        response_data = {
            'status': 'ok',
            'message': 'Wordle server is running',
            'service_available': session_service is not None,
            'word_supply': session_service.supply.kind if session_service else None,
            'dictionary_size': len(session_service.dictionary) if session_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        return jsonify({
            'status': 'error',
            'error': str(e)
        }), 500
