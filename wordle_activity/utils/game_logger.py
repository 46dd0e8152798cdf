"""
Game Logger Module

Structured logging for user actions, server responses and game events.
"""

import logging
import json
import os
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

# Response fields that would give away a secret
_SECRET_FIELDS = ('CurrentWord', 'newSecret', 'secret')


class GameLogger:
    """
    Centralized logging system for the Wordle activity server.

    Features:
    - User action tracking with IP and player identification
    - Server response logging with secrets masked
    - Game event logging
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.logger = None
        self.configure(log_dir, level)

    def configure(self, log_dir: str, level: str = "INFO"):
        """(Re)build handlers, e.g. once the app config is known."""
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper())
        if not isinstance(self.level, int):
            self.level = logging.INFO
        self.logger = self._setup_logger()

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('wordle_activity')
        logger.setLevel(self.level)
        logger.propagate = False

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        # File handler for detailed logs
        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console handler for only important messages
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _get_user_identity(self, request, user_id: Optional[str] = None) -> Dict[str, Optional[str]]:
        """Extract user identity information from request."""
        return {
            'user_ip': getattr(request, 'remote_addr', None) or 'unknown',
            'user_id': user_id
        }

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, Optional[str]],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        request,
                        action: str,
                        user_id: Optional[str] = None,
                        **kwargs):
        """
        Log user actions with full context.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'start_session', 'submit_guess')
            user_id: Player identifier if known
            **kwargs: Additional details to log
        """
        details = {
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }

        log_message = self._create_log_entry(
            'USER_ACTION', action, self._get_user_identity(request, user_id), details
        )
        self.logger.info(log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            user_id: Optional[str] = None,
                            **kwargs):
        """
        Log server responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            user_id: Player identifier if known
            **kwargs: Additional details to log
        """
        details = {
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(
            event_type, action, self._get_user_identity(request, user_id), details
        )

        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_game_event(self,
                       user_id: Optional[str],
                       event: str,
                       user_ip: str,
                       **kwargs):
        """
        Log game-specific events (wins, losses, resets, queued words).

        Args:
            user_id: Player identifier
            event: Type of game event (e.g., 'game_won', 'session_reset')
            user_ip: User's IP address
            **kwargs: Additional game details
        """
        user_info = {'user_ip': user_ip, 'user_id': user_id}
        log_message = self._create_log_entry('GAME_EVENT', event, user_info, dict(kwargs))
        self.logger.info(log_message)

    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  user_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            request: Flask request object
            error: Exception that occurred
            action: Action that was being performed
            user_id: Player identifier if known
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry(
            'ERROR', action, self._get_user_identity(request, user_id), details
        )
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Mask secrets and trim progress boards from response logs."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()
        for name in _SECRET_FIELDS:
            if sanitized.get(name):
                sanitized[name] = '*****'

        if isinstance(sanitized.get('user'), dict):
            sanitized['user'] = self._sanitize_response_data(sanitized['user'])

        for name in ('progress', 'GameProgress'):
            progress = sanitized.get(name)
            if isinstance(progress, dict):
                sanitized[name] = {
                    'row': progress.get('row'),
                    'gameOver': progress.get('gameOver'),
                    'guesses_count': len(progress.get('guesses', []))
                }

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'server_responses': 0,
            'game_events': 0,
            'errors': 0
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


# Global logger instance
game_logger = GameLogger(os.getenv('LOG_DIR', 'logs'), os.getenv('LOG_LEVEL', 'INFO'))
