"""
Wordle Activity Server - Main Entry Point

Builds the application from environment configuration and starts the
Flask-SocketIO server.
"""

import os

from . import create_app
from .config import config
from .utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config.get(os.getenv('APP_ENV', 'default'), config['default'])

    try:
        app, socketio = create_app(config_class)

        game_logger.logger.info(
            f"Wordle Activity Server starting on {config_class.HOST}:{config_class.PORT} "
            f"(supply={config_class.WORD_SUPPLY}, mongo={bool(config_class.MONGO_URI)}, "
            f"single_use_secret={config_class.SINGLE_USE_SECRET}, reveal_on_win={config_class.REVEAL_ON_WIN})"
        )

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        game_logger.logger.info("Wordle Activity Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
