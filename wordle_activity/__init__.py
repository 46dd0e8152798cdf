"""
Wordle Activity Server Application Package

Backend for a Wordle clone that runs standalone or embedded in a chat
activity: per-user sessions, guess scoring, saved boards and opponent word
queues.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def build_session_service(config_class=Config):
    """
    Wire stores, supply and dictionary from configuration and install the
    global session service.
    """
    from .config.game_settings import load_secret_pool
    from .services.dictionary import WordDictionary
    from .services.session_service import initialize_session_service
    from .services.word_supply import PairedQueueSupply, PairingRoster, RandomPoolSupply
    from .storage.user_store import InMemoryUserStore, MongoUserStore
    from .storage.word_queue import JsonFileWordQueue, MongoWordQueue

    dictionary = WordDictionary.from_file(config_class.VALID_WORDS_PATH)

    if config_class.MONGO_URI:
        store = MongoUserStore.connect(config_class.MONGO_URI, config_class.MONGO_DB_NAME)
        queue = MongoWordQueue(store.collection.database.word_queues)
    else:
        store = InMemoryUserStore()
        queue = JsonFileWordQueue(config_class.WORD_QUEUE_PATH)

    if config_class.WORD_SUPPLY == 'paired':
        supply = PairedQueueSupply(queue, PairingRoster.parse(config_class.PAIRINGS))
    elif config_class.WORD_SUPPLY == 'pool':
        supply = RandomPoolSupply(load_secret_pool(config_class.SECRET_WORDS))
    else:
        raise ValueError(f"Unknown WORD_SUPPLY '{config_class.WORD_SUPPLY}', expected 'pool' or 'paired'")

    return initialize_session_service(
        store, supply, dictionary,
        single_use_secret=config_class.SINGLE_USE_SECRET,
        reveal_on_win=config_class.REVEAL_ON_WIN
    )


def create_app(config_class=Config, session_service=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        session_service: Pre-built service to install instead of wiring one
            from config_class

    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    from .services.session_service import install_session_service
    from .utils.game_logger import game_logger

    app = Flask(__name__)
    app.config.from_object(config_class)

    game_logger.configure(config_class.LOG_DIR, config_class.LOG_LEVEL)

    if session_service is None:
        build_session_service(config_class)
    else:
        install_session_service(session_service)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.session_controller import session_bp
    from .controllers.user_controller import user_bp

    app.register_blueprint(session_bp, url_prefix='/api')
    app.register_blueprint(user_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
