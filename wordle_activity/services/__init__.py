"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import WordDictionary
from .evaluator import evaluate, is_winning
from .session_service import (
    GuessOutcome, SessionService, get_session_service, initialize_session_service,
    install_session_service
)
from .word_supply import PairedQueueSupply, PairingRoster, RandomPoolSupply

__all__ = [
    'WordDictionary', 'evaluate', 'is_winning',
    'GuessOutcome', 'SessionService', 'get_session_service', 'initialize_session_service',
    'install_session_service',
    'PairedQueueSupply', 'PairingRoster', 'RandomPoolSupply'
]
