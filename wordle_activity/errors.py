"""
Error Taxonomy

Every failure the session layer can report to a client. Each error carries
the HTTP status the controllers answer with.
"""


class WordleError(Exception):
    """Base class for errors surfaced to the client as structured responses."""

    status_code = 400

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidWord(WordleError):
    """Guess or submitted word is not in the dictionary."""

    def __init__(self, message: str = 'Not a valid Wordle word'):
        super().__init__(message, 400)


class NoActiveGame(WordleError):
    """Guess submitted while no secret is assigned."""

    def __init__(self, message: str = 'No word assigned'):
        super().__init__(message, 400)


class InvalidProgress(WordleError):
    """Progress payload is malformed or inconsistent."""

    def __init__(self, message: str):
        super().__init__(message, 400)


class PairingUnavailable(WordleError):
    """Opponent words are not available for this user or supply."""

    def __init__(self, message: str = 'No opponent configured'):
        super().__init__(message, 400)


class UserNotFound(WordleError):
    def __init__(self, message: str = 'not found'):
        super().__init__(message, 404)


class GameAlreadyOver(WordleError):
    """The current secret was solved or all rounds are used."""

    def __init__(self, message: str = 'Game is already over'):
        super().__init__(message, 409)


class SupplyExhausted(WordleError):
    """No word available to assign; recoverable by waiting for the opponent."""

    def __init__(self, message: str = 'No word available'):
        super().__init__(message, 409)


class StorageFailure(WordleError):
    """Persistence layer error, surfaced as-is."""

    def __init__(self, message: str):
        super().__init__(message, 500)
