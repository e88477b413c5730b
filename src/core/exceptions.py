"""
Custom exceptions shared by all layers.

Everything derives from GameError, so the service's callers can catch one type.
"""


class GameError(Exception):
    """Base class for all Family Match errors."""


class InvalidInputError(GameError):
    """Identifiers handed to the deck builder cannot form a deck."""


class InvalidRequestError(GameError):
    """A request model failed validation."""


class GameStateError(GameError):
    """Operation not allowed in the current game status."""


class ConfirmationRequiredError(GameError):
    """A destructive operation was requested without explicit confirmation."""


class RepositoryError(GameError):
    """Persistence layer could not complete the request."""
