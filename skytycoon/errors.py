"""Domain errors raised by the game service and mapped to HTTP responses."""

from typing import Any, List, Optional


class GameError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(GameError):
    """Raised when a player, aircraft, airport, route or flight is missing."""

    status_code = 404


class ConflictError(GameError):
    """Raised on duplicate usernames/routes and illegal status changes."""

    status_code = 409


class ValidationError(GameError):
    """Raised when a request passes the schema but fails game rules."""

    status_code = 400

    def __init__(self, message: str, details: Optional[List[Any]] = None):
        super().__init__(message)
        self.details = details or []


class InsufficientFundsError(GameError):
    """Raised when a purchase exceeds the player's balance."""

    status_code = 400
