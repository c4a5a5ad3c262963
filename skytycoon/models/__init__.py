"""Domain models package."""

from .player import Player
from .aircraft import Aircraft
from .airport import Airport
from .route import Route
from .flight import Flight
from .transaction import Transaction

__all__ = [
    "Player",
    "Aircraft",
    "Airport",
    "Route",
    "Flight",
    "Transaction",
]
