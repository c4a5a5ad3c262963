"""Routes package for API endpoints."""

from .player_routes import router as player_router
from .aircraft_routes import router as aircraft_router
from .airport_routes import router as airport_router
from .network_routes import router as network_router
from .flight_routes import router as flight_router
from .transaction_routes import router as transaction_router
from .game_routes import router as game_router

__all__ = [
    "player_router",
    "aircraft_router",
    "airport_router",
    "network_router",
    "flight_router",
    "transaction_router",
    "game_router",
]
