"""Services package."""

from .game_service import GameService
from .singleton import get_game_service

__all__ = ["GameService", "get_game_service"]
