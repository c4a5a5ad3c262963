"""Process-wide game service shared by the API routes."""

import threading
from typing import Optional

from .game_service import GameService

_game_service: Optional[GameService] = None
_create_lock = threading.Lock()


def get_game_service() -> GameService:
    """
    Return the shared game service, creating it on first use.

    Creation is guarded because synchronous handlers run in a threadpool.

    Returns:
        GameService instance
    """
    global _game_service
    if _game_service is None:
        with _create_lock:
            if _game_service is None:
                _game_service = GameService()
    return _game_service
