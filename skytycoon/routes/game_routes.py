"""Routes for game clock and save endpoints."""

import logging

from fastapi import APIRouter, Depends

from ..schemas.game_schemas import AdvanceDayResponse, HealthResponse, MessageResponse
from ..services.game_service import GameService
from ..services.singleton import get_game_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["game"])


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok")


@router.post("/game/{player_id}/advance-day", response_model=AdvanceDayResponse)
async def advance_day(player_id: int, service: GameService = Depends(get_game_service)):
    """
    Advance the player's calendar by one day.

    Scheduled flights that departed before the new date are completed and
    their profit is booked.

    Returns:
        Updated player, number of completed flights and profit booked
    """
    return AdvanceDayResponse(**service.advance_day(player_id))


@router.post("/game/{player_id}/save", response_model=MessageResponse)
async def save_game(player_id: int, service: GameService = Depends(get_game_service)):
    """Record the save time for a player."""
    service.save_game(player_id)
    logger.info(f"Game saved for player {player_id}")
    return MessageResponse(message="Game saved successfully")
