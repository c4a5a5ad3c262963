"""Routes for airport reference data."""

from typing import List

from fastapi import APIRouter, Depends

from ..models import Airport
from ..services.game_service import GameService
from ..services.singleton import get_game_service

router = APIRouter(prefix="/api/airports", tags=["airports"])


@router.get("", response_model=List[Airport])
async def get_airports(service: GameService = Depends(get_game_service)):
    return service.list_airports()


@router.get("/{code}", response_model=Airport)
async def get_airport(code: str, service: GameService = Depends(get_game_service)):
    return service.get_airport(code)
