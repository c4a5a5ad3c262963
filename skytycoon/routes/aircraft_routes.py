"""Routes for aircraft endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from ..aircraft_catalog import list_models
from ..models import Aircraft
from ..schemas.aircraft_schemas import (
    AircraftModelResponse,
    PurchaseAircraftRequest,
    UpdateAircraftRequest,
)
from ..services.game_service import GameService
from ..services.singleton import get_game_service

router = APIRouter(prefix="/api/aircraft", tags=["aircraft"])


@router.post("", response_model=Aircraft, status_code=201)
async def purchase_aircraft(
    request: PurchaseAircraftRequest,
    service: GameService = Depends(get_game_service),
):
    """
    Purchase an aircraft for a player.

    The price is debited and a purchase transaction is recorded.

    Returns:
        The new aircraft (400 if the balance is too low)
    """
    return service.purchase_aircraft(request)


@router.get("/models", response_model=List[AircraftModelResponse])
async def get_aircraft_models():
    """List the purchasable aircraft models."""
    return [AircraftModelResponse(**entry) for entry in list_models()]


@router.get("/player/{player_id}", response_model=List[Aircraft])
async def get_player_aircraft(player_id: int, service: GameService = Depends(get_game_service)):
    """List a player's fleet."""
    return service.list_aircraft(player_id)


@router.patch("/{aircraft_id}", response_model=Aircraft)
async def update_aircraft(
    aircraft_id: int,
    request: UpdateAircraftRequest,
    service: GameService = Depends(get_game_service),
):
    """Change an aircraft's status, maintenance date or amenities."""
    return service.update_aircraft(aircraft_id, request)
