"""Routes for a player's route network."""

from typing import List

from fastapi import APIRouter, Depends

from ..models import Route
from ..schemas.route_schemas import CreateRouteRequest
from ..services.game_service import GameService
from ..services.singleton import get_game_service

router = APIRouter(prefix="/api/routes", tags=["routes"])


@router.post("", response_model=Route, status_code=201)
async def create_route(
    request: CreateRouteRequest,
    service: GameService = Depends(get_game_service),
):
    """
    Open a route between two airports.

    Returns:
        The new route (409 if it exists, 404 for unknown airports)
    """
    return service.create_route(request.player_id, request.origin_code, request.destination_code)


@router.get("/player/{player_id}", response_model=List[Route])
async def get_player_routes(player_id: int, service: GameService = Depends(get_game_service)):
    """List a player's routes."""
    return service.list_routes(player_id)
