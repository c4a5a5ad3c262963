"""Routes for player endpoints."""

from fastapi import APIRouter, Depends

from ..models import Player
from ..schemas.player_schemas import CreatePlayerRequest, UpdatePlayerRequest
from ..services.game_service import GameService
from ..services.singleton import get_game_service

router = APIRouter(prefix="/api/players", tags=["players"])


@router.post("", response_model=Player, status_code=201)
def create_player(
    request: CreatePlayerRequest,
    service: GameService = Depends(get_game_service),
):
    """
    Create a player with the starting balance.

    Returns:
        The new player (409 if the username is taken)
    """
    return service.create_player(request.username, request.password)


@router.get("/{player_id}", response_model=Player)
async def get_player(player_id: int, service: GameService = Depends(get_game_service)):
    """Get a player by id."""
    return service.get_player(player_id)


@router.patch("/{player_id}", response_model=Player)
async def update_player(
    player_id: int,
    request: UpdatePlayerRequest,
    service: GameService = Depends(get_game_service),
):
    """Change a player's hub airport."""
    return service.update_player(player_id, hub=request.hub)
