"""Routes for flight scheduling endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from ..models import Flight
from ..schemas.flight_schemas import ScheduleFlightRequest, UpdateFlightRequest
from ..services.game_service import GameService
from ..services.singleton import get_game_service

router = APIRouter(prefix="/api/flights", tags=["flights"])


@router.post("", response_model=Flight, status_code=201)
async def schedule_flight(
    request: ScheduleFlightRequest,
    service: GameService = Depends(get_game_service),
):
    """
    Schedule a flight.

    Bookings, revenue and operating cost are estimated once here and
    booked unchanged when the flight completes.

    Returns:
        The new flight
    """
    return service.schedule_flight(request)


@router.get("/player/{player_id}", response_model=List[Flight])
async def get_player_flights(player_id: int, service: GameService = Depends(get_game_service)):
    """List all of a player's flights."""
    return service.list_flights(player_id)


@router.get("/player/{player_id}/upcoming", response_model=List[Flight])
async def get_upcoming_flights(player_id: int, service: GameService = Depends(get_game_service)):
    """
    List open flights departing on or after the player's current date.

    Returns:
        Flights ordered by departure
    """
    return service.upcoming_flights(player_id)


@router.patch("/{flight_id}", response_model=Flight)
async def update_flight(
    flight_id: int,
    request: UpdateFlightRequest,
    service: GameService = Depends(get_game_service),
):
    """Change a flight's status or timetable (409 on an illegal status change)."""
    return service.update_flight(flight_id, request)
