"""Schemas for flight endpoints."""

from datetime import date
from typing import Literal, Optional

from pydantic import Field

from .base import HHMM_PATTERN, ApiSchema

FlightStatus = Literal["scheduled", "in-progress", "completed", "cancelled"]


class ScheduleFlightRequest(ApiSchema):
    """
    Request model for scheduling a flight.

    Arrival defaults to departure plus the route's estimated time and
    maximum passengers defaults to the aircraft's capacity.
    """

    player_id: int
    route_id: int
    aircraft_id: int
    flight_number: str = Field(..., min_length=1, max_length=16)
    departure_date: date
    departure_time: str = Field(..., pattern=HHMM_PATTERN)
    arrival_date: Optional[date] = None
    arrival_time: Optional[str] = Field(None, pattern=HHMM_PATTERN)
    maximum_passengers: Optional[int] = Field(None, gt=0)

    class Config:
        json_schema_extra = {
            "example": {
                "playerId": 1,
                "routeId": 1,
                "aircraftId": 1,
                "flightNumber": "ST-101",
                "departureDate": "2026-10-20",
                "departureTime": "08:00",
            }
        }


class UpdateFlightRequest(ApiSchema):
    """Request model for status and timetable changes."""

    status: Optional[FlightStatus] = None
    flight_number: Optional[str] = Field(None, min_length=1, max_length=16)
    departure_date: Optional[date] = None
    departure_time: Optional[str] = Field(None, pattern=HHMM_PATTERN)
    arrival_date: Optional[date] = None
    arrival_time: Optional[str] = Field(None, pattern=HHMM_PATTERN)
