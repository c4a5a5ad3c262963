"""Flight model."""

from datetime import date
from decimal import Decimal

from .base import GameModel


class Flight(GameModel):
    """Represents a scheduled flight with its frozen economics."""

    id: int
    player_id: int
    route_id: int
    aircraft_id: int
    flight_number: str
    departure_date: date
    departure_time: str  # HH:MM
    arrival_date: date
    arrival_time: str  # HH:MM
    booked_passengers: int = 0
    maximum_passengers: int
    status: str
    revenue: Decimal
    operating_cost: Decimal

    @property
    def profit(self) -> Decimal:
        """Revenue minus operating cost."""
        return self.revenue - self.operating_cost

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "playerId": 1,
                "routeId": 1,
                "aircraftId": 1,
                "flightNumber": "ST-101",
                "departureDate": "2026-10-20",
                "departureTime": "08:00",
                "arrivalDate": "2026-10-20",
                "arrivalTime": "15:12",
                "bookedPassengers": 152,
                "maximumPassengers": 180,
                "status": "scheduled",
                "revenue": "34200.00",
                "operatingCost": "23940.00",
            }
        }
