"""Aircraft model."""

from datetime import date
from decimal import Decimal

from .base import GameModel


class Aircraft(GameModel):
    """Represents an aircraft owned by a player."""

    id: int
    player_id: int
    model: str
    registration: str
    capacity: int
    range: int  # km
    cruising_speed: int  # km/h
    fuel_efficiency: Decimal  # litres per passenger per 100km
    status: str
    purchase_price: Decimal
    purchase_date: date
    maintenance_due: date
    has_wifi: bool = False
    has_entertainment: bool = False
    has_premium_seating: bool = False

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "playerId": 1,
                "model": "Airbus A320neo",
                "registration": "N4821",
                "capacity": 180,
                "range": 6500,
                "cruisingSpeed": 870,
                "fuelEfficiency": "2.40",
                "status": "active",
                "purchasePrice": "101500000.00",
                "purchaseDate": "2026-10-19",
                "maintenanceDue": "2026-11-18",
                "hasWifi": False,
                "hasEntertainment": False,
                "hasPremiumSeating": False,
            }
        }
