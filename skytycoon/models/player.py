"""Player model."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import Field

from .base import GameModel


class Player(GameModel):
    """Represents a player's airline: balance, simulated date and hub."""

    id: int
    username: str
    password_hash: str = Field(exclude=True, repr=False)
    money: Decimal
    current_date: date
    hub: str
    last_login: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "username": "captain",
                "money": "10000000.00",
                "currentDate": "2026-10-19",
                "hub": "JFK",
                "lastLogin": "2026-10-19T08:30:00",
            }
        }
