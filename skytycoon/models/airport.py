"""Airport model."""

from typing import Optional

from .base import GameModel


class Airport(GameModel):
    """Represents an airport in the global reference data."""

    id: int
    code: str
    name: str
    city: str
    country: str
    latitude: float
    longitude: float
    demand_rating: Optional[int] = None  # 1-10
    landing_fee: Optional[int] = None
    slots: Optional[int] = None

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "code": "JFK",
                "name": "John F. Kennedy International Airport",
                "city": "New York",
                "country": "USA",
                "latitude": 40.6413,
                "longitude": -73.7781,
                "demandRating": 9,
                "landingFee": 25000,
                "slots": 100,
            }
        }
