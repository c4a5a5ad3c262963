"""Route model."""

from datetime import date

from .base import GameModel


class Route(GameModel):
    """Represents a player's origin/destination pair."""

    id: int
    player_id: int
    origin_code: str
    destination_code: str
    distance: int  # km
    estimated_time: int  # minutes
    demand: int  # percentage 0-100
    established: date

    def label(self) -> str:
        """Return route as ORIGIN-DESTINATION."""
        return f"{self.origin_code}-{self.destination_code}"
