"""Route competition and passenger demand from airport demand ratings."""

import logging

from .config import HIGH_COMPETITION_PAIRS
from .flight_economics import distance_km
from .models import Airport

logger = logging.getLogger(__name__)

SHORT_HAUL_KM = 1000
LONG_HAUL_KM = 8000

DEFAULT_COMPETITION = 5
DEFAULT_DEMAND = 50


def _airport_distance(origin: Airport, destination: Airport) -> int:
    return distance_km(origin.latitude, origin.longitude, destination.latitude, destination.longitude)


def is_high_competition_pair(origin_code: str, destination_code: str) -> bool:
    """Check both directions against the high-competition route list."""
    pair = (origin_code, destination_code)
    return pair in HIGH_COMPETITION_PAIRS or pair[::-1] in HIGH_COMPETITION_PAIRS


def calculate_competition(origin: Airport, destination: Airport) -> float:
    """
    Calculate competition on a route on a 1-10 scale.

    Base is the mean of both airports' demand ratings; busy city pairs
    add 2 and short-haul routes add 1.

    Args:
        origin: Origin airport
        destination: Destination airport

    Returns:
        Competition level clamped to [1, 10]
    """
    if origin.demand_rating is None or destination.demand_rating is None:
        return DEFAULT_COMPETITION

    competition = (origin.demand_rating + destination.demand_rating) / 2

    if is_high_competition_pair(origin.code, destination.code):
        competition += 2

    if _airport_distance(origin, destination) < SHORT_HAUL_KM:
        competition += 1

    return max(1, min(10, competition))


def calculate_route_demand(origin: Airport, destination: Airport) -> int:
    """
    Calculate passenger demand for a route as a percentage.

    Args:
        origin: Origin airport
        destination: Destination airport

    Returns:
        Demand clamped to [5, 100]
    """
    if origin.demand_rating is None or destination.demand_rating is None:
        logger.debug(
            f"No demand rating for {origin.code}-{destination.code}, using {DEFAULT_DEMAND}%"
        )
        return DEFAULT_DEMAND

    base_demand = (origin.demand_rating + destination.demand_rating) * 5

    distance = _airport_distance(origin, destination)
    if distance < SHORT_HAUL_KM:
        distance_multiplier = 1.2
    elif distance > LONG_HAUL_KM:
        distance_multiplier = 0.9
    else:
        distance_multiplier = 1.0

    competition_factor = 1 - calculate_competition(origin, destination) / 20

    demand = base_demand * distance_multiplier * competition_factor
    return round(max(5, min(100, demand)))
