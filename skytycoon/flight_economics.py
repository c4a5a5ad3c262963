"""Flight economics: distances, durations, bookings, fares and operating cost."""

import logging
import math
import random
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .config import EARTH_RADIUS_KM, Config
from .utils import to_money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlightEstimate:
    """Economics frozen onto a flight when it is scheduled."""

    booked_passengers: int
    booking_ratio: float
    average_fare: Decimal
    revenue: Decimal
    operating_cost: Decimal

    @property
    def profit(self) -> Decimal:
        return self.revenue - self.operating_cost


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> int:
    """
    Calculate great-circle distance with the haversine formula.

    Args:
        lat1: Latitude of point 1 in decimal degrees
        lon1: Longitude of point 1 in decimal degrees
        lat2: Latitude of point 2 in decimal degrees
        lon2: Longitude of point 2 in decimal degrees

    Returns:
        Distance in kilometers, rounded to the nearest km
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    # Clamp against rounding drift above 1.0 for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return round(EARTH_RADIUS_KM * c)


def flight_duration_minutes(
    distance: float, cruising_speed_kmh: float, ground_minutes: int = 30
) -> float:
    """
    Calculate block time for a flight.

    Cruise time at the given speed plus a fixed allowance for taxi,
    takeoff and landing.

    Args:
        distance: Distance in kilometers
        cruising_speed_kmh: Cruising speed in km/h
        ground_minutes: Ground-handling allowance in minutes

    Returns:
        Duration in minutes
    """
    if cruising_speed_kmh <= 0:
        raise ValueError(f"Cruising speed must be positive, got {cruising_speed_kmh}")
    if distance < 0:
        raise ValueError(f"Distance must be non-negative, got {distance}")

    return distance / cruising_speed_kmh * 60 + ground_minutes


def route_time_minutes(distance: int, config: Optional[Config] = None) -> int:
    """Estimated route time in whole minutes at the reference cruising speed."""
    config = config or Config()
    return round(
        flight_duration_minutes(
            distance, config.REFERENCE_CRUISING_SPEED, config.GROUND_TIME_MINUTES
        )
    )


def estimate_flight(
    seats: int,
    demand: int,
    rng: Optional[random.Random] = None,
    config: Optional[Config] = None,
) -> FlightEstimate:
    """
    Draw bookings, revenue and operating cost for a new flight.

    The booking ratio is drawn from the configured range, scaled by route
    demand and capped at the range maximum. Fare and cost ratio are drawn
    independently.

    Args:
        seats: Seats offered (maximum passengers)
        demand: Route demand percentage (0-100)
        rng: Random source (module random if None)
        config: Configuration with the draw ranges

    Returns:
        FlightEstimate with money rounded to cents
    """
    rng = rng or random.Random()
    config = config or Config()

    ratio = rng.uniform(config.BOOKING_RATIO_MIN, config.BOOKING_RATIO_MAX)
    adjusted_ratio = min(config.BOOKING_RATIO_MAX, ratio * (demand / 100))
    booked = math.floor(seats * adjusted_ratio)

    average_fare = to_money(rng.uniform(config.FARE_MIN, config.FARE_MAX))
    revenue = to_money(booked * average_fare)

    cost_ratio = rng.uniform(config.COST_RATIO_MIN, config.COST_RATIO_MAX)
    operating_cost = to_money(revenue * Decimal(str(cost_ratio)))

    logger.debug(
        f"Estimated flight: {booked}/{seats} booked ({adjusted_ratio:.2%}), "
        f"fare {average_fare}, revenue {revenue}, cost {operating_cost}"
    )

    return FlightEstimate(
        booked_passengers=booked,
        booking_ratio=adjusted_ratio,
        average_fare=average_fare,
        revenue=revenue,
        operating_cost=operating_cost,
    )
