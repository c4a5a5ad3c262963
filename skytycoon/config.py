"""Configuration module for game constants, reference tables, and settings."""

from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Dict, Optional, Tuple

from pydantic_settings import BaseSettings


# Flight statuses
FLIGHT_SCHEDULED = "scheduled"
FLIGHT_IN_PROGRESS = "in-progress"
FLIGHT_COMPLETED = "completed"
FLIGHT_CANCELLED = "cancelled"
FLIGHT_STATUSES = [FLIGHT_SCHEDULED, FLIGHT_IN_PROGRESS, FLIGHT_COMPLETED, FLIGHT_CANCELLED]

# Allowed flight status transitions (nothing goes back to scheduled)
FLIGHT_TRANSITIONS: Dict[str, Tuple[str, ...]] = {
    FLIGHT_SCHEDULED: (FLIGHT_IN_PROGRESS, FLIGHT_COMPLETED, FLIGHT_CANCELLED),
    FLIGHT_IN_PROGRESS: (FLIGHT_COMPLETED, FLIGHT_CANCELLED),
    FLIGHT_COMPLETED: (),
    FLIGHT_CANCELLED: (),
}

# Aircraft statuses
AIRCRAFT_ACTIVE = "active"
AIRCRAFT_MAINTENANCE = "maintenance"
AIRCRAFT_EN_ROUTE = "en-route"
AIRCRAFT_STATUSES = [AIRCRAFT_ACTIVE, AIRCRAFT_MAINTENANCE, AIRCRAFT_EN_ROUTE]

# Transaction types
TRANSACTION_PURCHASE = "purchase"
TRANSACTION_REVENUE = "revenue"
TRANSACTION_EXPENSE = "expense"
TRANSACTION_TYPES = [TRANSACTION_PURCHASE, TRANSACTION_REVENUE, TRANSACTION_EXPENSE]


EARTH_RADIUS_KM = 6371.0


def _cabin(config_id: int, name: str, economy: int, premium: int, business: int, first: int) -> Dict:
    """Build a cabin layout; capacity is the total seat count."""
    return {
        "id": config_id,
        "name": name,
        "capacity": economy + premium + business + first,
        "premium": premium + business + first > 0,
        "seats": {"economy": economy, "premium": premium, "business": business, "first": first},
    }


# Purchasable aircraft models
# Format: default capacity (seats), range (km), cruising speed (km/h),
# fuel efficiency (litres per passenger per 100km), price, cabin layouts
AIRCRAFT_MODELS: Dict[str, Dict] = {
    "A320neo": {
        "name": "Airbus A320neo",
        "type": "Narrow-body",
        "capacity": 180,
        "range": 6500,
        "cruising_speed": 870,
        "fuel_efficiency": Decimal("2.40"),
        "price": Decimal("101500000.00"),
        "configurations": [
            _cabin(0, "All Economy", 180, 0, 0, 0),
            _cabin(1, "Mixed Cabin", 126, 12, 12, 0),
            _cabin(2, "Business Focus", 60, 24, 30, 6),
        ],
    },
    "A330-300": {
        "name": "Airbus A330-300",
        "type": "Wide-body",
        "capacity": 330,
        "range": 11300,
        "cruising_speed": 871,
        "fuel_efficiency": Decimal("3.20"),
        "price": Decimal("275400000.00"),
        "configurations": [
            _cabin(0, "All Economy", 440, 0, 0, 0),
            _cabin(1, "Two Class", 270, 0, 60, 0),
            _cabin(2, "Three Class", 180, 48, 30, 12),
        ],
    },
}


# Aircraft registration prefix by hub airport
REGISTRATION_PREFIXES: Dict[str, str] = {
    "SYD": "VH-",
    "JFK": "N",
    "LHR": "G-",
    "CDG": "F-",
    "DXB": "A6-",
    "HND": "JA-",
    "SIN": "9V-",
    "FRA": "D-",
    "AMS": "PH-",
    "ICN": "HL-",
    "ATL": "N",
    "MIA": "N",
    "SFO": "N",
    "LAX": "N",
    "PEK": "B-",
    "PVG": "B-",
    "GRU": "PP-",
    "MAN": "G-",
    "ORY": "F-",
}
DEFAULT_REGISTRATION_PREFIX = "X-"
REGISTRATION_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"


# Route pairs with extra competition (checked in both directions)
HIGH_COMPETITION_PAIRS = [
    ("JFK", "LHR"),
    ("JFK", "CDG"),
    ("LHR", "DXB"),
    ("SIN", "LHR"),
    ("HND", "SIN"),
]


AIRPORTS_CSV = str(Path(__file__).parent / "data" / "airports.csv")


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    # Player defaults
    STARTING_MONEY: Decimal = Decimal("10000000.00")
    DEFAULT_HUB: str = "JFK"
    START_DATE: Optional[date] = None  # None means today

    # Flight timing
    GROUND_TIME_MINUTES: int = 30
    REFERENCE_CRUISING_SPEED: int = 850  # km/h, used for route estimates

    # Flight economics draws
    BOOKING_RATIO_MIN: float = 0.70
    BOOKING_RATIO_MAX: float = 0.95
    FARE_MIN: float = 150.0
    FARE_MAX: float = 300.0
    COST_RATIO_MIN: float = 0.60
    COST_RATIO_MAX: float = 0.80

    # Fleet
    MAINTENANCE_INTERVAL_DAYS: int = 30

    # Reference data
    AIRPORTS_CSV: str = AIRPORTS_CSV

    # Seed for the economics random source (None for non-deterministic)
    RANDOM_SEED: Optional[int] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "skytycoon.log"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }
