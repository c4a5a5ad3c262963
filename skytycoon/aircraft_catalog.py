"""Aircraft catalog lookups and registration generation."""

import random
from typing import Dict, List, Optional

from .config import (
    AIRCRAFT_MODELS,
    DEFAULT_REGISTRATION_PREFIX,
    REGISTRATION_LETTERS,
    REGISTRATION_PREFIXES,
)


def list_models() -> List[Dict]:
    """Return the purchasable models with their catalog key as "id"."""
    return [{"id": key, **details} for key, details in AIRCRAFT_MODELS.items()]


def registration_prefix(hub_code: str) -> str:
    return REGISTRATION_PREFIXES.get(hub_code.upper(), DEFAULT_REGISTRATION_PREFIX)


def generate_registration(hub_code: str, rng: Optional[random.Random] = None) -> str:
    """
    Generate an aircraft registration for a hub's country.

    US hubs get "N" plus four digits; everything else gets the country
    prefix plus three letters.

    Examples:
        N4821, G-KQT, VH-ABX
    """
    rng = rng or random.Random()
    prefix = registration_prefix(hub_code)

    if prefix == "N":
        return f"N{rng.randint(1000, 9999)}"

    letters = "".join(rng.choice(REGISTRATION_LETTERS) for _ in range(3))
    return f"{prefix}{letters}"
