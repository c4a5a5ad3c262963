"""Tests for aircraft catalog module."""

import random
import re
from decimal import Decimal

from skytycoon.aircraft_catalog import generate_registration, list_models, registration_prefix


def test_list_models():
    """Test catalog entries carry their key as id."""
    models = {m["id"]: m for m in list_models()}

    assert set(models) == {"A320neo", "A330-300"}
    assert models["A320neo"]["capacity"] == 180
    assert isinstance(models["A330-300"]["price"], Decimal)


def test_registration_prefix_lookup():
    """Test prefix lookup is case-insensitive with a fallback."""
    assert registration_prefix("LHR") == "G-"
    assert registration_prefix("syd") == "VH-"
    assert registration_prefix("XXX") == "X-"


def test_us_registration():
    """Test US hubs get N plus four digits."""
    rng = random.Random(1)
    for _ in range(20):
        assert re.fullmatch(r"N\d{4}", generate_registration("JFK", rng))


def test_foreign_registration():
    """Test other hubs get their prefix plus three letters."""
    rng = random.Random(2)
    for _ in range(20):
        assert re.fullmatch(r"G-[A-HJ-NP-Z]{3}", generate_registration("LHR", rng))


def test_unknown_hub_registration():
    """Test unknown hubs use the fallback prefix."""
    assert generate_registration("ZZZ", random.Random(3)).startswith("X-")


def test_registration_reproducible_with_seed():
    """Test the same seed gives the same registration."""
    assert generate_registration("CDG", random.Random(9)) == generate_registration("CDG", random.Random(9))


def test_cabin_layouts_add_up():
    """Test every layout's capacity equals its seat total."""
    for model in list_models():
        assert len(model["configurations"]) == 3
        for layout in model["configurations"]:
            assert layout["capacity"] == sum(layout["seats"].values())
            assert layout["premium"] == (layout["seats"]["economy"] < layout["capacity"])
