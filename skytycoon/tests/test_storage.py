"""Tests for storage module."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from skytycoon.storage import MemoryStorage, SequentialIdAllocator


@pytest.fixture
def storage():
    """Create an empty store for testing."""
    return MemoryStorage()


@pytest.fixture
def player(storage):
    """Create a player for testing."""
    return storage.create_player(
        username="captain",
        password_hash="x",
        money=Decimal("10000000.00"),
        current_date=date(2026, 10, 19),
        hub="JFK",
        last_login=datetime(2026, 10, 19, 8, 0),
    )


def add_flight(storage, player_id, departure_date, departure_time="08:00", status="scheduled"):
    return storage.create_flight(
        player_id=player_id,
        route_id=1,
        aircraft_id=1,
        flight_number="ST101",
        departure_date=departure_date,
        departure_time=departure_time,
        arrival_date=departure_date,
        arrival_time="15:00",
        booked_passengers=150,
        maximum_passengers=180,
        status=status,
        revenue=Decimal("30000.00"),
        operating_cost=Decimal("20000.00"),
    )


def add_transaction(storage, player_id, day, amount="100.00"):
    return storage.create_transaction(
        player_id=player_id,
        amount=Decimal(amount),
        type="expense",
        description="Fuel",
        date=day,
    )


def test_ids_are_sequential_per_entity(storage, player):
    """Test each entity type has its own id sequence."""
    first = add_flight(storage, player.id, date(2026, 10, 20))
    second = add_flight(storage, player.id, date(2026, 10, 21))
    entry = add_transaction(storage, player.id, date(2026, 10, 19))

    assert player.id == 1
    assert (first.id, second.id) == (1, 2)
    assert entry.id == 1


def test_custom_id_allocator():
    """Test the id allocator factory is used for every entity."""
    storage = MemoryStorage(id_allocator_factory=lambda: SequentialIdAllocator(start=100))
    airport = storage.create_airport(
        code="JFK", name="JFK", city="New York", country="USA", latitude=40.6, longitude=-73.7
    )

    assert airport.id == 100


def test_from_csv_seeds_airports():
    """Test the packaged CSV seeds the airport table."""
    storage = MemoryStorage.from_csv()

    assert len(storage.get_all_airports()) == 19
    assert storage.get_airport_by_code("lhr").code == "LHR"
    assert storage.get_airport_by_code("XXX") is None


def test_update_replaces_record(storage, player):
    """Test updates return and store a new record."""
    updated = storage.update_player(player.id, money=Decimal("5.00"))

    assert updated.money == Decimal("5.00")
    assert storage.get_player(player.id).money == Decimal("5.00")
    assert player.money == Decimal("10000000.00")


def test_update_missing_record(storage):
    """Test updating an unknown id returns None."""
    assert storage.update_player(99, hub="LHR") is None


def test_update_rejects_unknown_fields(storage, player):
    """Test unknown fields and id changes are rejected."""
    with pytest.raises(KeyError):
        storage.update_player(player.id, balance=Decimal("1.00"))
    with pytest.raises(KeyError):
        storage.update_player(player.id, id=5)


def test_get_player_by_username(storage, player):
    """Test lookup by username."""
    assert storage.get_player_by_username("captain").id == player.id
    assert storage.get_player_by_username("nobody") is None


def test_route_lookup_is_directional(storage, player):
    """Test route lookup by origin and destination."""
    storage.create_route(
        player_id=player.id,
        origin_code="JFK",
        destination_code="LHR",
        distance=5555,
        estimated_time=422,
        demand=48,
        established=date(2026, 10, 19),
    )

    assert storage.get_route_by_origin_destination(player.id, "JFK", "LHR") is not None
    assert storage.get_route_by_origin_destination(player.id, "LHR", "JFK") is None
    assert storage.get_route_by_origin_destination(player.id + 1, "JFK", "LHR") is None


def test_upcoming_flights_filter_and_order(storage, player):
    """Test upcoming flights exclude past and closed flights and sort by departure."""
    late = add_flight(storage, player.id, date(2026, 10, 21), "06:00")
    early = add_flight(storage, player.id, date(2026, 10, 20), "18:00")
    same_day = add_flight(storage, player.id, date(2026, 10, 19), "09:00")
    add_flight(storage, player.id, date(2026, 10, 18))
    add_flight(storage, player.id, date(2026, 10, 22), status="completed")
    add_flight(storage, player.id, date(2026, 10, 22), status="cancelled")
    in_progress = add_flight(storage, player.id, date(2026, 10, 20), "20:00", status="in-progress")

    upcoming = storage.get_upcoming_flights_by_player(player.id, date(2026, 10, 19))

    assert [f.id for f in upcoming] == [same_day.id, early.id, in_progress.id, late.id]


def test_transactions_newest_first(storage, player):
    """Test the ledger is ordered by date then id, newest first."""
    old = add_transaction(storage, player.id, date(2026, 10, 18))
    newest = add_transaction(storage, player.id, date(2026, 10, 20))
    first_today = add_transaction(storage, player.id, date(2026, 10, 19))
    second_today = add_transaction(storage, player.id, date(2026, 10, 19))

    ledger = storage.get_transactions_by_player(player.id)

    assert [t.id for t in ledger] == [newest.id, second_today.id, first_today.id, old.id]
