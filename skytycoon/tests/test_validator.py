"""Tests for validator module."""

from datetime import date
from decimal import Decimal

import pytest

from skytycoon.models import Aircraft, Route
from skytycoon.schemas import ScheduleFlightRequest
from skytycoon.validator import FlightScheduleValidator

TODAY = date(2026, 10, 19)


@pytest.fixture
def validator():
    """Create validator for testing."""
    return FlightScheduleValidator()


@pytest.fixture
def aircraft():
    """Create sample aircraft for testing."""
    return Aircraft(
        id=1,
        player_id=1,
        model="Airbus A320neo",
        registration="N1234",
        capacity=180,
        range=6500,
        cruising_speed=870,
        fuel_efficiency=Decimal("2.40"),
        status="active",
        purchase_price=Decimal("1000000.00"),
        purchase_date=TODAY,
        maintenance_due=date(2026, 11, 18),
    )


@pytest.fixture
def route():
    """Create sample route for testing."""
    return Route(
        id=1,
        player_id=1,
        origin_code="JFK",
        destination_code="LHR",
        distance=5555,
        estimated_time=422,
        demand=48,
        established=TODAY,
    )


def make_request(**overrides):
    fields = dict(
        player_id=1,
        route_id=1,
        aircraft_id=1,
        flight_number="ST101",
        departure_date=TODAY,
        departure_time="08:00",
    )
    fields.update(overrides)
    return ScheduleFlightRequest(**fields)


def test_valid_flight(validator, aircraft, route):
    """Test a plain flight passes."""
    report = validator.validate(make_request(), aircraft, route, TODAY)

    assert report.is_valid()
    assert report.warnings == []


def test_over_capacity(validator, aircraft, route):
    """Test more seats than the aircraft has is rejected."""
    report = validator.validate(make_request(maximum_passengers=200), aircraft, route, TODAY)

    assert not report.is_valid()
    assert "capacity" in report.errors[0]


def test_out_of_range(validator, aircraft, route):
    """Test a route longer than the aircraft's range is rejected."""
    short_range = aircraft.model_copy(update={"range": 3000})
    report = validator.validate(make_request(), short_range, route, TODAY)

    assert not report.is_valid()
    assert "JFK-LHR" in report.errors[0]


def test_aircraft_in_maintenance(validator, aircraft, route):
    """Test aircraft in maintenance cannot be scheduled."""
    grounded = aircraft.model_copy(update={"status": "maintenance"})
    report = validator.validate(make_request(), grounded, route, TODAY)

    assert not report.is_valid()


def test_aircraft_en_route_warns(validator, aircraft, route):
    """Test en-route aircraft only produce a warning."""
    flying = aircraft.model_copy(update={"status": "en-route"})
    report = validator.validate(make_request(), flying, route, TODAY)

    assert report.is_valid()
    assert len(report.warnings) == 1


def test_maintenance_due_warns(validator, aircraft, route):
    """Test departing on or after the maintenance date warns."""
    request = make_request(departure_date=date(2026, 11, 18))
    report = validator.validate(request, aircraft, route, TODAY)

    assert report.is_valid()
    assert "maintenance" in report.warnings[0]


def test_departure_in_the_past(validator, aircraft, route):
    """Test departures before the current date are rejected."""
    request = make_request(departure_date=date(2026, 10, 18))
    report = validator.validate(request, aircraft, route, TODAY)

    assert not report.is_valid()


def test_arrival_needs_date_and_time(validator, aircraft, route):
    """Test arrival date without time is rejected."""
    request = make_request(arrival_date=TODAY)
    report = validator.validate(request, aircraft, route, TODAY)

    assert report.errors == ["Arrival date and arrival time must be given together"]


def test_arrival_before_departure(validator, aircraft, route):
    """Test arrival must come after departure."""
    request = make_request(arrival_date=TODAY, arrival_time="07:00")
    report = validator.validate(request, aircraft, route, TODAY)

    assert report.errors == ["Arrival must be after departure"]


def test_overnight_arrival(validator, aircraft, route):
    """Test an arrival on the next day is accepted."""
    request = make_request(departure_time="22:00", arrival_date=date(2026, 10, 20), arrival_time="05:00")
    report = validator.validate(request, aircraft, route, TODAY)

    assert report.is_valid()
