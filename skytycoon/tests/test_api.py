"""Tests for the HTTP API."""

import random
from datetime import date

import pytest
from fastapi.testclient import TestClient

from skytycoon.config import Config
from skytycoon.main import app
from skytycoon.services.game_service import GameService
from skytycoon.services.singleton import get_game_service
from skytycoon.storage import MemoryStorage


@pytest.fixture
def client():
    """Create a test client backed by an isolated game service."""
    service = GameService(
        storage=MemoryStorage.from_csv(),
        config=Config(START_DATE=date(2026, 10, 19)),
        rng=random.Random(5),
    )
    app.dependency_overrides[get_game_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def player(client):
    """Create a player through the API."""
    response = client.post("/api/players", json={"username": "captain", "password": "secret"})
    assert response.status_code == 201
    return response.json()


def buy_aircraft(client, player_id, price="1000000.00"):
    return client.post(
        "/api/aircraft",
        json={
            "playerId": player_id,
            "model": "Airbus A320neo",
            "capacity": 180,
            "range": 6500,
            "cruisingSpeed": 870,
            "fuelEfficiency": "2.40",
            "purchasePrice": price,
        },
    )


def test_health(client):
    """Test the health endpoint."""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_player(player):
    """Test player payload uses camelCase and hides the password."""
    assert player["money"] == "10000000.00"
    assert player["currentDate"] == "2026-10-19"
    assert player["hub"] == "JFK"
    assert "passwordHash" not in player
    assert "password" not in player


def test_create_player_duplicate(client, player):
    """Test duplicate usernames return 409."""
    response = client.post("/api/players", json={"username": "captain", "password": "secret"})
    assert response.status_code == 409
    assert response.json()["message"] == "Username already exists"


def test_invalid_body_returns_400(client):
    """Test schema failures return 400 with field errors."""
    response = client.post("/api/players", json={"username": "ab", "password": "secret"})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request data"
    assert response.json()["errors"]


def test_unknown_field_rejected(client, player):
    """Test request bodies reject unknown fields."""
    response = client.patch(f"/api/players/{player['id']}", json={"money": "1"})
    assert response.status_code == 400


def test_unknown_player_returns_404(client):
    """Test unknown players return 404."""
    response = client.get("/api/players/999")
    assert response.status_code == 404


def test_update_player_hub(client, player):
    """Test changing hub."""
    response = client.patch(f"/api/players/{player['id']}", json={"hub": "lhr"})
    assert response.status_code == 200
    assert response.json()["hub"] == "LHR"


def test_airports(client):
    """Test airport reference data endpoints."""
    airports = client.get("/api/airports").json()
    assert len(airports) == 19

    response = client.get("/api/airports/lhr")
    assert response.status_code == 200
    assert response.json()["demandRating"] == 10
    assert client.get("/api/airports/XXX").status_code == 404


def test_aircraft_models(client):
    """Test the aircraft catalog endpoint."""
    models = client.get("/api/aircraft/models").json()

    assert [m["id"] for m in models] == ["A320neo", "A330-300"]
    assert models[0]["cruisingSpeed"] == 870
    assert models[0]["price"] == "101500000.00"


def test_purchase_insufficient_funds(client, player):
    """Test purchases above the balance return 400 and change nothing."""
    response = buy_aircraft(client, player["id"], price="101500000.00")

    assert response.status_code == 400
    assert response.json()["message"].startswith("Insufficient funds")
    assert client.get(f"/api/aircraft/player/{player['id']}").json() == []
    assert client.get(f"/api/players/{player['id']}").json()["money"] == "10000000.00"


def test_route_conflict(client, player):
    """Test opening the same route twice returns 409."""
    body = {"playerId": player["id"], "originCode": "JFK", "destinationCode": "LHR"}

    assert client.post("/api/routes", json=body).status_code == 201
    assert client.post("/api/routes", json=body).status_code == 409


def test_schedule_validation_errors(client, player):
    """Test rule failures return 400 with details."""
    aircraft = buy_aircraft(client, player["id"]).json()
    route = client.post(
        "/api/routes", json={"playerId": player["id"], "originCode": "JFK", "destinationCode": "SYD"}
    ).json()

    response = client.post(
        "/api/flights",
        json={
            "playerId": player["id"],
            "routeId": route["id"],
            "aircraftId": aircraft["id"],
            "flightNumber": "ST900",
            "departureDate": "2026-10-19",
            "departureTime": "08:00",
        },
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid flight data"
    assert response.json()["errors"]


def test_full_day_cycle(client, player):
    """Test buying, routing, scheduling and settling a flight."""
    player_id = player["id"]

    aircraft = buy_aircraft(client, player_id)
    assert aircraft.status_code == 201
    assert aircraft.json()["registration"].startswith("N")

    route = client.post(
        "/api/routes", json={"playerId": player_id, "originCode": "JFK", "destinationCode": "LHR"}
    )
    assert route.status_code == 201

    flight = client.post(
        "/api/flights",
        json={
            "playerId": player_id,
            "routeId": route.json()["id"],
            "aircraftId": aircraft.json()["id"],
            "flightNumber": "ST101",
            "departureDate": "2026-10-19",
            "departureTime": "08:00",
        },
    )
    assert flight.status_code == 201
    assert flight.json()["status"] == "scheduled"

    upcoming = client.get(f"/api/flights/player/{player_id}/upcoming").json()
    assert [f["flightNumber"] for f in upcoming] == ["ST101"]

    advanced = client.post(f"/api/game/{player_id}/advance-day")
    assert advanced.status_code == 200
    body = advanced.json()
    assert body["completedFlights"] == 1
    assert body["player"]["currentDate"] == "2026-10-20"

    ledger = client.get(f"/api/transactions/player/{player_id}").json()
    assert [t["type"] for t in ledger] == ["revenue", "purchase"]
    assert ledger[0]["amount"] == body["revenue"]

    summary = client.get(f"/api/transactions/player/{player_id}/summary").json()
    assert summary["transactionCount"] == 2
    assert summary["balance"] == body["player"]["money"]

    flight_id = flight.json()["id"]
    response = client.patch(f"/api/flights/{flight_id}", json={"status": "scheduled"})
    assert response.status_code == 409


def test_create_transaction(client, player):
    """Test posting a manual ledger entry."""
    response = client.post(
        "/api/transactions",
        json={"playerId": player["id"], "amount": "-500", "type": "expense", "description": "Fuel"},
    )

    assert response.status_code == 201
    assert response.json()["amount"] == "-500.00"
    assert client.get(f"/api/players/{player['id']}").json()["money"] == "9999500.00"


def test_save_game(client, player):
    """Test the save endpoint."""
    response = client.post(f"/api/game/{player['id']}/save")

    assert response.status_code == 200
    assert response.json() == {"message": "Game saved successfully"}


def test_oversized_amount_rejected(client, player):
    """Test amounts beyond the money precision are rejected as bad input."""
    response = client.post(
        "/api/transactions",
        json={"playerId": player["id"], "amount": "1e27", "type": "revenue", "description": "Jackpot"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request data"
    assert client.get(f"/api/players/{player['id']}").json()["money"] == "10000000.00"


def test_sub_cent_amount_rejected(client, player):
    """Test amounts with more than two decimal places are rejected."""
    response = client.post(
        "/api/transactions",
        json={"playerId": player["id"], "amount": "0.001", "type": "expense", "description": "Rounding"},
    )

    assert response.status_code == 400


def test_oversized_purchase_price_rejected(client, player):
    """Test purchase prices beyond the money precision are rejected."""
    response = buy_aircraft(client, player["id"], price="1e27")

    assert response.status_code == 400
    assert client.get(f"/api/aircraft/player/{player['id']}").json() == []


def test_aircraft_models_carry_cabin_layouts(client):
    """Test each catalog model lists its seating layouts."""
    models = {m["id"]: m for m in client.get("/api/aircraft/models").json()}

    layouts = models["A320neo"]["configurations"]
    assert [c["name"] for c in layouts] == ["All Economy", "Mixed Cabin", "Business Focus"]
    assert layouts[1]["seats"] == {"economy": 126, "premium": 12, "business": 12, "first": 0}
    assert layouts[0]["premium"] is False
