"""Service for game operations: players, fleet, network, schedule and ledger."""

import hashlib
import logging
import os
import random
import threading
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Dict, List, Optional

from ..aircraft_catalog import generate_registration
from ..config import (
    AIRCRAFT_ACTIVE,
    FLIGHT_COMPLETED,
    FLIGHT_SCHEDULED,
    FLIGHT_TRANSITIONS,
    TRANSACTION_PURCHASE,
    TRANSACTION_REVENUE,
    Config,
)
from ..errors import ConflictError, InsufficientFundsError, NotFoundError, ValidationError
from ..flight_economics import distance_km, estimate_flight, route_time_minutes
from ..models import Aircraft, Airport, Flight, Player, Route, Transaction
from ..route_demand import calculate_route_demand
from ..schemas import (
    CreateTransactionRequest,
    PurchaseAircraftRequest,
    ScheduleFlightRequest,
    UpdateAircraftRequest,
    UpdateFlightRequest,
)
from ..storage import MemoryStorage
from ..utils import add_minutes, format_money, to_money
from ..validator import FlightScheduleValidator

logger = logging.getLogger(__name__)

PASSWORD_ITERATIONS = 100_000


def hash_password(password: str, salt: Optional[bytes] = None) -> str:
    """Hash a password as "pbkdf2_sha256$iterations$salt$digest"."""
    salt = salt or os.urandom(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PASSWORD_ITERATIONS)
    return f"pbkdf2_sha256${PASSWORD_ITERATIONS}${salt.hex()}${digest.hex()}"


class GameService:
    """
    Service for managing game state and operations.

    Every operation that reads and then rewrites a player's balance runs
    under that player's lock, so concurrent requests for the same player
    cannot lose updates.
    """

    def __init__(
        self,
        storage: Optional[MemoryStorage] = None,
        config: Optional[Config] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize game service.

        Args:
            storage: Backing store (seeded from the airports CSV if None)
            config: Configuration (read from the environment if None)
            rng: Random source for economics and registrations
        """
        self.config = config or Config()
        self.storage = storage if storage is not None else MemoryStorage.from_csv(self.config.AIRPORTS_CSV)
        self.rng = rng or random.Random(self.config.RANDOM_SEED)
        self.validator = FlightScheduleValidator()
        self._player_locks: Dict[int, threading.RLock] = {}
        self._locks_guard = threading.Lock()
        self._registration_lock = threading.Lock()

    def _lock_for(self, player_id: int) -> threading.RLock:
        """Return the player's lock; unknown players raise NotFoundError."""
        with self._locks_guard:
            lock = self._player_locks.get(player_id)
            if lock is None:
                self._require_player(player_id)
                lock = self._player_locks[player_id] = threading.RLock()
            return lock

    def _require_player(self, player_id: int) -> Player:
        player = self.storage.get_player(player_id)
        if player is None:
            raise NotFoundError(f"Player {player_id} not found")
        return player

    def _require_airport(self, code: str) -> Airport:
        airport = self.storage.get_airport_by_code(code)
        if airport is None:
            raise NotFoundError(f"Airport {code} not found")
        return airport

    # Players

    def create_player(self, username: str, password: str) -> Player:
        """
        Create a player with the starting balance at the default hub.

        Raises:
            ConflictError: If the username is taken
        """
        with self._registration_lock:
            if self.storage.get_player_by_username(username) is not None:
                raise ConflictError("Username already exists")

            player = self.storage.create_player(
                username=username,
                password_hash=hash_password(password),
                money=to_money(self.config.STARTING_MONEY),
                current_date=self.config.START_DATE or date.today(),
                hub=self.config.DEFAULT_HUB,
                last_login=datetime.now(),
            )

        logger.info(f"Player {player.id} ({username}) created with {format_money(player.money)}")
        return player

    def get_player(self, player_id: int) -> Player:
        return self._require_player(player_id)

    def update_player(self, player_id: int, hub: Optional[str] = None) -> Player:
        """Change a player's hub airport."""
        player = self._require_player(player_id)
        if hub is None:
            return player

        airport = self._require_airport(hub)
        player = self.storage.update_player(player_id, hub=airport.code)
        logger.info(f"Player {player_id} moved hub to {airport.code}")
        return player

    def save_game(self, player_id: int) -> Player:
        """Record the save time; the store already holds the game state."""
        self._require_player(player_id)
        return self.storage.update_player(player_id, last_login=datetime.now())

    # Fleet

    def purchase_aircraft(self, request: PurchaseAircraftRequest) -> Aircraft:
        """
        Buy an aircraft, debit the price and post a purchase transaction.

        Args:
            request: Purchase request

        Returns:
            The new aircraft

        Raises:
            NotFoundError: If the player does not exist
            InsufficientFundsError: If the balance is below the price
        """
        with self._lock_for(request.player_id):
            player = self._require_player(request.player_id)
            price = to_money(request.purchase_price)

            if player.money < price:
                raise InsufficientFundsError(
                    f"Insufficient funds: balance {player.money} is below price {price}"
                )

            registration = request.registration or generate_registration(player.hub, self.rng)
            purchase_date = request.purchase_date or player.current_date
            maintenance_due = request.maintenance_due or (
                purchase_date + timedelta(days=self.config.MAINTENANCE_INTERVAL_DAYS)
            )

            aircraft = self.storage.create_aircraft(
                player_id=player.id,
                model=request.model,
                registration=registration,
                capacity=request.capacity,
                range=request.range,
                cruising_speed=request.cruising_speed,
                fuel_efficiency=request.fuel_efficiency,
                status=AIRCRAFT_ACTIVE,
                purchase_price=price,
                purchase_date=purchase_date,
                maintenance_due=maintenance_due,
                has_wifi=request.has_wifi,
                has_entertainment=request.has_entertainment,
                has_premium_seating=request.has_premium_seating,
            )

            self.storage.update_player(player.id, money=to_money(player.money - price))
            self.storage.create_transaction(
                player_id=player.id,
                amount=-price,
                type=TRANSACTION_PURCHASE,
                description=f"Purchased {aircraft.model} ({aircraft.registration})",
                date=player.current_date,
            )

        logger.info(
            f"Player {player.id} purchased {aircraft.model} {aircraft.registration} "
            f"for {format_money(price)}"
        )
        return aircraft

    def list_aircraft(self, player_id: int) -> List[Aircraft]:
        return self.storage.get_aircraft_by_player(player_id)

    def update_aircraft(self, aircraft_id: int, request: UpdateAircraftRequest) -> Aircraft:
        aircraft = self.storage.get_aircraft(aircraft_id)
        if aircraft is None:
            raise NotFoundError(f"Aircraft {aircraft_id} not found")

        updates = request.model_dump(exclude_unset=True, exclude_none=True)
        if not updates:
            return aircraft

        logger.debug(f"Updating aircraft {aircraft.registration}: {updates}")
        return self.storage.update_aircraft(aircraft_id, **updates)

    # Airports

    def list_airports(self) -> List[Airport]:
        return self.storage.get_all_airports()

    def get_airport(self, code: str) -> Airport:
        return self._require_airport(code)

    # Routes

    def create_route(self, player_id: int, origin_code: str, destination_code: str) -> Route:
        """
        Open a route between two airports.

        Distance, estimated time and demand are derived once here and never
        recomputed.

        Raises:
            NotFoundError: If the player or either airport is unknown
            ValidationError: If origin and destination are the same
            ConflictError: If the player already flies this route
        """
        origin_code = origin_code.upper()
        destination_code = destination_code.upper()

        with self._lock_for(player_id):
            player = self._require_player(player_id)

            if origin_code == destination_code:
                raise ValidationError("Origin and destination must differ")

            existing = self.storage.get_route_by_origin_destination(
                player_id, origin_code, destination_code
            )
            if existing is not None:
                raise ConflictError("Route already exists")

            origin = self.storage.get_airport_by_code(origin_code)
            destination = self.storage.get_airport_by_code(destination_code)
            if origin is None or destination is None:
                raise NotFoundError("One or both airports not found")

            distance = distance_km(
                origin.latitude, origin.longitude, destination.latitude, destination.longitude
            )
            route = self.storage.create_route(
                player_id=player_id,
                origin_code=origin_code,
                destination_code=destination_code,
                distance=distance,
                estimated_time=route_time_minutes(distance, self.config),
                demand=calculate_route_demand(origin, destination),
                established=player.current_date,
            )

        logger.info(
            f"Player {player_id} opened route {route.label()}: "
            f"{route.distance} km, {route.estimated_time} min, demand {route.demand}%"
        )
        return route

    def list_routes(self, player_id: int) -> List[Route]:
        return self.storage.get_routes_by_player(player_id)

    # Flights

    def schedule_flight(self, request: ScheduleFlightRequest) -> Flight:
        """
        Schedule a flight and freeze its bookings, revenue and operating cost.

        Args:
            request: Flight scheduling request

        Returns:
            The new flight

        Raises:
            NotFoundError: If the player, or an aircraft/route it owns, is missing
            ValidationError: If the schedule validator rejects the flight
        """
        with self._lock_for(request.player_id):
            player = self._require_player(request.player_id)

            aircraft = self.storage.get_aircraft(request.aircraft_id)
            if aircraft is None or aircraft.player_id != player.id:
                raise NotFoundError("Aircraft not found or does not belong to player")

            route = self.storage.get_route(request.route_id)
            if route is None or route.player_id != player.id:
                raise NotFoundError("Route not found or does not belong to player")

            report = self.validator.validate(request, aircraft, route, player.current_date)
            for warning in report.warnings:
                logger.warning(f"Flight {request.flight_number}: {warning}")
            if not report.is_valid():
                raise ValidationError("Invalid flight data", details=report.errors)

            seats = request.maximum_passengers or aircraft.capacity
            if request.arrival_date is not None:
                arrival_date, arrival_time = request.arrival_date, request.arrival_time
            else:
                arrival_date, arrival_time = add_minutes(
                    request.departure_date, request.departure_time, route.estimated_time
                )

            estimate = estimate_flight(seats, route.demand, self.rng, self.config)

            flight = self.storage.create_flight(
                player_id=player.id,
                route_id=route.id,
                aircraft_id=aircraft.id,
                flight_number=request.flight_number,
                departure_date=request.departure_date,
                departure_time=request.departure_time,
                arrival_date=arrival_date,
                arrival_time=arrival_time,
                booked_passengers=estimate.booked_passengers,
                maximum_passengers=seats,
                status=FLIGHT_SCHEDULED,
                revenue=estimate.revenue,
                operating_cost=estimate.operating_cost,
            )

        logger.info(
            f"Scheduled {flight.flight_number} on {route.label()} {flight.departure_date} "
            f"{flight.departure_time}: {flight.booked_passengers}/{seats} booked, "
            f"expected profit {format_money(estimate.profit)}"
        )
        return flight

    def list_flights(self, player_id: int) -> List[Flight]:
        return self.storage.get_flights_by_player(player_id)

    def upcoming_flights(self, player_id: int) -> List[Flight]:
        player = self._require_player(player_id)
        return self.storage.get_upcoming_flights_by_player(player_id, player.current_date)

    def update_flight(self, flight_id: int, request: UpdateFlightRequest) -> Flight:
        """
        Change a flight's status or timetable.

        Raises:
            NotFoundError: If the flight does not exist
            ConflictError: If the status change is not allowed
        """
        flight = self.storage.get_flight(flight_id)
        if flight is None:
            raise NotFoundError(f"Flight {flight_id} not found")

        with self._lock_for(flight.player_id):
            flight = self.storage.get_flight(flight_id)
            updates = request.model_dump(exclude_unset=True, exclude_none=True)

            new_status = updates.get("status")
            if new_status is not None and new_status != flight.status:
                if new_status not in FLIGHT_TRANSITIONS[flight.status]:
                    raise ConflictError(
                        f"Flight {flight.flight_number} cannot change from "
                        f"{flight.status} to {new_status}"
                    )

            if not updates:
                return flight
            return self.storage.update_flight(flight_id, **updates)

    # Ledger

    def record_transaction(self, request: CreateTransactionRequest) -> Transaction:
        """Post a ledger entry and apply its amount to the player's balance."""
        with self._lock_for(request.player_id):
            player = self._require_player(request.player_id)
            amount = to_money(request.amount)

            transaction = self.storage.create_transaction(
                player_id=player.id,
                amount=amount,
                type=request.type,
                description=request.description,
                date=request.date or player.current_date,
            )
            self.storage.update_player(player.id, money=to_money(player.money + amount))

        logger.info(f"Player {player.id} {request.type} {format_money(amount)}: {request.description}")
        return transaction

    def list_transactions(self, player_id: int) -> List[Transaction]:
        return self.storage.get_transactions_by_player(player_id)

    def financial_summary(self, player_id: int) -> Dict:
        """
        Summarise a player's ledger.

        Returns:
            Dictionary with balance, total_revenue, total_expenses,
            net_income and transaction_count
        """
        player = self._require_player(player_id)
        transactions = self.storage.get_transactions_by_player(player_id)

        total_revenue = sum(
            (t.amount for t in transactions if t.type == TRANSACTION_REVENUE), Decimal("0.00")
        )
        total_expenses = sum((-t.amount for t in transactions if t.amount < 0), Decimal("0.00"))
        net_income = sum((t.amount for t in transactions), Decimal("0.00"))

        return {
            "balance": player.money,
            "total_revenue": to_money(total_revenue),
            "total_expenses": to_money(total_expenses),
            "net_income": to_money(net_income),
            "transaction_count": len(transactions),
        }

    # Game clock

    def advance_day(self, player_id: int) -> Dict:
        """
        Advance the player's calendar by one day and settle departed flights.

        Every scheduled flight departing before the new date is marked
        completed and its precomputed profit (revenue minus operating cost)
        is booked as one revenue transaction. Changes already applied stay
        in place if a later step fails.

        Args:
            player_id: Player whose calendar advances

        Returns:
            Dictionary with the updated player, completed_flights and revenue

        Raises:
            NotFoundError: If the player does not exist
        """
        with self._lock_for(player_id):
            player = self._require_player(player_id)
            new_date = player.current_date + timedelta(days=1)
            self.storage.update_player(player_id, current_date=new_date)

            due_flights = [
                f for f in self.storage.get_flights_by_player(player_id)
                if f.status == FLIGHT_SCHEDULED and f.departure_date < new_date
            ]

            total_profit = Decimal("0.00")
            for flight in due_flights:
                self.storage.update_flight(flight.id, status=FLIGHT_COMPLETED)

                profit = to_money(flight.profit)
                self.storage.create_transaction(
                    player_id=player_id,
                    amount=profit,
                    type=TRANSACTION_REVENUE,
                    description=f"Flight {flight.flight_number} ({flight.booked_passengers} passengers)",
                    date=new_date,
                )
                total_profit += profit

            if total_profit != 0:
                current = self.storage.get_player(player_id)
                self.storage.update_player(player_id, money=to_money(current.money + total_profit))

            updated_player = self.storage.get_player(player_id)

        logger.info(
            f"Player {player_id} advanced to {new_date}: {len(due_flights)} flights completed, "
            f"profit {format_money(total_profit)}, balance {format_money(updated_player.money)}"
        )
        return {
            "player": updated_player,
            "completed_flights": len(due_flights),
            "revenue": to_money(total_profit),
        }
