"""In-memory store for players, fleet, network, schedule and ledger."""

import itertools
import logging
import threading
from datetime import date
from typing import Any, Callable, Dict, List, Optional, TypeVar

from pydantic import BaseModel

from .config import AIRPORTS_CSV, FLIGHT_CANCELLED, FLIGHT_COMPLETED
from .data_loader import load_airports
from .models import Aircraft, Airport, Flight, Player, Route, Transaction

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class SequentialIdAllocator:
    """Hands out auto-incrementing integer ids."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        return next(self._counter)


IdAllocatorFactory = Callable[[], SequentialIdAllocator]


def _apply_updates(record: ModelT, updates: Dict[str, Any]) -> ModelT:
    """Return a copy of record with updates applied to known fields only."""
    fields = type(record).model_fields
    unknown = [key for key in updates if key not in fields or key == "id"]
    if unknown:
        raise KeyError(f"Cannot update fields {unknown} on {type(record).__name__}")
    return record.model_copy(update=updates)


class MemoryStorage:
    """
    Keeps one map per entity type, keyed by integer id.

    Records are immutable; updates replace the stored record. Each entity
    type gets its own id allocator from id_allocator_factory, so tests can
    build isolated stores with predictable ids.
    """

    ENTITIES = ("player", "aircraft", "airport", "route", "flight", "transaction")

    def __init__(
        self,
        airports: Optional[List[Dict[str, Any]]] = None,
        id_allocator_factory: IdAllocatorFactory = SequentialIdAllocator,
    ):
        """
        Initialize an empty store, optionally seeded with airports.

        Args:
            airports: Airport field dictionaries to load as reference data
            id_allocator_factory: Callable returning a fresh id allocator
        """
        self._players: Dict[int, Player] = {}
        self._aircraft: Dict[int, Aircraft] = {}
        self._airports: Dict[int, Airport] = {}
        self._routes: Dict[int, Route] = {}
        self._flights: Dict[int, Flight] = {}
        self._transactions: Dict[int, Transaction] = {}

        self._ids = {name: id_allocator_factory() for name in self.ENTITIES}
        self._lock = threading.RLock()

        for record in airports or []:
            self.create_airport(**record)

        logger.info(f"MemoryStorage initialized with {len(self._airports)} airports")

    @classmethod
    def from_csv(
        cls,
        csv_path: str = AIRPORTS_CSV,
        id_allocator_factory: IdAllocatorFactory = SequentialIdAllocator,
    ) -> "MemoryStorage":
        """Build a store seeded with airports parsed from csv_path."""
        return cls(airports=load_airports(csv_path), id_allocator_factory=id_allocator_factory)

    def _snapshot(self, table: Dict[int, ModelT]) -> List[ModelT]:
        """Copy a table's records under the store lock."""
        with self._lock:
            return list(table.values())

    def _insert(self, table: Dict[int, ModelT], entity: str, model: type, fields: Dict[str, Any]) -> ModelT:
        with self._lock:
            record = model(id=self._ids[entity].next_id(), **fields)
            table[record.id] = record
            return record

    def _update(self, table: Dict[int, ModelT], record_id: int, updates: Dict[str, Any]) -> Optional[ModelT]:
        with self._lock:
            record = table.get(record_id)
            if record is None:
                return None
            updated = _apply_updates(record, updates)
            table[record_id] = updated
            return updated

    # Players

    def get_player(self, player_id: int) -> Optional[Player]:
        return self._players.get(player_id)

    def get_player_by_username(self, username: str) -> Optional[Player]:
        return next((p for p in self._snapshot(self._players) if p.username == username), None)

    def create_player(self, **fields: Any) -> Player:
        return self._insert(self._players, "player", Player, fields)

    def update_player(self, player_id: int, **updates: Any) -> Optional[Player]:
        return self._update(self._players, player_id, updates)

    # Aircraft

    def get_aircraft(self, aircraft_id: int) -> Optional[Aircraft]:
        return self._aircraft.get(aircraft_id)

    def get_aircraft_by_player(self, player_id: int) -> List[Aircraft]:
        return [a for a in self._snapshot(self._aircraft) if a.player_id == player_id]

    def create_aircraft(self, **fields: Any) -> Aircraft:
        return self._insert(self._aircraft, "aircraft", Aircraft, fields)

    def update_aircraft(self, aircraft_id: int, **updates: Any) -> Optional[Aircraft]:
        return self._update(self._aircraft, aircraft_id, updates)

    # Airports

    def get_airport(self, airport_id: int) -> Optional[Airport]:
        return self._airports.get(airport_id)

    def get_airport_by_code(self, code: str) -> Optional[Airport]:
        code = code.upper()
        return next((a for a in self._snapshot(self._airports) if a.code == code), None)

    def get_all_airports(self) -> List[Airport]:
        return self._snapshot(self._airports)

    def create_airport(self, **fields: Any) -> Airport:
        return self._insert(self._airports, "airport", Airport, fields)

    # Routes

    def get_route(self, route_id: int) -> Optional[Route]:
        return self._routes.get(route_id)

    def get_routes_by_player(self, player_id: int) -> List[Route]:
        return [r for r in self._snapshot(self._routes) if r.player_id == player_id]

    def get_route_by_origin_destination(
        self, player_id: int, origin_code: str, destination_code: str
    ) -> Optional[Route]:
        return next(
            (
                r for r in self._snapshot(self._routes)
                if r.player_id == player_id
                and r.origin_code == origin_code
                and r.destination_code == destination_code
            ),
            None,
        )

    def create_route(self, **fields: Any) -> Route:
        return self._insert(self._routes, "route", Route, fields)

    # Flights

    def get_flight(self, flight_id: int) -> Optional[Flight]:
        return self._flights.get(flight_id)

    def get_flights_by_player(self, player_id: int) -> List[Flight]:
        return [f for f in self._snapshot(self._flights) if f.player_id == player_id]

    def get_upcoming_flights_by_player(self, player_id: int, since: date) -> List[Flight]:
        """
        Get flights departing on or after since that are still open.

        Args:
            player_id: Owning player
            since: Earliest departure date to include

        Returns:
            Flights ordered by departure date and time
        """
        upcoming = [
            f for f in self._snapshot(self._flights)
            if f.player_id == player_id
            and f.departure_date >= since
            and f.status not in (FLIGHT_COMPLETED, FLIGHT_CANCELLED)
        ]
        return sorted(upcoming, key=lambda f: (f.departure_date, f.departure_time, f.id))

    def create_flight(self, **fields: Any) -> Flight:
        return self._insert(self._flights, "flight", Flight, fields)

    def update_flight(self, flight_id: int, **updates: Any) -> Optional[Flight]:
        return self._update(self._flights, flight_id, updates)

    # Transactions

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        return self._transactions.get(transaction_id)

    def get_transactions_by_player(self, player_id: int) -> List[Transaction]:
        """Get a player's ledger, newest date first (ties: newest id first)."""
        entries = [t for t in self._snapshot(self._transactions) if t.player_id == player_id]
        return sorted(entries, key=lambda t: (t.date, t.id), reverse=True)

    def create_transaction(self, **fields: Any) -> Transaction:
        return self._insert(self._transactions, "transaction", Transaction, fields)
