"""API schemas for request/response models."""

from .player_schemas import CreatePlayerRequest, UpdatePlayerRequest
from .aircraft_schemas import (
    PurchaseAircraftRequest,
    UpdateAircraftRequest,
    AircraftModelResponse,
    CabinConfigurationResponse,
)
from .route_schemas import CreateRouteRequest
from .flight_schemas import ScheduleFlightRequest, UpdateFlightRequest
from .transaction_schemas import CreateTransactionRequest, FinancialSummaryResponse
from .game_schemas import AdvanceDayResponse, MessageResponse, HealthResponse

__all__ = [
    "CreatePlayerRequest",
    "UpdatePlayerRequest",
    "PurchaseAircraftRequest",
    "UpdateAircraftRequest",
    "AircraftModelResponse",
    "CabinConfigurationResponse",
    "CreateRouteRequest",
    "ScheduleFlightRequest",
    "UpdateFlightRequest",
    "CreateTransactionRequest",
    "FinancialSummaryResponse",
    "AdvanceDayResponse",
    "MessageResponse",
    "HealthResponse",
]
