"""Schemas for game-state endpoints."""

from decimal import Decimal

from ..models import Player
from .base import ApiSchema


class AdvanceDayResponse(ApiSchema):
    """Response model for advancing the calendar."""

    player: Player
    completed_flights: int
    revenue: Decimal


class MessageResponse(ApiSchema):
    """Response model for simple acknowledgements."""

    message: str


class HealthResponse(ApiSchema):
    """Response model for the health check."""

    status: str
