"""Schemas for route endpoints."""

from pydantic import Field

from .base import AIRPORT_CODE_PATTERN, ApiSchema


class CreateRouteRequest(ApiSchema):
    """Request model for opening a route."""

    player_id: int
    origin_code: str = Field(..., pattern=AIRPORT_CODE_PATTERN)
    destination_code: str = Field(..., pattern=AIRPORT_CODE_PATTERN)
