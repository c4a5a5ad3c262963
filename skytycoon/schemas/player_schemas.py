"""Schemas for player endpoints."""

from typing import Optional

from pydantic import Field

from .base import AIRPORT_CODE_PATTERN, ApiSchema


class CreatePlayerRequest(ApiSchema):
    """Request model for creating a player."""

    username: str = Field(..., min_length=3, max_length=32)
    password: str = Field(..., min_length=4)


class UpdatePlayerRequest(ApiSchema):
    """Request model for changing a player's hub."""

    hub: Optional[str] = Field(None, pattern=AIRPORT_CODE_PATTERN)
