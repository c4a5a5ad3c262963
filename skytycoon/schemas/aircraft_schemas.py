"""Schemas for aircraft endpoints."""

from datetime import date
from decimal import Decimal
from typing import Dict, List, Literal, Optional

from pydantic import Field

from .base import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS, ApiSchema

AircraftStatus = Literal["active", "maintenance", "en-route"]


class PurchaseAircraftRequest(ApiSchema):
    """Request model for buying an aircraft."""

    player_id: int
    model: str = Field(..., min_length=1)
    registration: Optional[str] = Field(None, min_length=2, max_length=10)
    capacity: int = Field(..., gt=0)
    range: int = Field(..., gt=0, description="Range in km")
    cruising_speed: int = Field(..., gt=0, description="Cruising speed in km/h")
    fuel_efficiency: Decimal = Field(
        ..., gt=0, max_digits=6, decimal_places=2, description="Litres per passenger per 100km"
    )
    purchase_price: Decimal = Field(
        ..., ge=0, max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )
    purchase_date: Optional[date] = None
    maintenance_due: Optional[date] = None
    has_wifi: bool = False
    has_entertainment: bool = False
    has_premium_seating: bool = False

    class Config:
        json_schema_extra = {
            "example": {
                "playerId": 1,
                "model": "Airbus A320neo",
                "capacity": 180,
                "range": 6500,
                "cruisingSpeed": 870,
                "fuelEfficiency": "2.40",
                "purchasePrice": "101500000.00",
            }
        }


class UpdateAircraftRequest(ApiSchema):
    """Request model for status, maintenance and amenity changes."""

    status: Optional[AircraftStatus] = None
    maintenance_due: Optional[date] = None
    has_wifi: Optional[bool] = None
    has_entertainment: Optional[bool] = None
    has_premium_seating: Optional[bool] = None


class CabinConfigurationResponse(ApiSchema):
    """Response model for one seating layout of a catalog model."""

    id: int
    name: str
    capacity: int
    premium: bool
    seats: Dict[str, int]  # economy, premium, business, first


class AircraftModelResponse(ApiSchema):
    """Response model for a catalog entry."""

    id: str
    name: str
    type: str
    capacity: int
    range: int
    cruising_speed: int
    fuel_efficiency: Decimal
    price: Decimal
    configurations: List[CabinConfigurationResponse] = []
