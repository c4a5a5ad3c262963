"""Shared base schema for request bodies."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"
AIRPORT_CODE_PATTERN = r"^[A-Za-z]{3}$"


class ApiSchema(BaseModel):
    """Request/response schema with camelCase field names on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"

# Money fields: up to 13 integer digits and cents
MONEY_MAX_DIGITS = 15
MONEY_DECIMAL_PLACES = 2
