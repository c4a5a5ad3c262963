"""Shared base model."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class GameModel(BaseModel):
    """Immutable record serialised with camelCase field names."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
