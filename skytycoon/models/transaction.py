"""Ledger transaction model."""

import datetime
from decimal import Decimal

from .base import GameModel


class Transaction(GameModel):
    """Represents one signed balance change."""

    id: int
    player_id: int
    amount: Decimal
    type: str  # purchase, revenue, expense
    description: str
    date: datetime.date
