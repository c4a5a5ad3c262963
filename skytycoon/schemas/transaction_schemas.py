"""Schemas for ledger endpoints."""

import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field

from .base import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS, ApiSchema

TransactionType = Literal["purchase", "revenue", "expense"]


class CreateTransactionRequest(ApiSchema):
    """Request model for posting a ledger entry."""

    player_id: int
    amount: Decimal = Field(..., max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)
    type: TransactionType
    description: str = Field(..., min_length=1)
    date: Optional[datetime.date] = None


class FinancialSummaryResponse(ApiSchema):
    """Response model for a player's ledger totals."""

    balance: Decimal
    total_revenue: Decimal
    total_expenses: Decimal
    net_income: Decimal
    transaction_count: int
