"""Routes for ledger endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from ..models import Transaction
from ..schemas.transaction_schemas import CreateTransactionRequest, FinancialSummaryResponse
from ..services.game_service import GameService
from ..services.singleton import get_game_service

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


@router.post("", response_model=Transaction, status_code=201)
async def create_transaction(
    request: CreateTransactionRequest,
    service: GameService = Depends(get_game_service),
):
    """Post a ledger entry and apply it to the player's balance."""
    return service.record_transaction(request)


@router.get("/player/{player_id}", response_model=List[Transaction])
async def get_player_transactions(player_id: int, service: GameService = Depends(get_game_service)):
    """List a player's ledger, newest first."""
    return service.list_transactions(player_id)


@router.get("/player/{player_id}/summary", response_model=FinancialSummaryResponse)
async def get_financial_summary(player_id: int, service: GameService = Depends(get_game_service)):
    """
    Get ledger totals for a player.

    Returns:
        Balance, revenue, expenses, net income and transaction count
    """
    return FinancialSummaryResponse(**service.financial_summary(player_id))
