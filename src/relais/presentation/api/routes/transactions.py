"""
Pending transaction API routes.
"""

from fastapi import APIRouter, Depends

from relais.application.use_cases.list_pending_transactions import (
    ListPendingTransactions,
)
from relais.di.dependencies import get_list_pending_transactions
from relais.presentation.schemas.governance_schemas import (
    PendingTransactionListResponse,
    PendingTransactionResponse,
)

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get(
    "/pending",
    response_model=PendingTransactionListResponse,
    summary="List pending transactions",
    description="Signed actions waiting for the relayer, newest first",
)
async def list_pending_transactions(
    use_case: ListPendingTransactions = Depends(get_list_pending_transactions),
) -> PendingTransactionListResponse:
    transactions = await use_case.execute()
    return PendingTransactionListResponse(
        transactions=[PendingTransactionResponse.from_entity(t) for t in transactions],
        total=len(transactions),
    )
