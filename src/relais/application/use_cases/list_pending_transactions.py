"""
List Pending Transactions use case.
"""

from typing import List

from relais.domain.entities.pending_transaction import PendingTransaction
from relais.domain.repositories.i_pending_transaction_repository import (
    IPendingTransactionRepository,
)


class ListPendingTransactions:
    """List signed actions waiting for the relayer, newest first."""

    def __init__(self, pending_repository: IPendingTransactionRepository):
        self.pending_repository = pending_repository

    async def execute(self) -> List[PendingTransaction]:
        """
        Execute pending transaction listing.

        Returns:
            Non-executed transactions, newest first
        """
        return await self.pending_repository.list_pending()
