"""
Pending transaction repository interface.
"""

from abc import ABC, abstractmethod
from typing import List

from relais.domain.entities.pending_transaction import PendingTransaction


class IPendingTransactionRepository(ABC):
    """Interface for pending signed-transaction persistence operations."""

    @abstractmethod
    async def is_delegation_pending(self, address: str) -> bool:
        """
        Check whether a delegation from address is waiting for relay.

        Args:
            address: Lowercased submitter address

        Returns:
            True if a non-executed delegation exists
        """

    @abstractmethod
    async def is_vote_pending(self, address: str, proposal_id: int) -> bool:
        """
        Check whether a vote from address on proposal is waiting for relay.

        Args:
            address: Lowercased submitter address
            proposal_id: Governance proposal ID

        Returns:
            True if a non-executed vote exists
        """

    @abstractmethod
    async def insert_delegate_tx(
        self, transaction: PendingTransaction
    ) -> PendingTransaction:
        """
        Persist a new pending delegation.

        Args:
            transaction: PendingTransaction of kind DELEGATE

        Returns:
            Persisted transaction
        """

    @abstractmethod
    async def insert_vote_tx(
        self, transaction: PendingTransaction
    ) -> PendingTransaction:
        """
        Persist a new pending vote.

        Args:
            transaction: PendingTransaction of kind VOTE

        Returns:
            Persisted transaction
        """

    @abstractmethod
    async def list_pending(self) -> List[PendingTransaction]:
        """
        List transactions not yet executed by the relayer.

        Returns:
            Pending transactions, newest first
        """

    @abstractmethod
    async def commit(self) -> None:
        """
        Make previously inserted transactions durable.

        Raises:
            PersistenceError: If the commit fails
        """
