"""
Governance chain service interface.

Defines contract for read-only queries against the governance token and
governor contracts.
"""

from abc import ABC, abstractmethod

from relais.domain.entities.proposal import Proposal, VoteReceipt


class IGovernanceChain(ABC):
    """
    Interface for querying governance state from the chain.

    Clean Architecture: Domain layer defines interface,
    Infrastructure layer implements concrete RPC queries.
    All methods raise ChainQueryFailedError on failure.
    """

    @abstractmethod
    async def get_token_balance(self, address: str) -> int:
        """Token balance of address in base units."""

    @abstractmethod
    async def get_delegate(self, address: str, delegation_type: int) -> str:
        """
        Current delegatee of address for a delegation type.

        Args:
            address: Delegator address
            delegation_type: DelegationType.VOTING or DelegationType.PROPOSITION
        """

    @abstractmethod
    async def get_proposal(self, proposal_id: int) -> Proposal:
        """Proposal state from the governor contract."""

    @abstractmethod
    async def get_vote_receipt(self, proposal_id: int, address: str) -> VoteReceipt:
        """Vote receipt of address on proposal."""

    @abstractmethod
    async def get_current_block(self) -> int:
        """Latest block number."""

    @abstractmethod
    async def get_voting_power_at_block(
        self, address: str, block: int, delegation_type: int
    ) -> int:
        """Delegated power of address at a historical block."""

    @abstractmethod
    async def get_proposals_count(self) -> int:
        """Number of proposals created on the governor."""

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
