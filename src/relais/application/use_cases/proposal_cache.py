"""
Proposal cache use cases.

Read cached proposals and refresh the cache from the governor contract.
"""

import logging
from dataclasses import dataclass
from typing import List

from relais.application.services.eligibility_checker import gather_reads
from relais.domain.entities.proposal import Proposal
from relais.domain.repositories.i_proposal_repository import IProposalRepository
from relais.domain.services.i_governance_chain import IGovernanceChain

logger = logging.getLogger(__name__)


class GetCachedProposalCount:
    """Return the number of cached proposals."""

    def __init__(self, proposal_repository: IProposalRepository):
        self.proposal_repository = proposal_repository

    async def execute(self) -> int:
        return await self.proposal_repository.count()


class ListCachedProposals:
    """Return cached proposals ordered by id, newest first."""

    def __init__(self, proposal_repository: IProposalRepository):
        self.proposal_repository = proposal_repository

    async def execute(self) -> List[Proposal]:
        return await self.proposal_repository.list_cached()


@dataclass
class RefreshProposalCacheResult:
    """Result from proposal cache refresh."""

    proposals_on_chain: int
    newly_cached: int


class RefreshProposalCache:
    """
    Copy proposals missing from the cache out of the governor contract.

    Business rules:
    - Proposal ids are 0 .. getProposalsCount() - 1
    - Only ids not yet cached are fetched, concurrently
    - Chain failures surface as ChainQueryFailedError; nothing is stored then
    """

    def __init__(
        self,
        chain: IGovernanceChain,
        proposal_repository: IProposalRepository,
    ):
        """
        Initialize use case with dependencies.

        Args:
            chain: Governance chain query service
            proposal_repository: Repository for cached proposals
        """
        self.chain = chain
        self.proposal_repository = proposal_repository

    async def execute(self) -> RefreshProposalCacheResult:
        """
        Execute proposal cache refresh.

        Returns:
            RefreshProposalCacheResult with on-chain and newly cached counts

        Raises:
            ChainQueryFailedError: If a chain read fails
            PersistenceError: If storing fails
        """
        # 1. Compare chain count with cache
        total, cached_ids = await gather_reads(
            self.chain.get_proposals_count(),
            self.proposal_repository.cached_ids(),
        )
        missing = [pid for pid in range(int(total)) if pid not in cached_ids]

        if not missing:
            return RefreshProposalCacheResult(proposals_on_chain=total, newly_cached=0)

        # 2. Fetch missing proposals
        proposals = await gather_reads(
            *(self.chain.get_proposal(pid) for pid in missing)
        )

        # 3. Store
        written = await self.proposal_repository.cache_proposals(proposals)

        logger.info(
            f"Cached {written} new proposals ({total} on chain)",
            extra={"newly_cached": written, "proposals_on_chain": total},
        )

        return RefreshProposalCacheResult(
            proposals_on_chain=total,
            newly_cached=written,
        )
