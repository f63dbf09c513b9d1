"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container.
Each request gets its own database session and chain client.
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from relais.application.use_cases.check_delegation_eligibility import (
    CheckDelegationEligibility,
)
from relais.application.use_cases.check_vote_eligibility import (
    CheckVoteEligibility,
)
from relais.application.use_cases.list_pending_transactions import (
    ListPendingTransactions,
)
from relais.application.use_cases.proposal_cache import (
    GetCachedProposalCount,
    ListCachedProposals,
    RefreshProposalCache,
)
from relais.application.use_cases.submit_delegation import SubmitDelegation
from relais.application.use_cases.submit_vote import SubmitVote
from relais.di.container import get_container
from relais.domain.services.i_governance_chain import IGovernanceChain
from relais.domain.value_objects.typed_data_domain import TypedDataDomain

# ================================================================
# Infrastructure Dependencies
# ================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    Yields async database session from container.
    Commits after the request, rolls back on error.
    """
    container = get_container()
    async with container.database.session() as session:
        yield session


async def get_chain_client() -> AsyncGenerator[IGovernanceChain, None]:
    """Get a chain client for this request; closed afterwards."""
    chain = get_container().create_chain_client()
    try:
        yield chain
    finally:
        await chain.close()


def get_governor_domain() -> TypedDataDomain:
    """Typed-data domain for votes."""
    return get_container().governor_domain


def get_token_domain() -> TypedDataDomain:
    """Typed-data domain for delegations."""
    return get_container().token_domain


# ================================================================
# Use Case Dependencies
# ================================================================


def get_submit_vote(
    session: AsyncSession = Depends(get_db_session),
    chain: IGovernanceChain = Depends(get_chain_client),
) -> SubmitVote:
    """Get SubmitVote use case dependency."""
    return get_container().get_submit_vote(session, chain)


def get_submit_delegation(
    session: AsyncSession = Depends(get_db_session),
    chain: IGovernanceChain = Depends(get_chain_client),
) -> SubmitDelegation:
    """Get SubmitDelegation use case dependency."""
    return get_container().get_submit_delegation(session, chain)


def get_check_vote_eligibility(
    session: AsyncSession = Depends(get_db_session),
    chain: IGovernanceChain = Depends(get_chain_client),
) -> CheckVoteEligibility:
    """Get CheckVoteEligibility use case dependency."""
    return get_container().get_check_vote_eligibility(session, chain)


def get_check_delegation_eligibility(
    session: AsyncSession = Depends(get_db_session),
    chain: IGovernanceChain = Depends(get_chain_client),
) -> CheckDelegationEligibility:
    """Get CheckDelegationEligibility use case dependency."""
    return get_container().get_check_delegation_eligibility(session, chain)


def get_list_pending_transactions(
    session: AsyncSession = Depends(get_db_session),
) -> ListPendingTransactions:
    """Get ListPendingTransactions use case dependency."""
    return get_container().get_list_pending_transactions(session)


def get_list_cached_proposals(
    session: AsyncSession = Depends(get_db_session),
) -> ListCachedProposals:
    """Get ListCachedProposals use case dependency."""
    return get_container().get_list_cached_proposals(session)


def get_cached_proposal_count(
    session: AsyncSession = Depends(get_db_session),
) -> GetCachedProposalCount:
    """Get GetCachedProposalCount use case dependency."""
    return get_container().get_cached_proposal_count(session)


def get_refresh_proposal_cache(
    session: AsyncSession = Depends(get_db_session),
    chain: IGovernanceChain = Depends(get_chain_client),
) -> RefreshProposalCache:
    """Get RefreshProposalCache use case dependency."""
    return get_container().get_refresh_proposal_cache(session, chain)
