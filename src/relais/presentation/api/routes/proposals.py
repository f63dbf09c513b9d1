"""
Proposal cache API routes.
"""

from fastapi import APIRouter, Depends

from relais.application.use_cases.proposal_cache import (
    GetCachedProposalCount,
    ListCachedProposals,
    RefreshProposalCache,
)
from relais.di.dependencies import (
    get_cached_proposal_count,
    get_list_cached_proposals,
    get_refresh_proposal_cache,
)
from relais.presentation.schemas.proposal_schemas import (
    ProposalCountResponse,
    ProposalListResponse,
    ProposalResponse,
    RefreshProposalsResponse,
)

router = APIRouter(prefix="/proposals", tags=["Proposals"])


@router.get(
    "",
    response_model=ProposalListResponse,
    summary="List cached proposals",
    description="Cached governor proposals, newest first",
)
async def list_proposals(
    use_case: ListCachedProposals = Depends(get_list_cached_proposals),
) -> ProposalListResponse:
    proposals = await use_case.execute()
    return ProposalListResponse(
        proposals=[ProposalResponse.from_entity(p) for p in proposals],
        total=len(proposals),
    )


@router.get(
    "/count",
    response_model=ProposalCountResponse,
    summary="Count cached proposals",
)
async def count_proposals(
    use_case: GetCachedProposalCount = Depends(get_cached_proposal_count),
) -> ProposalCountResponse:
    return ProposalCountResponse(count=await use_case.execute())


@router.post(
    "/refresh",
    response_model=RefreshProposalsResponse,
    summary="Refresh proposal cache",
    description="Copy proposals missing from the cache out of the governor",
)
async def refresh_proposals(
    use_case: RefreshProposalCache = Depends(get_refresh_proposal_cache),
) -> RefreshProposalsResponse:
    """
    Refresh cached proposals from chain.

    Only proposal ids not yet cached are fetched.
    """
    result = await use_case.execute()
    return RefreshProposalsResponse(
        proposals_on_chain=result.proposals_on_chain,
        newly_cached=result.newly_cached,
    )
