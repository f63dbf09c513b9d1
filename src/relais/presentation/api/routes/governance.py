"""
Governance API routes.

Accepts signed votes and delegations and answers eligibility questions.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from relais.application.use_cases.check_delegation_eligibility import (
    CheckDelegationEligibility,
)
from relais.application.use_cases.check_vote_eligibility import (
    CheckVoteEligibility,
)
from relais.application.use_cases.submit_delegation import SubmitDelegation
from relais.application.use_cases.submit_vote import SubmitVote
from relais.di.dependencies import (
    get_check_delegation_eligibility,
    get_check_vote_eligibility,
    get_submit_delegation,
    get_submit_vote,
)
from relais.presentation.schemas.governance_schemas import (
    DelegateRequest,
    DelegationEligibilityResponse,
    PendingTransactionResponse,
    VoteEligibilityResponse,
    VoteRequest,
)

router = APIRouter(tags=["Governance"])


# ================================================================
# Votes
# ================================================================


@router.post(
    "/vote",
    response_model=PendingTransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit signed vote",
    description="Verify a VoteEmitted signature and queue it for relaying",
)
async def submit_vote(
    request: VoteRequest,
    use_case: SubmitVote = Depends(get_submit_vote),
) -> PendingTransactionResponse:
    """
    Submit a vote signed off-chain.

    Flow:
    1. Wallet signs the document from GET /api/messages/vote
    2. Client posts address, proposal, support and (v, r, s)
    3. Backend verifies signer and eligibility, then queues the vote
    4. Operator is notified after the vote is committed
    """
    transaction = await use_case.execute(
        address=request.address,
        proposal_id=request.proposal_id,
        support=request.support,
        v=request.v,
        r=request.r,
        s=request.s,
    )
    return PendingTransactionResponse.from_entity(transaction)


@router.get(
    "/vote/eligibility",
    response_model=VoteEligibilityResponse,
    summary="Check vote eligibility",
    description="Check whether an address may vote by signature on a proposal",
)
async def check_vote_eligibility(
    address: Optional[str] = Query(None, description="Voter address"),
    proposal_id: Optional[int] = Query(None, ge=0, description="Proposal ID"),
    use_case: CheckVoteEligibility = Depends(get_check_vote_eligibility),
) -> VoteEligibilityResponse:
    """Return eligible=true, or the structured rejection as an error."""
    result = await use_case.execute(address=address, proposal_id=proposal_id)
    return VoteEligibilityResponse(
        eligible=result.eligible,
        address=result.address,
        proposal_id=result.proposal_id,
    )


# ================================================================
# Delegations
# ================================================================


@router.post(
    "/delegate",
    response_model=PendingTransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit signed delegation",
    description="Verify a Delegate signature and queue it for relaying",
)
async def submit_delegation(
    request: DelegateRequest,
    use_case: SubmitDelegation = Depends(get_submit_delegation),
) -> PendingTransactionResponse:
    """Submit a delegate-by-signature authorization."""
    transaction = await use_case.execute(
        address=request.address,
        delegatee=request.delegatee,
        nonce=request.nonce,
        expiry=request.expiry,
        v=request.v,
        r=request.r,
        s=request.s,
    )
    return PendingTransactionResponse.from_entity(transaction)


@router.get(
    "/delegate/eligibility",
    response_model=DelegationEligibilityResponse,
    summary="Check delegation eligibility",
    description="Check whether an address may delegate by signature",
)
async def check_delegation_eligibility(
    address: Optional[str] = Query(None, description="Delegator address"),
    delegatee: Optional[str] = Query(None, description="Optional delegatee"),
    use_case: CheckDelegationEligibility = Depends(get_check_delegation_eligibility),
) -> DelegationEligibilityResponse:
    """Return eligible=true, or the structured rejection as an error."""
    result = await use_case.execute(address=address, delegatee=delegatee)
    return DelegationEligibilityResponse(
        eligible=result.eligible,
        address=result.address,
        delegatee=result.delegatee,
    )
