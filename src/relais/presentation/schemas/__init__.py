"""
API request and response schemas.
"""

from relais.presentation.schemas.governance_schemas import (
    DelegateRequest,
    DelegationEligibilityResponse,
    PendingTransactionListResponse,
    PendingTransactionResponse,
    VoteEligibilityResponse,
    VoteRequest,
)
from relais.presentation.schemas.message_schemas import TypedDataResponse
from relais.presentation.schemas.proposal_schemas import (
    ProposalCountResponse,
    ProposalListResponse,
    ProposalResponse,
    RefreshProposalsResponse,
)

__all__ = [
    "VoteRequest",
    "DelegateRequest",
    "PendingTransactionResponse",
    "PendingTransactionListResponse",
    "VoteEligibilityResponse",
    "DelegationEligibilityResponse",
    "TypedDataResponse",
    "ProposalResponse",
    "ProposalListResponse",
    "ProposalCountResponse",
    "RefreshProposalsResponse",
]
