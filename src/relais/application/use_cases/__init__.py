"""Application use cases."""

from relais.application.use_cases.check_delegation_eligibility import (
    CheckDelegationEligibility,
    DelegationEligibilityResult,
)
from relais.application.use_cases.check_vote_eligibility import (
    CheckVoteEligibility,
    VoteEligibilityResult,
)
from relais.application.use_cases.list_pending_transactions import (
    ListPendingTransactions,
)
from relais.application.use_cases.proposal_cache import (
    GetCachedProposalCount,
    ListCachedProposals,
    RefreshProposalCache,
    RefreshProposalCacheResult,
)
from relais.application.use_cases.submit_delegation import SubmitDelegation
from relais.application.use_cases.submit_signed_action import SubmitSignedAction
from relais.application.use_cases.submit_vote import SubmitVote

__all__ = [
    "SubmitSignedAction",
    "SubmitVote",
    "SubmitDelegation",
    "CheckVoteEligibility",
    "VoteEligibilityResult",
    "CheckDelegationEligibility",
    "DelegationEligibilityResult",
    "ListPendingTransactions",
    "GetCachedProposalCount",
    "ListCachedProposals",
    "RefreshProposalCache",
    "RefreshProposalCacheResult",
]
