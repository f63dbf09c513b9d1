"""
Check Vote Eligibility use case.

Lets clients ask whether a vote would be accepted before signing it.
"""

from dataclasses import dataclass
from typing import Optional

from relais.application.services.eligibility_checker import EligibilityChecker
from relais.domain.value_objects.address import normalize_address


@dataclass
class VoteEligibilityResult:
    """Result of a successful vote eligibility check."""

    address: str
    proposal_id: int
    eligible: bool = True


class CheckVoteEligibility:
    """
    Check whether an address may vote by signature on a proposal.

    Business rules:
    - Same rules as vote submission, without signature or persistence
    - Rejection is reported as the structured eligibility error
    """

    def __init__(self, eligibility_checker: EligibilityChecker):
        """
        Initialize use case with dependencies.

        Args:
            eligibility_checker: On-chain eligibility rules
        """
        self.eligibility_checker = eligibility_checker

    async def execute(
        self, address: Optional[str], proposal_id: Optional[int]
    ) -> VoteEligibilityResult:
        """
        Execute vote eligibility check.

        Args:
            address: Voter address
            proposal_id: Governance proposal ID

        Returns:
            VoteEligibilityResult when eligible

        Raises:
            RelaisException: Structured reason the vote would be rejected
        """
        await self.eligibility_checker.check_vote(address, proposal_id)

        return VoteEligibilityResult(
            address=normalize_address(address),
            proposal_id=proposal_id,
        )
