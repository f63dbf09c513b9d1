"""
Check Delegation Eligibility use case.

Lets clients ask whether a delegation would be accepted before signing it.
"""

from dataclasses import dataclass
from typing import Optional

from relais.application.services.eligibility_checker import EligibilityChecker
from relais.domain.value_objects.address import (
    normalize_address,
    normalize_optional_address,
)


@dataclass
class DelegationEligibilityResult:
    """Result of a successful delegation eligibility check."""

    address: str
    delegatee: Optional[str] = None
    eligible: bool = True


class CheckDelegationEligibility:
    """
    Check whether an address may delegate by signature.

    Business rules:
    - Same rules as delegation submission, without signature or persistence
    - Delegatee is optional; without it only balance and pending state count
    """

    def __init__(self, eligibility_checker: EligibilityChecker):
        """
        Initialize use case with dependencies.

        Args:
            eligibility_checker: On-chain eligibility rules
        """
        self.eligibility_checker = eligibility_checker

    async def execute(
        self, address: Optional[str], delegatee: Optional[str] = None
    ) -> DelegationEligibilityResult:
        """
        Execute delegation eligibility check.

        Args:
            address: Delegator address
            delegatee: Optional target address

        Returns:
            DelegationEligibilityResult when eligible

        Raises:
            RelaisException: Structured reason the delegation would be rejected
        """
        await self.eligibility_checker.check_delegation(address, delegatee)

        return DelegationEligibilityResult(
            address=normalize_address(address),
            delegatee=normalize_optional_address(delegatee),
        )
