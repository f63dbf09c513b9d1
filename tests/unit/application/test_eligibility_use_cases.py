"""
Unit tests for eligibility query and pending listing use cases.

Usage:
    pytest tests/unit/application/test_eligibility_use_cases.py
"""

import pytest

from conftest import MIN_BALANCE, SAFETY_MARGIN
from relais.application.services.eligibility_checker import EligibilityChecker
from relais.application.use_cases.check_delegation_eligibility import (
    CheckDelegationEligibility,
)
from relais.application.use_cases.check_vote_eligibility import CheckVoteEligibility
from relais.application.use_cases.list_pending_transactions import (
    ListPendingTransactions,
)
from relais.domain.entities.pending_transaction import PendingTransaction
from relais.domain.exceptions import InsufficientBalanceError, ProposalNotActiveError
from relais.domain.value_objects.signature import Signature

ADDRESS = "0xAbCdEf0123456789aBcDeF0123456789AbCdEf01"


@pytest.fixture
def checker(chain, pending_repo) -> EligibilityChecker:
    return EligibilityChecker(
        chain=chain,
        pending_repository=pending_repo,
        min_token_balance=MIN_BALANCE,
        safety_margin_blocks=SAFETY_MARGIN,
    )


class TestCheckVoteEligibility:
    async def test_eligible(self, checker):
        result = await CheckVoteEligibility(checker).execute(ADDRESS, 7)

        assert result.eligible is True
        assert result.address == ADDRESS.lower()
        assert result.proposal_id == 7

    async def test_rejected(self, checker, chain):
        chain.get_current_block.return_value = 1

        with pytest.raises(ProposalNotActiveError):
            await CheckVoteEligibility(checker).execute(ADDRESS, 7)


class TestCheckDelegationEligibility:
    async def test_eligible_without_delegatee(self, checker):
        result = await CheckDelegationEligibility(checker).execute(ADDRESS)

        assert result.eligible is True
        assert result.delegatee is None

    async def test_rejected(self, checker, chain):
        chain.get_token_balance.return_value = 0

        with pytest.raises(InsufficientBalanceError):
            await CheckDelegationEligibility(checker).execute(ADDRESS, ADDRESS)


class TestListPendingTransactions:
    async def test_lists_repository_content(self, pending_repo):
        tx = PendingTransaction.vote(
            from_address=ADDRESS,
            proposal_id=1,
            support=False,
            signature=Signature(v=27, r="0x" + "1" * 64, s="0x" + "2" * 64),
        )
        pending_repo.list_pending.return_value = [tx]

        assert await ListPendingTransactions(pending_repo).execute() == [tx]
