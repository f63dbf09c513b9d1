"""
Eligibility checks for signed governance actions.

Each check fans out independent chain and database reads, joins them, and
then applies business rules in order. The first violated rule wins.
"""

import asyncio
from typing import Any, Awaitable, FrozenSet, Iterable, List, Optional

from relais.domain.entities.proposal import DelegationType
from relais.domain.exceptions import (
    AlreadyVotedError,
    ChainQueryFailedError,
    InsufficientBalanceError,
    InsufficientVotingPowerError,
    InvalidInputError,
    NoOpDelegationError,
    PendingTransactionExistsError,
    ProposalNotActiveError,
    RelaisException,
)
from relais.domain.repositories.i_pending_transaction_repository import (
    IPendingTransactionRepository,
)
from relais.domain.services.i_governance_chain import IGovernanceChain
from relais.domain.value_objects.address import (
    addresses_equal,
    is_valid_address,
    normalize_address,
    normalize_optional_address,
)


async def gather_reads(*reads: Awaitable[Any]) -> List[Any]:
    """
    Run independent reads concurrently and join them.

    Every read is awaited to completion. If any failed, the first failure in
    argument order is raised: structured Relais errors as they are, anything
    else as ChainQueryFailedError.
    """
    results = await asyncio.gather(*reads, return_exceptions=True)
    for result in results:
        if isinstance(result, RelaisException):
            raise result
        if isinstance(result, BaseException):
            raise ChainQueryFailedError(cause=result) from result
    return list(results)


class EligibilityChecker:
    """
    Decide whether an address may currently delegate or vote by signature.

    Business rules:
    - Delegator needs at least min_token_balance tokens
    - Delegation must change at least one of the two current delegatees
    - Voter needs at least min_token_balance power at the proposal snapshot,
      unless exempt
    - Votes are accepted only while the proposal can still be relayed
    - One pending action per delegator / (voter, proposal)
    """

    def __init__(
        self,
        chain: IGovernanceChain,
        pending_repository: IPendingTransactionRepository,
        min_token_balance: int,
        safety_margin_blocks: int,
        exempt_addresses: Iterable[str] = (),
    ):
        """
        Initialize checker with dependencies.

        Args:
            chain: Governance chain query service
            pending_repository: Repository for pending transactions
            min_token_balance: Minimum balance / voting power in base units
            safety_margin_blocks: Blocks reserved before proposal end
            exempt_addresses: Addresses exempt from the voting power rule
        """
        self.chain = chain
        self.pending_repository = pending_repository
        self.min_token_balance = min_token_balance
        self.safety_margin_blocks = safety_margin_blocks
        self.exempt_addresses: FrozenSet[str] = frozenset(
            normalize_address(a) for a in exempt_addresses
        )

    def is_exempt(self, address: str) -> bool:
        """Check if address skips the minimum voting power rule."""
        return normalize_address(address) in self.exempt_addresses

    async def check_delegation(
        self, address: Optional[str], delegatee: Optional[str] = None
    ) -> None:
        """
        Check that address may delegate by signature.

        Args:
            address: Delegator address
            delegatee: Optional target; None, "" and "0x" mean unspecified

        Raises:
            InvalidInputError: If an address is missing or malformed
            PendingTransactionExistsError: If a delegation is already queued
            InsufficientBalanceError: If token balance is below minimum
            NoOpDelegationError: If delegatee already holds both powers
            ChainQueryFailedError: If a chain read fails
        """
        if address is None:
            raise InvalidInputError("invalid address input")

        address = normalize_address(address)
        delegatee = normalize_optional_address(delegatee)

        if delegatee is not None and not is_valid_address(delegatee):
            raise InvalidInputError("invalid delegatee address")

        if not is_valid_address(address):
            raise InvalidInputError("invalid from address")

        balance, voting_delegate, proposition_delegate, pending = await gather_reads(
            self.chain.get_token_balance(address),
            self.chain.get_delegate(address, DelegationType.VOTING),
            self.chain.get_delegate(address, DelegationType.PROPOSITION),
            self.pending_repository.is_delegation_pending(address),
        )

        if pending:
            raise PendingTransactionExistsError(
                "a delegation from this address is already pending"
            )

        if int(balance) < self.min_token_balance:
            raise InsufficientBalanceError(int(balance), self.min_token_balance)

        if (
            delegatee is not None
            and addresses_equal(delegatee, voting_delegate)
            and addresses_equal(delegatee, proposition_delegate)
        ):
            raise NoOpDelegationError(delegatee)

    async def check_vote(
        self, address: Optional[str], proposal_id: Optional[int]
    ) -> None:
        """
        Check that address may vote by signature on proposal.

        Args:
            address: Voter address
            proposal_id: Governance proposal ID

        Raises:
            InvalidInputError: If inputs are missing or address malformed
            PendingTransactionExistsError: If this vote is already queued
            ProposalNotActiveError: If voting window is closed for relaying
            InsufficientVotingPowerError: If snapshot power is below minimum
            AlreadyVotedError: If the chain already recorded a vote
            ChainQueryFailedError: If a chain read fails
        """
        if address is None or proposal_id is None:
            raise InvalidInputError("invalid input")

        address = normalize_address(address)

        if not is_valid_address(address):
            raise InvalidInputError("invalid from address")

        proposal, receipt, current_block, pending = await gather_reads(
            self.chain.get_proposal(proposal_id),
            self.chain.get_vote_receipt(proposal_id, address),
            self.chain.get_current_block(),
            self.pending_repository.is_vote_pending(address, proposal_id),
        )

        if pending:
            raise PendingTransactionExistsError(
                "a vote from this address on this proposal is already pending"
            )

        # Snapshot depends on proposal data, so it cannot join the batch above
        (voting_power,) = await gather_reads(
            self.chain.get_voting_power_at_block(
                address, proposal.start_block, DelegationType.VOTING
            )
        )

        if not proposal.is_voting_open(int(current_block), self.safety_margin_blocks):
            raise ProposalNotActiveError(proposal_id)

        if int(voting_power) < self.min_token_balance and not self.is_exempt(address):
            raise InsufficientVotingPowerError(
                int(voting_power), self.min_token_balance
            )

        if receipt.has_voted:
            raise AlreadyVotedError(address, proposal_id)
