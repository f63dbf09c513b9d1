"""
Unit tests for SubmitVote use case.

Signatures are produced with real throwaway keys so recovery runs for real.

Usage:
    pytest tests/unit/application/test_submit_vote.py
"""

from unittest.mock import MagicMock

import pytest

from conftest import MIN_BALANCE, SAFETY_MARGIN
from helpers.signing import STRANGER_KEY, VOTER_KEY, address_of, sign_document
from relais.application.services.eligibility_checker import EligibilityChecker
from relais.application.use_cases.submit_vote import SubmitVote
from relais.domain.entities.pending_transaction import ActionKind
from relais.domain.entities.proposal import VoteReceipt
from relais.domain.exceptions import (
    AlreadyVotedError,
    ChainQueryFailedError,
    InsufficientVotingPowerError,
    InvalidInputError,
    InvalidSignatureError,
    PendingTransactionExistsError,
    PersistenceError,
    ProposalNotActiveError,
)
from relais.domain.services.i_notifier import INotifier
from relais.domain.services.typed_messages import build_vote_message
from relais.infrastructure.auth.eip712_signature_verifier import (
    EIP712SignatureVerifier,
)

VOTER = address_of(VOTER_KEY)


@pytest.fixture
def notifier() -> MagicMock:
    return MagicMock(spec=INotifier)


@pytest.fixture
def use_case(chain, pending_repo, governor_domain, notifier) -> SubmitVote:
    checker = EligibilityChecker(
        chain=chain,
        pending_repository=pending_repo,
        min_token_balance=MIN_BALANCE,
        safety_margin_blocks=SAFETY_MARGIN,
    )
    return SubmitVote(
        pending_repository=pending_repo,
        eligibility_checker=checker,
        signature_verifier=EIP712SignatureVerifier(),
        governor_domain=governor_domain,
        notifier=notifier,
    )


@pytest.fixture
def signature(governor_domain):
    return sign_document(build_vote_message(governor_domain, 7, True), VOTER_KEY)


class TestSubmitVote:
    """Test cases for SubmitVote."""

    # ================================================================
    # Success
    # ================================================================

    async def test_vote_is_queued(self, use_case, pending_repo, signature, notifier):
        """Test eligible, correctly signed vote is persisted."""
        tx = await use_case.execute(
            VOTER, 7, True, signature.v, signature.r, signature.s
        )

        assert tx.kind == ActionKind.VOTE
        assert tx.from_address == VOTER
        assert tx.proposal_id == 7
        assert tx.support is True
        assert tx.executed is False
        assert tx.signature == signature
        pending_repo.insert_vote_tx.assert_awaited_once()
        notifier.notify.assert_called_once_with("New governance voting sig")

    async def test_mixed_case_address(self, use_case, signature):
        """Test claimed address comparison is case-insensitive."""
        tx = await use_case.execute(
            VOTER.upper().replace("0X", "0x"),
            7,
            True,
            signature.v,
            signature.r,
            signature.s,
        )

        assert tx.from_address == VOTER

    async def test_hex_string_v(self, use_case, signature):
        """Test v may arrive as a hex string."""
        tx = await use_case.execute(
            VOTER, "7", True, hex(signature.v), signature.r, signature.s
        )

        assert tx.signature.v == signature.v

    async def test_without_notifier(self, use_case, signature):
        """Test submission works when no notifier is configured."""
        use_case.notifier = None

        await use_case.execute(VOTER, 7, True, signature.v, signature.r, signature.s)

    async def test_notifier_failure_is_isolated(self, use_case, signature, notifier):
        """Test a failing notifier does not affect the result."""
        notifier.notify.side_effect = RuntimeError("no loop")

        tx = await use_case.execute(
            VOTER, 7, True, signature.v, signature.r, signature.s
        )

        assert tx.proposal_id == 7

    # ================================================================
    # Input and signature errors
    # ================================================================

    @pytest.mark.parametrize(
        "args",
        [
            (None, 7, True, 27, "0x01", "0x02"),
            (VOTER, None, True, 27, "0x01", "0x02"),
            (VOTER, 7, None, 27, "0x01", "0x02"),
            (VOTER, 7, True, None, "0x01", "0x02"),
            (VOTER, 7, True, 27, "", "0x02"),
            (VOTER, 7, "yes", 27, "0x01", "0x02"),
            (VOTER, -1, True, 27, "0x01", "0x02"),
            (VOTER, "seven", True, 27, "0x01", "0x02"),
        ],
    )
    async def test_invalid_input(self, use_case, pending_repo, args):
        """Test missing or malformed arguments are rejected."""
        with pytest.raises(InvalidInputError):
            await use_case.execute(*args)

        pending_repo.insert_vote_tx.assert_not_called()

    async def test_foreign_signer(self, use_case, pending_repo, chain, governor_domain):
        """Test a signature by another key is rejected before any read."""
        foreign = sign_document(
            build_vote_message(governor_domain, 7, True), STRANGER_KEY
        )

        with pytest.raises(InvalidSignatureError) as exc_info:
            await use_case.execute(VOTER, 7, True, foreign.v, foreign.r, foreign.s)

        assert exc_info.value.message == "invalid signature"
        chain.get_proposal.assert_not_called()
        pending_repo.insert_vote_tx.assert_not_called()

    async def test_signature_over_other_support(self, use_case, signature):
        """Test the signature binds the support flag."""
        with pytest.raises(InvalidSignatureError):
            await use_case.execute(
                VOTER, 7, False, signature.v, signature.r, signature.s
            )

    async def test_malformed_signature(self, use_case):
        """Test unparseable components are a signature error."""
        with pytest.raises(InvalidSignatureError):
            await use_case.execute(VOTER, 7, True, 27, "0xzz", "0x02")

    # ================================================================
    # Eligibility errors
    # ================================================================

    async def test_low_voting_power(self, use_case, chain, pending_repo, signature):
        """Test power 50 against threshold 100 is rejected."""
        chain.get_voting_power_at_block.return_value = 50

        with pytest.raises(InsufficientVotingPowerError):
            await use_case.execute(
                VOTER, 7, True, signature.v, signature.r, signature.s
            )

        pending_repo.insert_vote_tx.assert_not_called()

    async def test_already_voted(self, use_case, chain, signature, notifier):
        """Test a landed vote cannot be queued again."""
        chain.get_vote_receipt.return_value = VoteReceipt(support=True, voting_power=150)

        with pytest.raises(AlreadyVotedError):
            await use_case.execute(
                VOTER, 7, True, signature.v, signature.r, signature.s
            )

        notifier.notify.assert_not_called()

    async def test_closed_proposal(self, use_case, chain, signature):
        """Test votes near the end of the window are rejected."""
        chain.get_current_block.return_value = 9_000

        with pytest.raises(ProposalNotActiveError):
            await use_case.execute(
                VOTER, 7, True, signature.v, signature.r, signature.s
            )

    async def test_pending_vote(self, use_case, pending_repo, signature):
        """Test a second pending vote for the same proposal is rejected."""
        pending_repo.is_vote_pending.return_value = True

        with pytest.raises(PendingTransactionExistsError):
            await use_case.execute(
                VOTER, 7, True, signature.v, signature.r, signature.s
            )

    async def test_chain_failure(self, use_case, chain, signature):
        """Test chain failures surface as ChainQueryFailedError."""
        chain.get_current_block.side_effect = OSError("connection reset")

        with pytest.raises(ChainQueryFailedError):
            await use_case.execute(
                VOTER, 7, True, signature.v, signature.r, signature.s
            )

    # ================================================================
    # Storage
    # ================================================================

    async def test_notification_follows_commit(
        self, use_case, pending_repo, signature, notifier
    ):
        """Test the operator is notified only once the vote is committed."""
        notifier.notify.side_effect = lambda message: (
            pending_repo.commit.assert_awaited_once()
        )

        await use_case.execute(VOTER, 7, True, signature.v, signature.r, signature.s)

        notifier.notify.assert_called_once()

    async def test_commit_failure(self, use_case, pending_repo, signature, notifier):
        """Test a failed commit rejects the vote without notifying."""
        pending_repo.commit.side_effect = PersistenceError()

        with pytest.raises(PersistenceError):
            await use_case.execute(
                VOTER, 7, True, signature.v, signature.r, signature.s
            )

        notifier.notify.assert_not_called()

    async def test_unexpected_storage_error(
        self, use_case, pending_repo, signature, notifier
    ):
        """Test a raw driver error is raised as PersistenceError."""
        pending_repo.insert_vote_tx.side_effect = ConnectionResetError(
            "db socket dropped"
        )

        with pytest.raises(PersistenceError) as exc_info:
            await use_case.execute(
                VOTER, 7, True, signature.v, signature.r, signature.s
            )

        assert exc_info.value.code == "PERSISTENCE_ERROR"
        assert isinstance(exc_info.value.__cause__, ConnectionResetError)
        pending_repo.commit.assert_not_called()
        notifier.notify.assert_not_called()
