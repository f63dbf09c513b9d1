"""
Integration tests for PendingTransactionRepository.

Runs against a file-backed SQLite database (see tests/conftest.py).

Usage:
    pytest tests/integration/database/test_pending_transaction_repository.py
"""

from datetime import datetime, timedelta, timezone

import pytest

from relais.domain.entities.pending_transaction import (
    ActionKind,
    PendingTransaction,
)
from relais.domain.value_objects.signature import Signature
from relais.infrastructure.persistence.models import PendingTransactionModel
from relais.infrastructure.persistence.repositories.pending_transaction_repository import (
    PendingTransactionRepository,
)

VOTER = "0x1111111111111111111111111111111111111111"
DELEGATEE = "0x2222222222222222222222222222222222222222"
SIGNATURE = Signature(v=28, r="0x" + "ab" * 32, s="0x" + "cd" * 32)
MAX_UINT256 = 2**256 - 1


def _vote(proposal_id: int = 7) -> PendingTransaction:
    return PendingTransaction.vote(
        from_address=VOTER,
        proposal_id=proposal_id,
        support=True,
        signature=SIGNATURE,
    )


def _delegation(expiry: int = 1_900_000_000) -> PendingTransaction:
    return PendingTransaction.delegate(
        from_address=VOTER,
        delegatee=DELEGATEE,
        nonce=3,
        expiry=expiry,
        signature=SIGNATURE,
    )


@pytest.fixture
def repo(db_session) -> PendingTransactionRepository:
    return PendingTransactionRepository(db_session)


class TestPendingTransactionRepository:
    """Test cases for PendingTransactionRepository."""

    # ================================================================
    # Inserts
    # ================================================================

    async def test_insert_vote(self, repo):
        """Test vote round trip keeps every field."""
        tx = _vote()

        saved = await repo.insert_vote_tx(tx)

        assert saved.id == tx.id
        assert saved.kind == ActionKind.VOTE
        assert saved.from_address == VOTER
        assert saved.proposal_id == 7
        assert saved.support is True
        assert saved.signature == SIGNATURE
        assert saved.executed is False

    async def test_insert_delegation_with_max_uint(self, repo):
        """Test uint256 values survive storage."""
        saved = await repo.insert_delegate_tx(_delegation(expiry=MAX_UINT256))

        assert saved.kind == ActionKind.DELEGATE
        assert saved.delegatee == DELEGATEE
        assert saved.nonce == 3
        assert saved.expiry == MAX_UINT256

    async def test_insert_wrong_kind(self, repo):
        """Test kind-specific inserts refuse the other kind."""
        with pytest.raises(ValueError):
            await repo.insert_vote_tx(_delegation())
        with pytest.raises(ValueError):
            await repo.insert_delegate_tx(_vote())

    # ================================================================
    # Pending lookups
    # ================================================================

    async def test_vote_pending_is_per_proposal(self, repo):
        """Test a vote only blocks the same (voter, proposal)."""
        await repo.insert_vote_tx(_vote(proposal_id=7))

        assert await repo.is_vote_pending(VOTER, 7) is True
        assert await repo.is_vote_pending(VOTER.upper().replace("0X", "0x"), 7) is True
        assert await repo.is_vote_pending(VOTER, 8) is False
        assert await repo.is_delegation_pending(VOTER) is False

    async def test_delegation_pending(self, repo):
        """Test a delegation blocks further delegations from the address."""
        await repo.insert_delegate_tx(_delegation())

        assert await repo.is_delegation_pending(VOTER) is True
        assert await repo.is_delegation_pending(DELEGATEE) is False

    async def test_executed_rows_do_not_block(self, repo, db_session):
        """Test rows marked executed by the relayer are ignored."""
        saved = await repo.insert_vote_tx(_vote())
        model = await db_session.get(PendingTransactionModel, saved.id)
        model.executed = True
        await db_session.flush()

        assert await repo.is_vote_pending(VOTER, 7) is False
        assert await repo.list_pending() == []

    # ================================================================
    # Listing
    # ================================================================

    async def test_list_pending_newest_first(self, repo):
        """Test pending rows are listed newest first."""
        older = _vote(proposal_id=1)
        newer = PendingTransaction(
            from_address=VOTER,
            kind=ActionKind.VOTE,
            signature=SIGNATURE,
            proposal_id=2,
            support=False,
            created_at=datetime.now(timezone.utc) + timedelta(minutes=1),
        )
        await repo.insert_vote_tx(older)
        await repo.insert_vote_tx(newer)

        listed = await repo.list_pending()

        assert [tx.proposal_id for tx in listed] == [2, 1]
        assert all(tx.created_at.tzinfo is not None for tx in listed)

    # ================================================================
    # Commit
    # ================================================================

    async def test_commit_is_visible_to_other_sessions(self, repo, test_db):
        """Test committed rows are seen by a fresh session."""
        await repo.insert_vote_tx(_vote())
        await repo.commit()

        async with test_db.session() as other:
            assert await PendingTransactionRepository(other).is_vote_pending(
                VOTER, 7
            )
