"""
Unit tests for GovernanceChainClient.

Contract calls are replaced with mocks; no RPC endpoint is contacted.

Usage:
    pytest tests/unit/infrastructure/test_governance_chain_client.py
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from relais.domain.exceptions import ChainQueryFailedError
from relais.infrastructure.blockchain.abi import PROPOSAL_FIELDS
from relais.infrastructure.blockchain.governance_chain_client import (
    GovernanceChainClient,
)

HOLDER = "0x5b3bffc0bcf8d4caec873fdcf719f60725767c98"
CREATOR = "0x2B384212EDc04Ae8bB41738D05BA20E33277bf33"


def _client() -> GovernanceChainClient:
    client = GovernanceChainClient(
        rpc_endpoint="http://localhost:8545",
        token_address="0x92d6c1e31e14520e676a687f0a93788b716beff5",
        governor_address="0x7e9b1672616ff6d6629ef2879419aae79a9018d2",
        timeout=0.5,
    )
    client._ensure_web3()
    client._token = MagicMock()
    client._governor = MagicMock()
    return client


def _returning(value) -> MagicMock:
    """Contract function whose .call() resolves to value."""
    function = MagicMock()
    function.return_value.call = AsyncMock(return_value=value)
    return function


def _proposal_tuple(**overrides):
    values = {
        "id": 3,
        "creator": CREATOR,
        "executor": "0x" + "0" * 40,
        "targets": [],
        "values": [],
        "signatures": [],
        "calldatas": [],
        "withDelegatecalls": [],
        "startBlock": 100,
        "endBlock": 10_000,
        "executionTime": 0,
        "forVotes": 10**24,
        "againstVotes": 5,
        "executed": False,
        "canceled": False,
        "strategy": "0x" + "0" * 40,
        "ipfsHash": b"\x12" * 32,
    }
    values.update(overrides)
    return tuple(values[name] for name, _ in PROPOSAL_FIELDS)


class TestGovernanceChainClient:
    """Unit tests for chain reads and error translation."""

    # ================================================================
    # Token reads
    # ================================================================

    async def test_token_balance(self):
        """Test balanceOf result is returned as int."""
        client = _client()
        client._token.functions.balanceOf = _returning(150)

        assert await client.get_token_balance(HOLDER) == 150

    async def test_delegate_is_lowercased(self):
        """Test delegatee address comes back lowercase."""
        client = _client()
        client._token.functions.getDelegateeByType = _returning(CREATOR)

        assert await client.get_delegate(HOLDER, 1) == CREATOR.lower()
        args = client._token.functions.getDelegateeByType.call_args.args
        assert args[1] == 1

    async def test_voting_power_at_block(self):
        """Test snapshot power read passes block and type."""
        client = _client()
        client._token.functions.getPowerAtBlock = _returning(42)

        assert await client.get_voting_power_at_block(HOLDER, 100, 0) == 42
        args = client._token.functions.getPowerAtBlock.call_args.args
        assert args[1:] == (100, 0)

    # ================================================================
    # Governor reads
    # ================================================================

    async def test_proposal_struct_is_mapped(self):
        """Test governor struct fields map onto Proposal."""
        client = _client()
        client._governor.functions.getProposalById = _returning(_proposal_tuple())

        proposal = await client.get_proposal(3)

        assert proposal.id == 3
        assert proposal.start_block == 100
        assert proposal.end_block == 10_000
        assert proposal.canceled is False
        assert proposal.creator == CREATOR.lower()
        assert proposal.for_votes == 10**24
        assert proposal.ipfs_hash == "0x" + "12" * 32

    async def test_vote_receipt(self):
        """Test (support, votingPower) maps onto VoteReceipt."""
        client = _client()
        client._governor.functions.getVoteOnProposal = _returning((True, 7))

        receipt = await client.get_vote_receipt(3, HOLDER)

        assert receipt.support is True
        assert receipt.has_voted

    async def test_proposals_count(self):
        """Test proposal count read."""
        client = _client()
        client._governor.functions.getProposalsCount = _returning(12)

        assert await client.get_proposals_count() == 12

    # ================================================================
    # Failures
    # ================================================================

    async def test_rpc_error_becomes_chain_query_failed(self):
        """Test any read failure is reported with the operation name."""
        client = _client()
        function = MagicMock()
        function.return_value.call = AsyncMock(
            side_effect=ValueError("execution reverted")
        )
        client._token.functions.balanceOf = function

        with pytest.raises(ChainQueryFailedError) as exc_info:
            await client.get_token_balance(HOLDER)

        assert exc_info.value.operation == "balance_of"
        assert exc_info.value.message == "error fetching data from blockchain"
        assert isinstance(exc_info.value.__cause__, ValueError)

    async def test_invalid_address_becomes_chain_query_failed(self):
        """Test checksum conversion errors are translated too."""
        client = _client()
        client._token.functions.balanceOf = _returning(1)

        with pytest.raises(ChainQueryFailedError):
            await client.get_token_balance("not-an-address")

    async def test_timeout_becomes_chain_query_failed(self):
        """Test slow reads are cut off by the client timeout."""
        client = _client()

        async def slow_call():
            await asyncio.sleep(5)

        function = MagicMock()
        function.return_value.call = slow_call
        client._governor.functions.getProposalsCount = function

        with pytest.raises(ChainQueryFailedError) as exc_info:
            await client.get_proposals_count()

        assert exc_info.value.operation == "get_proposals_count"
