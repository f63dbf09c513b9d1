"""
Unit tests for proposal cache use cases.

Usage:
    pytest tests/unit/application/test_proposal_cache.py
"""

from unittest.mock import AsyncMock

import pytest

from relais.application.use_cases.proposal_cache import (
    GetCachedProposalCount,
    ListCachedProposals,
    RefreshProposalCache,
)
from relais.domain.entities.proposal import Proposal
from relais.domain.exceptions import ChainQueryFailedError
from relais.domain.repositories.i_proposal_repository import IProposalRepository


@pytest.fixture
def proposal_repo() -> AsyncMock:
    mock = AsyncMock(spec=IProposalRepository)
    mock.cached_ids.return_value = set()
    mock.cache_proposals.side_effect = lambda proposals: len(proposals)
    return mock


def _proposal(pid: int) -> Proposal:
    return Proposal(id=pid, start_block=pid * 10, end_block=pid * 10 + 5)


class TestRefreshProposalCache:
    """Test cases for RefreshProposalCache."""

    async def test_fetches_only_missing(self, chain, proposal_repo):
        """Test already cached ids are not fetched again."""
        chain.get_proposals_count.return_value = 4
        chain.get_proposal.side_effect = _proposal
        proposal_repo.cached_ids.return_value = {0, 2}

        result = await RefreshProposalCache(chain, proposal_repo).execute()

        assert result.proposals_on_chain == 4
        assert result.newly_cached == 2
        fetched = sorted(call.args[0] for call in chain.get_proposal.await_args_list)
        assert fetched == [1, 3]
        stored = proposal_repo.cache_proposals.await_args.args[0]
        assert [p.id for p in stored] == [1, 3]

    async def test_nothing_missing(self, chain, proposal_repo):
        """Test an up-to-date cache skips chain and storage."""
        chain.get_proposals_count.return_value = 2
        proposal_repo.cached_ids.return_value = {0, 1}

        result = await RefreshProposalCache(chain, proposal_repo).execute()

        assert result.newly_cached == 0
        chain.get_proposal.assert_not_called()
        proposal_repo.cache_proposals.assert_not_called()

    async def test_empty_governor(self, chain, proposal_repo):
        """Test zero proposals on chain."""
        result = await RefreshProposalCache(chain, proposal_repo).execute()

        assert result.proposals_on_chain == 0
        assert result.newly_cached == 0

    async def test_chain_failure_stores_nothing(self, chain, proposal_repo):
        """Test one failing fetch aborts the refresh."""
        chain.get_proposals_count.return_value = 3
        chain.get_proposal.side_effect = [
            _proposal(0),
            ConnectionError("rpc down"),
            _proposal(2),
        ]

        with pytest.raises(ChainQueryFailedError):
            await RefreshProposalCache(chain, proposal_repo).execute()

        proposal_repo.cache_proposals.assert_not_called()


class TestCachedProposalReads:
    """Test cases for cache read use cases."""

    async def test_count(self, proposal_repo):
        """Test count is read from the repository."""
        proposal_repo.count.return_value = 3

        assert await GetCachedProposalCount(proposal_repo).execute() == 3

    async def test_list(self, proposal_repo):
        """Test list is returned as stored."""
        proposal_repo.list_cached.return_value = [_proposal(1), _proposal(0)]

        proposals = await ListCachedProposals(proposal_repo).execute()

        assert [p.id for p in proposals] == [1, 0]
