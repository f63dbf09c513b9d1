"""
Proposal cache repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, Set

from relais.domain.entities.proposal import Proposal


class IProposalRepository(ABC):
    """Interface for cached proposal persistence operations."""

    @abstractmethod
    async def list_cached(self) -> List[Proposal]:
        """
        List cached proposals.

        Returns:
            Proposals ordered by id, newest first
        """

    @abstractmethod
    async def cache_proposals(self, proposals: Sequence[Proposal]) -> int:
        """
        Insert or refresh cached proposals.

        Args:
            proposals: Proposals read from chain

        Returns:
            Number of proposals written
        """

    @abstractmethod
    async def count(self) -> int:
        """Return number of cached proposals."""

    @abstractmethod
    async def cached_ids(self) -> Set[int]:
        """Return ids of all cached proposals."""
