"""
Proposal cache repository implementation using SQLAlchemy.
"""

from typing import List, Sequence, Set

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from relais.domain.entities.proposal import Proposal
from relais.domain.exceptions import PersistenceError
from relais.domain.repositories.i_proposal_repository import IProposalRepository
from relais.infrastructure.persistence.models import ProposalModel


class ProposalRepository(IProposalRepository):
    """
    SQLAlchemy implementation of the proposal cache.

    Database failures are raised as PersistenceError.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def list_cached(self) -> List[Proposal]:
        stmt = select(ProposalModel).order_by(ProposalModel.id.desc())
        try:
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        except SQLAlchemyError as e:
            raise PersistenceError(cause=e) from e

        return [self._to_entity(model) for model in models]

    async def cache_proposals(self, proposals: Sequence[Proposal]) -> int:
        """
        Insert or refresh cached proposals.

        Args:
            proposals: Proposals read from chain

        Returns:
            Number of proposals written
        """
        try:
            for proposal in proposals:
                await self.session.merge(self._to_model(proposal))
            await self.session.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(cause=e) from e

        return len(proposals)

    async def count(self) -> int:
        try:
            result = await self.session.execute(
                select(func.count()).select_from(ProposalModel)
            )
        except SQLAlchemyError as e:
            raise PersistenceError(cause=e) from e
        return int(result.scalar_one())

    async def cached_ids(self) -> Set[int]:
        try:
            result = await self.session.execute(select(ProposalModel.id))
        except SQLAlchemyError as e:
            raise PersistenceError(cause=e) from e
        return set(result.scalars().all())

    def _to_model(self, proposal: Proposal) -> ProposalModel:
        return ProposalModel(
            id=proposal.id,
            start_block=proposal.start_block,
            end_block=proposal.end_block,
            canceled=proposal.canceled,
            executed=proposal.executed,
            creator=proposal.creator,
            for_votes=str(proposal.for_votes),
            against_votes=str(proposal.against_votes),
            ipfs_hash=proposal.ipfs_hash,
        )

    def _to_entity(self, model: ProposalModel) -> Proposal:
        """Convert ORM model to domain entity."""
        return Proposal(
            id=model.id,
            start_block=model.start_block,
            end_block=model.end_block,
            canceled=model.canceled,
            executed=model.executed,
            creator=model.creator,
            for_votes=int(model.for_votes),
            against_votes=int(model.against_votes),
            ipfs_hash=model.ipfs_hash,
        )
