"""
PendingTransaction repository implementation using SQLAlchemy.
"""

from datetime import timezone
from typing import List

from sqlalchemy import exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from relais.domain.entities.pending_transaction import (
    ActionKind,
    PendingTransaction,
)
from relais.domain.exceptions import PersistenceError
from relais.domain.repositories.i_pending_transaction_repository import (
    IPendingTransactionRepository,
)
from relais.domain.value_objects.address import normalize_address
from relais.domain.value_objects.signature import Signature
from relais.infrastructure.persistence.models import PendingTransactionModel


class PendingTransactionRepository(IPendingTransactionRepository):
    """
    SQLAlchemy implementation of pending transaction repository.

    Database failures are raised as PersistenceError.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def is_delegation_pending(self, address: str) -> bool:
        stmt = select(
            exists().where(
                PendingTransactionModel.from_address == normalize_address(address),
                PendingTransactionModel.kind == ActionKind.DELEGATE.value,
                PendingTransactionModel.executed.is_(False),
            )
        )
        return await self._scalar(stmt)

    async def is_vote_pending(self, address: str, proposal_id: int) -> bool:
        stmt = select(
            exists().where(
                PendingTransactionModel.from_address == normalize_address(address),
                PendingTransactionModel.kind == ActionKind.VOTE.value,
                PendingTransactionModel.proposal_id == int(proposal_id),
                PendingTransactionModel.executed.is_(False),
            )
        )
        return await self._scalar(stmt)

    async def insert_delegate_tx(
        self, transaction: PendingTransaction
    ) -> PendingTransaction:
        if transaction.kind != ActionKind.DELEGATE:
            raise ValueError("Expected a delegate transaction")
        return await self._insert(transaction)

    async def insert_vote_tx(
        self, transaction: PendingTransaction
    ) -> PendingTransaction:
        if transaction.kind != ActionKind.VOTE:
            raise ValueError("Expected a vote transaction")
        return await self._insert(transaction)

    async def list_pending(self) -> List[PendingTransaction]:
        """
        List transactions not yet executed.

        Returns:
            Pending transactions, newest first
        """
        stmt = (
            select(PendingTransactionModel)
            .where(PendingTransactionModel.executed.is_(False))
            .order_by(PendingTransactionModel.created_at.desc())
        )
        try:
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        except SQLAlchemyError as e:
            raise PersistenceError(cause=e) from e

        return [self._to_entity(model) for model in models]

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            raise PersistenceError(cause=e) from e

    async def _scalar(self, stmt) -> bool:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError(cause=e) from e
        return bool(result.scalar())

    async def _insert(self, transaction: PendingTransaction) -> PendingTransaction:
        model = PendingTransactionModel(
            id=transaction.id,
            from_address=transaction.from_address,
            kind=transaction.kind.value,
            proposal_id=transaction.proposal_id,
            support=transaction.support,
            delegatee=transaction.delegatee,
            nonce=_to_text(transaction.nonce),
            expiry=_to_text(transaction.expiry),
            v=transaction.signature.v,
            r=transaction.signature.r,
            s=transaction.signature.s,
            created_at=transaction.created_at,
            executed=transaction.executed,
        )

        try:
            self.session.add(model)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(cause=e) from e

        return self._to_entity(model)

    def _to_entity(self, model: PendingTransactionModel) -> PendingTransaction:
        """Convert ORM model to domain entity."""
        created_at = model.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return PendingTransaction(
            id=model.id,
            from_address=model.from_address,
            kind=ActionKind(model.kind),
            signature=Signature(v=model.v, r=model.r, s=model.s),
            proposal_id=model.proposal_id,
            support=model.support,
            delegatee=model.delegatee,
            nonce=int(model.nonce) if model.nonce is not None else None,
            expiry=int(model.expiry) if model.expiry is not None else None,
            created_at=created_at,
            executed=model.executed,
        )


def _to_text(value):
    return str(value) if value is not None else None
