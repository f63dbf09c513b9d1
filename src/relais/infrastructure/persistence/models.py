"""
SQLAlchemy models for Relais persistence.

uint256 values that may exceed 64 bits are stored as decimal strings.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import BigInteger, Boolean, DateTime, Integer, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all models."""


class PendingTransactionModel(Base):
    """Signed governance action waiting for the relayer."""

    __tablename__ = "pending_transactions"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    from_address: Mapped[str] = mapped_column(String(42), index=True, nullable=False)
    kind: Mapped[str] = mapped_column(String(16), index=True, nullable=False)

    # Vote payload
    proposal_id: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    support: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)

    # Delegation payload
    delegatee: Mapped[Optional[str]] = mapped_column(String(42), nullable=True)
    nonce: Mapped[Optional[str]] = mapped_column(String(78), nullable=True)
    expiry: Mapped[Optional[str]] = mapped_column(String(78), nullable=True)

    # Signature
    v: Mapped[int] = mapped_column(Integer, nullable=False)
    r: Mapped[str] = mapped_column(String(66), nullable=False)
    s: Mapped[str] = mapped_column(String(66), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    executed: Mapped[bool] = mapped_column(
        Boolean, default=False, index=True, nullable=False
    )


class ProposalModel(Base):
    """Cached copy of a governor proposal."""

    __tablename__ = "proposals"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    start_block: Mapped[int] = mapped_column(BigInteger, nullable=False)
    end_block: Mapped[int] = mapped_column(BigInteger, nullable=False)
    canceled: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    executed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    creator: Mapped[Optional[str]] = mapped_column(String(42), nullable=True)
    for_votes: Mapped[str] = mapped_column(String(78), default="0", nullable=False)
    against_votes: Mapped[str] = mapped_column(String(78), default="0", nullable=False)
    ipfs_hash: Mapped[Optional[str]] = mapped_column(String(66), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )
