"""
API schemas for signed governance actions.

Request and response models for vote and delegation endpoints.
"""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field

# ================================================================
# Request Schemas
# ================================================================


class SignatureFields(BaseModel):
    """ECDSA signature components shared by every signed action."""

    v: Optional[Union[int, str]] = Field(
        None,
        description="Recovery byte (27/28), as int, hex or decimal string",
        examples=[27],
    )
    r: Optional[str] = Field(
        None,
        description="Signature r component (32-byte hex)",
    )
    s: Optional[str] = Field(
        None,
        description="Signature s component (32-byte hex)",
    )


class VoteRequest(SignatureFields):
    """Request schema for submitting a signed vote."""

    address: Optional[str] = Field(
        None,
        description="Voter address (must match signer)",
        examples=["0x5b3bffc0bcf8d4caec873fdcf719f60725767c98"],
    )
    proposal_id: Optional[int] = Field(
        None,
        description="Governance proposal ID",
        ge=0,
        examples=[12],
    )
    support: Optional[bool] = Field(
        None,
        description="True to vote in favor",
    )


class DelegateRequest(SignatureFields):
    """Request schema for submitting a signed delegation."""

    address: Optional[str] = Field(
        None,
        description="Delegator address (must match signer)",
    )
    delegatee: Optional[str] = Field(
        None,
        description="Address receiving voting and proposition power",
    )
    nonce: Optional[Union[int, str]] = Field(
        None,
        description="Delegator's current token nonce",
    )
    expiry: Optional[Union[int, str]] = Field(
        None,
        description="Signature expiry (unix timestamp)",
    )


# ================================================================
# Response Schemas
# ================================================================


class PendingTransactionResponse(BaseModel):
    """Response schema for a queued signed action."""

    id: UUID = Field(..., description="Transaction unique identifier")
    from_address: str = Field(..., description="Signer address (lowercase)")
    kind: str = Field(..., description="vote or delegate")
    proposal_id: Optional[int] = Field(None, description="Proposal ID (votes)")
    support: Optional[bool] = Field(None, description="Vote direction (votes)")
    delegatee: Optional[str] = Field(None, description="Delegatee (delegations)")
    nonce: Optional[str] = Field(None, description="Token nonce (delegations)")
    expiry: Optional[str] = Field(None, description="Expiry (delegations)")
    v: int = Field(..., description="Signature recovery byte")
    r: str = Field(..., description="Signature r component")
    s: str = Field(..., description="Signature s component")
    created_at: datetime = Field(..., description="Creation timestamp")
    executed: bool = Field(..., description="Whether the relayer executed it")

    @classmethod
    def from_entity(cls, transaction):
        """
        Create response from PendingTransaction entity.

        Args:
            transaction: PendingTransaction entity

        Returns:
            PendingTransactionResponse instance
        """
        return cls(**transaction.to_dict())


class PendingTransactionListResponse(BaseModel):
    """Response schema for pending transactions."""

    transactions: list[PendingTransactionResponse] = Field(
        ...,
        description="Pending transactions, newest first",
    )
    total: int = Field(..., description="Number of pending transactions")


class VoteEligibilityResponse(BaseModel):
    """Response schema for a passed vote eligibility check."""

    eligible: bool = Field(True, description="Always true; rejections are errors")
    address: str = Field(..., description="Voter address (lowercase)")
    proposal_id: int = Field(..., description="Governance proposal ID")


class DelegationEligibilityResponse(BaseModel):
    """Response schema for a passed delegation eligibility check."""

    eligible: bool = Field(True, description="Always true; rejections are errors")
    address: str = Field(..., description="Delegator address (lowercase)")
    delegatee: Optional[str] = Field(None, description="Requested delegatee")
