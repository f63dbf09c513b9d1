"""
PendingTransaction entity - a signed governance action awaiting relay.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from relais.domain.value_objects.address import normalize_address
from relais.domain.value_objects.signature import Signature


class ActionKind(str, Enum):
    """Signed governance action kinds."""

    VOTE = "vote"
    DELEGATE = "delegate"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class PendingTransaction:
    """
    PendingTransaction entity representing a validated, not-yet-relayed
    signed action.

    Business rules:
    - Addresses are stored lowercased
    - VOTE transactions carry proposal_id and support
    - DELEGATE transactions carry delegatee, nonce and expiry
    - Signature components never change once created
    - Only the external relayer flips ``executed``
    """

    from_address: str
    kind: ActionKind
    signature: Signature
    proposal_id: Optional[int] = None
    support: Optional[bool] = None
    delegatee: Optional[str] = None
    nonce: Optional[int] = None
    expiry: Optional[int] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    executed: bool = False

    def __post_init__(self):
        """Validate transaction data after initialization."""
        if not self.from_address:
            raise ValueError("Submitter address is required")

        object.__setattr__(self, "from_address", normalize_address(self.from_address))

        if self.kind == ActionKind.VOTE:
            if self.proposal_id is None or self.support is None:
                raise ValueError("Vote transactions require proposal_id and support")
        elif self.kind == ActionKind.DELEGATE:
            if self.delegatee is None or self.nonce is None or self.expiry is None:
                raise ValueError(
                    "Delegate transactions require delegatee, nonce and expiry"
                )
            object.__setattr__(self, "delegatee", normalize_address(self.delegatee))

    @classmethod
    def vote(
        cls,
        from_address: str,
        proposal_id: int,
        support: bool,
        signature: Signature,
    ) -> "PendingTransaction":
        """Create a pending vote transaction."""
        return cls(
            from_address=from_address,
            kind=ActionKind.VOTE,
            signature=signature,
            proposal_id=proposal_id,
            support=support,
        )

    @classmethod
    def delegate(
        cls,
        from_address: str,
        delegatee: str,
        nonce: int,
        expiry: int,
        signature: Signature,
    ) -> "PendingTransaction":
        """Create a pending delegation transaction."""
        return cls(
            from_address=from_address,
            kind=ActionKind.DELEGATE,
            signature=signature,
            delegatee=delegatee,
            nonce=nonce,
            expiry=expiry,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert entity to dictionary representation.

        Fields of the other action kind are None. Nonce and expiry are
        uint256 values and are rendered as decimal strings.
        """
        return {
            "id": str(self.id),
            "from_address": self.from_address,
            "kind": self.kind.value,
            "proposal_id": self.proposal_id,
            "support": self.support,
            "delegatee": self.delegatee,
            "nonce": None if self.nonce is None else str(self.nonce),
            "expiry": None if self.expiry is None else str(self.expiry),
            "v": self.signature.v,
            "r": self.signature.r,
            "s": self.signature.s,
            "created_at": self.created_at.isoformat(),
            "executed": self.executed,
        }
