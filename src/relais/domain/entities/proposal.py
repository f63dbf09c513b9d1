"""
Proposal entity - cached copy of on-chain governance proposal state.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


class DelegationType:
    """Delegation power types understood by the governance token."""

    VOTING = 0
    PROPOSITION = 1


@dataclass(frozen=True)
class Proposal:
    """
    Proposal entity mirroring the governor contract.

    Business rules:
    - Voting opens after start_block and closes at end_block
    - Relayed votes need a safety margin before end_block to land on chain
    - Canceled proposals never accept votes
    """

    id: int
    start_block: int
    end_block: int
    canceled: bool = False
    executed: bool = False
    creator: Optional[str] = None
    for_votes: int = 0
    against_votes: int = 0
    ipfs_hash: Optional[str] = None

    def is_voting_open(self, current_block: int, safety_margin: int) -> bool:
        """
        Check whether a signed vote can still be relayed in time.

        Args:
            current_block: Latest chain block number
            safety_margin: Blocks reserved before end_block for relaying

        Returns:
            True if start_block < current_block < end_block - safety_margin
            and the proposal is not canceled
        """
        if self.canceled:
            return False
        return self.start_block < current_block < self.end_block - safety_margin

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        return {
            "id": self.id,
            "start_block": self.start_block,
            "end_block": self.end_block,
            "canceled": self.canceled,
            "executed": self.executed,
            "creator": self.creator,
            "for_votes": str(self.for_votes),
            "against_votes": str(self.against_votes),
            "ipfs_hash": self.ipfs_hash,
        }


@dataclass(frozen=True)
class VoteReceipt:
    """On-chain record of an address's vote on a proposal."""

    support: bool = False
    voting_power: int = 0

    @property
    def has_voted(self) -> bool:
        """A receipt with recorded power means the vote already landed."""
        return self.voting_power > 0
