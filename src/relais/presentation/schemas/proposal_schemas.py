"""
API schemas for cached proposals.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ProposalResponse(BaseModel):
    """Response schema for a cached proposal."""

    id: int = Field(..., description="Proposal ID")
    start_block: int = Field(..., description="Voting start block")
    end_block: int = Field(..., description="Voting end block")
    canceled: bool = Field(..., description="Whether proposal was canceled")
    executed: bool = Field(..., description="Whether proposal was executed")
    creator: Optional[str] = Field(None, description="Proposal creator address")
    for_votes: str = Field(..., description="Voting power in favor (base units)")
    against_votes: str = Field(..., description="Voting power against (base units)")
    ipfs_hash: Optional[str] = Field(None, description="Proposal IPFS hash")

    @classmethod
    def from_entity(cls, proposal):
        """Create response from Proposal entity."""
        return cls(**proposal.to_dict())


class ProposalListResponse(BaseModel):
    """Response schema for cached proposals."""

    proposals: list[ProposalResponse] = Field(
        ...,
        description="Cached proposals, newest first",
    )
    total: int = Field(..., description="Number of cached proposals")


class ProposalCountResponse(BaseModel):
    """Response schema for cached proposal count."""

    count: int = Field(..., description="Number of cached proposals")


class RefreshProposalsResponse(BaseModel):
    """Response schema for proposal cache refresh."""

    proposals_on_chain: int = Field(..., description="Proposals on the governor")
    newly_cached: int = Field(..., description="Proposals added by this refresh")
