"""
Domain entities.
"""

from relais.domain.entities.pending_transaction import (
    ActionKind,
    PendingTransaction,
)
from relais.domain.entities.proposal import DelegationType, Proposal, VoteReceipt

__all__ = [
    "ActionKind",
    "DelegationType",
    "PendingTransaction",
    "Proposal",
    "VoteReceipt",
]
