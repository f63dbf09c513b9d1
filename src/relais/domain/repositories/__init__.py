"""
Repository interfaces.
"""

from relais.domain.repositories.i_pending_transaction_repository import (
    IPendingTransactionRepository,
)
from relais.domain.repositories.i_proposal_repository import IProposalRepository

__all__ = [
    "IPendingTransactionRepository",
    "IProposalRepository",
]
