"""Repository implementations."""

from relais.infrastructure.persistence.repositories.pending_transaction_repository import (
    PendingTransactionRepository,
)
from relais.infrastructure.persistence.repositories.proposal_repository import (
    ProposalRepository,
)

__all__ = [
    "PendingTransactionRepository",
    "ProposalRepository",
]
