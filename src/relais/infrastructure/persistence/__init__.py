"""
Infrastructure persistence package.
"""

from relais.infrastructure.persistence.database import Database
from relais.infrastructure.persistence.models import (
    Base,
    PendingTransactionModel,
    ProposalModel,
)

__all__ = [
    "Database",
    "Base",
    "PendingTransactionModel",
    "ProposalModel",
]
