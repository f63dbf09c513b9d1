"""
Domain exceptions package.
"""

# Signature exceptions
from relais.domain.exceptions.auth import InvalidSignatureError

# Base exceptions
from relais.domain.exceptions.base import (
    ErrorKind,
    InvalidInputError,
    RelaisException,
)

# Chain exceptions
from relais.domain.exceptions.blockchain import ChainQueryFailedError

# Eligibility exceptions
from relais.domain.exceptions.eligibility import (
    AlreadyVotedError,
    EligibilityError,
    InsufficientBalanceError,
    InsufficientVotingPowerError,
    NoOpDelegationError,
    ProposalNotActiveError,
)

# Persistence exceptions
from relais.domain.exceptions.persistence import (
    PendingTransactionExistsError,
    PersistenceError,
)

__all__ = [
    # Base
    "ErrorKind",
    "RelaisException",
    "InvalidInputError",
    # Signature
    "InvalidSignatureError",
    # Chain
    "ChainQueryFailedError",
    # Eligibility
    "EligibilityError",
    "InsufficientBalanceError",
    "InsufficientVotingPowerError",
    "NoOpDelegationError",
    "ProposalNotActiveError",
    "AlreadyVotedError",
    # Persistence
    "PersistenceError",
    "PendingTransactionExistsError",
]
