"""
Persistence-layer exceptions.

These carry a structured code and are passed through to callers unchanged.
"""

from typing import Optional

from relais.domain.exceptions.base import ErrorKind, RelaisException


class PersistenceError(RelaisException):
    """Raised when a database operation fails."""

    kind = ErrorKind.PERSISTENCE_ERROR

    def __init__(
        self,
        message: str = "database operation failed",
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause=cause)


class PendingTransactionExistsError(PersistenceError):
    """Raised when an equivalent signed action is already queued."""

    kind = ErrorKind.PENDING_TRANSACTION_EXISTS

    def __init__(self, message: str):
        super().__init__(message)
