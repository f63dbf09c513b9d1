"""
Base domain exceptions.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Machine-checkable category carried by every Relais error."""

    INVALID_INPUT = "INVALID_INPUT"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    INSUFFICIENT_VOTING_POWER = "INSUFFICIENT_VOTING_POWER"
    NO_OP_DELEGATION = "NO_OP_DELEGATION"
    PROPOSAL_NOT_ACTIVE = "PROPOSAL_NOT_ACTIVE"
    ALREADY_VOTED = "ALREADY_VOTED"
    CHAIN_QUERY_FAILED = "CHAIN_QUERY_FAILED"
    PENDING_TRANSACTION_EXISTS = "PENDING_TRANSACTION_EXISTS"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"


class RelaisException(Exception):
    """Base exception for all Relais domain errors."""

    kind: ErrorKind = ErrorKind.CHAIN_QUERY_FAILED

    def __init__(
        self,
        message: str,
        kind: Optional[ErrorKind] = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message
        if kind is not None:
            self.kind = kind
        self.cause = cause
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def code(self) -> str:
        """Error code exposed to API clients."""
        return self.kind.value


class InvalidInputError(RelaisException):
    """Raised when arguments are missing or malformed."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str = "invalid input"):
        super().__init__(message)
