"""
Signature domain exceptions.
"""

from typing import Optional

from relais.domain.exceptions.base import ErrorKind, RelaisException


class InvalidSignatureError(RelaisException):
    """Raised when signer recovery fails or the signer is not the claimant."""

    kind = ErrorKind.INVALID_SIGNATURE

    def __init__(
        self,
        message: str = "invalid signature",
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause=cause)
