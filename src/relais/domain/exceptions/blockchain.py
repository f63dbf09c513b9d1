"""
Chain query exceptions.
"""

from typing import Optional

from relais.domain.exceptions.base import ErrorKind, RelaisException


class ChainQueryFailedError(RelaisException):
    """
    Raised when any remote chain read fails.

    The underlying cause is kept on ``__cause__`` for logs but never
    surfaced to API clients.
    """

    kind = ErrorKind.CHAIN_QUERY_FAILED

    def __init__(
        self,
        message: str = "error fetching data from blockchain",
        operation: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause=cause)
        self.operation = operation
