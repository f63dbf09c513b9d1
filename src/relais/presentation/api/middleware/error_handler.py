"""
Global error handling.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from relais.domain.exceptions import ErrorKind, RelaisException

logger = logging.getLogger(__name__)

STATUS_CODE_MAP = {
    ErrorKind.INVALID_INPUT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.INVALID_SIGNATURE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.INSUFFICIENT_BALANCE: status.HTTP_403_FORBIDDEN,
    ErrorKind.INSUFFICIENT_VOTING_POWER: status.HTTP_403_FORBIDDEN,
    ErrorKind.NO_OP_DELEGATION: status.HTTP_403_FORBIDDEN,
    ErrorKind.PROPOSAL_NOT_ACTIVE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ALREADY_VOTED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CHAIN_QUERY_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.PENDING_TRANSACTION_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.PERSISTENCE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def relais_exception_handler(
    request: Request, exc: RelaisException
) -> JSONResponse:
    """
    Handle Relais domain exceptions.

    Converts domain exceptions to appropriate HTTP responses.
    """
    status_code = STATUS_CODE_MAP.get(
        exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR
    )

    if status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.code}",
            exc_info=exc.__cause__,
        )

    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "message": exc.message,
        },
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed request bodies and query strings as INVALID_INPUT."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": ErrorKind.INVALID_INPUT.value,
            "message": "invalid input",
        },
    )
