"""
API middleware.
"""

from relais.presentation.api.middleware.error_handler import (
    relais_exception_handler,
    validation_exception_handler,
)
from relais.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)

__all__ = [
    "RequestIDMiddleware",
    "relais_exception_handler",
    "validation_exception_handler",
]
