"""
API routes.
"""

from relais.presentation.api.routes import (
    governance,
    messages,
    proposals,
    transactions,
)

__all__ = ["governance", "messages", "proposals", "transactions"]
