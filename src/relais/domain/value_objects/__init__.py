"""
Domain value objects.
"""

from relais.domain.value_objects.address import (
    EMPTY_ADDRESS,
    addresses_equal,
    is_valid_address,
    normalize_address,
    normalize_optional_address,
)
from relais.domain.value_objects.signature import Signature
from relais.domain.value_objects.typed_data_domain import TypedDataDomain

__all__ = [
    "EMPTY_ADDRESS",
    "Signature",
    "TypedDataDomain",
    "addresses_equal",
    "is_valid_address",
    "normalize_address",
    "normalize_optional_address",
]
