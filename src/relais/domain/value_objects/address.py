"""
Address helpers - normalization and format checks for EVM addresses.
"""

import re
from typing import Any, Optional

_ADDRESS_PATTERN = re.compile(r"^0x[0-9a-f]{40}$")

# Sentinel used by clients for "no delegatee specified"
EMPTY_ADDRESS = "0x"


def normalize_address(address: Any) -> str:
    """
    Normalize an address for storage and comparison.

    Always returns the lowercase string form; idempotent.
    """
    return str(address).strip().lower()


def is_valid_address(address: Any) -> bool:
    """Check that the value is a 0x-prefixed, 20-byte hex address."""
    if address is None:
        return False
    return bool(_ADDRESS_PATTERN.match(normalize_address(address)))


def normalize_optional_address(address: Optional[Any]) -> Optional[str]:
    """
    Normalize an optional address.

    Returns None for missing values and for the ``"0x"`` sentinel.
    """
    if address is None:
        return None
    normalized = normalize_address(address)
    if normalized in ("", EMPTY_ADDRESS):
        return None
    return normalized


def addresses_equal(first: Any, second: Any) -> bool:
    """Case-insensitive address comparison."""
    return normalize_address(first) == normalize_address(second)
