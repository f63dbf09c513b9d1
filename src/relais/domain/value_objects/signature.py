"""
Signature value object - (v, r, s) ECDSA components.
"""

from dataclasses import dataclass
from typing import Union

_HEX_DIGITS = set("0123456789abcdef")


def _strip_hex(value: str) -> str:
    value = value.strip().lower()
    if value.startswith("0x"):
        value = value[2:]
    return value


def _parse_v(v: Union[int, str]) -> int:
    if isinstance(v, bool):
        raise ValueError("v must be an integer or hex string")
    if isinstance(v, int):
        parsed = v
    elif isinstance(v, str):
        text = v.strip().lower()
        if text.startswith("0x"):
            parsed = int(text[2:], 16)
        else:
            parsed = int(text, 10)
    else:
        raise ValueError("v must be an integer or hex string")

    if parsed < 0 or parsed > 255:
        raise ValueError(f"v out of range: {parsed}")
    return parsed


def _parse_word(name: str, value: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a hex string")
    digits = _strip_hex(value)
    if not digits or len(digits) > 64 or not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"{name} must be a 32-byte hex string")
    return "0x" + digits.zfill(64)


@dataclass(frozen=True)
class Signature:
    """
    Value object representing an ECDSA signature split in components.

    Business rules:
    - r and s are 32-byte words, stored as lowercase 0x-prefixed hex
    - v is a single byte (27/28, or 0/1 for raw recovery ids)
    - Immutable once created
    """

    v: int
    r: str
    s: str

    @classmethod
    def from_components(
        cls, v: Union[int, str], r: str, s: str
    ) -> "Signature":
        """
        Build a signature from client-supplied components.

        Args:
            v: Recovery byte as int, 0x-hex string or decimal string
            r: r component as hex string
            s: s component as hex string

        Raises:
            ValueError: If any component is malformed
        """
        return cls(v=_parse_v(v), r=_parse_word("r", r), s=_parse_word("s", s))

    def to_hex(self) -> str:
        """Canonical 65-byte ``r || s || v`` form as 0x-prefixed hex."""
        return "0x" + self.r[2:] + self.s[2:] + f"{self.v:02x}"

    def to_bytes(self) -> bytes:
        """Canonical 65-byte ``r || s || v`` form."""
        return bytes.fromhex(self.to_hex()[2:])
