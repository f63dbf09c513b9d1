"""
Signature verification infrastructure.
"""

from relais.infrastructure.auth.eip712_signature_verifier import (
    EIP712SignatureVerifier,
)

__all__ = ["EIP712SignatureVerifier"]
