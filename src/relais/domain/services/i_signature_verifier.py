"""
Signature verifier service interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from relais.domain.value_objects.signature import Signature


class ISignatureVerifier(ABC):
    """
    Abstract service interface for typed-data signer recovery.

    - User signs an EIP-712 document with their wallet
    - Backend recovers the signing address and compares it to the claimant
    """

    @abstractmethod
    def recover_signer(self, document: Dict[str, Any], signature: Signature) -> str:
        """
        Recover the address that produced signature over document.

        Args:
            document: EIP-712 document (types, primaryType, domain, message)
            signature: Signature components

        Returns:
            Lowercased signer address

        Raises:
            InvalidSignatureError: If recovery fails
        """
