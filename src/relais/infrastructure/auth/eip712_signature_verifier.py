"""
EIP-712 signature verifier.

Recovers the signer of a typed-data document from its 65-byte signature.
"""

from typing import Any, Dict

from eth_account import Account
from eth_account.messages import encode_typed_data

from relais.domain.exceptions import InvalidSignatureError
from relais.domain.services.i_signature_verifier import ISignatureVerifier
from relais.domain.value_objects.address import is_valid_address, normalize_address
from relais.domain.value_objects.signature import Signature


class EIP712SignatureVerifier(ISignatureVerifier):
    """
    Typed-data signer recovery using eth_account.

    Hashes domain separator and message struct, then runs ECDSA public key
    recovery over the digest.
    """

    def recover_signer(self, document: Dict[str, Any], signature: Signature) -> str:
        """
        Recover the address that signed document.

        Args:
            document: EIP-712 document (types, primaryType, domain, message)
            signature: Signature components

        Returns:
            Lowercased signer address

        Raises:
            InvalidSignatureError: If hashing or recovery fails
        """
        try:
            signable = encode_typed_data(full_message=document)
            recovered = Account.recover_message(
                signable, signature=signature.to_bytes()
            )
        except Exception as e:
            raise InvalidSignatureError(cause=e) from e

        signer = normalize_address(recovered)
        if not is_valid_address(signer):
            raise InvalidSignatureError()

        return signer
