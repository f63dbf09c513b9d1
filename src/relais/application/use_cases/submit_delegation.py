"""
Submit Delegation use case.

Queues a delegate-by-signature authorization for relaying.
"""

from typing import Any, Dict, Optional, Union

from relais.application.services.eligibility_checker import EligibilityChecker
from relais.application.use_cases.submit_signed_action import SubmitSignedAction
from relais.domain.entities.pending_transaction import (
    ActionKind,
    PendingTransaction,
)
from relais.domain.exceptions import InvalidInputError
from relais.domain.repositories.i_pending_transaction_repository import (
    IPendingTransactionRepository,
)
from relais.domain.services.i_notifier import INotifier
from relais.domain.services.i_signature_verifier import ISignatureVerifier
from relais.domain.services.typed_messages import build_delegate_message
from relais.domain.value_objects.address import is_valid_address, normalize_address
from relais.domain.value_objects.signature import Signature
from relais.domain.value_objects.typed_data_domain import TypedDataDomain


class SubmitDelegation(SubmitSignedAction):
    """
    Submit a signed delegation.

    Business rules:
    - Signature must cover the token's Delegate document
    - Delegator must hold the minimum balance
    - Delegation must change at least one current delegatee
    - At most one pending delegation per delegator
    """

    kind = ActionKind.DELEGATE
    signer_mismatch_message = "given address does not match signer address"
    notification_message = "New governance delegation sig"

    def __init__(
        self,
        pending_repository: IPendingTransactionRepository,
        eligibility_checker: EligibilityChecker,
        signature_verifier: ISignatureVerifier,
        token_domain: TypedDataDomain,
        notifier: Optional[INotifier] = None,
    ):
        super().__init__(
            pending_repository, eligibility_checker, signature_verifier, notifier
        )
        self.token_domain = token_domain

    async def execute(
        self,
        address: Optional[str],
        delegatee: Optional[str],
        nonce: Union[int, str, None],
        expiry: Union[int, str, None],
        v: Union[int, str, None],
        r: Optional[str],
        s: Optional[str],
    ) -> PendingTransaction:
        """
        Execute delegation submission.

        Args:
            address: Delegator address
            delegatee: Address receiving both powers
            nonce: Delegator's token nonce
            expiry: Signature expiry timestamp
            v: Signature recovery byte
            r: Signature r component
            s: Signature s component

        Returns:
            Persisted PendingTransaction of kind DELEGATE

        Raises:
            InvalidInputError: If an argument is missing or malformed
            InvalidSignatureError: If signer does not match address
            EligibilityError: If delegator may not delegate
            ChainQueryFailedError: If a chain read fails
            PersistenceError: If storing fails
        """
        self._require(address, delegatee, nonce, expiry, v, r, s)

        delegatee = normalize_address(delegatee)
        if not is_valid_address(delegatee):
            raise InvalidInputError("invalid delegatee address")

        params = {
            "delegatee": delegatee,
            "nonce": self._to_uint(nonce),
            "expiry": self._to_uint(expiry),
        }
        return await self.submit(address, params, v, r, s)

    def build_document(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return build_delegate_message(
            self.token_domain, params["delegatee"], params["nonce"], params["expiry"]
        )

    async def check_eligibility(self, address: str, params: Dict[str, Any]) -> None:
        await self.eligibility_checker.check_delegation(address, params["delegatee"])

    def build_transaction(
        self, address: str, params: Dict[str, Any], signature: Signature
    ) -> PendingTransaction:
        return PendingTransaction.delegate(
            from_address=address,
            delegatee=params["delegatee"],
            nonce=params["nonce"],
            expiry=params["expiry"],
            signature=signature,
        )

    async def persist(self, transaction: PendingTransaction) -> PendingTransaction:
        return await self.pending_repository.insert_delegate_tx(transaction)
