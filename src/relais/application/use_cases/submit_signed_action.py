"""
Submit Signed Action use case.

Generic pipeline shared by every signed governance action:
verify signature -> check eligibility -> persist and commit -> notify.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

from relais.application.services.eligibility_checker import EligibilityChecker
from relais.domain.entities.pending_transaction import (
    ActionKind,
    PendingTransaction,
)
from relais.domain.exceptions import (
    ChainQueryFailedError,
    InvalidInputError,
    InvalidSignatureError,
    PersistenceError,
    RelaisException,
)
from relais.domain.repositories.i_pending_transaction_repository import (
    IPendingTransactionRepository,
)
from relais.domain.services.i_notifier import INotifier
from relais.domain.services.i_signature_verifier import ISignatureVerifier
from relais.domain.value_objects.address import addresses_equal, normalize_address
from relais.domain.value_objects.signature import Signature
from relais.infrastructure.monitoring import metrics

logger = logging.getLogger(__name__)


class SubmitSignedAction(ABC):
    """
    Validate and queue a signed governance action.

    Business rules:
    - Every argument is required
    - Recovered signer must equal the claimed address
    - Eligibility is checked after the signature
    - Exactly one record is persisted, or one structured error is raised
    - Notification follows the commit and never affects the result

    Subclasses describe their action kind: the typed document to verify,
    the eligibility check to run and the record to persist.
    """

    kind: ActionKind
    signer_mismatch_message: str = "invalid signature"
    notification_message: str

    def __init__(
        self,
        pending_repository: IPendingTransactionRepository,
        eligibility_checker: EligibilityChecker,
        signature_verifier: ISignatureVerifier,
        notifier: Optional[INotifier] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            pending_repository: Repository for pending transactions
            eligibility_checker: On-chain eligibility rules
            signature_verifier: Service for typed-data signer recovery
            notifier: Optional operator notification sink
        """
        self.pending_repository = pending_repository
        self.eligibility_checker = eligibility_checker
        self.signature_verifier = signature_verifier
        self.notifier = notifier

    @abstractmethod
    def build_document(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Build the EIP-712 document the user signed."""

    @abstractmethod
    async def check_eligibility(self, address: str, params: Dict[str, Any]) -> None:
        """Run the eligibility check for this action kind."""

    @abstractmethod
    def build_transaction(
        self, address: str, params: Dict[str, Any], signature: Signature
    ) -> PendingTransaction:
        """Build the pending transaction record."""

    @abstractmethod
    async def persist(self, transaction: PendingTransaction) -> PendingTransaction:
        """Store the pending transaction."""

    async def submit(
        self,
        address: str,
        params: Dict[str, Any],
        v: Union[int, str],
        r: str,
        s: str,
    ) -> PendingTransaction:
        """
        Run the pipeline for already-validated arguments.

        Args:
            address: Claimed signer address
            params: Action payload
            v: Signature recovery byte
            r: Signature r component
            s: Signature s component

        Returns:
            Persisted PendingTransaction

        Raises:
            RelaisException: Exactly one structured error on rejection
        """
        try:
            address = normalize_address(address)

            # 1. Verify signature
            signature = self._parse_signature(v, r, s)
            document = self.build_document(params)
            signer = self.signature_verifier.recover_signer(document, signature)
            if not addresses_equal(signer, address):
                raise InvalidSignatureError(self.signer_mismatch_message)

            # 2. Check eligibility
            try:
                await self.check_eligibility(address, params)
            except RelaisException:
                raise
            except Exception as e:
                raise ChainQueryFailedError(cause=e) from e

            # 3. Persist
            transaction = self.build_transaction(address, params, signature)
            try:
                saved = await self.persist(transaction)
                await self.pending_repository.commit()
            except RelaisException:
                raise
            except Exception as e:
                raise PersistenceError(cause=e) from e

        except RelaisException as e:
            metrics.submissions_total.labels(kind=self.kind.value, outcome=e.code).inc()
            logger.info(
                f"Rejected {self.kind.value} submission from {address}: {e.code}",
                extra={"kind": self.kind.value, "error_code": e.code},
            )
            raise

        metrics.submissions_total.labels(kind=self.kind.value, outcome="accepted").inc()
        logger.info(
            f"Queued {self.kind.value} transaction {saved.id} from {address}",
            extra={"kind": self.kind.value, "transaction_id": str(saved.id)},
        )

        # 4. Notify
        self._notify()

        return saved

    @staticmethod
    def _parse_signature(v: Union[int, str], r: str, s: str) -> Signature:
        try:
            return Signature.from_components(v, r, s)
        except ValueError as e:
            raise InvalidSignatureError(cause=e) from e

    @staticmethod
    def _to_uint(value: Union[int, str]) -> int:
        if isinstance(value, bool):
            raise InvalidInputError("invalid input")
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            raise InvalidInputError("invalid input")
        if parsed < 0:
            raise InvalidInputError("invalid input")
        return parsed

    @staticmethod
    def _require(*values: Any) -> None:
        if any(value is None or value == "" for value in values):
            raise InvalidInputError("invalid input")

    def _notify(self) -> None:
        if self.notifier is None:
            return
        try:
            self.notifier.notify(self.notification_message)
        except Exception:
            logger.warning("Failed to schedule notification", exc_info=True)
