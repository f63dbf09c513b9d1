"""
Submit Vote use case.

Queues a vote signed by the voter for relaying.
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
from relais.domain.services.typed_messages import build_vote_message
from relais.domain.value_objects.signature import Signature
from relais.domain.value_objects.typed_data_domain import TypedDataDomain


class SubmitVote(SubmitSignedAction):
    """
    Submit a signed vote.

    Business rules:
    - Signature must cover the governor's VoteEmitted document
    - Proposal must be open for relaying and the voter eligible
    - At most one pending vote per (voter, proposal)
    """

    kind = ActionKind.VOTE
    notification_message = "New governance voting sig"

    def __init__(
        self,
        pending_repository: IPendingTransactionRepository,
        eligibility_checker: EligibilityChecker,
        signature_verifier: ISignatureVerifier,
        governor_domain: TypedDataDomain,
        notifier: Optional[INotifier] = None,
    ):
        super().__init__(
            pending_repository, eligibility_checker, signature_verifier, notifier
        )
        self.governor_domain = governor_domain

    async def execute(
        self,
        address: Optional[str],
        proposal_id: Optional[int],
        support: Optional[bool],
        v: Union[int, str, None],
        r: Optional[str],
        s: Optional[str],
    ) -> PendingTransaction:
        """
        Execute vote submission.

        Args:
            address: Voter address
            proposal_id: Governance proposal ID
            support: True for a vote in favor
            v: Signature recovery byte
            r: Signature r component
            s: Signature s component

        Returns:
            Persisted PendingTransaction of kind VOTE

        Raises:
            InvalidInputError: If an argument is missing
            InvalidSignatureError: If signer does not match address
            EligibilityError: If voter may not vote
            ChainQueryFailedError: If a chain read fails
            PersistenceError: If storing fails
        """
        self._require(address, proposal_id, support, v, r, s)
        if not isinstance(support, bool):
            raise InvalidInputError("invalid input")

        params = {"proposal_id": self._to_uint(proposal_id), "support": support}
        return await self.submit(address, params, v, r, s)

    def build_document(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return build_vote_message(
            self.governor_domain, params["proposal_id"], params["support"]
        )

    async def check_eligibility(self, address: str, params: Dict[str, Any]) -> None:
        await self.eligibility_checker.check_vote(address, params["proposal_id"])

    def build_transaction(
        self, address: str, params: Dict[str, Any], signature: Signature
    ) -> PendingTransaction:
        return PendingTransaction.vote(
            from_address=address,
            proposal_id=params["proposal_id"],
            support=params["support"],
            signature=signature,
        )

    async def persist(self, transaction: PendingTransaction) -> PendingTransaction:
        return await self.pending_repository.insert_vote_tx(transaction)
