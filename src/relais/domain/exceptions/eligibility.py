"""
Eligibility (business rule) exceptions.

Raised by eligibility checks when an action is currently not permitted.
"""

from relais.domain.exceptions.base import ErrorKind, RelaisException


class EligibilityError(RelaisException):
    """Base exception for business-rule rejections."""


class InsufficientBalanceError(EligibilityError):
    """Raised when token balance is below the configured minimum."""

    kind = ErrorKind.INSUFFICIENT_BALANCE

    def __init__(self, balance: int, minimum: int):
        super().__init__("token balance too low")
        self.balance = balance
        self.minimum = minimum


class InsufficientVotingPowerError(EligibilityError):
    """Raised when delegated voting power is below the configured minimum."""

    kind = ErrorKind.INSUFFICIENT_VOTING_POWER

    def __init__(self, voting_power: int, minimum: int):
        super().__init__("voting power is too low")
        self.voting_power = voting_power
        self.minimum = minimum


class NoOpDelegationError(EligibilityError):
    """Raised when the delegatee already holds both delegation types."""

    kind = ErrorKind.NO_OP_DELEGATION

    def __init__(self, delegatee: str):
        super().__init__("delegatee can not be current delegatee")
        self.delegatee = delegatee


class ProposalNotActiveError(EligibilityError):
    """Raised when the proposal is outside its relayable voting window."""

    kind = ErrorKind.PROPOSAL_NOT_ACTIVE

    def __init__(self, proposal_id: int):
        super().__init__("proposal voting period is not active")
        self.proposal_id = proposal_id


class AlreadyVotedError(EligibilityError):
    """Raised when the chain already holds a vote receipt for the address."""

    kind = ErrorKind.ALREADY_VOTED

    def __init__(self, address: str, proposal_id: int):
        super().__init__("address already voted")
        self.address = address
        self.proposal_id = proposal_id
