"""
Domain services.
"""

from relais.domain.services.i_governance_chain import IGovernanceChain
from relais.domain.services.i_notifier import INotifier
from relais.domain.services.i_signature_verifier import ISignatureVerifier
from relais.domain.services.typed_messages import (
    build_delegate_message,
    build_vote_message,
)

__all__ = [
    "IGovernanceChain",
    "INotifier",
    "ISignatureVerifier",
    "build_delegate_message",
    "build_vote_message",
]
