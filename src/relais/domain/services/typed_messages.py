"""
EIP-712 typed message builders for governance actions.

Pure functions: the same inputs and domain always give the same document.
"""

from typing import Any, Dict

from relais.domain.value_objects.typed_data_domain import TypedDataDomain

VOTE_PRIMARY_TYPE = "VoteEmitted"
DELEGATE_PRIMARY_TYPE = "Delegate"

VOTE_FIELDS = [
    {"name": "id", "type": "uint256"},
    {"name": "support", "type": "bool"},
]

DELEGATE_FIELDS = [
    {"name": "delegatee", "type": "address"},
    {"name": "nonce", "type": "uint256"},
    {"name": "expiry", "type": "uint256"},
]


def _document(
    domain: TypedDataDomain,
    primary_type: str,
    fields: list,
    message: Dict[str, Any],
) -> Dict[str, Any]:
    return {
        "types": {
            "EIP712Domain": domain.type_fields(),
            primary_type: [dict(f) for f in fields],
        },
        "primaryType": primary_type,
        "domain": domain.to_dict(),
        "message": message,
    }


def build_vote_message(
    domain: TypedDataDomain, proposal_id: int, support: bool
) -> Dict[str, Any]:
    """
    Build the vote-by-signature document.

    Args:
        domain: Governor EIP-712 domain
        proposal_id: Governance proposal ID
        support: True to vote for, False against

    Returns:
        EIP-712 document with primary type ``VoteEmitted``
    """
    return _document(
        domain,
        VOTE_PRIMARY_TYPE,
        VOTE_FIELDS,
        {"id": int(proposal_id), "support": bool(support)},
    )


def build_delegate_message(
    domain: TypedDataDomain, delegatee: str, nonce: int, expiry: int
) -> Dict[str, Any]:
    """
    Build the delegate-by-signature document.

    Args:
        domain: Governance token EIP-712 domain
        delegatee: Address receiving the delegated power
        nonce: Delegator's token nonce
        expiry: UNIX time after which the signature is void

    Returns:
        EIP-712 document with primary type ``Delegate``
    """
    return _document(
        domain,
        DELEGATE_PRIMARY_TYPE,
        DELEGATE_FIELDS,
        {"delegatee": delegatee, "nonce": int(nonce), "expiry": int(expiry)},
    )
