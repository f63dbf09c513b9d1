"""
Typed message API routes.

Serves the exact EIP-712 documents wallets must sign.
"""

from fastapi import APIRouter, Depends, Query

from relais.di.dependencies import get_governor_domain, get_token_domain
from relais.domain.exceptions import InvalidInputError
from relais.domain.services.typed_messages import (
    build_delegate_message,
    build_vote_message,
)
from relais.domain.value_objects.address import is_valid_address, normalize_address
from relais.domain.value_objects.typed_data_domain import TypedDataDomain
from relais.presentation.schemas.message_schemas import TypedDataResponse

router = APIRouter(prefix="/messages", tags=["Messages"])


@router.get(
    "/vote",
    response_model=TypedDataResponse,
    summary="Vote typed data",
    description="EIP-712 VoteEmitted document for a proposal",
)
async def vote_message(
    proposal_id: int = Query(..., ge=0, description="Proposal ID"),
    support: bool = Query(..., description="True to vote in favor"),
    domain: TypedDataDomain = Depends(get_governor_domain),
) -> TypedDataResponse:
    return TypedDataResponse.model_validate(
        build_vote_message(domain, proposal_id, support)
    )


@router.get(
    "/delegate",
    response_model=TypedDataResponse,
    summary="Delegate typed data",
    description="EIP-712 Delegate document for the governance token",
)
async def delegate_message(
    delegatee: str = Query(..., description="Delegatee address"),
    nonce: int = Query(..., ge=0, description="Delegator's token nonce"),
    expiry: int = Query(..., ge=0, description="Signature expiry timestamp"),
    domain: TypedDataDomain = Depends(get_token_domain),
) -> TypedDataResponse:
    delegatee = normalize_address(delegatee)
    if not is_valid_address(delegatee):
        raise InvalidInputError("invalid delegatee address")

    return TypedDataResponse.model_validate(
        build_delegate_message(domain, delegatee, nonce, expiry)
    )
