"""
API schemas for typed-data message previews.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class TypedDataResponse(BaseModel):
    """EIP-712 document a wallet must sign."""

    model_config = ConfigDict(populate_by_name=True)

    types: Dict[str, List[Dict[str, str]]] = Field(
        ...,
        description="Struct definitions including EIP712Domain",
    )
    primary_type: str = Field(
        ...,
        alias="primaryType",
        description="Name of the signed struct",
    )
    domain: Dict[str, Any] = Field(..., description="Domain separator values")
    message: Dict[str, Any] = Field(..., description="Signed struct values")
