"""
TypedDataDomain value object - EIP-712 domain descriptor.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from relais.domain.value_objects.address import is_valid_address, normalize_address


@dataclass(frozen=True)
class TypedDataDomain:
    """
    EIP-712 domain separator inputs.

    ``version`` is optional: some contracts hash a domain without it,
    and then the field must be absent from the domain type as well.
    """

    name: str
    chain_id: int
    verifying_contract: str
    version: Optional[str] = None

    def __post_init__(self):
        """Validate domain data after initialization."""
        if not self.name:
            raise ValueError("Domain name is required")
        if self.chain_id <= 0:
            raise ValueError("Chain id must be positive")
        if not is_valid_address(self.verifying_contract):
            raise ValueError(f"Invalid verifying contract: {self.verifying_contract}")
        object.__setattr__(
            self, "verifying_contract", normalize_address(self.verifying_contract)
        )

    def type_fields(self) -> List[Dict[str, str]]:
        """Field list for the ``EIP712Domain`` type, in canonical order."""
        fields = [{"name": "name", "type": "string"}]
        if self.version is not None:
            fields.append({"name": "version", "type": "string"})
        fields.append({"name": "chainId", "type": "uint256"})
        fields.append({"name": "verifyingContract", "type": "address"})
        return fields

    def to_dict(self) -> Dict[str, Any]:
        """Domain values keyed by EIP-712 field name."""
        domain: Dict[str, Any] = {"name": self.name}
        if self.version is not None:
            domain["version"] = self.version
        domain["chainId"] = self.chain_id
        domain["verifyingContract"] = self.verifying_contract
        return domain
