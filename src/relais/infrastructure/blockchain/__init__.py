"""
Blockchain infrastructure.
"""

from relais.infrastructure.blockchain.governance_chain_client import (
    GovernanceChainClient,
)

__all__ = ["GovernanceChainClient"]
