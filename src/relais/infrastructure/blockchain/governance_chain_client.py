"""
Governance chain client.

Read-only queries against the governance token and governor contracts over
JSON-RPC, using web3's async provider.
"""

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Optional

from eth_utils import to_checksum_address
from web3 import AsyncHTTPProvider, AsyncWeb3

from relais.domain.entities.proposal import Proposal, VoteReceipt
from relais.domain.exceptions import ChainQueryFailedError
from relais.domain.services.i_governance_chain import IGovernanceChain
from relais.domain.value_objects.address import normalize_address
from relais.infrastructure.blockchain.abi import (
    GOVERNANCE_TOKEN_ABI,
    GOVERNOR_ABI,
    PROPOSAL_INDEX,
)
from relais.infrastructure.monitoring import metrics

logger = logging.getLogger(__name__)


class GovernanceChainClient(IGovernanceChain):
    """
    Query governance state through an RPC endpoint.

    Design:
    - Web3 instance is lazily created on first read
    - Every read is bounded by the configured timeout
    - Any failure is reported as ChainQueryFailedError with the operation name
    """

    def __init__(
        self,
        rpc_endpoint: str,
        token_address: str,
        governor_address: str,
        timeout: float = 15.0,
    ):
        """
        Initialize governance chain client.

        Args:
            rpc_endpoint: JSON-RPC HTTP endpoint
            token_address: Governance token contract address
            governor_address: Governor contract address
            timeout: Per-read timeout in seconds
        """
        self.rpc_endpoint = rpc_endpoint
        self.token_address = token_address
        self.governor_address = governor_address
        self.timeout = timeout
        self._w3: Optional[AsyncWeb3] = None
        self._token = None
        self._governor = None

    def _ensure_web3(self) -> AsyncWeb3:
        if self._w3 is None:
            self._w3 = AsyncWeb3(AsyncHTTPProvider(self.rpc_endpoint))
            self._token = self._w3.eth.contract(
                address=to_checksum_address(self.token_address),
                abi=GOVERNANCE_TOKEN_ABI,
            )
            self._governor = self._w3.eth.contract(
                address=to_checksum_address(self.governor_address),
                abi=GOVERNOR_ABI,
            )
        return self._w3

    async def _read(self, operation: str, call: Callable[[], Awaitable[Any]]) -> Any:
        """
        Run one chain read with metrics, timeout and error translation.

        Args:
            operation: Name used in metrics and errors
            call: Zero-argument callable producing the read awaitable

        Raises:
            ChainQueryFailedError: If the read fails or times out
        """
        metrics.chain_requests_total.labels(operation=operation).inc()
        start = time.perf_counter()
        try:
            self._ensure_web3()
            return await asyncio.wait_for(call(), timeout=self.timeout)
        except Exception as e:
            metrics.chain_errors_total.labels(operation=operation).inc()
            logger.warning(f"Chain read {operation} failed: {e}", exc_info=True)
            raise ChainQueryFailedError(operation=operation, cause=e) from e
        finally:
            metrics.chain_request_duration_seconds.labels(operation=operation).observe(
                time.perf_counter() - start
            )

    async def get_token_balance(self, address: str) -> int:
        balance = await self._read(
            "balance_of",
            lambda: self._token.functions.balanceOf(
                to_checksum_address(address)
            ).call(),
        )
        return int(balance)

    async def get_delegate(self, address: str, delegation_type: int) -> str:
        delegatee = await self._read(
            "get_delegatee_by_type",
            lambda: self._token.functions.getDelegateeByType(
                to_checksum_address(address), int(delegation_type)
            ).call(),
        )
        return normalize_address(delegatee)

    async def get_voting_power_at_block(
        self, address: str, block: int, delegation_type: int
    ) -> int:
        power = await self._read(
            "get_power_at_block",
            lambda: self._token.functions.getPowerAtBlock(
                to_checksum_address(address), int(block), int(delegation_type)
            ).call(),
        )
        return int(power)

    async def get_proposal(self, proposal_id: int) -> Proposal:
        """
        Read proposal state from the governor.

        Args:
            proposal_id: Governance proposal ID

        Returns:
            Proposal entity built from the governor struct
        """
        raw = await self._read(
            "get_proposal_by_id",
            lambda: self._governor.functions.getProposalById(int(proposal_id)).call(),
        )
        ipfs_hash = raw[PROPOSAL_INDEX["ipfsHash"]]
        return Proposal(
            id=int(raw[PROPOSAL_INDEX["id"]]),
            start_block=int(raw[PROPOSAL_INDEX["startBlock"]]),
            end_block=int(raw[PROPOSAL_INDEX["endBlock"]]),
            canceled=bool(raw[PROPOSAL_INDEX["canceled"]]),
            executed=bool(raw[PROPOSAL_INDEX["executed"]]),
            creator=normalize_address(raw[PROPOSAL_INDEX["creator"]]),
            for_votes=int(raw[PROPOSAL_INDEX["forVotes"]]),
            against_votes=int(raw[PROPOSAL_INDEX["againstVotes"]]),
            ipfs_hash="0x" + bytes(ipfs_hash).hex() if ipfs_hash else None,
        )

    async def get_vote_receipt(self, proposal_id: int, address: str) -> VoteReceipt:
        raw = await self._read(
            "get_vote_on_proposal",
            lambda: self._governor.functions.getVoteOnProposal(
                int(proposal_id), to_checksum_address(address)
            ).call(),
        )
        support, voting_power = raw[0], raw[1]
        return VoteReceipt(support=bool(support), voting_power=int(voting_power))

    async def get_current_block(self) -> int:
        block = await self._read(
            "block_number", lambda: self._ensure_web3().eth.get_block_number()
        )
        return int(block)

    async def get_proposals_count(self) -> int:
        count = await self._read(
            "get_proposals_count",
            lambda: self._governor.functions.getProposalsCount().call(),
        )
        return int(count)

    async def close(self) -> None:
        """Close the provider's HTTP session."""
        if self._w3 is not None:
            await self._w3.provider.disconnect()
            self._w3 = None
            self._token = None
            self._governor = None
