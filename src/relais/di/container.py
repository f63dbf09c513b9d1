"""
Dependency Injection Container for Relais.

Manages all service instances and their dependencies.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from relais.application.services.eligibility_checker import EligibilityChecker
from relais.application.use_cases.check_delegation_eligibility import (
    CheckDelegationEligibility,
)
from relais.application.use_cases.check_vote_eligibility import (
    CheckVoteEligibility,
)
from relais.application.use_cases.list_pending_transactions import (
    ListPendingTransactions,
)
from relais.application.use_cases.proposal_cache import (
    GetCachedProposalCount,
    ListCachedProposals,
    RefreshProposalCache,
)
from relais.application.use_cases.submit_delegation import SubmitDelegation
from relais.application.use_cases.submit_vote import SubmitVote
from relais.config.settings import get_settings
from relais.domain.repositories.i_pending_transaction_repository import (
    IPendingTransactionRepository,
)
from relais.domain.repositories.i_proposal_repository import IProposalRepository
from relais.domain.services.i_governance_chain import IGovernanceChain
from relais.domain.services.i_notifier import INotifier
from relais.domain.services.i_signature_verifier import ISignatureVerifier
from relais.domain.value_objects.typed_data_domain import TypedDataDomain
from relais.infrastructure.auth.eip712_signature_verifier import (
    EIP712SignatureVerifier,
)
from relais.infrastructure.blockchain.governance_chain_client import (
    GovernanceChainClient,
)
from relais.infrastructure.notifications.webhook_notifier import WebhookNotifier
from relais.infrastructure.persistence.database import Database
from relais.infrastructure.persistence.repositories.pending_transaction_repository import (  # noqa: E501
    PendingTransactionRepository,
)
from relais.infrastructure.persistence.repositories.proposal_repository import (
    ProposalRepository,
)


class DIContainer:
    """
    Dependency Injection Container.

    Manages singleton instances of process-wide services.
    Repositories, chain clients and use cases are built per request.
    """

    def __init__(self):
        """Initialize container with None instances."""
        # Infrastructure
        self._database: Optional[Database] = None
        self._notifier: Optional[INotifier] = None

        # Domain Services
        self._signature_verifier: Optional[ISignatureVerifier] = None
        self._governor_domain: Optional[TypedDataDomain] = None
        self._token_domain: Optional[TypedDataDomain] = None

    async def initialize(self) -> None:
        """Initialize all services and establish connections."""
        await self.database.connect()
        await self.database.create_tables()

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._notifier:
            await self._notifier.close()
            self._notifier = None

        if self._database:
            await self._database.disconnect()

    # Infrastructure Getters

    @property
    def database(self) -> Database:
        """Get database instance."""
        if self._database is None:
            self._database = Database(
                database_url=get_settings().DATABASE_URL,
                echo=get_settings().DATABASE_ECHO,
            )
        return self._database

    @property
    def notifier(self) -> Optional[INotifier]:
        """Get webhook notifier, or None when no webhook is configured."""
        webhook = get_settings().NOTIFICATION_WEBHOOK
        if self._notifier is None and webhook:
            self._notifier = WebhookNotifier(
                webhook_url=webhook,
                timeout=get_settings().NOTIFICATION_TIMEOUT,
            )
        return self._notifier

    def create_chain_client(self) -> IGovernanceChain:
        """
        Create a governance chain client for one unit of work.

        Callers own the client and must close it.
        """
        settings = get_settings()
        return GovernanceChainClient(
            rpc_endpoint=settings.RPC_ENDPOINT,
            token_address=settings.TOKEN_ADDRESS,
            governor_address=settings.GOVERNOR_ADDRESS,
            timeout=settings.RPC_TIMEOUT,
        )

    # Domain Service Getters

    @property
    def signature_verifier(self) -> ISignatureVerifier:
        """Get typed-data signature verifier instance."""
        if self._signature_verifier is None:
            self._signature_verifier = EIP712SignatureVerifier()
        return self._signature_verifier

    @property
    def governor_domain(self) -> TypedDataDomain:
        """Typed-data domain for votes (governor contract, no version)."""
        if self._governor_domain is None:
            settings = get_settings()
            self._governor_domain = TypedDataDomain(
                name=settings.GOVERNOR_DOMAIN_NAME,
                chain_id=settings.CHAIN_ID,
                verifying_contract=settings.GOVERNOR_ADDRESS,
            )
        return self._governor_domain

    @property
    def token_domain(self) -> TypedDataDomain:
        """Typed-data domain for delegations (governance token)."""
        if self._token_domain is None:
            settings = get_settings()
            self._token_domain = TypedDataDomain(
                name=settings.TOKEN_DOMAIN_NAME,
                version=settings.TOKEN_DOMAIN_VERSION,
                chain_id=settings.CHAIN_ID,
                verifying_contract=settings.TOKEN_ADDRESS,
            )
        return self._token_domain

    # Repository Getters (Session-scoped)

    def get_pending_transaction_repository(
        self, session: AsyncSession
    ) -> IPendingTransactionRepository:
        """Get pending transaction repository bound to session."""
        return PendingTransactionRepository(session)

    def get_proposal_repository(self, session: AsyncSession) -> IProposalRepository:
        """Get proposal cache repository bound to session."""
        return ProposalRepository(session)

    # Application Service Getters

    def get_eligibility_checker(
        self, session: AsyncSession, chain: IGovernanceChain
    ) -> EligibilityChecker:
        """
        Get eligibility checker with session-scoped repository.

        Args:
            session: Active database session
            chain: Chain client for this request

        Returns:
            EligibilityChecker configured from settings
        """
        settings = get_settings()
        return EligibilityChecker(
            chain=chain,
            pending_repository=self.get_pending_transaction_repository(session),
            min_token_balance=settings.MIN_TOKEN_BALANCE,
            safety_margin_blocks=settings.VOTING_SAFETY_MARGIN_BLOCKS,
            exempt_addresses=settings.VOTING_POWER_WHITELIST,
        )

    # Use Case Getters

    def get_submit_vote(
        self, session: AsyncSession, chain: IGovernanceChain
    ) -> SubmitVote:
        """Get submit vote use case."""
        return SubmitVote(
            pending_repository=self.get_pending_transaction_repository(session),
            eligibility_checker=self.get_eligibility_checker(session, chain),
            signature_verifier=self.signature_verifier,
            governor_domain=self.governor_domain,
            notifier=self.notifier,
        )

    def get_submit_delegation(
        self, session: AsyncSession, chain: IGovernanceChain
    ) -> SubmitDelegation:
        """Get submit delegation use case."""
        return SubmitDelegation(
            pending_repository=self.get_pending_transaction_repository(session),
            eligibility_checker=self.get_eligibility_checker(session, chain),
            signature_verifier=self.signature_verifier,
            token_domain=self.token_domain,
            notifier=self.notifier,
        )

    def get_check_vote_eligibility(
        self, session: AsyncSession, chain: IGovernanceChain
    ) -> CheckVoteEligibility:
        """Get check vote eligibility use case."""
        return CheckVoteEligibility(self.get_eligibility_checker(session, chain))

    def get_check_delegation_eligibility(
        self, session: AsyncSession, chain: IGovernanceChain
    ) -> CheckDelegationEligibility:
        """Get check delegation eligibility use case."""
        return CheckDelegationEligibility(self.get_eligibility_checker(session, chain))

    def get_list_pending_transactions(
        self, session: AsyncSession
    ) -> ListPendingTransactions:
        """Get list pending transactions use case."""
        return ListPendingTransactions(self.get_pending_transaction_repository(session))

    def get_list_cached_proposals(self, session: AsyncSession) -> ListCachedProposals:
        """Get list cached proposals use case."""
        return ListCachedProposals(self.get_proposal_repository(session))

    def get_cached_proposal_count(
        self, session: AsyncSession
    ) -> GetCachedProposalCount:
        """Get cached proposal count use case."""
        return GetCachedProposalCount(self.get_proposal_repository(session))

    def get_refresh_proposal_cache(
        self, session: AsyncSession, chain: IGovernanceChain
    ) -> RefreshProposalCache:
        """Get refresh proposal cache use case."""
        return RefreshProposalCache(
            chain=chain,
            proposal_repository=self.get_proposal_repository(session),
        )


# Global container instance
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Get global DI container instance."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


async def initialize_container() -> DIContainer:
    """Initialize and return DI container."""
    container = get_container()
    await container.initialize()
    return container


async def shutdown_container() -> None:
    """Shutdown DI container."""
    container = get_container()
    await container.shutdown()


def reset_container() -> None:
    """Drop the global container (for testing)."""
    global _container
    _container = None
