"""
Test fixtures and configuration.
"""

from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from relais.config.settings import Settings, override_settings, reset_settings
from relais.di.container import (
    initialize_container,
    reset_container,
    shutdown_container,
)
from relais.di.dependencies import get_chain_client
from relais.domain.entities.proposal import Proposal, VoteReceipt
from relais.domain.repositories.i_pending_transaction_repository import (
    IPendingTransactionRepository,
)
from relais.domain.services.i_governance_chain import IGovernanceChain
from relais.domain.value_objects.typed_data_domain import TypedDataDomain
from relais.infrastructure.persistence.database import Database
from relais.main import create_app

ZERO_ADDRESS = "0x" + "0" * 40
GOVERNOR_ADDRESS = "0x7e9b1672616ff6d6629ef2879419aae79a9018d2"
TOKEN_ADDRESS = "0x92d6c1e31e14520e676a687f0a93788b716beff5"

MIN_BALANCE = 100
SAFETY_MARGIN = 2400

# Voting window for the default proposal: 100 < block < 10000 - 2400
ACTIVE_PROPOSAL = Proposal(id=7, start_block=100, end_block=10_000)
CURRENT_BLOCK = 200


@pytest.fixture
def governor_domain() -> TypedDataDomain:
    """Vote domain (no version)."""
    return TypedDataDomain(
        name="dYdX Governance",
        chain_id=1,
        verifying_contract=GOVERNOR_ADDRESS,
    )


@pytest.fixture
def token_domain() -> TypedDataDomain:
    """Delegation domain (with version)."""
    return TypedDataDomain(
        name="dYdX",
        version="1",
        chain_id=1,
        verifying_contract=TOKEN_ADDRESS,
    )


@pytest.fixture
def chain() -> AsyncMock:
    """
    Mock chain where everyone is eligible.

    Balance and power 150, no delegates set, proposal 7 open, no votes cast.
    """
    mock = AsyncMock(spec=IGovernanceChain)
    mock.get_token_balance.return_value = 150
    mock.get_delegate.return_value = ZERO_ADDRESS
    mock.get_proposal.return_value = ACTIVE_PROPOSAL
    mock.get_vote_receipt.return_value = VoteReceipt()
    mock.get_current_block.return_value = CURRENT_BLOCK
    mock.get_voting_power_at_block.return_value = 150
    mock.get_proposals_count.return_value = 0
    return mock


@pytest.fixture
def pending_repo() -> AsyncMock:
    """Mock pending-transaction repository with nothing pending."""
    mock = AsyncMock(spec=IPendingTransactionRepository)
    mock.is_delegation_pending.return_value = False
    mock.is_vote_pending.return_value = False
    mock.insert_vote_tx.side_effect = lambda tx: tx
    mock.insert_delegate_tx.side_effect = lambda tx: tx
    mock.list_pending.return_value = []
    return mock


@pytest_asyncio.fixture
async def test_db(tmp_path) -> AsyncGenerator[Database, None]:
    """
    Create a file-backed SQLite database with all tables.

    Each test gets a clean database.
    """
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'relais.db'}")
    await db.connect()
    await db.create_tables()

    yield db

    await db.disconnect()


@pytest_asyncio.fixture
async def db_session(test_db: Database) -> AsyncGenerator[AsyncSession, None]:
    """Provide database session for tests."""
    async with test_db.session() as session:
        yield session


# ================================================================
# API fixtures
# ================================================================


@pytest.fixture
def app_settings(tmp_path) -> Settings:
    """Settings for an app backed by SQLite and the mock chain."""
    return Settings(
        _env_file=None,
        ENV="test",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        RPC_ENDPOINT="http://localhost:8545",
        MIN_TOKEN_BALANCE=MIN_BALANCE,
        VOTING_SAFETY_MARGIN_BLOCKS=SAFETY_MARGIN,
        GOVERNOR_ADDRESS=GOVERNOR_ADDRESS,
        TOKEN_ADDRESS=TOKEN_ADDRESS,
        NOTIFICATION_WEBHOOK=None,
        METRICS_ENABLED=True,
    )


@pytest_asyncio.fixture
async def api_client(
    app_settings: Settings, chain: AsyncMock
) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP client for the full app.

    The container runs for real against SQLite; only the chain is mocked.
    """
    override_settings(app_settings)
    reset_container()
    await initialize_container()

    app = create_app(app_settings)

    async def _chain_override():
        yield chain

    app.dependency_overrides[get_chain_client] = _chain_override

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    await shutdown_container()
    reset_container()
    reset_settings()

