"""
Integration tests for the Database session manager.

Usage:
    pytest tests/integration/database/test_database.py
"""

import pytest
from sqlalchemy import func, select

from relais.infrastructure.persistence.database import Database
from relais.infrastructure.persistence.models import ProposalModel


class TestDatabase:
    """Test cases for Database."""

    async def test_health_check(self, test_db):
        assert await test_db.health_check() is True

    async def test_health_check_when_disconnected(self, tmp_path):
        db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'idle.db'}")

        assert await db.health_check() is False

    async def test_session_requires_connect(self, tmp_path):
        db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'idle.db'}")

        with pytest.raises(RuntimeError):
            async with db.session():
                pass

    async def test_failed_block_is_rolled_back(self, test_db):
        """Test rows added in a block that raises are discarded."""
        with pytest.raises(LookupError):
            async with test_db.session() as session:
                session.add(ProposalModel(id=1, start_block=1, end_block=2))
                await session.flush()
                raise LookupError("boom")

        async with test_db.session() as session:
            count = await session.scalar(select(func.count(ProposalModel.id)))

        assert count == 0
