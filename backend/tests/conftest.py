import sys
import os
import asyncio
import tempfile
from pathlib import Path

import pytest

# Add backend root (1 level up from tests/) to sys.path so tests can import 'polyglot'
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

# Point settings at a throwaway SQLite file before anything imports the app,
# and make sure no real GhanaNLP key leaks in from the environment.
_db_dir = tempfile.mkdtemp(prefix="polyglot-tests-")
TEST_DATABASE_URL = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ.pop("GHANANLP_API_KEY_DEV", None)
os.environ.pop("GHANANLP_API_KEY_BASIC", None)

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from fastapi.testclient import TestClient

from polyglot.models.database import Base as DBBase
import polyglot.models.database as database_module

from tests.helpers import FakeGhanaNLP, FakeSummaryEngine


# Replace the app's database engine at import-time so that everything importing
# polyglot.main receives the SQLite engine. NullPool keeps connections from
# being shared between the pytest-asyncio loop and the TestClient loop.
test_engine = create_async_engine(TEST_DATABASE_URL, echo=False, future=True, poolclass=NullPool)
test_async_session = sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

database_module.engine = test_engine
database_module.AsyncSessionLocal = test_async_session


async def _reset_test_db():
    async with test_engine.begin() as conn:
        await conn.run_sync(DBBase.metadata.drop_all)
        await conn.run_sync(DBBase.metadata.create_all)


def reset_test_db():
    asyncio.run(_reset_test_db())


@pytest.fixture
async def db_session():
    """Fresh schema plus a session for service-level tests."""
    await _reset_test_db()
    async with test_async_session() as session:
        yield session


@pytest.fixture
def fake_api():
    return FakeGhanaNLP()


@pytest.fixture
def fake_engine():
    return FakeSummaryEngine()


@pytest.fixture
def api_client(fake_api, fake_engine):
    """TestClient with the lifespan running and the upstream API mocked."""
    reset_test_db()

    from polyglot.main import app, configure_services

    with TestClient(app) as client:
        configure_services(
            app,
            ghananlp_client=fake_api.client(),
            summary_engine=fake_engine,
        )
        yield client


@pytest.fixture
def session_factory():
    return test_async_session
