"""Service test fixtures — async DB, fake repositories and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - app.state.db_manager points at the test engine for readiness checks
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from schoolfinder.core.domain_types import NewSchool, SchoolId, SchoolRecord
from schoolfinder.core.errors import StorageError
from schoolfinder.db.base import Base
from schoolfinder.infrastructure.database import get_db, DatabaseSessionManager
import schoolfinder.models  # noqa: F401
from schoolfinder.main import app


class InMemorySchoolRepository:
    """SchoolRepository fake that keeps rows in a list."""

    def __init__(self, records: list[SchoolRecord] | None = None):
        self.records = list(records or [])
        self.insert_calls = 0
        self.fetch_calls = 0

    async def insert(self, school: NewSchool) -> SchoolId:
        self.insert_calls += 1
        school_id = SchoolId(len(self.records) + 1)
        self.records.append(SchoolRecord(
            id=school_id, name=school.name, address=school.address,
            latitude=school.latitude, longitude=school.longitude,
        ))
        return school_id

    async def fetch_all(self) -> list[SchoolRecord]:
        self.fetch_calls += 1
        return list(self.records)


class FailingSchoolRepository:
    """SchoolRepository fake whose every call fails like a lost connection."""

    async def insert(self, school: NewSchool) -> SchoolId:
        raise StorageError("Could not save school", "insert")

    async def fetch_all(self) -> list[SchoolRecord]:
        raise StorageError("Could not read schools", "fetch_all")


@pytest.fixture
def memory_repository():
    return InMemorySchoolRepository()


@pytest.fixture
def failing_repository():
    return FailingSchoolRepository()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # Lifespan does not run under ASGITransport; install the manager directly
    original_manager = getattr(app.state, "db_manager", None)
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = original_manager
