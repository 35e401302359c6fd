from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from testcontainers.postgres import PostgresContainer

from chill_match.app import app
from chill_match.domain.ports.repositories.like_repository import LikeRepository
from chill_match.domain.ports.repositories.user_repository import UserRepository
from chill_match.domain.ports.services.logger import LoggerPort
from chill_match.infrastructure.config.dependencies import get_like_repository, get_user_repository
from chill_match.infrastructure.persistence.database import get_session
from chill_match.infrastructure.persistence.models import table_registry

from .fakes import InMemoryLikeRepository, InMemoryUserRepository


@pytest.fixture
def mock_user_repository():
    """Mock user repository for use case testing"""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_like_repository():
    """Mock like repository for use case testing"""
    repository = AsyncMock(spec=LikeRepository)
    repository.get_by_from_user.return_value = []
    repository.get_by_to_user.return_value = []
    repository.get.return_value = None
    return repository


@pytest.fixture
def mock_logger():
    return Mock(spec=LoggerPort)


@pytest.fixture
def user_store():
    return InMemoryUserRepository()


@pytest.fixture
def like_store():
    return InMemoryLikeRepository()


@pytest_asyncio.fixture
async def api_client(user_store, like_store):
    """HTTP client wired to in-memory repositories"""
    app.dependency_overrides[get_user_repository] = lambda: user_store
    app.dependency_overrides[get_like_repository] = lambda: like_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


class BaseIntegrationTest:
    """Base class for integration tests against a throwaway Postgres"""

    @pytest_asyncio.fixture
    async def postgres_engine(self):
        """Create test database engine"""
        with PostgresContainer("postgres:16", driver="psycopg") as postgres:
            engine = create_async_engine(postgres.get_connection_url())

            async with engine.begin() as conn:
                await conn.run_sync(table_registry.metadata.create_all)

            yield engine

            async with engine.begin() as conn:
                await conn.run_sync(table_registry.metadata.drop_all)
            await engine.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, postgres_engine):
        """Create test database session"""
        async with AsyncSession(postgres_engine, expire_on_commit=False) as session:
            yield session

    @pytest_asyncio.fixture
    async def client(self, test_session):
        """Create test HTTP client with database override"""

        async def override_get_session():
            yield test_session

        app.dependency_overrides[get_session] = override_get_session

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()
