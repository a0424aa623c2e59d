"""Pytest fixtures for bureau payroll tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from bureau_payroll.api.app import create_app
from bureau_payroll.api.dependencies import get_db_session
from bureau_payroll.database import create_schema, make_session_factory
from bureau_payroll.models import Client
from bureau_payroll.services import ChecklistStep, ClientService

# Use in-memory SQLite for tests (with async support)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

CHECKLIST = [
    ChecklistStep(name="Collect timesheets", sort_order=1),
    ChecklistStep(name="Process payroll", sort_order=2),
    ChecklistStep(name="Submit FPS", sort_order=3),
]


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    async with make_session_factory(engine)() as session:
        yield session


@pytest.fixture
def tenant_id() -> UUID:
    return uuid4()


@pytest_asyncio.fixture
async def monthly_client(session: AsyncSession, tenant_id: UUID) -> Client:
    """A client paid on the last Friday of each month."""
    return await ClientService(session).create_client(
        tenant_id=tenant_id,
        name="Acme Bakery Ltd",
        pay_frequency="monthly",
        pay_day="last_friday",
        checklist=list(CHECKLIST),
        paye_reference="123/AB45678",
    )


@pytest_asyncio.fixture
async def weekly_client(session: AsyncSession, tenant_id: UUID) -> Client:
    """A client paid every Friday."""
    return await ClientService(session).create_client(
        tenant_id=tenant_id,
        name="Harbour Cafe",
        pay_frequency="weekly",
        pay_day="friday",
        checklist=list(CHECKLIST),
    )


@pytest_asyncio.fixture
async def api_client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the test database."""
    factory = make_session_factory(engine)

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            yield session

    app = create_app()
    app.dependency_overrides[get_db_session] = override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
