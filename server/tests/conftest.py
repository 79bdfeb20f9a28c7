"""
Shared test configuration and fixtures for the ROI simulator test suite.
"""

import os

# keep imports of the application away from the on-disk default database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from typing import Any, AsyncIterator, Dict

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from roi_simulator.api.dependencies.database import get_db
from roi_simulator.db.session import build_engine, init_models
from roi_simulator.main import app
from roi_simulator.repositories import InMemoryScenarioRepository, SqlAlchemyScenarioRepository, memory_store


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def canonical_inputs() -> Dict[str, Any]:
    """Reference scenario with documented results."""
    return {
        "monthly_invoice_volume": 2000,
        "num_ap_staff": 3,
        "avg_hours_per_invoice": 0.17,
        "hourly_wage": 30,
        "error_rate_manual": 0.5,
        "error_cost": 100,
        "time_horizon_months": 36,
        "one_time_implementation_cost": 50000,
    }


@pytest.fixture
def canonical_results() -> Dict[str, Any]:
    return {
        "monthly_savings": 34100.0,
        "cumulative_savings": 1227600.0,
        "net_savings": 1177600.0,
        "payback_months": 1.47,
        "roi_percentage": 2355.2,
    }


@pytest_asyncio.fixture
async def test_engine() -> AsyncIterator[AsyncEngine]:
    """Fresh in-memory database per test."""
    engine = build_engine(TEST_DATABASE_URL)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def memory_repository() -> InMemoryScenarioRepository:
    return InMemoryScenarioRepository()


@pytest.fixture(params=["sql", "memory"])
def repository(request, db_session):
    """Run a test against both scenario store adapters."""
    if request.param == "sql":
        return SqlAlchemyScenarioRepository(db_session)
    return InMemoryScenarioRepository()


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncIterator[httpx.AsyncClient]:
    """HTTP client bound to the application with the test database."""

    async def override_get_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    memory_store.clear()

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client

    app.dependency_overrides.clear()
    memory_store.clear()
