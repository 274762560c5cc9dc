"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) so tests run without
PostgreSQL.  The production models carry no PostgreSQL-only column
types, so the real metadata is created directly.
"""

from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.api.auth import hash_token
from src.domain.enums import UserRole
from src.infrastructure.database import Base
from src.infrastructure.models import CheckinModel, ClientModel, UserModel


TEST_DB_URL = "sqlite+aiosqlite:///:memory:"

MANAGER_TOKEN = "manager-token"
EMPLOYEE_TOKEN = "employee-token"
IDLE_EMPLOYEE_TOKEN = "idle-employee-token"
OTHER_MANAGER_TOKEN = "other-manager-token"
INACTIVE_TOKEN = "inactive-token"

REPORT_DAY = "2026-01-31"


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker, None]:
    """Fresh in-memory database per test."""
    engine = create_async_engine(TEST_DB_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded(session_factory) -> dict:
    """
    Two teams.  Manager A has a busy employee and an idle one; manager B
    has one employee who also checks in on the report day.
    """
    async with session_factory() as session:
        manager = UserModel(
            name="Manager A", email="a@example.com", role=UserRole.MANAGER,
            api_token_hash=hash_token(MANAGER_TOKEN),
        )
        other_manager = UserModel(
            name="Manager B", email="b@example.com", role=UserRole.MANAGER,
            api_token_hash=hash_token(OTHER_MANAGER_TOKEN),
        )
        session.add_all([manager, other_manager])
        await session.flush()

        busy = UserModel(
            name="Busy Employee", email="busy@example.com",
            role=UserRole.EMPLOYEE, manager_id=manager.id,
            api_token_hash=hash_token(EMPLOYEE_TOKEN),
        )
        idle = UserModel(
            name="Idle Employee", email="idle@example.com",
            role=UserRole.EMPLOYEE, manager_id=manager.id,
            api_token_hash=hash_token(IDLE_EMPLOYEE_TOKEN),
        )
        outsider = UserModel(
            name="Other Team", email="other@example.com",
            role=UserRole.EMPLOYEE, manager_id=other_manager.id,
        )
        inactive = UserModel(
            name="Former Manager", email="former@example.com",
            role=UserRole.MANAGER, is_active=False,
            api_token_hash=hash_token(INACTIVE_TOKEN),
        )
        session.add_all([busy, idle, outsider, inactive])

        client_a = ClientModel(name="Client A", latitude=12.9719, longitude=77.6412)
        client_b = ClientModel(name="Client B", latitude=12.9352, longitude=77.6245)
        session.add_all([client_a, client_b])
        await session.flush()

        def visit(employee, client, start, end=None):
            return CheckinModel(
                employee_id=employee.id, client_id=client.id,
                latitude=client.latitude, longitude=client.longitude,
                distance_from_client_km=0.0,
                checkin_time=start, checkout_time=end,
            )

        session.add_all([
            # busy: 1.5 h + 2.25 h closed, plus one open visit
            visit(busy, client_a, utc(2026, 1, 31, 8, 30), utc(2026, 1, 31, 10, 0)),
            visit(busy, client_b, utc(2026, 1, 31, 11, 0), utc(2026, 1, 31, 13, 15)),
            visit(busy, client_a, utc(2026, 1, 31, 14, 0)),
            # idle: only the day before
            visit(idle, client_a, utc(2026, 1, 30, 9, 0), utc(2026, 1, 30, 17, 0)),
            # other team, same day
            visit(outsider, client_b, utc(2026, 1, 31, 9, 0), utc(2026, 1, 31, 12, 0)),
        ])
        await session.commit()

        return {
            "manager_id": manager.id,
            "busy_id": busy.id,
            "idle_id": idle.id,
            "outsider_id": outsider.id,
            "client_a_id": client_a.id,
            "client_b_id": client_b.id,
        }


@pytest_asyncio.fixture
async def client(session_factory, seeded) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient backed by the seeded SQLite database."""
    from src.api.app import create_app
    from src.api.dependencies import get_db
    from src.api.middleware import limiter

    async def _test_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db] = _test_db
    limiter.enabled = False

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    limiter.enabled = True


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def manager_headers() -> dict:
    return auth(MANAGER_TOKEN)


@pytest.fixture
def employee_headers() -> dict:
    return auth(EMPLOYEE_TOKEN)
