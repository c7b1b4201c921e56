import os
import uuid

# Must be set before the app (and its engine) is imported
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.api.deps import get_current_user
from app.core.constants import DEFAULT_MUSCLE_GROUPS
from app.db.base import Base
from app.db.session import enable_sqlite_foreign_keys, get_db
from app.main import app
from app.models import MuscleGroup
from app.services.auth_provider import AuthenticatedUser

USER_ID = uuid.UUID("a1a1a1a1-b2b2-4c3c-8d4d-e5e5e5e5e5e5")


@pytest_asyncio.fixture
async def session_maker(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    enable_sqlite_foreign_keys(engine.sync_engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def muscle_groups(session_maker) -> dict[str, uuid.UUID]:
    """The default muscle groups, by name."""
    async with session_maker() as session:
        groups = [MuscleGroup(name=name) for name in DEFAULT_MUSCLE_GROUPS]
        session.add_all(groups)
        await session.commit()
        return {g.name: g.id for g in groups}


@pytest.fixture
def current_user():
    return AuthenticatedUser(id=USER_ID, email="lifter@example.com", username="lifter", token="test-token")


@pytest_asyncio.fixture
async def client(session_maker, current_user):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_user] = lambda: current_user
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_exercise(client):
    """Create an exercise through the API and return its id (as a string)."""

    async def _make(name: str, *muscle_group_ids: uuid.UUID, **fields) -> str:
        body = {"name": name, "muscle_group_ids": [str(g) for g in muscle_group_ids], **fields}
        resp = await client.post("/api/v1/exercises", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()["id"]

    return _make


@pytest.fixture
def schedule_group(client):
    """Toggle a muscle group on for a weekday."""

    async def _schedule(day_of_week: int, muscle_group_id: uuid.UUID) -> None:
        resp = await client.post(f"/api/v1/schedule/{day_of_week}/muscle-groups/{muscle_group_id}/toggle")
        assert resp.status_code == 200, resp.text
        assert resp.json()["scheduled"] is True

    return _schedule
