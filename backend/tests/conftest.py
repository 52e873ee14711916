"""Test fixtures for the guesthouse backend."""
from __future__ import annotations

import datetime
import os
from collections.abc import AsyncIterator
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("PROPERTY_TIMEZONE", "UTC")

from app.api import deps
from app.core.config import get_settings
from app.db.base import Base
from app.db.session import dispose_engine, get_sessionmaker
from app.main import app
from app.models import Room

# 2024-01-01 is a Monday.
FIXED_TODAY = datetime.date(2024, 1, 1)


@pytest.fixture(scope="session")
def db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    """Provide a temporary SQLite database URL for the test session."""
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture()
async def reset_database(db_url: str) -> AsyncIterator[None]:
    """Drop and recreate the database schema for an isolated test."""
    os.environ["DATABASE_URL"] = db_url
    get_settings.cache_clear()
    get_settings()

    await dispose_engine(db_url)
    engine = create_async_engine(db_url, future=True)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()
    yield
    await dispose_engine(db_url)


@pytest_asyncio.fixture()
async def app_context(
    reset_database: AsyncIterator[None], db_url: str
) -> AsyncIterator[dict[str, object]]:
    """Yield an async client, a seeded room and the pinned property date."""
    sessionmaker = get_sessionmaker(db_url)

    async with sessionmaker() as session:
        room = Room(
            name="Deluxe Garden",
            slug="deluxe-garden",
            price_per_night=Decimal("80.00"),
            sunday_price=Decimal("90.00"),
            monday_price=Decimal("100.00"),
            tuesday_price=Decimal("120.00"),
            wednesday_price=Decimal("110.00"),
            thursday_price=None,
            friday_price=Decimal("0"),
            saturday_price=Decimal("150.00"),
        )
        session.add(room)
        await session.commit()

        context: dict[str, object] = {
            "room_id": room.id,
            "today": FIXED_TODAY,
        }

    app.dependency_overrides[deps.get_today] = lambda: FIXED_TODAY
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            context["client"] = client
            yield context
    finally:
        app.dependency_overrides.pop(deps.get_today, None)
