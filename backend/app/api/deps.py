"""Common API dependencies."""

from __future__ import annotations

import datetime
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from app.core import calendar
from app.db.session import get_session


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide an async database session."""
    async for session in get_session():
        yield session


def get_today() -> datetime.date:
    """Current calendar date at the property; overridden in tests."""
    return calendar.today()
