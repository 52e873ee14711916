"""Health check endpoints."""

import datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from app.api import deps
from app.core.config import get_settings

router = APIRouter()


@router.get("", summary="Service health status")
async def healthcheck(
    today: Annotated[datetime.date, Depends(deps.get_today)],
) -> dict[str, str]:
    """Return application health metadata."""
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
        "environment": settings.app_env,
        "property_date": today.isoformat(),
    }
