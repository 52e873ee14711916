"""Room catalogue queries and display pricing."""
from __future__ import annotations

import datetime
import uuid
from decimal import Decimal

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Room, RoomPromotion
from app.services import pricing_service


async def list_available_rooms(session: AsyncSession) -> list[Room]:
    stmt: Select[tuple[Room]] = (
        select(Room)
        .where(Room.available.is_(True))
        .order_by(Room.price_per_night.asc(), Room.name.asc())
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_room(session: AsyncSession, *, room_id: uuid.UUID) -> Room | None:
    return await session.get(Room, room_id)


def current_room_price(
    room: Room,
    promotion: RoomPromotion | None,
    *,
    today: datetime.date,
) -> Decimal:
    """Price shown on room cards for a stay starting today."""
    rates = pricing_service.room_rates_from_room(room)
    window = (
        pricing_service.promotion_window_from_model(promotion)
        if promotion is not None
        else None
    )
    return pricing_service.resolve_price(rates, promotion=window, today=today).average_price
