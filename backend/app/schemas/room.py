"""Room catalogue schemas."""

from __future__ import annotations

import datetime
import uuid
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from app.schemas.promotion import RoomPromotionRead


class RoomRead(BaseModel):
    """Room with its weekday rate table."""

    id: uuid.UUID
    name: str
    slug: str | None = None
    description: str | None = None
    price_per_night: Decimal
    sunday_price: Decimal | None = None
    monday_price: Decimal | None = None
    tuesday_price: Decimal | None = None
    wednesday_price: Decimal | None = None
    thursday_price: Decimal | None = None
    friday_price: Decimal | None = None
    saturday_price: Decimal | None = None
    promo_price: Decimal | None = None
    promo_start_date: datetime.date | None = None
    promo_end_date: datetime.date | None = None
    max_guests: int
    room_count: int
    available: bool

    model_config = ConfigDict(from_attributes=True)


class RoomListing(RoomRead):
    """Room card data with today's display price."""

    active_promotion: RoomPromotionRead | None = None
    final_price: Decimal
