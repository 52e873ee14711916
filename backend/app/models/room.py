"""Room inventory and rate table models."""

from __future__ import annotations

import datetime
import uuid
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.mixins import TimestampMixin

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from app.models.room_promotion import RoomPromotion

# Column names for the weekday rate table, Sunday first.
WEEKDAY_PRICE_FIELDS: tuple[str, ...] = (
    "sunday_price",
    "monday_price",
    "tuesday_price",
    "wednesday_price",
    "thursday_price",
    "friday_price",
    "saturday_price",
)


class Room(TimestampMixin, Base):
    """Bookable room type with a per-weekday rate table."""

    __tablename__ = "rooms"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str | None] = mapped_column(String(255), unique=True)
    description: Mapped[str | None] = mapped_column(Text)
    price_per_night: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    sunday_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    monday_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    tuesday_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    wednesday_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    thursday_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    friday_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    saturday_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))

    promo_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    promo_start_date: Mapped[datetime.date | None] = mapped_column(nullable=True)
    promo_end_date: Mapped[datetime.date | None] = mapped_column(nullable=True)

    max_guests: Mapped[int] = mapped_column(Integer, nullable=False, default=2)
    room_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    promotions: Mapped[list["RoomPromotion"]] = relationship(
        "RoomPromotion",
        back_populates="room",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def weekday_prices(self) -> tuple[Decimal | None, ...]:
        return tuple(getattr(self, field) for field in WEEKDAY_PRICE_FIELDS)
