"""Schemas for room promotions."""

from __future__ import annotations

import datetime
import uuid
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Columns that are NOT NULL on room_promotions.
REQUIRED_PROMOTION_FIELDS = (
    "name",
    "start_date",
    "end_date",
    "is_active",
    "min_nights",
    "badge_text",
    "badge_color",
    "priority",
)

class RoomPromotionBase(BaseModel):
    name: str
    description: str | None = None
    promo_price: Decimal | None = Field(default=None, ge=0)
    discount_percentage: Decimal | None = Field(default=None, ge=0, le=100)
    start_date: datetime.date
    end_date: datetime.date
    is_active: bool = True
    min_nights: int = Field(default=1, ge=1)
    promo_code: str | None = None
    badge_text: str = "Promo"
    badge_color: str = "#ef4444"
    priority: int = 0

    @model_validator(mode="after")
    def _check_window(self) -> "RoomPromotionBase":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not precede start_date")
        return self


class RoomPromotionCreate(RoomPromotionBase):
    room_id: uuid.UUID


class RoomPromotionUpdate(BaseModel):
    name: str | None = None
    description: str | None = None
    promo_price: Decimal | None = Field(default=None, ge=0)
    discount_percentage: Decimal | None = Field(default=None, ge=0, le=100)
    start_date: datetime.date | None = None
    end_date: datetime.date | None = None
    is_active: bool | None = None
    min_nights: int | None = Field(default=None, ge=1)
    promo_code: str | None = None
    badge_text: str | None = None
    badge_color: str | None = None
    priority: int | None = None

    @model_validator(mode="after")
    def _reject_null_required_fields(self) -> "RoomPromotionUpdate":
        nulled = sorted(
            field
            for field in REQUIRED_PROMOTION_FIELDS
            if field in self.model_fields_set and getattr(self, field) is None
        )
        if nulled:
            raise ValueError(f"fields cannot be null: {', '.join(nulled)}")
        return self


class RoomPromotionToggle(BaseModel):
    is_active: bool


class RoomPromotionRead(RoomPromotionBase):
    id: uuid.UUID
    room_id: uuid.UUID

    model_config = ConfigDict(from_attributes=True)
