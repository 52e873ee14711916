"""Pricing schema definitions."""

from __future__ import annotations

import datetime
import uuid
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, model_validator

from app.core.config import get_settings
from app.services.pricing_service import PriceSource


class StayQuoteRequest(BaseModel):
    """Input payload for pricing a room, optionally over a stay."""

    room_id: uuid.UUID
    check_in: datetime.date | None = None
    check_out: datetime.date | None = None
    promotion_id: uuid.UUID | None = None

    @model_validator(mode="after")
    def _limit_stay_length(self) -> "StayQuoteRequest":
        if self.check_in is None or self.check_out is None:
            return self
        max_nights = get_settings().max_stay_nights
        if (self.check_out - self.check_in).days > max_nights:
            raise ValueError(f"stay must not exceed {max_nights} nights")
        return self


class NightPriceRead(BaseModel):
    """Resolved price for one night of the stay."""

    date: datetime.date
    base_price: Decimal
    price: Decimal
    source: PriceSource

    model_config = ConfigDict(from_attributes=True)


class StayQuoteRead(BaseModel):
    """Nightly rate response."""

    room_id: uuid.UUID
    promotion_id: uuid.UUID | None = None
    average_price: Decimal
    has_date_range: bool
    nights: list[NightPriceRead]
    total: Decimal
