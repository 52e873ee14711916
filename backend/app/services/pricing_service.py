"""Nightly rate resolution for rooms."""

from __future__ import annotations

import datetime
import enum
import logging
from dataclasses import dataclass
from decimal import Decimal

from app.core.calendar import each_day, weekday_index
from app.models import Room, RoomPromotion

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


@dataclass(frozen=True, slots=True)
class FixedPrice:
    """Promotion that replaces the nightly price outright."""

    amount: Decimal


@dataclass(frozen=True, slots=True)
class PercentDiscount:
    """Promotion that takes a percentage off the weekday price."""

    percent: Decimal


@dataclass(frozen=True, slots=True)
class NoOverride:
    """Promotion with no numeric effect."""


PriceOverride = FixedPrice | PercentDiscount | NoOverride


@dataclass(frozen=True, slots=True)
class PromotionWindow:
    """Promotion snapshot: an override valid between two dates inclusive."""

    start_date: datetime.date
    end_date: datetime.date
    override: PriceOverride = NoOverride()

    def covers(self, day: datetime.date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True, slots=True)
class LegacyPromo:
    """Fixed promo price stored directly on the room."""

    price: Decimal
    start_date: datetime.date
    end_date: datetime.date

    def covers(self, day: datetime.date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True, slots=True)
class RoomRates:
    """Read-only snapshot of a room's rate table."""

    weekday_prices: tuple[Decimal | None, ...]
    fallback_price: Decimal
    legacy_promo: LegacyPromo | None = None


class PriceSource(str, enum.Enum):
    """Which rule produced a night's price."""

    BASE = "base"
    PROMOTION = "promotion"
    LEGACY_PROMO = "legacy_promo"


@dataclass(frozen=True, slots=True)
class NightPrice:
    """Price resolved for a single night of a stay."""

    date: datetime.date
    base_price: Decimal
    price: Decimal
    source: PriceSource


@dataclass(frozen=True, slots=True)
class NightlyRate:
    """Average nightly rate and whether a stay window produced it."""

    average_price: Decimal
    has_date_range: bool


@dataclass(slots=True)
class StayQuote:
    """Nightly breakdown plus totals for a stay."""

    nightly_rate: NightlyRate
    nights: list[NightPrice]
    total: Decimal


def _to_decimal(value: Decimal | float | int | str | None) -> Decimal | None:
    if value is None:
        return None
    return value if isinstance(value, Decimal) else Decimal(str(value))


def weekday_price(rates: RoomRates, weekday: int) -> Decimal:
    """Weekday price (Sunday=0), falling back to the flat rate when unset or zero."""
    price = rates.weekday_prices[weekday]
    return price if price else rates.fallback_price


def _apply_override(override: PriceOverride, base_price: Decimal) -> Decimal | None:
    if isinstance(override, FixedPrice):
        return override.amount
    if isinstance(override, PercentDiscount):
        return base_price * (1 - override.percent / _HUNDRED)
    return None


def _price_night(
    rates: RoomRates,
    night: datetime.date,
    promotion: PromotionWindow | None,
) -> NightPrice:
    base_price = weekday_price(rates, weekday_index(night))
    if promotion is not None and promotion.covers(night):
        # A covering promotion shadows the legacy promo even without an override.
        price = _apply_override(promotion.override, base_price)
        if price is None:
            return NightPrice(night, base_price, base_price, PriceSource.BASE)
        return NightPrice(night, base_price, price, PriceSource.PROMOTION)
    legacy = rates.legacy_promo
    if legacy is not None and legacy.covers(night):
        return NightPrice(night, base_price, legacy.price, PriceSource.LEGACY_PROMO)
    return NightPrice(night, base_price, base_price, PriceSource.BASE)


def _price_today(
    rates: RoomRates,
    today: datetime.date,
    promotion: PromotionWindow | None,
) -> Decimal:
    base_price = weekday_price(rates, weekday_index(today))
    if promotion is not None and promotion.covers(today):
        price = _apply_override(promotion.override, base_price)
        if price is not None:
            return price
    legacy = rates.legacy_promo
    if legacy is not None and legacy.covers(today):
        return legacy.price
    return base_price


def price_nights(
    rates: RoomRates,
    check_in: datetime.date,
    check_out: datetime.date,
    promotion: PromotionWindow | None = None,
) -> list[NightPrice]:
    """Price every night from check-in up to, not including, check-out."""
    if check_out <= check_in:
        return []
    last_night = check_out - datetime.timedelta(days=1)
    return [
        _price_night(rates, night, promotion)
        for night in each_day(check_in, last_night)
    ]


def _average_rate(
    rates: RoomRates, check_in: datetime.date, nights: list[NightPrice]
) -> NightlyRate:
    if not nights:
        return NightlyRate(
            weekday_price(rates, weekday_index(check_in)), has_date_range=True
        )
    total = sum((night.price for night in nights), _ZERO)
    return NightlyRate(total / len(nights), has_date_range=True)


def resolve_price(
    rates: RoomRates,
    check_in: datetime.date | None = None,
    check_out: datetime.date | None = None,
    promotion: PromotionWindow | None = None,
    *,
    today: datetime.date,
) -> NightlyRate:
    """Resolve the nightly rate to charge for a room.

    Without both dates the price for ``today`` is returned. With a stay the
    result is the arithmetic mean of the independently priced nights; a stay
    with no nights falls back to the check-in weekday price. The active
    ``promotion`` always outranks the room's legacy promo. No rounding is
    applied.
    """
    if check_in is None or check_out is None:
        return NightlyRate(_price_today(rates, today, promotion), has_date_range=False)

    nights = price_nights(rates, check_in, check_out, promotion)
    return _average_rate(rates, check_in, nights)


def quote_stay(
    rates: RoomRates,
    check_in: datetime.date | None = None,
    check_out: datetime.date | None = None,
    promotion: PromotionWindow | None = None,
    *,
    today: datetime.date,
) -> StayQuote:
    """Produce the nightly breakdown and total for a stay."""
    if check_in is None or check_out is None:
        nightly_rate = resolve_price(rates, promotion=promotion, today=today)
        return StayQuote(
            nightly_rate=nightly_rate, nights=[], total=nightly_rate.average_price
        )

    nights = price_nights(rates, check_in, check_out, promotion)
    nightly_rate = _average_rate(rates, check_in, nights)
    if nights:
        total = sum((night.price for night in nights), _ZERO)
    else:
        total = nightly_rate.average_price
    return StayQuote(nightly_rate=nightly_rate, nights=nights, total=total)


def room_rates_from_room(room: Room) -> RoomRates:
    """Build a rate snapshot from a stored room, rejecting invalid prices."""
    weekday_prices = tuple(_to_decimal(price) for price in room.weekday_prices)
    fallback_price = _to_decimal(room.price_per_night)
    if fallback_price is None:
        raise ValueError(f"Room {room.id} has no price per night")
    for price in (*weekday_prices, fallback_price, _to_decimal(room.promo_price)):
        if price is not None and price < 0:
            logger.warning("Room %s has a negative price configured", room.id)
            raise ValueError(f"Room {room.id} has a negative price")

    legacy_promo: LegacyPromo | None = None
    promo_price = _to_decimal(room.promo_price)
    if promo_price and room.promo_start_date and room.promo_end_date:
        legacy_promo = LegacyPromo(
            price=promo_price,
            start_date=room.promo_start_date,
            end_date=room.promo_end_date,
        )
    return RoomRates(
        weekday_prices=weekday_prices,
        fallback_price=fallback_price,
        legacy_promo=legacy_promo,
    )


def promotion_window_from_model(promotion: RoomPromotion) -> PromotionWindow:
    """Build a promotion snapshot; a fixed price wins over a percentage."""
    if promotion.end_date < promotion.start_date:
        logger.warning("Promotion %s ends before it starts", promotion.id)
        raise ValueError(f"Promotion {promotion.id} ends before it starts")

    promo_price = _to_decimal(promotion.promo_price)
    percent = _to_decimal(promotion.discount_percentage)
    override: PriceOverride
    if promo_price:
        if promo_price < 0:
            raise ValueError(f"Promotion {promotion.id} has a negative price")
        override = FixedPrice(promo_price)
    elif percent:
        if not _ZERO <= percent <= _HUNDRED:
            raise ValueError(
                f"Promotion {promotion.id} discount must be between 0 and 100"
            )
        override = PercentDiscount(percent)
    else:
        override = NoOverride()
    return PromotionWindow(
        start_date=promotion.start_date,
        end_date=promotion.end_date,
        override=override,
    )


__all__ = [
    "FixedPrice",
    "LegacyPromo",
    "NightPrice",
    "NightlyRate",
    "NoOverride",
    "PercentDiscount",
    "PriceOverride",
    "PriceSource",
    "PromotionWindow",
    "RoomRates",
    "StayQuote",
    "price_nights",
    "promotion_window_from_model",
    "quote_stay",
    "resolve_price",
    "room_rates_from_room",
    "weekday_price",
]
