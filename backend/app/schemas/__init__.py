"""Schema exports."""

from app.schemas.pricing import NightPriceRead, StayQuoteRead, StayQuoteRequest
from app.schemas.promotion import (
    RoomPromotionCreate,
    RoomPromotionRead,
    RoomPromotionToggle,
    RoomPromotionUpdate,
)
from app.schemas.room import RoomListing, RoomRead

__all__ = [
    "NightPriceRead",
    "RoomListing",
    "RoomPromotionCreate",
    "RoomPromotionRead",
    "RoomPromotionToggle",
    "RoomPromotionUpdate",
    "RoomRead",
    "StayQuoteRead",
    "StayQuoteRequest",
]
