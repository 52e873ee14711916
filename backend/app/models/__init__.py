"""ORM models package export."""

from app.models.room import WEEKDAY_PRICE_FIELDS, Room
from app.models.room_promotion import RoomPromotion

__all__ = [
    "Room",
    "RoomPromotion",
    "WEEKDAY_PRICE_FIELDS",
]
