"""Service layer exports."""
from app.services import (
    pricing_service,
    promotion_service,
    room_service,
)

__all__ = [
    "pricing_service",
    "promotion_service",
    "room_service",
]
