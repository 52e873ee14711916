"""Versioned API router."""

from fastapi import APIRouter

from . import health, pricing, promotions, rooms

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(rooms.router, prefix="/rooms", tags=["rooms"])
router.include_router(pricing.router, tags=["pricing"])
router.include_router(promotions.router, tags=["promotions"])

__all__ = ["router"]
