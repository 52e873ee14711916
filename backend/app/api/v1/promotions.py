"""Room promotion administration endpoints."""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.models import RoomPromotion
from app.schemas.promotion import (
    RoomPromotionCreate,
    RoomPromotionRead,
    RoomPromotionToggle,
    RoomPromotionUpdate,
)
from app.services import promotion_service

router = APIRouter(prefix="/promotions")


async def _get_or_404(session: AsyncSession, promotion_id: uuid.UUID) -> RoomPromotion:
    promotion = await promotion_service.get_promotion(
        session, promotion_id=promotion_id
    )
    if promotion is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Promotion not found"
        )
    return promotion


@router.get("", response_model=list[RoomPromotionRead], summary="List promotions")
async def list_promotions(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    room_id: uuid.UUID | None = Query(default=None),
) -> list[RoomPromotionRead]:
    promotions = await promotion_service.list_promotions(session, room_id=room_id)
    return [RoomPromotionRead.model_validate(item) for item in promotions]


@router.post(
    "",
    response_model=RoomPromotionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create promotion",
)
async def create_promotion(
    payload: RoomPromotionCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> RoomPromotionRead:
    try:
        promotion = await promotion_service.create_promotion(session, payload=payload)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return RoomPromotionRead.model_validate(promotion)


@router.get(
    "/{promotion_id}", response_model=RoomPromotionRead, summary="Get promotion"
)
async def get_promotion(
    promotion_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> RoomPromotionRead:
    promotion = await _get_or_404(session, promotion_id)
    return RoomPromotionRead.model_validate(promotion)


@router.patch(
    "/{promotion_id}", response_model=RoomPromotionRead, summary="Update promotion"
)
async def update_promotion(
    promotion_id: uuid.UUID,
    payload: RoomPromotionUpdate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> RoomPromotionRead:
    promotion = await _get_or_404(session, promotion_id)
    try:
        updated = await promotion_service.update_promotion(
            session, promotion=promotion, payload=payload
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return RoomPromotionRead.model_validate(updated)


@router.post(
    "/{promotion_id}/toggle",
    response_model=RoomPromotionRead,
    summary="Activate or deactivate promotion",
)
async def toggle_promotion(
    promotion_id: uuid.UUID,
    payload: RoomPromotionToggle,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> RoomPromotionRead:
    promotion = await _get_or_404(session, promotion_id)
    updated = await promotion_service.set_promotion_active(
        session, promotion=promotion, is_active=payload.is_active
    )
    return RoomPromotionRead.model_validate(updated)


@router.delete(
    "/{promotion_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete promotion",
)
async def delete_promotion(
    promotion_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> None:
    promotion = await _get_or_404(session, promotion_id)
    await promotion_service.delete_promotion(session, promotion=promotion)
    return None
