"""Pricing-related API endpoints."""

from __future__ import annotations

import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.models import RoomPromotion
from app.schemas.pricing import NightPriceRead, StayQuoteRead, StayQuoteRequest
from app.services import pricing_service, promotion_service, room_service

router = APIRouter(prefix="/pricing", tags=["pricing"])


async def _resolve_promotion(
    session: AsyncSession,
    payload: StayQuoteRequest,
    *,
    reference_date: datetime.date,
) -> RoomPromotion | None:
    if payload.promotion_id is None:
        return await promotion_service.get_active_promotion(
            session, room_id=payload.room_id, reference_date=reference_date
        )
    promotion = await promotion_service.get_promotion(
        session, promotion_id=payload.promotion_id
    )
    if promotion is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Promotion not found"
        )
    if promotion.room_id != payload.room_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Promotion does not apply to this room",
        )
    return promotion


@router.post("/quote", response_model=StayQuoteRead, summary="Quote nightly rate")
async def quote_room_price(
    payload: StayQuoteRequest,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    today: Annotated[datetime.date, Depends(deps.get_today)],
) -> StayQuoteRead:
    room = await room_service.get_room(session, room_id=payload.room_id)
    if room is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Room not found"
        )
    has_stay = payload.check_in is not None and payload.check_out is not None
    reference_date = payload.check_in if has_stay else today
    promotion = await _resolve_promotion(
        session, payload, reference_date=reference_date
    )
    try:
        rates = pricing_service.room_rates_from_room(room)
        window = (
            pricing_service.promotion_window_from_model(promotion)
            if promotion is not None
            else None
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc

    quote = pricing_service.quote_stay(
        rates, payload.check_in, payload.check_out, window, today=today
    )
    return StayQuoteRead(
        room_id=room.id,
        promotion_id=promotion.id if promotion is not None else None,
        average_price=quote.nightly_rate.average_price,
        has_date_range=quote.nightly_rate.has_date_range,
        nights=[NightPriceRead.model_validate(night) for night in quote.nights],
        total=quote.total,
    )
