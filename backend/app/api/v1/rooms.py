"""Room catalogue endpoints."""

from __future__ import annotations

import datetime
import logging
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api import deps
from app.schemas.promotion import RoomPromotionRead
from app.schemas.room import RoomListing, RoomRead
from app.services import promotion_service, room_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[RoomListing], summary="List available rooms")
async def list_rooms(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    today: Annotated[datetime.date, Depends(deps.get_today)],
) -> list[RoomListing]:
    rooms = await room_service.list_available_rooms(session)
    promotions = await promotion_service.active_promotions_by_room(
        session, room_ids=[room.id for room in rooms], reference_date=today
    )
    listings: list[RoomListing] = []
    for room in rooms:
        promotion = promotions.get(room.id)
        try:
            final_price = room_service.current_room_price(room, promotion, today=today)
        except ValueError:
            logger.warning("Skipping room %s with invalid pricing data", room.id)
            continue
        listing = RoomListing.model_validate(
            {
                **RoomRead.model_validate(room).model_dump(),
                "active_promotion": (
                    RoomPromotionRead.model_validate(promotion)
                    if promotion is not None
                    else None
                ),
                "final_price": final_price,
            }
        )
        listings.append(listing)
    return listings


@router.get("/{room_id}", response_model=RoomRead, summary="Get room")
async def get_room(
    room_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> RoomRead:
    room = await room_service.get_room(session, room_id=room_id)
    if room is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Room not found"
        )
    return RoomRead.model_validate(room)
