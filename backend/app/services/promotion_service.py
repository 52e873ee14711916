"""Room promotion administration and active-promotion selection."""
from __future__ import annotations

import datetime
import logging
import uuid
from collections.abc import Iterable
from decimal import Decimal

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Room, RoomPromotion
from app.schemas.promotion import RoomPromotionCreate, RoomPromotionUpdate

logger = logging.getLogger(__name__)


def select_active_promotion(
    promotions: Iterable[RoomPromotion],
    reference_date: datetime.date,
) -> RoomPromotion | None:
    """Pick the highest-priority active promotion covering the reference date.

    Ties keep the promotion that appears first.
    """
    best: RoomPromotion | None = None
    for promotion in promotions:
        if not promotion.is_active:
            continue
        if not promotion.start_date <= reference_date <= promotion.end_date:
            continue
        if best is None or promotion.priority > best.priority:
            best = promotion
    return best


async def get_active_promotion(
    session: AsyncSession,
    *,
    room_id: uuid.UUID,
    reference_date: datetime.date,
) -> RoomPromotion | None:
    stmt = (
        select(RoomPromotion)
        .where(
            RoomPromotion.room_id == room_id,
            RoomPromotion.is_active.is_(True),
            RoomPromotion.start_date <= reference_date,
            RoomPromotion.end_date >= reference_date,
        )
        .order_by(RoomPromotion.priority.desc(), RoomPromotion.created_at.asc())
    )
    result = await session.execute(stmt)
    return select_active_promotion(result.scalars().all(), reference_date)


async def active_promotions_by_room(
    session: AsyncSession,
    *,
    room_ids: Iterable[uuid.UUID],
    reference_date: datetime.date,
) -> dict[uuid.UUID, RoomPromotion]:
    """Map each room to its active promotion, omitting rooms without one."""
    ids = list(room_ids)
    if not ids:
        return {}
    stmt = (
        select(RoomPromotion)
        .where(
            RoomPromotion.room_id.in_(ids),
            RoomPromotion.is_active.is_(True),
            RoomPromotion.start_date <= reference_date,
            RoomPromotion.end_date >= reference_date,
        )
        .order_by(RoomPromotion.priority.desc(), RoomPromotion.created_at.asc())
    )
    result = await session.execute(stmt)
    grouped: dict[uuid.UUID, list[RoomPromotion]] = {}
    for promotion in result.scalars().all():
        grouped.setdefault(promotion.room_id, []).append(promotion)
    selected: dict[uuid.UUID, RoomPromotion] = {}
    for room_id, promotions in grouped.items():
        promotion = select_active_promotion(promotions, reference_date)
        if promotion is not None:
            selected[room_id] = promotion
    return selected


async def list_promotions(
    session: AsyncSession,
    *,
    room_id: uuid.UUID | None = None,
) -> list[RoomPromotion]:
    stmt: Select[tuple[RoomPromotion]] = select(RoomPromotion)
    if room_id is not None:
        stmt = stmt.where(RoomPromotion.room_id == room_id)
    stmt = stmt.order_by(RoomPromotion.start_date.desc())
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_promotion(
    session: AsyncSession,
    *,
    promotion_id: uuid.UUID,
) -> RoomPromotion | None:
    return await session.get(RoomPromotion, promotion_id)


async def create_promotion(
    session: AsyncSession,
    *,
    payload: RoomPromotionCreate,
) -> RoomPromotion:
    room = await session.get(Room, payload.room_id)
    if room is None:
        raise ValueError("Room not found")
    data = payload.model_dump()
    promotion = RoomPromotion(**data)
    session.add(promotion)
    await session.commit()
    await session.refresh(promotion)
    logger.info(
        "Created promotion %s for room %s (%s to %s)",
        promotion.id,
        promotion.room_id,
        promotion.start_date,
        promotion.end_date,
    )
    return promotion


async def update_promotion(
    session: AsyncSession,
    *,
    promotion: RoomPromotion,
    payload: RoomPromotionUpdate,
) -> RoomPromotion:
    data = payload.model_dump(exclude_unset=True)
    for key in ("promo_price", "discount_percentage"):
        if data.get(key) is not None:
            data[key] = Decimal(str(data[key]))
    start_date = data.get("start_date", promotion.start_date)
    end_date = data.get("end_date", promotion.end_date)
    if end_date < start_date:
        raise ValueError("end_date must not precede start_date")
    for key, value in data.items():
        setattr(promotion, key, value)
    await session.commit()
    await session.refresh(promotion)
    logger.info("Updated promotion %s fields=%s", promotion.id, sorted(data))
    return promotion


async def set_promotion_active(
    session: AsyncSession,
    *,
    promotion: RoomPromotion,
    is_active: bool,
) -> RoomPromotion:
    promotion.is_active = is_active
    await session.commit()
    await session.refresh(promotion)
    logger.info("Promotion %s active=%s", promotion.id, is_active)
    return promotion


async def delete_promotion(session: AsyncSession, *, promotion: RoomPromotion) -> None:
    await session.delete(promotion)
    await session.commit()
    logger.info("Deleted promotion %s", promotion.id)
