"""Service-level tests for promotion selection and administration."""

from __future__ import annotations

import datetime
import uuid
from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.db.session import get_sessionmaker
from app.models import Room, RoomPromotion
from app.schemas.promotion import RoomPromotionCreate, RoomPromotionUpdate
from app.services import promotion_service

TODAY = datetime.date(2024, 1, 10)


def _promotion(
    room_id: uuid.UUID,
    *,
    name: str,
    priority: int = 0,
    start: datetime.date = datetime.date(2024, 1, 1),
    end: datetime.date = datetime.date(2024, 1, 31),
    is_active: bool = True,
) -> RoomPromotion:
    return RoomPromotion(
        room_id=room_id,
        name=name,
        discount_percentage=Decimal("10"),
        start_date=start,
        end_date=end,
        is_active=is_active,
        priority=priority,
    )


async def _seed_room(session, name: str = "Standard") -> Room:
    room = Room(name=name, price_per_night=Decimal("100.00"))
    session.add(room)
    await session.flush()
    return room


def test_select_active_promotion_prefers_priority_and_first_tie() -> None:
    room_id = uuid.uuid4()
    low = _promotion(room_id, name="low", priority=1)
    high = _promotion(room_id, name="high", priority=5)
    tie = _promotion(room_id, name="tie", priority=5)
    assert promotion_service.select_active_promotion([low, high, tie], TODAY) is high


def test_select_active_promotion_skips_inactive_and_expired() -> None:
    room_id = uuid.uuid4()
    inactive = _promotion(room_id, name="off", priority=9, is_active=False)
    expired = _promotion(
        room_id,
        name="old",
        priority=9,
        start=datetime.date(2023, 12, 1),
        end=datetime.date(2024, 1, 9),
    )
    assert promotion_service.select_active_promotion([inactive, expired], TODAY) is None
    edge = _promotion(room_id, name="edge", end=TODAY)
    assert promotion_service.select_active_promotion([edge], TODAY) is edge


@pytest.mark.asyncio
async def test_get_active_promotion_from_database(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        room = await _seed_room(session)
        other = await _seed_room(session, name="Other")
        session.add_all(
            [
                _promotion(room.id, name="base", priority=1),
                _promotion(room.id, name="best", priority=3),
                _promotion(room.id, name="disabled", priority=10, is_active=False),
                _promotion(other.id, name="other room", priority=20),
            ]
        )
        await session.commit()

        promotion = await promotion_service.get_active_promotion(
            session, room_id=room.id, reference_date=TODAY
        )
        assert promotion is not None
        assert promotion.name == "best"

        by_room = await promotion_service.active_promotions_by_room(
            session, room_ids=[room.id, other.id], reference_date=TODAY
        )
        assert by_room[room.id].name == "best"
        assert by_room[other.id].name == "other room"

        none_yet = await promotion_service.get_active_promotion(
            session, room_id=room.id, reference_date=datetime.date(2023, 6, 1)
        )
        assert none_yet is None


@pytest.mark.asyncio
async def test_promotion_crud(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        room = await _seed_room(session)
        await session.commit()

        created = await promotion_service.create_promotion(
            session,
            payload=RoomPromotionCreate(
                room_id=room.id,
                name="Early bird",
                promo_price=Decimal("75.00"),
                start_date=datetime.date(2024, 1, 1),
                end_date=datetime.date(2024, 1, 15),
            ),
        )
        assert created.is_active is True
        assert created.priority == 0

        updated = await promotion_service.update_promotion(
            session,
            promotion=created,
            payload=RoomPromotionUpdate(priority=4, discount_percentage=Decimal("15")),
        )
        assert updated.priority == 4
        assert updated.discount_percentage == Decimal("15")

        with pytest.raises(ValueError):
            await promotion_service.update_promotion(
                session,
                promotion=created,
                payload=RoomPromotionUpdate(end_date=datetime.date(2023, 12, 31)),
            )

        toggled = await promotion_service.set_promotion_active(
            session, promotion=created, is_active=False
        )
        assert toggled.is_active is False

        listed = await promotion_service.list_promotions(session, room_id=room.id)
        assert [item.id for item in listed] == [created.id]

        await promotion_service.delete_promotion(session, promotion=created)
        assert await promotion_service.list_promotions(session) == []


@pytest.mark.asyncio
async def test_create_promotion_requires_room(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        with pytest.raises(ValueError):
            await promotion_service.create_promotion(
                session,
                payload=RoomPromotionCreate(
                    room_id=uuid.uuid4(),
                    name="Ghost",
                    start_date=datetime.date(2024, 1, 1),
                    end_date=datetime.date(2024, 1, 2),
                ),
            )


def test_update_schema_rejects_null_required_fields() -> None:
    with pytest.raises(ValidationError):
        RoomPromotionUpdate(start_date=None)
    with pytest.raises(ValidationError):
        RoomPromotionUpdate.model_validate({"name": None})
    payload = RoomPromotionUpdate.model_validate({"promo_price": None, "priority": 2})
    assert payload.model_dump(exclude_unset=True) == {"promo_price": None, "priority": 2}
