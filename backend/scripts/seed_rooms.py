"""Seed sample rooms and a launch promotion."""

from __future__ import annotations

import asyncio
from datetime import timedelta
from decimal import Decimal

from sqlalchemy import select

from app.core import calendar
from app.db.base import Base
from app.db.session import get_engine, get_sessionmaker
from app.models import Room, RoomPromotion

PROMO_CODE = "WELCOME10"

SAMPLE_ROOMS: list[dict[str, object]] = [
    {
        "name": "Deluxe Garden",
        "slug": "deluxe-garden",
        "price_per_night": Decimal("450000"),
        "friday_price": Decimal("525000"),
        "saturday_price": Decimal("575000"),
        "max_guests": 2,
        "room_count": 4,
    },
    {
        "name": "Family Suite",
        "slug": "family-suite",
        "price_per_night": Decimal("850000"),
        "saturday_price": Decimal("950000"),
        "sunday_price": Decimal("900000"),
        "max_guests": 4,
        "room_count": 2,
    },
]


async def seed_rooms() -> None:
    sessionmaker = get_sessionmaker()
    engine = get_engine()
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)

    async with sessionmaker() as session:
        today = calendar.today()
        rooms_created = 0
        promos_created = 0
        for room_data in SAMPLE_ROOMS:
            existing = (
                await session.execute(select(Room).where(Room.slug == room_data["slug"]))
            ).scalar_one_or_none()
            if existing is not None:
                continue
            room = Room(**room_data)
            session.add(room)
            await session.flush()
            rooms_created += 1

            session.add(
                RoomPromotion(
                    room_id=room.id,
                    name="Welcome offer",
                    discount_percentage=Decimal("10"),
                    start_date=today,
                    end_date=today + timedelta(days=90),
                    promo_code=PROMO_CODE,
                    priority=1,
                )
            )
            promos_created += 1

        if rooms_created or promos_created:
            await session.commit()

        print(f"Seeded {rooms_created} room(s) and {promos_created} promotion(s).")


def main() -> None:
    asyncio.run(seed_rooms())


if __name__ == "__main__":
    main()
