"""API tests for promotion administration."""

from __future__ import annotations

import uuid
from typing import Any

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_promotion_lifecycle(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    room_id = str(app_context["room_id"])

    create_resp = await client.post(
        "/api/v1/promotions",
        json={
            "room_id": room_id,
            "name": "New Year",
            "discount_percentage": "20",
            "start_date": "2024-01-01",
            "end_date": "2024-01-07",
            "priority": 3,
        },
    )
    assert create_resp.status_code == 201
    promotion = create_resp.json()
    promotion_id = promotion["id"]
    assert promotion["is_active"] is True

    list_resp = await client.get("/api/v1/promotions", params={"room_id": room_id})
    assert list_resp.status_code == 200
    assert [item["id"] for item in list_resp.json()] == [promotion_id]

    quote = await client.post("/api/v1/pricing/quote", json={"room_id": room_id})
    assert quote.json()["promotion_id"] == promotion_id
    assert float(quote.json()["average_price"]) == pytest.approx(80.0)

    patch_resp = await client.patch(
        f"/api/v1/promotions/{promotion_id}", json={"name": "New Year Sale"}
    )
    assert patch_resp.status_code == 200
    assert patch_resp.json()["name"] == "New Year Sale"

    toggle_resp = await client.post(
        f"/api/v1/promotions/{promotion_id}/toggle", json={"is_active": False}
    )
    assert toggle_resp.status_code == 200
    assert toggle_resp.json()["is_active"] is False

    quote = await client.post("/api/v1/pricing/quote", json={"room_id": room_id})
    assert quote.json()["promotion_id"] is None

    delete_resp = await client.delete(f"/api/v1/promotions/{promotion_id}")
    assert delete_resp.status_code == 204
    missing = await client.get(f"/api/v1/promotions/{promotion_id}")
    assert missing.status_code == 404


async def test_promotion_validation(app_context: dict[str, Any]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    room_id = str(app_context["room_id"])
    base = {"room_id": room_id, "name": "Bad", "start_date": "2024-01-05"}

    reversed_window = await client.post(
        "/api/v1/promotions", json={**base, "end_date": "2024-01-01"}
    )
    assert reversed_window.status_code == 422

    too_much = await client.post(
        "/api/v1/promotions",
        json={**base, "end_date": "2024-01-06", "discount_percentage": "150"},
    )
    assert too_much.status_code == 422

    unknown_room = await client.post(
        "/api/v1/promotions",
        json={**base, "room_id": str(uuid.uuid4()), "end_date": "2024-01-06"},
    )
    assert unknown_room.status_code == 404

    created = await client.post(
        "/api/v1/promotions", json={**base, "end_date": "2024-01-06"}
    )
    assert created.status_code == 201
    bad_patch = await client.patch(
        f"/api/v1/promotions/{created.json()['id']}",
        json={"end_date": "2024-01-01"},
    )
    assert bad_patch.status_code == 400


@pytest.mark.parametrize(
    "payload",
    [{"start_date": None}, {"name": None}, {"priority": None, "badge_text": None}],
)
async def test_promotion_patch_rejects_null_required_fields(
    app_context: dict[str, Any], payload: dict[str, Any]
) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    created = await client.post(
        "/api/v1/promotions",
        json={
            "room_id": str(app_context["room_id"]),
            "name": "Weekend",
            "start_date": "2024-01-05",
            "end_date": "2024-01-07",
        },
    )
    assert created.status_code == 201
    promotion_id = created.json()["id"]

    rejected = await client.patch(f"/api/v1/promotions/{promotion_id}", json=payload)
    assert rejected.status_code == 422

    cleared = await client.patch(
        f"/api/v1/promotions/{promotion_id}", json={"description": None}
    )
    assert cleared.status_code == 200
    body = cleared.json()
    assert body["name"] == "Weekend"
    assert body["start_date"] == "2024-01-05"
