"""API tests for the order endpoints."""

from decimal import Decimal

import pytest

from core.data.models import OrderModel


def order_body(member_id: int, *items) -> dict:
    return {
        "member_id": member_id,
        "recipient_name": "Kim Minji",
        "recipient_phone": "010-1234-5678",
        "shipping_address": "Seoul, Gangnam-gu",
        "payment_method": "CARD",
        "items": [{"product_id": pid, "quantity": qty} for pid, qty in items],
    }


@pytest.mark.asyncio
async def test_place_order(client, store, member_id):
    product_id = await store.add_product("STRANDMON", "1000", stock=10)

    response = await client.post("/api/v1/orders", json=order_body(member_id, (product_id, 3)))

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["message"] == "Order placed successfully"
    assert isinstance(data["order_id"], int)
    assert Decimal(str(data["total_price"])) == Decimal("3000")
    assert await store.stock_of(product_id) == 7


@pytest.mark.asyncio
async def test_client_supplied_price_is_ignored(client, store, member_id):
    product_id = await store.add_product("STRANDMON", "249000", stock=10)
    body = order_body(member_id, (product_id, 1))
    body["items"][0]["price"] = 1

    response = await client.post("/api/v1/orders", json=body)

    assert response.status_code == 200
    assert Decimal(str(response.json()["total_price"])) == Decimal("249000")


@pytest.mark.asyncio
async def test_empty_order_is_bad_request(client, store, member_id):
    response = await client.post("/api/v1/orders", json=order_body(member_id))

    assert response.status_code == 400
    assert response.json()["detail"] == "No items to order"
    assert response.json()["error_kind"] == "EMPTY_ORDER"


@pytest.mark.asyncio
async def test_missing_member_is_bad_request(client, store):
    product_id = await store.add_product("LACK", "15000", stock=5)

    response = await client.post(
        "/api/v1/orders", json={"items": [{"product_id": product_id, "quantity": 1}]}
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "member_id is required"
    assert await store.stock_of(product_id) == 5


@pytest.mark.asyncio
async def test_insufficient_stock_reports_remaining(client, store, member_id):
    product_id = await store.add_product("LACK", "15000", stock=2)

    response = await client.post("/api/v1/orders", json=order_body(member_id, (product_id, 5)))

    assert response.status_code == 500
    data = response.json()
    assert data["error_kind"] == "INSUFFICIENT_STOCK"
    assert "remaining stock: 2" in data["detail"]
    assert await store.count(OrderModel) == 0


@pytest.mark.asyncio
async def test_non_positive_quantity_is_rejected(client, store, member_id):
    product_id = await store.add_product("LACK", "15000", stock=2)

    response = await client.post("/api/v1/orders", json=order_body(member_id, (product_id, 0)))

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_order_history(client, store, member_id):
    product_id = await store.add_product("MALM", "199000", stock=5)
    placed = await client.post("/api/v1/orders", json=order_body(member_id, (product_id, 2)))

    response = await client.get("/api/v1/orders/history", params={"member_id": member_id})

    assert response.status_code == 200
    history = response.json()
    assert len(history) == 1
    assert history[0]["order_id"] == placed.json()["order_id"]
    assert history[0]["product_name"] == "MALM"
    assert history[0]["status"] == "PAID"


@pytest.mark.asyncio
async def test_order_history_requires_member(client):
    response = await client.get("/api/v1/orders/history")

    assert response.status_code == 400
