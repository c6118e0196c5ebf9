"""API tests for members, catalog, cart, reviews and health."""

import pytest

from core.settings import get_app_settings


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(get_app_settings().security, "bcrypt_rounds", 4)


@pytest.mark.asyncio
async def test_register_and_login(client):
    body = {"email": "kim@example.com", "password": "s3cret", "name": "Kim"}

    registered = await client.post("/api/v1/members/register", json=body)
    assert registered.status_code == 201
    member_id = registered.json()["member_id"]

    duplicate = await client.post("/api/v1/members/register", json=body)
    assert duplicate.status_code == 409

    login = await client.post(
        "/api/v1/members/login", json={"email": "kim@example.com", "password": "s3cret"}
    )
    assert login.status_code == 200
    assert login.json()["member"]["member_id"] == member_id
    assert "password" not in login.json()["member"]

    bad_login = await client.post(
        "/api/v1/members/login", json={"email": "kim@example.com", "password": "nope"}
    )
    assert bad_login.status_code == 401


@pytest.mark.asyncio
async def test_register_missing_fields(client):
    response = await client.post("/api/v1/members/register", json={"email": "kim@example.com"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_catalog_listing(client, store):
    living = await store.add_category("거실가구")
    bedroom = await store.add_category("침실가구")
    await store.add_product("STRANDMON", "249000", stock=10, category_id=living)
    await store.add_product("MALM", "199000", stock=20, category_id=bedroom)

    categories = await client.get("/api/v1/categories")
    assert [c["name"] for c in categories.json()] == ["거실가구", "침실가구"]

    everything = await client.get("/api/v1/products", params={"category_id": "all"})
    assert len(everything.json()) == 2

    bedroom_only = await client.get("/api/v1/products", params={"category_id": bedroom})
    assert [p["name"] for p in bedroom_only.json()] == ["MALM"]
    assert bedroom_only.json()[0]["review_count"] == 0

    invalid = await client.get("/api/v1/products", params={"category_id": "sofa"})
    assert invalid.status_code == 400


@pytest.mark.asyncio
async def test_cart_roundtrip(client, store, member_id):
    product_id = await store.add_product("LACK", "15000", stock=50)

    added = await client.post(
        "/api/v1/cart", json={"member_id": member_id, "product_id": product_id, "quantity": 2}
    )
    cart_id = added.json()["cart_id"]

    updated = await client.put(f"/api/v1/cart/{cart_id}", json={"quantity": 4})
    assert updated.status_code == 200

    listing = await client.get("/api/v1/cart", params={"member_id": member_id})
    assert [(i["product_id"], i["quantity"]) for i in listing.json()] == [(product_id, 4)]

    removed = await client.delete(f"/api/v1/cart/{cart_id}")
    assert removed.status_code == 200

    missing = await client.delete(f"/api/v1/cart/{cart_id}")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_placing_order_empties_cart_of_purchased_products(client, store, member_id):
    bought = await store.add_product("MALM", "199000", stock=5)
    kept = await store.add_product("LACK", "15000", stock=5)
    for product_id in (bought, kept):
        await client.post("/api/v1/cart", json={"member_id": member_id, "product_id": product_id})

    await client.post(
        "/api/v1/orders",
        json={"member_id": member_id, "items": [{"product_id": bought, "quantity": 1}]},
    )

    listing = await client.get("/api/v1/cart", params={"member_id": member_id})
    assert [i["product_id"] for i in listing.json()] == [kept]


@pytest.mark.asyncio
async def test_reviews(client, store, member_id):
    product_id = await store.add_product("MALM", "199000", stock=5)
    review = {"member_id": member_id, "product_id": product_id, "rating": 5, "comment": "Sturdy"}

    forbidden = await client.post("/api/v1/reviews", json=review)
    assert forbidden.status_code == 403

    await client.post(
        "/api/v1/orders",
        json={"member_id": member_id, "items": [{"product_id": product_id, "quantity": 1}]},
    )
    created = await client.post("/api/v1/reviews", json=review)
    assert created.status_code == 201

    listing = await client.get(f"/api/v1/products/{product_id}/reviews")
    assert [(r["rating"], r["reviewer_name"]) for r in listing.json()] == [(5, "Buyer")]


@pytest.mark.asyncio
async def test_review_rating_out_of_range(client, store, member_id):
    response = await client.post(
        "/api/v1/reviews", json={"member_id": member_id, "product_id": 1, "rating": 6}
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_health(client):
    live = await client.get("/health")
    assert live.json()["status"] == "healthy"

    ready = await client.get("/health/ready")
    assert ready.status_code == 200
    assert ready.json()["checks"]["database"] == "ok"
