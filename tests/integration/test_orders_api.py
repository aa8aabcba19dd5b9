"""
HTTP tests for the customer-facing orders endpoints.
"""

from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from backoffice.models.db import Review as ReviewModel

pytestmark = pytest.mark.api

API = "/api/v1"
SHIRT_PRICE = Decimal("20.00")
MUG_PRICE = Decimal("15.00")


class TestCreateOrder:
    @pytest.mark.asyncio
    async def test_create_order_with_coupon(self, client, seed, auth_headers):
        response = await client.post(
            f"{API}/orders",
            headers=auth_headers(seed.customer_id),
            json={
                "items": [
                    {"product": str(seed.shirt_id), "quantity": 2},
                    {"product": str(seed.mug_id), "quantity": 1},
                ],
                "couponCode": "SAVE10",
                "shippingAddress": {"firstName": "Carla", "city": "Lyon"},
            },
        )

        assert response.status_code == 201
        order = response.json()["order"]
        assert order["subtotal"] == 55.0
        assert order["discount"] == 5.5
        assert order["totalPrice"] == 49.5
        assert order["status"] == "pending"
        assert order["paymentMethod"] == "cod"
        assert order["owner"]["name"] == "Carla Customer"
        assert order["items"][0]["product"]["name"] == "Linen Shirt"
        assert order["items"][0]["canReview"] is False
        assert order["shippingAddress"]["city"] == "Lyon"

    @pytest.mark.asyncio
    async def test_requires_identity(self, client, seed):
        response = await client.post(f"{API}/orders", json={"items": [{"product": str(seed.shirt_id), "quantity": 1}]})

        assert response.status_code == 403
        assert response.json()["error"] == "AUTHORIZATION_ERROR"

    @pytest.mark.asyncio
    async def test_unknown_user(self, client, seed, auth_headers):
        response = await client.post(
            f"{API}/orders",
            headers=auth_headers(uuid4()),
            json={"items": [{"product": str(seed.shirt_id), "quantity": 1}]},
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "items",
        [
            [],
            [{"product": "not-a-uuid", "quantity": 1}],
            [{"product": "00000000-0000-0000-0000-000000000000", "quantity": 1}],
        ],
    )
    async def test_invalid_items(self, client, seed, auth_headers, items):
        response = await client.post(f"{API}/orders", headers=auth_headers(seed.customer_id), json={"items": items})

        assert response.status_code == 400
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_zero_quantity(self, client, seed, auth_headers):
        response = await client.post(
            f"{API}/orders",
            headers=auth_headers(seed.customer_id),
            json={"items": [{"product": str(seed.shirt_id), "quantity": 0}]},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_inactive_coupon(self, client, seed, auth_headers):
        response = await client.post(
            f"{API}/orders",
            headers=auth_headers(seed.customer_id),
            json={"items": [{"product": str(seed.shirt_id), "quantity": 1}], "couponCode": "OLD50"},
        )

        assert response.status_code == 400


class TestListOrders:
    @pytest.mark.asyncio
    async def test_split_by_review_state(self, client, seed, auth_headers, order_factory):
        current = await order_factory(seed.customer_id, [(seed.shirt_id, SHIRT_PRICE, 1)])
        history = await order_factory(seed.customer_id, [(seed.mug_id, MUG_PRICE, 1)], status="delivered", reviewed=True)
        await order_factory(seed.other_id, [(seed.mug_id, MUG_PRICE, 1)])

        response = await client.get(f"{API}/orders", headers=auth_headers(seed.customer_id))

        assert response.status_code == 200
        body = response.json()
        assert [o["id"] for o in body["ordersWithoutReview"]] == [str(current)]
        assert [o["id"] for o in body["ordersWithReview"]] == [str(history)]

    @pytest.mark.asyncio
    async def test_customer_cannot_list_someone_else(self, client, seed, auth_headers):
        response = await client.get(f"{API}/orders", params={"owner": str(seed.other_id)}, headers=auth_headers(seed.customer_id))

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_lists_for_owner(self, client, seed, auth_headers, order_factory):
        await order_factory(seed.other_id, [(seed.mug_id, MUG_PRICE, 1)])

        response = await client.get(f"{API}/orders", params={"owner": str(seed.other_id)}, headers=auth_headers(seed.admin_id))

        assert response.status_code == 200
        assert len(response.json()["ordersWithoutReview"]) == 1


class TestUpdateOrderStatus:
    @pytest.mark.asyncio
    async def test_admin_moves_order_forward(self, client, seed, auth_headers, order_factory):
        order_id = await order_factory(seed.customer_id, [(seed.shirt_id, SHIRT_PRICE, 1)])

        response = await client.patch(
            f"{API}/orders/{order_id}", headers=auth_headers(seed.admin_id), json={"status": "processing"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Order status updated from pending to processing"
        assert body["order"]["status"] == "processing"

    @pytest.mark.asyncio
    async def test_customer_forbidden(self, client, seed, auth_headers, order_factory):
        order_id = await order_factory(seed.customer_id, [(seed.shirt_id, SHIRT_PRICE, 1)])

        response = await client.patch(
            f"{API}/orders/{order_id}", headers=auth_headers(seed.customer_id), json={"status": "cancelled"}
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_illegal_transition(self, client, seed, auth_headers, order_factory):
        order_id = await order_factory(seed.customer_id, [(seed.shirt_id, SHIRT_PRICE, 1)], status="delivered")

        response = await client.patch(
            f"{API}/orders/{order_id}", headers=auth_headers(seed.admin_id), json={"status": "pending"}
        )

        assert response.status_code == 409
        assert response.json()["error"] == "INVALID_TRANSITION"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("order_id", [str(uuid4()), "not-a-uuid"])
    async def test_unknown_order(self, client, seed, auth_headers, order_id):
        response = await client.patch(
            f"{API}/orders/{order_id}", headers=auth_headers(seed.admin_id), json={"status": "processing"}
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"status": "teleported"}])
    async def test_invalid_status(self, client, seed, auth_headers, order_factory, payload):
        order_id = await order_factory(seed.customer_id, [(seed.shirt_id, SHIRT_PRICE, 1)])

        response = await client.patch(f"{API}/orders/{order_id}", headers=auth_headers(seed.admin_id), json=payload)

        assert response.status_code == 400


class TestSubmitReview:
    async def _review(self, client, headers, order_id, product_id, **overrides):
        payload = {
            "order": str(order_id),
            "product": str(product_id),
            "rating": 5,
            "comment": "Lovely fabric",
            "images": ["https://img.example.com/1.jpg"],
        }
        payload.update(overrides)
        return await client.post(f"{API}/reviews", headers=headers, json=payload)

    @pytest.mark.asyncio
    async def test_review_delivered_item(self, client, seed, auth_headers, order_factory):
        order_id = await order_factory(seed.customer_id, [(seed.shirt_id, SHIRT_PRICE, 1)], status="delivered")
        headers = auth_headers(seed.customer_id)

        response = await self._review(client, headers, order_id, seed.shirt_id)

        assert response.status_code == 201
        review = response.json()["review"]
        assert review["rating"] == 5
        assert review["user"] == str(seed.customer_id)

        listing = (await client.get(f"{API}/orders", headers=headers)).json()
        assert [o["id"] for o in listing["ordersWithReview"]] == [str(order_id)]
        assert listing["ordersWithReview"][0]["items"][0]["isReviewed"] is True

    @pytest.mark.asyncio
    async def test_second_review_conflicts(self, client, seed, auth_headers, order_factory, db_session):
        order_id = await order_factory(seed.customer_id, [(seed.shirt_id, SHIRT_PRICE, 1)], status="delivered")
        headers = auth_headers(seed.customer_id)

        first = await self._review(client, headers, order_id, seed.shirt_id)
        second = await self._review(client, headers, order_id, seed.shirt_id, comment="Changed my mind")

        assert first.status_code == 201
        assert second.status_code == 409
        assert await db_session.scalar(select(func.count()).select_from(ReviewModel)) == 1

    @pytest.mark.asyncio
    async def test_undelivered_order(self, client, seed, auth_headers, order_factory):
        order_id = await order_factory(seed.customer_id, [(seed.shirt_id, SHIRT_PRICE, 1)], status="shipped")

        response = await self._review(client, auth_headers(seed.customer_id), order_id, seed.shirt_id)

        assert response.status_code == 409
        assert response.json()["error"] == "INVALID_OPERATION"

    @pytest.mark.asyncio
    async def test_someone_elses_order(self, client, seed, auth_headers, order_factory):
        order_id = await order_factory(seed.customer_id, [(seed.shirt_id, SHIRT_PRICE, 1)], status="delivered")

        response = await self._review(client, auth_headers(seed.other_id), order_id, seed.shirt_id)

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_product_not_in_order(self, client, seed, auth_headers, order_factory):
        order_id = await order_factory(seed.customer_id, [(seed.shirt_id, SHIRT_PRICE, 1)], status="delivered")

        response = await self._review(client, auth_headers(seed.customer_id), order_id, seed.mug_id)

        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"rating": 6},
            {"rating": 0},
            {"comment": "   "},
            {"images": ["not a url"]},
            {"images": [f"https://img.example.com/{i}.jpg" for i in range(6)]},
            {"order": "not-a-uuid"},
        ],
    )
    async def test_invalid_review(self, client, seed, auth_headers, order_factory, overrides):
        order_id = await order_factory(seed.customer_id, [(seed.shirt_id, SHIRT_PRICE, 1)], status="delivered")

        response = await self._review(client, auth_headers(seed.customer_id), order_id, seed.shirt_id, **overrides)

        assert response.status_code == 400
