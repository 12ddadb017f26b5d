"""Integration tests for order endpoints."""

import pytest
from quickbite.config import TransitionPolicy


@pytest.fixture()
def checkout_body(menu):
    return {
        "items": [{"menu_item_id": menu["pizza"], "quantity": 2}, {"menu_item_id": menu["burger"], "quantity": 1}],
        "total": 39.96,
        "address": {"street": "1 Main St", "city": "Springfield"},
        "payment_intent_id": "pi_123",
    }


def _fill_cart(client, headers, menu):
    client.post("/cart", json={"menu_item_id": menu["pizza"], "quantity": 2}, headers=headers)
    client.post("/cart", json={"menu_item_id": menu["burger"], "quantity": 1}, headers=headers)


def _place(client, headers, body):
    response = client.post("/orders", json=body, headers=headers)
    assert response.status_code == 201
    return response.json()


class TestCreateOrderEndpoint:
    def test_checkout(self, client, customer, menu, checkout_body):
        _fill_cart(client, customer, menu)

        order = _place(client, customer, checkout_body)

        assert order["status"] == "pending"
        assert order["total"] == 39.96
        assert order["payment_reference"] == "pi_123"
        assert order["address"] == {"street": "1 Main St", "city": "Springfield"}
        assert sorted(item["quantity"] for item in order["items"]) == [1, 2]
        assert client.get("/cart", headers=customer).json() == []

    def test_requested_status_is_ignored(self, client, customer, checkout_body):
        order = _place(client, customer, {**checkout_body, "status": "delivered"})
        assert order["status"] == "pending"

    def test_order_from_cart_when_items_omitted(self, client, customer, menu):
        _fill_cart(client, customer, menu)
        order = _place(client, customer, {})
        assert order["total"] == 39.96
        assert len(order["items"]) == 2

    def test_numeric_text_address_round_trips(self, client, customer, checkout_body):
        user_id = customer["X-User-Id"]
        order = _place(client, customer, {**checkout_body, "address": "12345"})
        assert order["address"] == "12345"

        listed = client.get(f"/orders/{user_id}", headers=customer)
        assert listed.status_code == 200
        assert [entry["address"] for entry in listed.json()] == ["12345"]

    def test_empty_cart_checkout_rejected(self, client, customer):
        response = client.post("/orders", json={}, headers=customer)
        assert response.status_code == 400
        assert "items" in response.json()["errors"]

    def test_empty_items_rejected(self, client, customer, menu, checkout_body):
        _fill_cart(client, customer, menu)

        response = client.post("/orders", json={**checkout_body, "items": []}, headers=customer)

        assert response.status_code == 400
        assert response.json()["errors"]["items"] == ["An order needs at least one item"]
        assert len(client.get("/cart", headers=customer).json()) == 2

    def test_negative_total(self, client, customer, checkout_body):
        response = client.post("/orders", json={**checkout_body, "total": -1}, headers=customer)
        assert response.status_code == 400

    def test_requires_user(self, client, checkout_body):
        assert client.post("/orders", json=checkout_body).status_code == 401


class TestListOrdersEndpoints:
    def test_own_orders_newest_first(self, client, customer, checkout_body):
        first = _place(client, customer, checkout_body)
        second = _place(client, customer, checkout_body)
        user_id = client.get("/user", headers=customer).json()["id"]

        response = client.get(f"/orders/{user_id}", headers=customer)

        assert response.status_code == 200
        assert [order["id"] for order in response.json()] == [second["id"], first["id"]]
        assert response.json()[0]["items"][0]["menu_item"] is not None

    def test_other_users_orders_forbidden(self, client, customer, other_customer, checkout_body):
        _place(client, customer, checkout_body)
        user_id = client.get("/user", headers=customer).json()["id"]

        assert client.get(f"/orders/{user_id}", headers=other_customer).status_code == 403

    def test_admin_reads_any_users_orders(self, client, admin, customer, checkout_body):
        _place(client, customer, checkout_body)
        user_id = client.get("/user", headers=customer).json()["id"]

        response = client.get(f"/orders/{user_id}", headers=admin)
        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_all_orders_admin_only(self, client, admin, customer, other_customer, checkout_body):
        _place(client, customer, checkout_body)
        _place(client, other_customer, checkout_body)

        assert client.get("/orders", headers=customer).status_code == 403
        assert client.get("/orders").status_code == 401
        assert len(client.get("/orders", headers=admin).json()) == 2


class TestUpdateOrderStatusEndpoint:
    def test_admin_updates(self, client, admin, customer, checkout_body):
        order = _place(client, customer, checkout_body)
        response = client.patch(f"/orders/{order['id']}", json={"status": "processing"}, headers=admin)
        assert response.status_code == 200
        assert response.json()["status"] == "processing"

    def test_invalid_status(self, client, admin, customer, checkout_body):
        order = _place(client, customer, checkout_body)
        response = client.patch(f"/orders/{order['id']}", json={"status": "shipped"}, headers=admin)
        assert response.status_code == 400
        assert "status" in response.json()["errors"]

    def test_missing_order(self, client, admin):
        assert client.patch("/orders/999", json={"status": "processing"}, headers=admin).status_code == 404

    def test_customer_forbidden(self, client, customer, checkout_body):
        order = _place(client, customer, checkout_body)
        response = client.patch(f"/orders/{order['id']}", json={"status": "cancelled"}, headers=customer)
        assert response.status_code == 403

    def test_permissive_policy_allows_delivered_to_pending(self, client, admin, customer, checkout_body):
        order = _place(client, customer, checkout_body)
        client.patch(f"/orders/{order['id']}", json={"status": "delivered"}, headers=admin)
        response = client.patch(f"/orders/{order['id']}", json={"status": "pending"}, headers=admin)
        assert response.status_code == 200

    def test_strict_policy_rejects_delivered_to_pending(self, client, admin, customer, checkout_body, settings):
        settings(transition_policy=TransitionPolicy.STRICT)
        order = _place(client, customer, checkout_body)
        for status in ("processing", "delivering", "delivered"):
            assert client.patch(f"/orders/{order['id']}", json={"status": status}, headers=admin).status_code == 200

        response = client.patch(f"/orders/{order['id']}", json={"status": "pending"}, headers=admin)
        assert response.status_code == 400
