"""Integration tests for the assembled QuickBite application."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def app():
    from app import app

    return app


class TestHealth:
    def test_health(self, app):
        with TestClient(app) as client:
            response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "domain": "quickbite"}


class TestStartup:
    def test_seeds_demo_data_when_enabled(self, app, settings):
        settings(seed_data=True)

        with TestClient(app) as client:
            menu = client.get("/menu").json()

        assert len(menu) == 8
        assert len({item["category"] for item in menu}) > 1

    def test_no_seed_when_disabled(self, app, settings):
        settings(seed_data=False)

        with TestClient(app) as client:
            assert client.get("/menu").json() == []

    def test_seed_runs_once(self, app, settings):
        settings(seed_data=True)

        with TestClient(app):
            pass
        with TestClient(app) as client:
            assert len(client.get("/menu").json()) == 8


class TestRequestPipeline:
    def test_checkout_through_full_app(self, app, make_user, make_menu_item):
        user_id = make_user(username="jane")
        pizza = make_menu_item(name="Pepperoni Pizza", price=12.99)
        headers = {"X-User-Id": str(user_id)}

        with TestClient(app) as client:
            assert client.post("/cart", json={"menu_item_id": pizza, "quantity": 2}, headers=headers).status_code == 201
            response = client.post("/orders", json={}, headers=headers)

        assert response.status_code == 201
        assert response.json()["total"] == 28.97

    def test_error_body_shape(self, app):
        with TestClient(app) as client:
            response = client.get("/user")

        assert response.status_code == 401
        assert set(response.json()) == {"message", "errors"}

    def test_cors_preflight(self, app):
        with TestClient(app) as client:
            response = client.options(
                "/menu",
                headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
            )

        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers
