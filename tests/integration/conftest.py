import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from quickbite.api import (
    cart_router,
    menu_router,
    order_router,
    payment_router,
    register_error_handlers,
    user_router,
)


@pytest.fixture()
def client():
    app = FastAPI()
    for router in (user_router, menu_router, cart_router, order_router, payment_router):
        app.include_router(router)
    register_error_handlers(app)
    return TestClient(app, raise_server_exceptions=False)


def auth(user_id) -> dict:
    return {"X-User-Id": str(user_id)}


@pytest.fixture()
def admin(make_user):
    return auth(make_user(username="admin", is_admin=True))


@pytest.fixture()
def customer(make_user):
    return auth(make_user(username="jane"))


@pytest.fixture()
def other_customer(make_user):
    return auth(make_user(username="bob"))


@pytest.fixture()
def menu(make_menu_item):
    return {
        "pizza": make_menu_item(name="Pepperoni Pizza", price=12.99, category="Pizza", is_popular=True),
        "burger": make_menu_item(name="Deluxe Burger", price=10.99, category="Burgers"),
        "cake": make_menu_item(name="Chocolate Cake", price=6.99, category="Desserts"),
    }
