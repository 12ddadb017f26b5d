"""Shared BDD fixtures and step definitions for ordering."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then
from quickbite.catalogue.management import CreateMenuItem
from quickbite.config import TotalPolicy, TransitionPolicy, override_settings
from quickbite.ordering.cart.items import AddToCart
from quickbite.ordering.order.checkout import PlaceOrder
from quickbite.ordering.order.history import get_order


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def customer_id():
    return 1


@pytest.fixture()
def menu():
    """Menu item ids by name."""
    return {}


@pytest.fixture()
def placed():
    """The order placed in the scenario, if any."""
    return {"order_id": None}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def capture(error):
    """Run an action and keep its ValidationError for a later Then step."""

    def _run(action):
        try:
            return action()
        except ValidationError as exc:
            error["exc"] = exc
            return None

    return _run


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the menu has "{name}" at {price:f}'))
def menu_item(menu, name, price):
    menu[name] = current_domain.process(
        CreateMenuItem(name=name, description=f"{name} from the kitchen", price=price, category="Mains"),
        asynchronous=False,
    )


@given(parsers.cfparse('the customer adds {quantity:d} "{name}" to the cart'))
def add_to_cart(menu, customer_id, quantity, name):
    current_domain.process(
        AddToCart(user_id=customer_id, menu_item_id=menu[name], quantity=quantity),
        asynchronous=False,
    )


@given("the customer has placed an order")
def order_placed(menu, customer_id, placed):
    for menu_item_id in menu.values():
        current_domain.process(AddToCart(user_id=customer_id, menu_item_id=menu_item_id), asynchronous=False)
    placed["order_id"] = current_domain.process(PlaceOrder(user_id=customer_id), asynchronous=False)


@given("order totals are verified")
def verified_totals():
    override_settings(total_policy=TotalPolicy.VERIFY)


@given("status transitions are strict")
def strict_transitions():
    override_settings(transition_policy=TransitionPolicy.STRICT)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the order is pending")
def order_is_pending(placed):
    assert get_order(placed["order_id"]).status == "pending"


@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(placed, status):
    assert get_order(placed["order_id"]).status == status
