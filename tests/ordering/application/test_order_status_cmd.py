"""Application tests for order status updates."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from quickbite.config import TransitionPolicy
from quickbite.ordering.order.creation import CreateOrder
from quickbite.ordering.order.history import get_order
from quickbite.ordering.order.status import UpdateOrderStatus


@pytest.fixture()
def order_id(make_menu_item):
    pizza = make_menu_item(price=12.99)
    return current_domain.process(
        CreateOrder(user_id=1, items=json.dumps([{"menu_item_id": pizza, "quantity": 1}]), total=15.98),
        asynchronous=False,
    )


def _update(order_id, status):
    return current_domain.process(UpdateOrderStatus(order_id=order_id, status=status), asynchronous=False)


class TestUpdateOrderStatusCommand:
    def test_update_persists(self, order_id):
        _update(order_id, "processing")
        assert get_order(order_id).status == "processing"

    def test_updated_at_moves(self, order_id):
        before = get_order(order_id).updated_at
        _update(order_id, "processing")
        assert get_order(order_id).updated_at >= before

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            _update(123, "processing")

    def test_status_outside_enumeration(self, order_id):
        with pytest.raises(ValidationError):
            _update(order_id, "teleported")
        assert get_order(order_id).status == "pending"

    def test_permissive_policy_allows_going_back(self, order_id):
        _update(order_id, "delivered")
        _update(order_id, "pending")
        assert get_order(order_id).status == "pending"

    def test_strict_policy_rejects_going_back(self, order_id, settings):
        settings(transition_policy=TransitionPolicy.STRICT)
        for status in ("processing", "delivering", "delivered"):
            _update(order_id, status)

        with pytest.raises(ValidationError):
            _update(order_id, "pending")
        assert get_order(order_id).status == "delivered"
