"""Checkout: turn a user's cart into an order and empty the cart.

Both writes happen inside the command handler's unit of work, so either the
order exists and the cart is empty, or neither change is kept.
"""

import structlog
from protean import handle
from protean.fields import Float, Integer, String, Text

from quickbite.domain import quickbite
from quickbite.ordering.cart.cart import CartLine
from quickbite.ordering.cart.items import clear_cart
from quickbite.ordering.order.creation import build_order, parse_json
from quickbite.ordering.order.order import Order
from quickbite.store.entity_store import find_by, save

logger = structlog.get_logger(__name__)


@quickbite.command(part_of="Order")
class PlaceOrder:
    """Place an order for ``user_id``.

    When ``items`` is omitted the current cart contents are ordered.
    """

    user_id = Integer(required=True)
    items = Text()  # JSON: list of {menu_item_id, quantity}
    total = Float(min_value=0.0)
    address = Text()
    payment_reference = String(max_length=255)


def _cart_items(user_id) -> list[dict]:
    lines = sorted(find_by(CartLine, user_id=user_id), key=lambda line: line.id)
    return [{"menu_item_id": line.menu_item_id, "quantity": line.quantity} for line in lines]


@quickbite.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        items_data = parse_json(command.items, None)
        if items_data is None:
            items_data = _cart_items(command.user_id)

        order = build_order(
            user_id=command.user_id,
            items_data=items_data,
            total=command.total,
            address=parse_json(command.address, None),
            payment_reference=command.payment_reference,
        )
        save(order)
        cleared = clear_cart(command.user_id)

        logger.info(
            "Order placed",
            order_id=order.id,
            user_id=order.user_id,
            total=order.total,
            cart_lines_cleared=cleared,
        )
        return order.id
