"""Order creation: command, handler and the shared snapshot builder."""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Integer, String, Text

from quickbite.catalogue.browsing import menu_items_by_id
from quickbite.config import TotalPolicy, get_settings
from quickbite.domain import quickbite
from quickbite.ordering.order.order import Order
from quickbite.ordering.pricing import line_total, order_total, to_money
from quickbite.store.entity_store import next_id, save

logger = structlog.get_logger(__name__)


@quickbite.command(part_of="Order")
class CreateOrder:
    user_id = Integer(required=True)
    items = Text(required=True)  # JSON: list of {menu_item_id, quantity}
    total = Float(min_value=0.0)
    address = Text()  # JSON: address dict, or free text
    payment_reference = String(max_length=255)


def parse_json(value, default):
    if value is None or value == "":
        return default
    return json.loads(value) if isinstance(value, str) else value


def snapshot_items(items_data) -> list[dict]:
    """Copy name and unit price from the live menu onto each requested item."""
    snapshot = []
    for entry in items_data:
        if entry.get("menu_item_id") is None:
            raise ValidationError({"items": ["Each item needs a menu_item_id"]})
        snapshot.append({"menu_item_id": int(entry["menu_item_id"]), "quantity": entry.get("quantity", 1)})

    menu = menu_items_by_id(entry["menu_item_id"] for entry in snapshot)
    for entry in snapshot:
        menu_item = menu.get(entry["menu_item_id"])
        if menu_item is not None:
            entry["name"] = menu_item.name
            entry["unit_price"] = menu_item.price
    return snapshot


def computed_total(snapshot, delivery_fee):
    subtotal = sum(
        (line_total(entry["unit_price"], entry["quantity"]) for entry in snapshot if entry.get("unit_price") is not None),
        to_money(0),
    )
    return order_total(subtotal, delivery_fee, has_items=bool(snapshot))


def build_order(user_id, items_data, total=None, address=None, payment_reference=None) -> Order:
    """Create a PENDING order from requested items under the configured total policy.

    A missing ``total`` is filled in from the menu prices plus delivery.
    """
    settings = get_settings()
    snapshot = snapshot_items(items_data)
    if not snapshot:
        raise ValidationError({"items": ["An order needs at least one item"]})
    if total is None:
        total = computed_total(snapshot, settings.delivery_fee)

    order = Order.create(
        order_id=next_id("order"),
        user_id=user_id,
        items_data=snapshot,
        total=total,
        address=address,
        payment_reference=payment_reference,
    )
    if settings.total_policy == TotalPolicy.VERIFY:
        order.verify_total(settings.delivery_fee)
    return order


@quickbite.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        order = build_order(
            user_id=command.user_id,
            items_data=parse_json(command.items, []),
            total=command.total,
            address=parse_json(command.address, None),
            payment_reference=command.payment_reference,
        )
        save(order)
        logger.info("Order created", order_id=order.id, user_id=order.user_id, total=order.total)
        return order.id
