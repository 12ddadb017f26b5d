"""Order aggregate: a snapshot of a cart taken at checkout.

State machine:
    PENDING → PROCESSING → DELIVERING → DELIVERED
    CANCELLED (from PENDING, PROCESSING, DELIVERING)

Orders always start out PENDING, whatever the caller asks for. Which
transitions ``change_status`` accepts depends on the transition policy: the
permissive policy allows any enumerated status from any state, the strict
policy only the edges above. Orders are never deleted.
"""

import json
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String, Text

from quickbite.config import TransitionPolicy
from quickbite.domain import quickbite
from quickbite.ordering.order.events import OrderPlaced, OrderStatusChanged
from quickbite.ordering.pricing import line_total, order_total, to_money


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    DELIVERING = "delivering"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.DELIVERING, OrderStatus.CANCELLED},
    OrderStatus.DELIVERING: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}

STATUS_VALUES = [status.value for status in OrderStatus]


def parse_status(value) -> OrderStatus:
    """Resolve a status string, case-insensitively, or raise ``ValidationError``."""
    try:
        return OrderStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError(
            {"status": [f"Invalid status '{value}'. Must be one of: {', '.join(STATUS_VALUES)}"]}
        ) from None


@quickbite.entity(part_of="Order")
class OrderItem:
    """One ordered menu item.

    ``name`` and ``unit_price`` are copied from the menu when the order is
    placed, and stay empty when the item was not on the menu at the time.
    """

    menu_item_id = Integer(required=True)
    quantity = Integer(required=True, min_value=1)
    name = String(max_length=255)
    unit_price = Float(min_value=0.0)


@quickbite.aggregate
class Order:
    id = Integer(identifier=True)
    user_id = Integer(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    items = HasMany(OrderItem)
    total = Float(required=True, min_value=0.0)
    address = Text()  # JSON: delivery address as submitted
    payment_reference = String(max_length=255)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, order_id, user_id, items_data, total, address=None, payment_reference=None):
        """Snapshot ``items_data`` into a new PENDING order.

        Each entry carries ``menu_item_id`` and ``quantity`` and optionally
        the ``name`` and ``unit_price`` captured from the menu.
        """
        if total is None or to_money(total) < 0:
            raise ValidationError({"total": ["Total must be zero or greater"]})

        items = []
        for entry in items_data:
            quantity = entry.get("quantity")
            if quantity is None or quantity < 1:
                raise ValidationError({"items": ["Each item needs a quantity of at least 1"]})
            items.append(
                OrderItem(
                    menu_item_id=entry["menu_item_id"],
                    quantity=quantity,
                    name=entry.get("name"),
                    unit_price=entry.get("unit_price"),
                )
            )

        now = datetime.now(UTC)
        order = cls(
            id=order_id,
            user_id=user_id,
            status=OrderStatus.PENDING.value,
            items=items,
            total=float(to_money(total)),
            address=None if address is None else json.dumps(address),
            payment_reference=payment_reference,
            created_at=now,
            updated_at=now,
        )

        order.raise_(
            OrderPlaced(
                order_id=order_id,
                user_id=user_id,
                item_count=sum(item.quantity for item in items),
                total=order.total,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def can_transition_to(self, new_status: OrderStatus, policy=TransitionPolicy.PERMISSIVE) -> bool:
        if policy == TransitionPolicy.PERMISSIVE:
            return True
        return new_status in _VALID_TRANSITIONS[OrderStatus(self.status)]

    def change_status(self, new_status, policy=TransitionPolicy.PERMISSIVE):
        target = parse_status(new_status)
        current = OrderStatus(self.status)

        if not self.can_transition_to(target, policy):
            raise ValidationError(
                {"status": [f"Cannot move an order from {current.value} to {target.value}"]}
            )

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=current.value,
                new_status=target.value,
                changed_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Totals
    # -------------------------------------------------------------------
    def snapshot_subtotal(self) -> Decimal:
        """Sum of the captured unit prices. Items without a price count as zero."""
        return to_money(
            sum(
                (line_total(item.unit_price, item.quantity) for item in self.items if item.unit_price is not None),
                Decimal("0"),
            )
        )

    def expected_total(self, delivery_fee) -> Decimal:
        return order_total(self.snapshot_subtotal(), delivery_fee, has_items=bool(self.items))

    def verify_total(self, delivery_fee) -> None:
        """Reject a stored total that is off from the recomputed one by more than a cent."""
        if any(item.unit_price is None for item in self.items):
            raise ValidationError({"items": ["Every item must be on the menu to verify the total"]})

        expected = self.expected_total(delivery_fee)
        if abs(to_money(self.total) - expected) > Decimal("0.01"):
            raise ValidationError({"total": [f"Total {self.total:.2f} does not match the expected {expected}"]})

    def delivery_address(self):
        if not self.address:
            return None
        return json.loads(self.address)
