"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Integer, String

from quickbite.domain import quickbite


@quickbite.event(part_of="Order")
class OrderPlaced:
    """A cart was turned into a pending order."""

    __version__ = 1

    order_id = Integer(required=True)
    user_id = Integer(required=True)
    item_count = Integer(required=True)
    total = Float(required=True)
    placed_at = DateTime(required=True)


@quickbite.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id = Integer(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
