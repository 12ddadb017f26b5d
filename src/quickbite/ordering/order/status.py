"""Order status updates: admin command and handler."""

import structlog
from protean import handle
from protean.fields import Integer, String

from quickbite.config import get_settings
from quickbite.domain import quickbite
from quickbite.ordering.order.order import Order
from quickbite.store.entity_store import fetch, save

logger = structlog.get_logger(__name__)


@quickbite.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Integer(required=True)
    status = String(required=True, max_length=20)


@quickbite.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        order = fetch(Order, command.order_id)
        previous = order.status
        order.change_status(command.status, policy=get_settings().transition_policy)
        save(order)
        logger.info("Order status changed", order_id=order.id, previous_status=previous, new_status=order.status)
        return order.id
