"""Cart item management: commands and handler.

A line that belongs to somebody else is reported exactly like a missing line.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Integer, Text

from quickbite.catalogue.menu_item import MenuItem
from quickbite.domain import quickbite
from quickbite.ordering.cart.cart import CartLine
from quickbite.store.entity_store import delete, fetch, find_by, find_one_by, next_id, save

logger = structlog.get_logger(__name__)


@quickbite.command(part_of="CartLine")
class AddToCart:
    user_id = Integer(required=True)
    menu_item_id = Integer(required=True)
    quantity = Integer(default=1)
    selected_addons = Text()  # JSON array
    special_instructions = Text()


@quickbite.command(part_of="CartLine")
class UpdateCartQuantity:
    line_id = Integer(required=True)
    user_id = Integer(required=True)
    quantity = Integer(required=True)


@quickbite.command(part_of="CartLine")
class RemoveFromCart:
    line_id = Integer(required=True)
    user_id = Integer(required=True)


@quickbite.command(part_of="CartLine")
class ClearCart:
    user_id = Integer(required=True)


def owned_line(line_id, user_id) -> CartLine:
    """Load a cart line owned by ``user_id`` or raise ``ObjectNotFoundError``."""
    line = fetch(CartLine, line_id)
    if not line.belongs_to(user_id):
        raise ObjectNotFoundError({"_entity": f"Cart item {line_id} not found"})
    return line


def clear_cart(user_id) -> int:
    """Delete every line in the user's cart. Returns how many were removed."""
    lines = find_by(CartLine, user_id=user_id)
    for line in lines:
        delete(line)
    return len(lines)


@quickbite.command_handler(part_of=CartLine)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        quantity = 1 if command.quantity is None else command.quantity

        # Unknown menu items are rejected before anything is written
        fetch(MenuItem, command.menu_item_id)

        line = find_one_by(CartLine, user_id=command.user_id, menu_item_id=command.menu_item_id)
        if line is not None:
            line.increase(quantity)
        else:
            line = CartLine.create(
                line_id=next_id("cart_line"),
                user_id=command.user_id,
                menu_item_id=command.menu_item_id,
                quantity=quantity,
                selected_addons=json.loads(command.selected_addons) if command.selected_addons else None,
                special_instructions=command.special_instructions,
            )

        save(line)
        logger.info(
            "Item added to cart",
            user_id=command.user_id,
            menu_item_id=command.menu_item_id,
            line_quantity=line.quantity,
        )
        return line.id

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        line = owned_line(command.line_id, command.user_id)
        line.change_quantity(command.quantity)
        save(line)
        return line.id

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        line = owned_line(command.line_id, command.user_id)
        delete(line)
        logger.info("Item removed from cart", user_id=command.user_id, line_id=command.line_id)

    @handle(ClearCart)
    def clear(self, command):
        removed = clear_cart(command.user_id)
        logger.info("Cart cleared", user_id=command.user_id, lines_removed=removed)
        return removed
