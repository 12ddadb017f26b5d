"""Domain events for the CartLine aggregate."""

from protean.fields import Integer

from quickbite.domain import quickbite


@quickbite.event(part_of="CartLine")
class CartItemAdded:
    """A menu item was added to a cart, either as a new line or merged into one."""

    __version__ = 1

    line_id = Integer(required=True)
    user_id = Integer(required=True)
    menu_item_id = Integer(required=True)
    quantity = Integer(required=True)
    line_quantity = Integer(required=True)


@quickbite.event(part_of="CartLine")
class CartQuantityUpdated:
    __version__ = 1

    line_id = Integer(required=True)
    user_id = Integer(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
