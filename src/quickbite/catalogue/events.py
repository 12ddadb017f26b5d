"""Domain events for the MenuItem aggregate."""

from protean.fields import DateTime, Float, Integer, String

from quickbite.domain import quickbite


@quickbite.event(part_of="MenuItem")
class MenuItemAdded:
    """A new item was put on the menu."""

    __version__ = 1

    menu_item_id: Integer(required=True)
    name: String(required=True)
    category: String(required=True)
    price: Float(required=True)
    added_at: DateTime(required=True)


@quickbite.event(part_of="MenuItem")
class MenuItemUpdated:
    """Menu item details or price changed. Existing orders keep their snapshot."""

    __version__ = 1

    menu_item_id: Integer(required=True)
    name: String(required=True)
    category: String(required=True)
    price: Float(required=True)
    updated_at: DateTime(required=True)

