"""Cart read side: lines joined with the live menu."""

from dataclasses import dataclass
from decimal import Decimal

from quickbite.catalogue.browsing import menu_items_by_id
from quickbite.catalogue.menu_item import MenuItem
from quickbite.ordering.cart.cart import CartLine
from quickbite.ordering.pricing import line_total, to_money
from quickbite.store.entity_store import find_by


@dataclass
class CartLineDetail:
    line: CartLine
    menu_item: MenuItem | None  # None once the item has been taken off the menu

    @property
    def line_total(self) -> Decimal:
        if self.menu_item is None:
            return Decimal("0.00")
        return line_total(self.menu_item.price, self.line.quantity)


def list_with_details(user_id) -> list[CartLineDetail]:
    lines = sorted(find_by(CartLine, user_id=user_id), key=lambda line: line.id)
    menu = menu_items_by_id(line.menu_item_id for line in lines)
    return [CartLineDetail(line=line, menu_item=menu.get(line.menu_item_id)) for line in lines]


def cart_subtotal(details: list[CartLineDetail]) -> Decimal:
    return to_money(sum((detail.line_total for detail in details), Decimal("0")))
