"""Order history: read-side queries over Order, newest first."""

from dataclasses import dataclass

from quickbite.catalogue.browsing import menu_items_by_id
from quickbite.catalogue.menu_item import MenuItem
from quickbite.ordering.order.order import Order, OrderItem
from quickbite.store.entity_store import fetch, find_by


@dataclass
class OrderItemDetail:
    item: OrderItem
    menu_item: MenuItem | None  # live menu entry, None once removed from the menu


@dataclass
class OrderDetail:
    order: Order
    items: list[OrderItemDetail]


def _newest_first(orders):
    return sorted(orders, key=lambda order: (order.created_at, order.id), reverse=True)


def _with_details(orders) -> list[OrderDetail]:
    menu = menu_items_by_id(item.menu_item_id for order in orders for item in order.items)
    return [
        OrderDetail(
            order=order,
            items=[OrderItemDetail(item=item, menu_item=menu.get(item.menu_item_id)) for item in order.items],
        )
        for order in orders
    ]


def orders_for_user(user_id) -> list[OrderDetail]:
    return _with_details(_newest_first(find_by(Order, user_id=user_id)))


def all_orders() -> list[OrderDetail]:
    return _with_details(_newest_first(find_by(Order)))


def get_order(order_id) -> Order:
    return fetch(Order, order_id)
