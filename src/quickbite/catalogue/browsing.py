"""Menu browsing: read-side queries over MenuItem."""

from quickbite.catalogue.menu_item import MenuItem
from quickbite.store.entity_store import fetch, find_by


def list_menu_items(search: str | None = None, category: str | None = None) -> list[MenuItem]:
    """All menu items, optionally narrowed by category and a search term.

    Category ``all`` (or empty) disables the category filter. Both filters
    are case-insensitive.
    """
    items = sorted(find_by(MenuItem), key=lambda item: item.id)

    if category:
        items = [item for item in items if item.in_category(category)]
    if search and search.strip():
        items = [item for item in items if item.matches(search)]

    return items


def get_menu_item(menu_item_id: int) -> MenuItem:
    return fetch(MenuItem, menu_item_id)


def menu_items_by_id(menu_item_ids) -> dict[int, MenuItem]:
    """Live lookup of several menu items. Missing ids are left out."""
    wanted = sorted(set(menu_item_ids))
    if not wanted:
        return {}
    return {item.id: item for item in find_by(MenuItem, id__in=wanted)}
