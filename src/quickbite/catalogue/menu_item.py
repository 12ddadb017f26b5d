"""MenuItem aggregate: one dish or combo on the restaurant menu.

Orders never hold a live reference to a menu item; they copy the fields they
need at checkout, so editing or deleting an item leaves past orders intact.
"""

import json
from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from quickbite.domain import quickbite

# Fields an admin may change after creation
EDITABLE_FIELDS = (
    "name",
    "description",
    "price",
    "image_url",
    "category",
    "is_popular",
    "is_seasonal",
    "is_combo",
    "discount_percentage",
)


def _dump(value):
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value)


def _load(value, default):
    if not value:
        return default
    return json.loads(value) if isinstance(value, str) else value


@quickbite.aggregate
class MenuItem:
    id: Integer(identifier=True)
    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True, min_value=0.0)
    image_url: String(max_length=1000)
    category: String(required=True, max_length=100)
    rating: Float(default=0.0, min_value=0.0, max_value=5.0)
    review_count: Integer(default=0, min_value=0)
    is_popular: Boolean(default=False)
    is_seasonal: Boolean(default=False)
    is_combo: Boolean(default=False)
    dietary_preferences: Text()  # JSON array of tags, e.g. ["vegetarian"]
    nutritional_info: Text()  # JSON object: calories, protein, carbs, fat, allergens
    available_addons: Text()  # JSON array of {name, price, category}
    discount_percentage: Float(default=0.0, min_value=0.0, max_value=100.0)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(
        cls,
        menu_item_id,
        name,
        description,
        price,
        category,
        image_url=None,
        is_popular=False,
        is_seasonal=False,
        is_combo=False,
        dietary_preferences=None,
        nutritional_info=None,
        available_addons=None,
        discount_percentage=0.0,
    ):
        from quickbite.catalogue.events import MenuItemAdded

        now = datetime.now(UTC)
        item = cls(
            id=menu_item_id,
            name=name,
            description=description,
            price=price,
            image_url=image_url,
            category=category,
            is_popular=bool(is_popular),
            is_seasonal=bool(is_seasonal),
            is_combo=bool(is_combo),
            dietary_preferences=_dump(dietary_preferences),
            nutritional_info=_dump(nutritional_info),
            available_addons=_dump(available_addons),
            discount_percentage=discount_percentage or 0.0,
            created_at=now,
            updated_at=now,
        )
        item.raise_(
            MenuItemAdded(
                menu_item_id=menu_item_id,
                name=name,
                category=category,
                price=price,
                added_at=now,
            )
        )
        return item

    def update_details(self, **changes):
        """Apply the given field values. ``None`` leaves a field untouched."""
        from quickbite.catalogue.events import MenuItemUpdated

        for field_name in EDITABLE_FIELDS:
            value = changes.get(field_name)
            if value is not None:
                setattr(self, field_name, value)

        for field_name in ("dietary_preferences", "nutritional_info", "available_addons"):
            if changes.get(field_name) is not None:
                setattr(self, field_name, _dump(changes[field_name]))

        self.updated_at = datetime.now(UTC)

        self.raise_(
            MenuItemUpdated(
                menu_item_id=self.id,
                name=self.name,
                category=self.category,
                price=self.price,
                updated_at=self.updated_at,
            )
        )

    # -------------------------------------------------------------------
    # Read helpers
    # -------------------------------------------------------------------
    def dietary_tags(self) -> list:
        return _load(self.dietary_preferences, [])

    def nutrition(self) -> dict | None:
        return _load(self.nutritional_info, None)

    def addons(self) -> list:
        return _load(self.available_addons, [])

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match over name, description and category."""
        needle = term.strip().lower()
        if not needle:
            return True
        return any(needle in (value or "").lower() for value in (self.name, self.description, self.category))

    def in_category(self, category: str) -> bool:
        if not category or category.lower() == "all":
            return True
        return self.category.lower() == category.lower()
