"""CartLine aggregate: one menu item in one user's cart.

Each (user, menu item) pair has at most one line. Adding the same item again
grows the existing line instead of creating a second one, which the
``AddToCart`` handler arranges by looking the pair up before creating.
"""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, Text

from quickbite.domain import quickbite
from quickbite.ordering.cart.events import CartItemAdded, CartQuantityUpdated


@quickbite.aggregate
class CartLine:
    id = Integer(identifier=True)
    user_id = Integer(required=True)
    menu_item_id = Integer(required=True)
    quantity = Integer(required=True, min_value=1)
    selected_addons = Text()  # JSON array of add-on names
    special_instructions = Text()
    added_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, line_id, user_id, menu_item_id, quantity=1, selected_addons=None, special_instructions=None):
        _check_quantity(quantity)

        now = datetime.now(UTC)
        line = cls(
            id=line_id,
            user_id=user_id,
            menu_item_id=menu_item_id,
            quantity=quantity,
            selected_addons=json.dumps(selected_addons) if selected_addons is not None else None,
            special_instructions=special_instructions,
            added_at=now,
            updated_at=now,
        )
        line.raise_(
            CartItemAdded(
                line_id=line_id,
                user_id=user_id,
                menu_item_id=menu_item_id,
                quantity=quantity,
                line_quantity=quantity,
            )
        )
        return line

    def increase(self, quantity):
        """Merge another add of the same menu item into this line."""
        _check_quantity(quantity)

        self.quantity += quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemAdded(
                line_id=self.id,
                user_id=self.user_id,
                menu_item_id=self.menu_item_id,
                quantity=quantity,
                line_quantity=self.quantity,
            )
        )

    def change_quantity(self, new_quantity):
        _check_quantity(new_quantity)

        previous_quantity = self.quantity
        self.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                line_id=self.id,
                user_id=self.user_id,
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def belongs_to(self, user_id) -> bool:
        return self.user_id == user_id

    def addons(self) -> list:
        if not self.selected_addons:
            return []
        return json.loads(self.selected_addons)


def _check_quantity(quantity):
    if quantity is None or quantity < 1:
        raise ValidationError({"quantity": ["Quantity must be at least 1"]})
