"""Menu management: admin commands and handler."""

import structlog
from protean import handle
from protean.fields import Boolean, Float, Integer, String, Text

from quickbite.catalogue.menu_item import MenuItem
from quickbite.domain import quickbite
from quickbite.store.entity_store import delete, fetch, next_id, save

logger = structlog.get_logger(__name__)


@quickbite.command(part_of="MenuItem")
class CreateMenuItem:
    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True, min_value=0.0)
    category: String(required=True, max_length=100)
    image_url: String(max_length=1000)
    is_popular: Boolean(default=False)
    is_seasonal: Boolean(default=False)
    is_combo: Boolean(default=False)
    dietary_preferences: Text()  # JSON array
    nutritional_info: Text()  # JSON object
    available_addons: Text()  # JSON array
    discount_percentage: Float(default=0.0, min_value=0.0, max_value=100.0)


@quickbite.command(part_of="MenuItem")
class UpdateMenuItem:
    menu_item_id: Integer(required=True)
    name: String(max_length=255)
    description: Text()
    price: Float(min_value=0.0)
    category: String(max_length=100)
    image_url: String(max_length=1000)
    is_popular: Boolean()
    is_seasonal: Boolean()
    is_combo: Boolean()
    dietary_preferences: Text()
    nutritional_info: Text()
    available_addons: Text()
    discount_percentage: Float(min_value=0.0, max_value=100.0)


@quickbite.command(part_of="MenuItem")
class DeleteMenuItem:
    menu_item_id: Integer(required=True)


@quickbite.command_handler(part_of=MenuItem)
class ManageMenuHandler:
    @handle(CreateMenuItem)
    def create_menu_item(self, command):
        item = MenuItem.create(
            menu_item_id=next_id("menu_item"),
            name=command.name,
            description=command.description,
            price=command.price,
            category=command.category,
            image_url=command.image_url,
            is_popular=command.is_popular,
            is_seasonal=command.is_seasonal,
            is_combo=command.is_combo,
            dietary_preferences=command.dietary_preferences,
            nutritional_info=command.nutritional_info,
            available_addons=command.available_addons,
            discount_percentage=command.discount_percentage,
        )
        save(item)
        logger.info("Menu item created", menu_item_id=item.id, category=item.category)
        return item.id

    @handle(UpdateMenuItem)
    def update_menu_item(self, command):
        item = fetch(MenuItem, command.menu_item_id)
        item.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            category=command.category,
            image_url=command.image_url,
            is_popular=command.is_popular,
            is_seasonal=command.is_seasonal,
            is_combo=command.is_combo,
            dietary_preferences=command.dietary_preferences,
            nutritional_info=command.nutritional_info,
            available_addons=command.available_addons,
            discount_percentage=command.discount_percentage,
        )
        save(item)
        return item.id

    @handle(DeleteMenuItem)
    def delete_menu_item(self, command):
        item = fetch(MenuItem, command.menu_item_id)
        delete(item)
        logger.info("Menu item deleted", menu_item_id=command.menu_item_id)
