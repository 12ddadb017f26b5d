"""Demo data: an admin account and a small starter menu.

Seeding only runs against an empty store, so restarting the service never
duplicates the menu.
"""

import json

import structlog
from protean.utils.globals import current_domain

from quickbite.catalogue.management import CreateMenuItem
from quickbite.catalogue.menu_item import MenuItem
from quickbite.config import get_settings
from quickbite.identity.registration import RegisterUser, find_user_by_username
from quickbite.store.entity_store import find_one_by

logger = structlog.get_logger(__name__)

ADMIN = {
    "username": "admin",
    "name": "Admin User",
    "email": "admin@quickbite.com",
    "is_admin": True,
}

_IMAGES = "https://images.unsplash.com"

MENU = [
    {
        "name": "Pepperoni Pizza",
        "description": "Classic pepperoni pizza with mozzarella and our special sauce",
        "price": 12.99,
        "category": "Pizza",
        "image_url": f"{_IMAGES}/photo-1513104890138-7c749659a591",
        "is_popular": True,
        "dietary_preferences": ["vegetarian"],
        "nutritional_info": {"calories": 850, "protein": 35, "carbs": 80, "fat": 40, "allergens": ["dairy", "gluten"]},
    },
    {
        "name": "Deluxe Burger",
        "description": "Juicy beef patty with cheese, lettuce, tomato and special sauce",
        "price": 10.99,
        "category": "Burgers",
        "image_url": f"{_IMAGES}/photo-1568901346375-23c9450c58cd",
        "is_popular": True,
        "dietary_preferences": [],
        "nutritional_info": {"calories": 650, "protein": 45, "carbs": 50, "fat": 35, "allergens": ["gluten"]},
    },
    {
        "name": "Salmon Sushi Roll",
        "description": "Fresh salmon, avocado, cucumber wrapped in seaweed and rice",
        "price": 14.99,
        "category": "Sushi",
        "image_url": f"{_IMAGES}/photo-1579871494447-9811cf80d66c",
        "is_popular": True,
        "dietary_preferences": ["gluten-free"],
        "nutritional_info": {"calories": 320, "protein": 25, "carbs": 45, "fat": 12, "allergens": ["fish"]},
    },
    {
        "name": "Pasta Carbonara",
        "description": "Creamy pasta with bacon, egg, parmesan cheese and black pepper",
        "price": 13.99,
        "category": "Pasta",
        "image_url": f"{_IMAGES}/photo-1473093295043-cdd812d0e601",
        "is_popular": True,
        "dietary_preferences": [],
        "nutritional_info": {
            "calories": 720,
            "protein": 28,
            "carbs": 65,
            "fat": 38,
            "allergens": ["dairy", "gluten", "eggs"],
        },
    },
    {
        "name": "Margherita Pizza",
        "description": "Classic pizza with tomato sauce, mozzarella cheese, and fresh basil",
        "price": 11.99,
        "category": "Pizza",
        "image_url": f"{_IMAGES}/photo-1565299624946-b28f40a0ae38",
        "dietary_preferences": ["vegetarian"],
        "nutritional_info": {"calories": 780, "protein": 32, "carbs": 75, "fat": 35, "allergens": ["dairy", "gluten"]},
    },
    {
        "name": "Chicken Salad",
        "description": "Fresh vegetables with grilled chicken, avocado and vinaigrette",
        "price": 9.99,
        "category": "Salads",
        "image_url": f"{_IMAGES}/photo-1546793665-c74683f339c1",
        "dietary_preferences": ["gluten-free"],
        "nutritional_info": {"calories": 420, "protein": 35, "carbs": 25, "fat": 22, "allergens": []},
    },
    {
        "name": "Spicy Wings",
        "description": "Crispy chicken wings tossed in our special hot sauce",
        "price": 8.99,
        "category": "Chicken",
        "image_url": f"{_IMAGES}/photo-1563729784474-d77dbb933a9e",
        "dietary_preferences": [],
        "nutritional_info": {"calories": 580, "protein": 42, "carbs": 15, "fat": 38, "allergens": []},
    },
    {
        "name": "Chocolate Cake",
        "description": "Rich chocolate cake with ganache frosting and berries",
        "price": 6.99,
        "category": "Desserts",
        "image_url": f"{_IMAGES}/photo-1529042410759-befb1204b468",
        "dietary_preferences": ["vegetarian"],
        "nutritional_info": {
            "calories": 450,
            "protein": 6,
            "carbs": 55,
            "fat": 25,
            "allergens": ["dairy", "gluten", "eggs"],
        },
    },
]


def seed_demo_data() -> bool:
    """Create the admin user and starter menu. Returns False when data already exists."""
    if find_one_by(MenuItem) is not None or find_user_by_username(ADMIN["username"]) is not None:
        logger.info("Seed skipped, store is not empty")
        return False

    current_domain.process(RegisterUser(password=get_settings().seed_admin_password, **ADMIN), asynchronous=False)

    for entry in MENU:
        command = CreateMenuItem(
            name=entry["name"],
            description=entry["description"],
            price=entry["price"],
            category=entry["category"],
            image_url=entry["image_url"],
            is_popular=entry.get("is_popular", False),
            dietary_preferences=json.dumps(entry["dietary_preferences"]),
            nutritional_info=json.dumps(entry["nutritional_info"]),
        )
        current_domain.process(command, asynchronous=False)

    logger.info("Demo data seeded", menu_items=len(MENU))
    return True
