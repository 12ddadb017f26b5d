"""QuickBite HTTP API package."""

from quickbite.api.errors import register_error_handlers
from quickbite.api.routes import cart_router, menu_router, order_router, payment_router, user_router

__all__ = [
    "cart_router",
    "menu_router",
    "order_router",
    "payment_router",
    "user_router",
    "register_error_handlers",
]
