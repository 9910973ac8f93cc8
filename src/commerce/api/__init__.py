"""Commerce domain API package."""

from commerce.api.handlers import register_error_handlers
from commerce.api.routes import admin_router, cart_router, order_router, product_router, user_router

__all__ = [
    "order_router",
    "admin_router",
    "cart_router",
    "user_router",
    "product_router",
    "register_error_handlers",
]
