"""Menu domain API package."""

from menu.api.routes import category_router, coffee_item_router

__all__ = ["coffee_item_router", "category_router"]
