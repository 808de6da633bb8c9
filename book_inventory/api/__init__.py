"""HTTP layer: routers and request dependencies."""

from book_inventory.api.routes import router

__all__ = ["router"]
