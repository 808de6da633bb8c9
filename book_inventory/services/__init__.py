"""Business logic services. Routes call these; they call the stores."""

from book_inventory.services.auth import AuthService
from book_inventory.services.books import BookService

__all__ = ["AuthService", "BookService"]
