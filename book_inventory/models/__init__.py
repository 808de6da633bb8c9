"""SQLAlchemy ORM models."""

from book_inventory.models.base import Base
from book_inventory.models.book import Book
from book_inventory.models.user import Role, User

__all__ = ["Base", "Book", "Role", "User"]
