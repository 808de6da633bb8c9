"""Persistence layer: one store per aggregate, each bound to a SQLAlchemy session."""

from book_inventory.stores.books import BookStore
from book_inventory.stores.users import UserStore

__all__ = ["BookStore", "UserStore"]
