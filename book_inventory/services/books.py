"""Book service: validation and orchestration for book records."""

import logging

from book_inventory.core.errors import NotFoundError, ValidationError
from book_inventory.models.book import QUANTITY_MAX, Book
from book_inventory.stores.books import BookStore

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def _validate_book_fields(title: str, author: str, quantity: int) -> tuple[str, str]:
    title = title.strip()
    author = author.strip()
    if not title:
        raise ValidationError("book title is required")
    if not author:
        raise ValidationError("book author is required")
    if quantity < 0:
        raise ValidationError("book quantity cannot be negative")
    if quantity > QUANTITY_MAX:
        raise ValidationError(f"book quantity cannot exceed {QUANTITY_MAX}")
    return title, author


class BookService:
    def __init__(self, books: BookStore) -> None:
        self.books = books

    def create_book(self, title: str, author: str, quantity: int) -> Book:
        title, author = _validate_book_fields(title, author, quantity)
        book = self.books.create(title=title, author=author, quantity=quantity)
        logger.info("Created book id=%s title=%r", book.id, book.title)
        return book

    def get_book(self, book_id: int) -> Book:
        book = self.books.get_by_id(book_id)
        if book is None:
            raise NotFoundError("book not found")
        return book

    def list_books(self) -> list[Book]:
        return self.books.list_all()

    def search_books(self, query: str) -> list[Book]:
        """Match title or author; a blank query returns every book."""
        if not query.strip():
            return self.books.list_all()
        return self.books.search(query.strip())

    def list_books_paginated(self, page: int, page_size: int) -> tuple[list[Book], int, int, int]:
        """
        Return (books, total, page, page_size) with page and page_size normalized.

        page < 1 becomes 1; page_size outside [1, MAX_PAGE_SIZE] becomes
        DEFAULT_PAGE_SIZE.
        """
        if page < 1:
            page = 1
        if page_size < 1 or page_size > MAX_PAGE_SIZE:
            page_size = DEFAULT_PAGE_SIZE
        offset = (page - 1) * page_size
        books, total = self.books.list_page(offset=offset, limit=page_size)
        return books, total, page, page_size

    def update_book(self, book_id: int, title: str, author: str, quantity: int) -> Book:
        book = self.get_book(book_id)
        title, author = _validate_book_fields(title, author, quantity)
        book = self.books.update(book, title=title, author=author, quantity=quantity)
        logger.info("Updated book id=%s", book_id)
        return book

    def update_quantity(self, book_id: int, quantity: int) -> Book:
        if quantity < 0:
            raise ValidationError("quantity cannot be negative")
        if quantity > QUANTITY_MAX:
            raise ValidationError(f"quantity cannot exceed {QUANTITY_MAX}")
        book = self.get_book(book_id)
        return self.books.update_quantity(book, quantity)

    def delete_book(self, book_id: int) -> None:
        book = self.get_book(book_id)
        self.books.soft_delete(book)
        logger.info("Deleted book id=%s", book_id)
