"""Unit tests for book_inventory.services.books with a mocked book store."""

import unittest
from unittest.mock import MagicMock

from book_inventory.core.errors import NotFoundError, ValidationError
from book_inventory.models.book import QUANTITY_MAX, Book
from book_inventory.services.books import DEFAULT_PAGE_SIZE, BookService


def _book(book_id: int = 1, title: str = "Dune", author: str = "Frank Herbert", quantity: int = 3) -> Book:
    return Book(id=book_id, title=title, author=author, quantity=quantity)


class TestCreateAndUpdate(unittest.TestCase):
    """Title and author are required; quantity must not be negative."""

    def setUp(self) -> None:
        self.store = MagicMock()
        self.store.create.side_effect = lambda **kw: Book(id=1, **kw)
        self.service = BookService(self.store)

    def test_create_trims_fields(self) -> None:
        book = self.service.create_book("  Dune ", " Frank Herbert ", 2)
        self.store.create.assert_called_once_with(title="Dune", author="Frank Herbert", quantity=2)
        self.assertEqual(book.id, 1)

    def test_create_rejects_invalid_fields(self) -> None:
        cases = [
            ("", "Author", 1),
            ("Title", "  ", 1),
            ("Title", "Author", -1),
            ("Title", "Author", QUANTITY_MAX + 1),
        ]
        for title, author, quantity in cases:
            with self.subTest(title=title, author=author, quantity=quantity):
                with self.assertRaises(ValidationError):
                    self.service.create_book(title, author, quantity)
        self.store.create.assert_not_called()

    def test_update_missing_book(self) -> None:
        self.store.get_by_id.return_value = None
        with self.assertRaises(NotFoundError):
            self.service.update_book(9, "Title", "Author", 1)
        self.store.update.assert_not_called()

    def test_update_existing_book(self) -> None:
        existing = _book()
        self.store.get_by_id.return_value = existing
        self.service.update_book(1, "Dune Messiah", "Frank Herbert", 5)
        self.store.update.assert_called_once_with(
            existing, title="Dune Messiah", author="Frank Herbert", quantity=5
        )

    def test_update_quantity_rejects_negative(self) -> None:
        with self.assertRaises(ValidationError):
            self.service.update_quantity(1, -3)
        self.store.get_by_id.assert_not_called()

    def test_update_quantity_rejects_value_past_column_range(self) -> None:
        with self.assertRaises(ValidationError):
            self.service.update_quantity(1, QUANTITY_MAX + 1)
        self.store.get_by_id.assert_not_called()


class TestLookupAndDelete(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MagicMock()
        self.service = BookService(self.store)

    def test_get_missing_book(self) -> None:
        self.store.get_by_id.return_value = None
        with self.assertRaises(NotFoundError):
            self.service.get_book(3)

    def test_delete_soft_deletes(self) -> None:
        existing = _book()
        self.store.get_by_id.return_value = existing
        self.service.delete_book(1)
        self.store.soft_delete.assert_called_once_with(existing)

    def test_blank_search_lists_all(self) -> None:
        self.store.list_all.return_value = [_book()]
        self.assertEqual(len(self.service.search_books("   ")), 1)
        self.store.search.assert_not_called()

    def test_search_passes_trimmed_query(self) -> None:
        self.store.search.return_value = []
        self.service.search_books(" dune ")
        self.store.search.assert_called_once_with("dune")


class TestPagination(unittest.TestCase):
    """Out-of-range page and page_size are normalized before querying."""

    def setUp(self) -> None:
        self.store = MagicMock()
        self.store.list_page.return_value = ([], 0)
        self.service = BookService(self.store)

    def test_offset_from_page(self) -> None:
        _, _, page, size = self.service.list_books_paginated(3, 20)
        self.store.list_page.assert_called_once_with(offset=40, limit=20)
        self.assertEqual((page, size), (3, 20))

    def test_page_below_one_becomes_one(self) -> None:
        _, _, page, _ = self.service.list_books_paginated(0, 5)
        self.assertEqual(page, 1)
        self.store.list_page.assert_called_once_with(offset=0, limit=5)

    def test_page_size_out_of_range_uses_default(self) -> None:
        for page_size in (0, -1, 101):
            with self.subTest(page_size=page_size):
                _, _, _, size = self.service.list_books_paginated(1, page_size)
                self.assertEqual(size, DEFAULT_PAGE_SIZE)


if __name__ == "__main__":
    unittest.main()
