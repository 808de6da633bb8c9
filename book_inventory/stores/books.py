"""Book store: CRUD, search and pagination over Book rows."""

from datetime import UTC, datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from book_inventory.models.book import Book


class BookStore:
    """Repository for Book rows. Soft-deleted books are invisible to every query."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _active(self):
        return self.session.query(Book).filter(Book.deleted_at.is_(None))

    def create(self, title: str, author: str, quantity: int) -> Book:
        book = Book(title=title, author=author, quantity=quantity)
        self.session.add(book)
        self.session.commit()
        self.session.refresh(book)
        return book

    def get_by_id(self, book_id: int) -> Book | None:
        return self._active().filter(Book.id == book_id).first()

    def list_all(self) -> list[Book]:
        return self._active().order_by(Book.id).all()

    def search(self, query: str) -> list[Book]:
        """Case-insensitive substring match on title or author."""
        pattern = f"%{query}%"
        return (
            self._active()
            .filter(or_(Book.title.ilike(pattern), Book.author.ilike(pattern)))
            .order_by(Book.id)
            .all()
        )

    def list_page(self, offset: int, limit: int) -> tuple[list[Book], int]:
        """Return one page of books and the total number of books."""
        total = self._active().count()
        books = self._active().order_by(Book.id).offset(offset).limit(limit).all()
        return books, total

    def update(self, book: Book, title: str, author: str, quantity: int) -> Book:
        book.title = title
        book.author = author
        book.quantity = quantity
        self.session.commit()
        self.session.refresh(book)
        return book

    def update_quantity(self, book: Book, quantity: int) -> Book:
        book.quantity = quantity
        self.session.commit()
        self.session.refresh(book)
        return book

    def soft_delete(self, book: Book) -> None:
        book.deleted_at = datetime.now(UTC)
        self.session.commit()
