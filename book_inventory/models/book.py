"""ORM model for books in the inventory."""

from sqlalchemy import CheckConstraint, Column, Integer, String

from book_inventory.models.base import Base, TimestampMixin

# Largest value a 32-bit INTEGER column holds.
QUANTITY_MAX = 2**31 - 1


class Book(TimestampMixin, Base):
    """A book record. quantity is the number of copies on hand."""

    __tablename__ = "books"
    __table_args__ = (CheckConstraint("quantity >= 0", name="ck_books_quantity_non_negative"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
