"""Request/response schemas for book endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from book_inventory.models.book import QUANTITY_MAX


class BookCreate(BaseModel):
    """Body for POST /books and PUT /books/{id}."""

    title: str = Field(..., max_length=255, description="Book title")
    author: str = Field(..., max_length=255, description="Book author")
    quantity: int = Field(default=0, le=QUANTITY_MAX, description="Copies on hand (>= 0)")


class QuantityUpdate(BaseModel):
    quantity: int = Field(..., ge=0, le=QUANTITY_MAX, description="New quantity (>= 0)")


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
    quantity: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BookSearchResponse(BaseModel):
    """Result of GET /books?search=..."""

    books: list[BookResponse]
    count: int


class BookPageResponse(BaseModel):
    """Result of GET /books?page=..&page_size=.."""

    books: list[BookResponse]
    total: int
    page: int
    page_size: int
    total_pages: int
