"""Book endpoints. Reads need authentication; writes need the admin role."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from book_inventory.api.deps import get_book_service, get_current_user, require_admin
from book_inventory.schemas.auth import CurrentUser, MessageResponse
from book_inventory.schemas.book import (
    BookCreate,
    BookPageResponse,
    BookResponse,
    BookSearchResponse,
    QuantityUpdate,
)
from book_inventory.services.books import BookService

router = APIRouter()


@router.get("", response_model=list[BookResponse] | BookSearchResponse | BookPageResponse)
def list_books(
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    books: Annotated[BookService, Depends(get_book_service)],
    search: Annotated[str | None, Query(description="Match title or author")] = None,
    page: Annotated[int | None, Query(description="Page number (from 1)")] = None,
    page_size: Annotated[int | None, Query(description="Books per page (1-100)")] = None,
) -> list[BookResponse] | BookSearchResponse | BookPageResponse:
    """
    List books.

    - **search**: returns `{books, count}` for books whose title or author
      contains the query (case-insensitive).
    - **page** / **page_size**: returns one page plus `total` and `total_pages`.
    - neither: returns a plain array of all books.
    """
    if search:
        found = books.search_books(search)
        return BookSearchResponse(
            books=[BookResponse.model_validate(b) for b in found],
            count=len(found),
        )
    if page is not None or page_size is not None:
        rows, total, page_no, size = books.list_books_paginated(page or 0, page_size or 0)
        return BookPageResponse(
            books=[BookResponse.model_validate(b) for b in rows],
            total=total,
            page=page_no,
            page_size=size,
            total_pages=(total + size - 1) // size,
        )
    return [BookResponse.model_validate(b) for b in books.list_books()]


@router.get("/{book_id}", response_model=BookResponse)
def get_book(
    book_id: int,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    books: Annotated[BookService, Depends(get_book_service)],
) -> BookResponse:
    return BookResponse.model_validate(books.get_book(book_id))


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
def create_book(
    body: BookCreate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    books: Annotated[BookService, Depends(get_book_service)],
) -> BookResponse:
    book = books.create_book(body.title, body.author, body.quantity)
    return BookResponse.model_validate(book)


@router.put("/{book_id}", response_model=BookResponse)
def update_book(
    book_id: int,
    body: BookCreate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    books: Annotated[BookService, Depends(get_book_service)],
) -> BookResponse:
    book = books.update_book(book_id, body.title, body.author, body.quantity)
    return BookResponse.model_validate(book)


@router.delete("/{book_id}", response_model=MessageResponse)
def delete_book(
    book_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    books: Annotated[BookService, Depends(get_book_service)],
) -> MessageResponse:
    books.delete_book(book_id)
    return MessageResponse(message="Book deleted successfully")


@router.patch("/{book_id}/quantity", response_model=MessageResponse)
def update_book_quantity(
    book_id: int,
    body: QuantityUpdate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    books: Annotated[BookService, Depends(get_book_service)],
) -> MessageResponse:
    books.update_quantity(book_id, body.quantity)
    return MessageResponse(message="Book quantity updated successfully")
