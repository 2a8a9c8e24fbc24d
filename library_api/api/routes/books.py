"""Book CRUD endpoints."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from library_api.api.schemas.books import Book, BookFields
from library_api.core.books.errors import BookConflictError, BookNotFoundError
from library_api.core.books.store import BookStore, get_book_store

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/books", tags=["Books"])


@router.get("", response_model=list[Book])
async def list_books(
    store: Annotated[BookStore, Depends(get_book_store)],
) -> list[Book]:
    """List all books."""
    books = store.list_books()
    logger.info("Getting all books", count=len(books))
    return books


@router.get("/{isbn}", response_model=Book)
async def get_book(
    isbn: str,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> Book:
    """Get one book by ISBN."""
    book = store.get_book(isbn)
    if not book:
        logger.info("Book not found", isbn=isbn)
        raise HTTPException(status_code=404, detail=str(BookNotFoundError(isbn)))

    logger.info("Getting one book", isbn=isbn, title=book.title)
    return book


@router.post("/{isbn}", response_model=list[Book], status_code=status.HTTP_201_CREATED)
async def create_book(
    isbn: str,
    fields: BookFields,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> list[Book]:
    """
    Create a book under the given ISBN.

    Returns the full list of books after the insert.
    """
    try:
        store.add_book(Book.from_fields(isbn, fields))
    except BookConflictError as e:
        logger.info("Rejected duplicate book", isbn=isbn)
        raise HTTPException(status_code=409, detail=str(e))

    logger.info("Created book", isbn=isbn, title=fields.title)
    return store.list_books()


@router.put("/{isbn}", response_model=list[Book])
async def update_book(
    isbn: str,
    fields: BookFields,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> list[Book]:
    """
    Replace every field of an existing book.

    Optional fields left out of the body are reset, not kept.
    Returns the full list of books after the update.
    """
    try:
        store.update_book(isbn, fields)
    except BookNotFoundError as e:
        logger.info("No matching book", isbn=isbn)
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("Updated book", isbn=isbn)
    return store.list_books()


@router.delete("/{isbn}", response_model=list[Book])
async def delete_book(
    isbn: str,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> list[Book]:
    """Delete a book and return the remaining books."""
    try:
        store.delete_book(isbn)
    except BookNotFoundError as e:
        logger.info("No matching book", isbn=isbn)
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("Deleted book", isbn=isbn)
    return store.list_books()
