"""In-memory book storage."""

import threading
from datetime import date
from typing import Optional

import structlog
from fastapi import Request

from library_api.api.schemas.books import Book, BookFields
from library_api.core.books.errors import BookConflictError, BookNotFoundError

logger = structlog.get_logger(__name__)


class BookStore:
    """
    Simple in-memory store for books, keyed by ISBN.

    Books are kept in insertion order. Every method holds the store lock for
    its whole body, so each call is atomic with respect to the others.
    """

    def __init__(self) -> None:
        self._books: dict[str, Book] = {}
        self._lock = threading.Lock()

    def list_books(self) -> list[Book]:
        """List all books in insertion order."""
        with self._lock:
            return [book.model_copy() for book in self._books.values()]

    def get_book(self, isbn: str) -> Optional[Book]:
        """Get a book by ISBN."""
        with self._lock:
            book = self._books.get(isbn)
            return book.model_copy() if book else None

    def count(self) -> int:
        """Number of stored books."""
        with self._lock:
            return len(self._books)

    def add_book(self, book: Book) -> Book:
        """Add a book to the store, rejecting duplicate ISBNs."""
        with self._lock:
            if book.isbn in self._books:
                raise BookConflictError(book.isbn)
            self._books[book.isbn] = book.model_copy()
        logger.debug("Book added", isbn=book.isbn)
        return book

    def update_book(self, isbn: str, fields: BookFields) -> Book:
        """Replace every field of an existing book, keeping its position."""
        book = Book.from_fields(isbn, fields)
        with self._lock:
            if isbn not in self._books:
                raise BookNotFoundError(isbn)
            self._books[isbn] = book
        logger.debug("Book updated", isbn=isbn)
        return book.model_copy()

    def delete_book(self, isbn: str) -> Book:
        """Remove a book, preserving the order of the remaining ones."""
        with self._lock:
            book = self._books.pop(isbn, None)
        if book is None:
            raise BookNotFoundError(isbn)
        logger.debug("Book deleted", isbn=isbn)
        return book


def seed_books(store: BookStore) -> None:
    """Add the two sample books a fresh library starts with."""
    store.add_book(
        Book(
            isbn="0451527127",
            title="Tempest, The",
            author="William Shakespeare",
            pub_date=date(1623, 1, 1),
            rating=1,
            checked_out=True,
        )
    )
    store.add_book(
        Book(
            isbn="1444707868",
            title="It",
            author="Stephen King",
            pub_date=date(1986, 9, 5),
            rating=2,
            checked_out=False,
        )
    )
    logger.info("Sample books loaded", count=store.count())


def get_book_store(request: Request) -> BookStore:
    """Get the book store owned by the running application."""
    return request.app.state.book_store
