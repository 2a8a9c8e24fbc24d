"""Book management module."""

from library_api.core.books.errors import BookConflictError, BookNotFoundError, BookStoreError
from library_api.core.books.store import BookStore, get_book_store, seed_books

__all__ = [
    "BookConflictError",
    "BookNotFoundError",
    "BookStore",
    "BookStoreError",
    "get_book_store",
    "seed_books",
]
