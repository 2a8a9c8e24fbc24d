"""API schemas."""

from library_api.api.schemas.books import Book, BookFields

__all__ = ["Book", "BookFields"]
