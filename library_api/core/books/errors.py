"""Book store errors."""


class BookStoreError(Exception):
    """Base class for book store failures."""

    def __init__(self, isbn: str, message: str) -> None:
        super().__init__(message)
        self.isbn = isbn


class BookNotFoundError(BookStoreError):
    """No book with the given ISBN exists."""

    def __init__(self, isbn: str) -> None:
        super().__init__(isbn, f"Couldn't find ISBN: [{isbn}].")


class BookConflictError(BookStoreError):
    """A book with the given ISBN already exists."""

    def __init__(self, isbn: str) -> None:
        super().__init__(isbn, f"A book with ISBN [{isbn}] already exists.")
