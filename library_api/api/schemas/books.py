"""Book schemas."""

import re
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


class BookFields(BaseModel):
    """Every book field except the ISBN, which is taken from the request path."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Author name")
    publisher: Optional[str] = Field(default=None, description="Publisher name")
    pub_date: date = Field(..., alias="pubdate", description="Publish date (YYYY-MM-DD)")
    rating: Optional[int] = Field(default=None, ge=1, le=3, description="Rating from 1 to 3")
    checked_out: bool = Field(default=False, alias="checkedOut", description="Whether the book is checked out")

    @field_validator("pub_date", mode="before")
    @classmethod
    def parse_pub_date(cls, value: object) -> object:
        """Only accept calendar dates written as YYYY-MM-DD."""
        if isinstance(value, date):
            return value
        if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
            raise ValueError(f"Bad publish date = {value}")
        try:
            return datetime.strptime(value, DATE_FORMAT).date()
        except ValueError:
            raise ValueError(f"Bad publish date = {value}")

    @field_validator("rating", mode="before")
    @classmethod
    def reject_non_integer_rating(cls, value: object) -> object:
        # bool is an int subclass and 2.0 coerces silently; neither is a rating
        if isinstance(value, (bool, float)):
            raise ValueError(f"Bad rating = {value}")
        return value


class Book(BookFields):
    """A book record held by the store."""

    isbn: str = Field(..., min_length=1, alias="ISBN", description="Unique book identifier (ISBN)")

    @classmethod
    def from_fields(cls, isbn: str, fields: BookFields) -> "Book":
        """Build a book from an ISBN and a full set of field values."""
        return cls(isbn=isbn, **fields.model_dump())
