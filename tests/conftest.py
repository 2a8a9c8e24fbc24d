"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from library_api.config import Settings
from library_api.core.books.store import BookStore
from library_api.main import create_app


@pytest.fixture
def app():
    """Create a fresh application seeded with the sample books."""
    return create_app(Settings(metrics_enabled=False))


@pytest.fixture
def client(app):
    """Create a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store(app) -> BookStore:
    """The book store behind the app under test."""
    return app.state.book_store


@pytest.fixture
def book_payload():
    """A valid request body for creating or updating a book."""
    return {
        "title": "Stuff and Nonsense",
        "author": "Erik Urdang",
        "publisher": "Redeam Press",
        "pubdate": "2018-04-02",
        "rating": 3,
        "checkedOut": False,
    }
