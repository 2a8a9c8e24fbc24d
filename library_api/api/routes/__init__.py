"""API routes."""

from library_api.api.routes.health import router as health_router
from library_api.api.routes.books import router as books_router

__all__ = ["health_router", "books_router"]
