"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from library_api.api.routes import books_router, health_router
from library_api.config import Settings, get_settings
from library_api.core.books.store import BookStore, seed_books
from library_api.utils.logging import setup_logging

logger = structlog.get_logger(__name__)

VERSION = "1.0.0"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request data as 400 Bad Request."""
    errors = jsonable_encoder(exc.errors())
    detail = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'][1:]) or 'body'}: {err['msg']}" for err in errors
    )
    logger.info("Rejected invalid request", path=request.url.path, detail=detail)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail, "errors": errors},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own book store."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup and shutdown."""
        setup_logging(debug=settings.debug, json_logs=settings.log_json)
        logger.info("Library API started", books=app.state.book_store.count())
        yield

    app = FastAPI(
        title=settings.app_name,
        description="CRUD API for an in-memory collection of books",
        version=VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    store = BookStore()
    if settings.seed_sample_books:
        seed_books(store)
    app.state.book_store = store

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics
    if settings.metrics_enabled:
        Instrumentator().instrument(app).expose(app, endpoint="/metrics")

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include routers
    app.include_router(health_router)
    app.include_router(books_router)

    @app.get("/")
    async def api_info():
        """API information endpoint."""
        return {
            "service": settings.app_name,
            "version": VERSION,
            "docs": "/docs",
            "openapi": "/openapi.json",
            "health": "/health",
            "books": "/books",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "library_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
