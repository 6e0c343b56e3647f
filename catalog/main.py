"""
Catalog web application.

create_app() assembles the FastAPI app: the five catalog routers, the
slowapi limiter on form posts, and the pages shown when something fails:

- RecordNotFound    -> 404 page with the controller's message
- SQLAlchemyError   -> 500 page; the database error goes to the log only
- RateLimitExceeded -> 429 page with Retry-After
- anything else     -> 500 page (exception text only when DEBUG is on)

Run it with:

    uvicorn catalog.main:app --port 8001
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import RedirectResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import SQLAlchemyError

from catalog import __version__
from catalog.config import get_settings
from catalog.controllers import RecordNotFound
from catalog.database import create_tables, engine
from catalog.routers import (
    authors_router,
    book_instances_router,
    books_router,
    genres_router,
    index_router,
)
from catalog.services.rate_limiter import limiter, rate_limit_exceeded_handler
from catalog.templating import templates

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Ensure the tables exist on startup and release the pool on shutdown."""
    logger.info(f"{settings.app_name} {__version__} starting ({settings.environment})")

    if settings.create_tables_on_startup:
        create_tables()
        logger.info("Catalog tables ready")

    yield

    engine.dispose()
    logger.info(f"{settings.app_name} stopped")


def error_page(request: Request, title: str, message: str, status_code: int):
    """Render error.html with the given status."""
    return templates.TemplateResponse(
        request,
        "error.html",
        {"title": title, "message": message, "status_code": status_code},
        status_code=status_code,
    )


def create_app() -> FastAPI:
    """Build the catalog application."""
    app = FastAPI(
        title=settings.app_name,
        description="Server-rendered catalog of books, authors, genres and copies.",
        version=__version__,
        lifespan=lifespan,
    )

    # Form posts are throttled per client; see catalog.services.rate_limiter
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.exception_handler(RecordNotFound)
    async def record_not_found(request: Request, exc: RecordNotFound):
        logger.info(f"{request.method} {request.url.path}: {exc.message}")
        return error_page(request, "Not Found", exc.message, exc.status_code)

    @app.exception_handler(SQLAlchemyError)
    async def database_error(request: Request, exc: SQLAlchemyError):
        logger.error(f"{request.method} {request.url.path} failed in the database: {exc}")
        return error_page(
            request,
            "Error",
            "A database error occurred. Please try again later.",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception(f"{request.method} {request.url.path} failed")
        message = str(exc) if settings.debug else "An internal error occurred."
        return error_page(request, "Error", message, status.HTTP_500_INTERNAL_SERVER_ERROR)

    for router in (index_router, authors_router, genres_router, books_router, book_instances_router):
        app.include_router(router)

    @app.get("/", include_in_schema=False)
    async def root() -> RedirectResponse:
        return RedirectResponse("/catalog", status_code=status.HTTP_303_SEE_OTHER)

    @app.get("/health", tags=["Health"], summary="Liveness probe")
    async def health() -> dict:
        """Report the running version and whether form posts are throttled."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
            "environment": settings.environment,
            "rate_limiting": {
                "enabled": settings.rate_limit_enabled,
                "write_limit": settings.rate_limit_write,
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("catalog.main:app", host=settings.host, port=settings.port, reload=settings.debug)
