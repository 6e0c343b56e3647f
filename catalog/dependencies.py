"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.

The chain is:
    get_session_factory -> get_catalog -> get_<entity>_controller

Tests override get_session_factory to point every repository at a
throwaway database:

    app.dependency_overrides[get_session_factory] = lambda: test_factory
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import sessionmaker

from catalog.controllers import (
    AuthorController,
    BookController,
    BookInstanceController,
    GenreController,
    IndexController,
)
from catalog.database import SessionLocal
from catalog.repository import Catalog


def get_session_factory() -> sessionmaker:
    """Session factory used by every repository."""
    return SessionLocal


SessionFactory = Annotated[sessionmaker, Depends(get_session_factory)]


def get_catalog(session_factory: SessionFactory) -> Catalog:
    """Repositories for the four collections, built per request."""
    return Catalog.from_session_factory(session_factory)


CatalogDep = Annotated[Catalog, Depends(get_catalog)]


# =============================================================================
# Controllers
# =============================================================================
def get_index_controller(catalog: CatalogDep) -> IndexController:
    return IndexController(catalog)


def get_author_controller(catalog: CatalogDep) -> AuthorController:
    return AuthorController(catalog)


def get_genre_controller(catalog: CatalogDep) -> GenreController:
    return GenreController(catalog)


def get_book_controller(catalog: CatalogDep) -> BookController:
    return BookController(catalog)


def get_book_instance_controller(catalog: CatalogDep) -> BookInstanceController:
    return BookInstanceController(catalog)


IndexControllerDep = Annotated[IndexController, Depends(get_index_controller)]
AuthorControllerDep = Annotated[AuthorController, Depends(get_author_controller)]
GenreControllerDep = Annotated[GenreController, Depends(get_genre_controller)]
BookControllerDep = Annotated[BookController, Depends(get_book_controller)]
BookInstanceControllerDep = Annotated[
    BookInstanceController, Depends(get_book_instance_controller)
]
