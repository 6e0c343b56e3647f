"""
pytest Fixtures for the Catalog Tests

Every test gets its own SQLite database file under tmp_path. A file (not
:memory:) is used because repository calls run in worker threads, each with
its own connection, and they must all see the same data.

The app's session-factory dependency is overridden so every request goes
to the test database.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["DATABASE_URL"] = "sqlite://"

from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker

from catalog.database import build_engine, build_session_factory, create_tables
from catalog.dependencies import get_session_factory
from catalog.main import app
from catalog.repository import Catalog


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture
def engine(tmp_path) -> Generator[Engine, None, None]:
    """Create a fresh SQLite database with all catalog tables."""
    engine = build_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
    create_tables(engine)

    yield engine

    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return build_session_factory(engine)


@pytest.fixture
def catalog(session_factory: sessionmaker) -> Catalog:
    """Repositories bound to the test database."""
    return Catalog.from_session_factory(session_factory)


@pytest.fixture
def client(session_factory: sessionmaker) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_session_factory dependency so the repositories
    built for each request use the test engine.
    """
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_author(catalog: Catalog):
    """Create a sample author for testing."""
    author_id = catalog.authors.insert(
        {
            "first_name": "Patrick",
            "family_name": "Rothfuss",
            "date_of_birth": date(1973, 6, 6),
        }
    )
    return catalog.authors.find_by_id(author_id)


@pytest.fixture
def sample_genre(catalog: Catalog):
    """Create a sample genre for testing."""
    genre_id = catalog.genres.insert({"name": "Fantasy"})
    return catalog.genres.find_by_id(genre_id)


@pytest.fixture
def sample_book(catalog: Catalog, sample_author, sample_genre):
    """Create a sample book by sample_author in sample_genre."""
    book_id = catalog.books.insert(
        {
            "title": "The Name of the Wind",
            "summary": "The tale of Kvothe, told by himself.",
            "isbn": "9781473211896",
            "author": sample_author.id,
            "genre": [sample_genre.id],
        }
    )
    return catalog.books.find_by_id(book_id, ("author", "genre"))


@pytest.fixture
def sample_book_instance(catalog: Catalog, sample_book):
    """Create an available copy of sample_book."""
    copy_id = catalog.book_instances.insert(
        {
            "book": sample_book.id,
            "imprint": "Gollancz, 2011.",
            "status": "Available",
        }
    )
    return catalog.book_instances.find_by_id(copy_id, ("book",))
