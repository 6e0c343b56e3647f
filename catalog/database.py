"""
Engine, session factory and declarative base of the catalog.

This module sets up SQLAlchemy 2.0 for the catalog.

Session Management Pattern
==========================
The catalog uses a "session per operation" pattern instead of the usual
session per request:
1. Each repository call opens a session from the factory
2. The call reads or writes, committing writes immediately
3. The session closes and the loaded records stay usable (expire_on_commit=False)

Independent reads of one request (a genre and the books that reference it)
therefore run in separate worker threads without sharing a session.
"""

import uuid

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from catalog.config import get_settings

settings = get_settings()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.

    SQLite connections are handed between worker threads, so the same-thread
    check is disabled; pool sizing only applies to server databases.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=echo,
        )
    return create_engine(
        database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,  # Verify connections are alive before using
        echo=echo,
    )


def build_session_factory(bind: Engine) -> sessionmaker:
    """
    Create a session factory bound to an engine.

    expire_on_commit=False keeps attributes loaded after commit, so records
    returned by the repository can be rendered after their session closes.
    """
    return sessionmaker(
        autoflush=False,
        expire_on_commit=False,
        bind=bind,
    )


# =============================================================================
# Engine and Session Factory
# =============================================================================
engine = build_engine(settings.database_url, echo=settings.debug)

SessionLocal = build_session_factory(engine)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover the catalog tables.
    """
    pass


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables(bind: Engine | None = None) -> None:
    """Create any catalog table that does not exist yet (Alembic owns the schema in production)."""
    # Importing the package registers every model on Base.metadata
    import catalog.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Engine | None = None) -> None:
    """Drop every catalog table. Used by tests."""
    import catalog.models  # noqa: F401

    Base.metadata.drop_all(bind=bind or engine)


def generate_id() -> str:
    """Return a new opaque record identity (32 hex characters)."""
    return uuid.uuid4().hex
