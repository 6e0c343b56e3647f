"""
Migration environment for the catalog tables.

The database URL comes from the catalog settings (DATABASE_URL or .env),
not from alembic.ini. It can be overridden per run:

    alembic -x url=sqlite:///./other.db upgrade head

Offline mode renders SQL without connecting:

    alembic upgrade head --sql > catalog.sql
"""

from logging.config import fileConfig

from alembic import context

from catalog.config import get_settings
from catalog.database import Base, build_engine

# Registers author, genre, book, book_genres and bookinstance on Base.metadata
import catalog.models  # noqa: F401

settings = get_settings()
config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

database_url = context.get_x_argument(as_dictionary=True).get("url", settings.database_url)


def configure(**options) -> None:
    # SQLite cannot ALTER most constraints in place
    context.configure(
        target_metadata=Base.metadata,
        compare_type=True,
        render_as_batch=database_url.startswith("sqlite"),
        **options,
    )


if context.is_offline_mode():
    configure(
        url=database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()
else:
    engine = build_engine(database_url)
    try:
        with engine.connect() as connection:
            configure(connection=connection)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()
