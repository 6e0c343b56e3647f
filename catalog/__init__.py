"""
Local Library Catalog Package

Server-rendered catalog of Books, Authors, Genres and BookInstances.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and declarative base
- repository.py: Persistence service (find/insert/update/delete per collection)
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- templating.py: Jinja2 environment shared by all views
- models/: SQLAlchemy ORM models and derived (virtual) attributes
- schemas/: Pydantic form schemas and the validation layer
- controllers/: CRUD workflow per entity (render or redirect outcomes)
- routers/: URL dispatch onto controllers
- services/: Parallel reads, rate limiting
"""

__version__ = "0.1.0"
