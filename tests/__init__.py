"""
Test Suite for the Local Library Catalog

Test Organization:
- conftest.py: Shared fixtures (per-test database, client, sample records)
- test_virtuals.py: Derived attributes (url, name, lifespan)
- test_validation.py: Form schemas and the validation pipeline
- test_parallel.py: Concurrent named reads
- test_rate_limiter.py: Client key used for throttling
- test_controllers.py: Controller outcomes driven with asyncio.run()
- test_repository.py: SQLAlchemy persistence service
- test_genres.py / test_authors.py / test_books.py / test_book_instances.py:
  CRUD pages per entity
- test_app.py: Home page, health check and error handling

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_genres.py
"""
