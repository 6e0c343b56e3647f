"""
Catalog Routers Package

FastAPI routers mapping catalog URLs onto controller operations.

Router Structure:
- index.py: /catalog home page
- authors.py: /catalog/author(s)/* pages
- genres.py: /catalog/genre(s)/* pages
- books.py: /catalog/book(s)/* pages
- book_instances.py: /catalog/bookinstance(s)/* pages
- responses.py: Render/Redirect outcome -> HTTP response

Each entity router serves the same eight routes:

- GET  /catalog/<kind>s                list
- GET  /catalog/<kind>/create          empty form
- POST /catalog/<kind>/create          create (or re-render with errors)
- GET  /catalog/<kind>/{id}            detail
- GET  /catalog/<kind>/{id}/update     prefilled form
- POST /catalog/<kind>/{id}/update     update (or re-render with errors)
- GET  /catalog/<kind>/{id}/delete     confirmation page
- POST /catalog/<kind>/{id}/delete     delete

The create routes are registered before /{id} so "create" is never taken
for an id. POST routes are rate limited. Each router is registered in
main.py.
"""

from catalog.routers.authors import router as authors_router
from catalog.routers.book_instances import router as book_instances_router
from catalog.routers.books import router as books_router
from catalog.routers.genres import router as genres_router
from catalog.routers.index import router as index_router

__all__ = [
    "index_router",
    "authors_router",
    "genres_router",
    "books_router",
    "book_instances_router",
]
