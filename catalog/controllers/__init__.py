"""
Record Controllers Package

One controller per entity. Each operation validates input, reads or writes
through the repositories and returns a Render or Redirect outcome; routers
turn outcomes into HTTP responses.
"""

from catalog.controllers.authors import AuthorController
from catalog.controllers.base import Outcome, Redirect, RecordNotFound, Render
from catalog.controllers.book_instances import BookInstanceController
from catalog.controllers.books import BookController
from catalog.controllers.genres import GenreController
from catalog.controllers.index import IndexController

__all__ = [
    "AuthorController",
    "BookController",
    "BookInstanceController",
    "GenreController",
    "IndexController",
    "Outcome",
    "Redirect",
    "RecordNotFound",
    "Render",
]
