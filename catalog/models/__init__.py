"""
SQLAlchemy Models Package

This package contains the four catalog collections.

Model Relationships:
- Book -> Author: Many-to-One (each book has exactly one author)
- Book <-> Genre: Many-to-Many (a book can belong to several genres)
- BookInstance -> Book: Many-to-One (each copy is a copy of one book)

Derived attributes (url, name, lifespan) are not stored; they live as pure
functions in virtuals.py.
"""

# The order matters for SQLAlchemy to resolve relationships
from catalog.models.author import Author
from catalog.models.genre import Genre
from catalog.models.book import Book, book_genres
from catalog.models.book_instance import BookInstance

__all__ = [
    "Author",
    "Genre",
    "Book",
    "book_genres",
    "BookInstance",
]
