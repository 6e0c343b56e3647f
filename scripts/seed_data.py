#!/usr/bin/env python3
"""
Database Seed Script

Populates the catalog with sample authors, genres, books and copies for
development.

USAGE:
    # From the project root
    python scripts/seed_data.py

    # Keep existing records and add the samples on top
    python scripts/seed_data.py --keep

Records pass through the same form rules and repositories the controllers
use, so they are trimmed and escaped exactly like submitted forms.
"""

import argparse
import sys
from datetime import date
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from catalog.database import SessionLocal, create_tables
from catalog.models import Author, Book, BookInstance, Genre
from catalog.repository import Catalog
from catalog.schemas import AuthorForm, BookForm, BookInstanceForm, GenreForm, validate_form


def validated(schema, data: dict) -> dict:
    """Run sample data through the form rules so it is stored like user input."""
    result = validate_form(schema, data)
    if not result.is_valid:
        raise ValueError(f"Invalid sample {schema.__name__}: {result.errors}")
    return result.draft


def clear_data() -> None:
    """Clear all existing catalog records."""
    print("Clearing existing data...")
    with SessionLocal() as session:
        for model in (BookInstance, Book, Author, Genre):
            for record in session.query(model).all():
                session.delete(record)
        session.commit()
    print("Data cleared.")


def create_authors(catalog: Catalog) -> dict[str, str]:
    """Create sample authors, returning their ids keyed by family name."""
    print("Creating authors...")
    authors_data = [
        {"first_name": "Patrick", "family_name": "Rothfuss", "date_of_birth": date(1973, 6, 6)},
        {"first_name": "Ben", "family_name": "Bova", "date_of_birth": date(1932, 11, 8)},
        {"first_name": "Isaac", "family_name": "Asimov", "date_of_birth": date(1920, 1, 2),
         "date_of_death": date(1992, 4, 6)},
        {"first_name": "Bob", "family_name": "Billings"},
        {"first_name": "Jim", "family_name": "Jones", "date_of_birth": date(1971, 12, 16)},
    ]
    authors = {
        data["family_name"]: catalog.authors.insert(validated(AuthorForm, data))
        for data in authors_data
    }
    print(f"Created {len(authors)} authors.")
    return authors


def create_genres(catalog: Catalog) -> dict[str, str]:
    """Create sample genres, returning their ids keyed by name."""
    print("Creating genres...")
    names = ["Fantasy", "Science Fiction", "French Poetry"]
    genres = {name: catalog.genres.insert(validated(GenreForm, {"name": name})) for name in names}
    print(f"Created {len(genres)} genres.")
    return genres


def create_books(catalog: Catalog, authors: dict[str, str], genres: dict[str, str]) -> dict[str, str]:
    """Create sample books linked to the authors and genres."""
    print("Creating books...")
    books_data = [
        {
            "title": "The Name of the Wind (The Kingkiller Chronicle, #1)",
            "summary": "I have stolen princesses back from sleeping barrow kings. "
                       "I burned down the town of Trebon.",
            "isbn": "9781473211896",
            "author": authors["Rothfuss"],
            "genre": [genres["Fantasy"]],
        },
        {
            "title": "The Wise Man's Fear (The Kingkiller Chronicle, #2)",
            "summary": "Picking up the tale of Kvothe Kingkiller once again.",
            "isbn": "9788401352836",
            "author": authors["Rothfuss"],
            "genre": [genres["Fantasy"]],
        },
        {
            "title": "Apes and Angels",
            "summary": "Humankind headed out to the stars not for conquest, nor exploration, "
                       "nor even for curiosity.",
            "isbn": "9780765379528",
            "author": authors["Bova"],
            "genre": [genres["Science Fiction"]],
        },
        {
            "title": "Death Wave",
            "summary": "In Ben Bova's previous novel New Earth, Jordan Kell led the first "
                       "human mission beyond the solar system.",
            "isbn": "9780765379504",
            "author": authors["Bova"],
            "genre": [genres["Science Fiction"]],
        },
        {
            "title": "Test Book 1",
            "summary": "Summary of test book 1",
            "isbn": "ISBN111111",
            "author": authors["Billings"],
            "genre": [genres["Fantasy"], genres["Science Fiction"]],
        },
    ]
    books = {
        data["title"]: catalog.books.insert(validated(BookForm, data))
        for data in books_data
    }
    print(f"Created {len(books)} books.")
    return books


def create_book_instances(catalog: Catalog, books: dict[str, str]) -> int:
    """Create copies of the sample books."""
    print("Creating book instances...")
    titles = list(books)
    copies_data = [
        {"book": books[titles[0]], "imprint": "London Gollancz, 2014.", "status": "Available"},
        {"book": books[titles[1]], "imprint": "Gollancz, 2011.", "status": "Loaned",
         "due_back": date(2026, 11, 1)},
        {"book": books[titles[2]], "imprint": "Gollancz, 2015.", "status": "Available"},
        {"book": books[titles[3]], "imprint": "New York Tom Doherty Associates, 2016.",
         "status": "Available"},
        {"book": books[titles[3]], "imprint": "New York, NY Tom Doherty Associates, LLC, 2015.",
         "status": "Maintenance"},
        {"book": books[titles[4]], "imprint": "Imprint XXX2", "status": "Reserved"},
    ]
    for data in copies_data:
        catalog.book_instances.insert(validated(BookInstanceForm, data))
    print(f"Created {len(copies_data)} book instances.")
    return len(copies_data)


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()
    catalog = Catalog.from_session_factory(SessionLocal)

    if clear_existing:
        clear_data()

    authors = create_authors(catalog)
    genres = create_genres(catalog)
    books = create_books(catalog, authors, genres)
    copies = create_book_instances(catalog, books)

    print("=" * 60)
    print("Database seeding completed successfully!")
    print("=" * 60)
    print("\nSummary:")
    print(f"  - Authors: {len(authors)}")
    print(f"  - Genres: {len(genres)}")
    print(f"  - Books: {len(books)}")
    print(f"  - Book instances: {copies}")
    print("\nBrowse the catalog at http://localhost:8001/catalog")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the catalog with sample records")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep existing records instead of clearing them first",
    )
    args = parser.parse_args()
    seed_database(clear_existing=not args.keep)
