"""
Book Model

The central model of the catalog.

This file also contains the association table for the Book <-> Genre
many-to-many relationship (book_genres).
"""

from typing import TYPE_CHECKING, ClassVar

from sqlalchemy import Column, ForeignKey, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database import Base, generate_id

if TYPE_CHECKING:
    from catalog.models.author import Author
    from catalog.models.book_instance import BookInstance
    from catalog.models.genre import Genre


# =============================================================================
# Association Tables
# =============================================================================
# Rows are removed with either side; the Genre row itself is only deleted
# by the controller once no book references it.
book_genres = Table(
    "book_genres",
    Base.metadata,
    Column(
        "book_id",
        String(32),
        ForeignKey("books.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "genre_id",
        String(32),
        ForeignKey("genres.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    comment="Association table linking books to their genres",
)


class Book(Base):
    """
    Book model representing titles in the catalog.

    Table: books

    Fields:
    - title: Book title (required)
    - author_id: Reference to the author (required)
    - summary: Short description (required)
    - isbn: International Standard Book Number (required)

    Relationships:
    - author: Many-to-One
    - genre: Many-to-Many (a book can belong to several genres)
    - instances: One-to-Many, the physical copies of this book
    """

    __tablename__ = "books"

    url_segment: ClassVar[str] = "book"

    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=generate_id,
    )

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author_id: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("authors.id"),
        index=True,
        nullable=False,
    )

    summary: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Book summary"
    )

    isbn: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="International Standard Book Number"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    author: Mapped["Author"] = relationship(
        "Author",
        back_populates="books",
    )

    # Named in the singular to match the form field it is edited through
    genre: Mapped[list["Genre"]] = relationship(
        "Genre",
        secondary=book_genres,
        back_populates="books",
    )

    instances: Mapped[list["BookInstance"]] = relationship(
        "BookInstance",
        back_populates="book",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')"
