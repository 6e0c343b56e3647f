"""
Genre Model

Represents a book genre in the catalog.

Genre names are kept unique by the controllers (existence check before
writes), not by a database constraint.
"""

from typing import TYPE_CHECKING, ClassVar

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database import Base, generate_id

if TYPE_CHECKING:
    from catalog.models.book import Book


class Genre(Base):
    """
    Genre model representing book categories.

    Table: genres

    Relationships:
    - books: Many-to-Many relationship through book_genres table
    """

    __tablename__ = "genres"

    url_segment: ClassVar[str] = "genre"

    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=generate_id,
    )

    # Indexed for the exact-match existence check, deliberately not unique
    name: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
        comment="Genre name (e.g., 'Fantasy', 'Science Fiction')"
    )

    books: Mapped[list["Book"]] = relationship(
        "Book",
        secondary="book_genres",
        back_populates="genre",
    )

    def __repr__(self) -> str:
        return f"Genre(id={self.id}, name='{self.name}')"
