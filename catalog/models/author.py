"""
Author Model

Represents an author in the catalog.

The display name and lifespan are derived (see catalog.models.virtuals).
"""

from datetime import date
from typing import TYPE_CHECKING, ClassVar

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database import Base, generate_id

if TYPE_CHECKING:
    from catalog.models.book import Book


class Author(Base):
    """
    Author model representing writers in the catalog.

    Table: authors

    Relationships:
    - books: One-to-Many, the books whose author is this record

    Example:
        author = Author(
            first_name="Patrick",
            family_name="Rothfuss",
            date_of_birth=date(1973, 6, 6),
        )
    """

    __tablename__ = "authors"

    # URL segment used by catalog.models.virtuals.record_url
    url_segment: ClassVar[str] = "author"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    # Opaque identity assigned on insert; never derived from the data
    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=generate_id,
    )

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    first_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Author's given name"
    )

    family_name: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
        comment="Author's family name, used for sorting"
    )

    # Date (not DateTime) because only the day matters
    date_of_birth: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
    )

    date_of_death: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="author",
    )

    def __repr__(self) -> str:
        return (
            f"Author(id={self.id}, first_name='{self.first_name}', "
            f"family_name='{self.family_name}')"
        )
