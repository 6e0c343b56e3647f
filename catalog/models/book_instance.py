"""
BookInstance Model

A physical copy of a book that can be borrowed.

status is free text: the form offers the distinct values already stored,
so new statuses can be introduced without a schema change.
"""

from datetime import date
from typing import TYPE_CHECKING, ClassVar

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database import Base, generate_id

if TYPE_CHECKING:
    from catalog.models.book import Book

DEFAULT_STATUS = "Maintenance"


class BookInstance(Base):
    """
    BookInstance model representing copies of a book.

    Table: book_instances

    Example:
        copy = BookInstance(
            book_id=book.id,
            imprint="Gollancz, 2011.",
            status="Available",
        )
    """

    __tablename__ = "book_instances"

    url_segment: ClassVar[str] = "bookinstance"

    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=generate_id,
    )

    book_id: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("books.id"),
        index=True,
        nullable=False,
    )

    imprint: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Publisher and edition details"
    )

    status: Mapped[str] = mapped_column(
        String(50),
        index=True,
        nullable=False,
        default=DEFAULT_STATUS,
    )

    due_back: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
        comment="Date the copy is due back, absent when not on loan"
    )

    book: Mapped["Book"] = relationship(
        "Book",
        back_populates="instances",
    )

    def __repr__(self) -> str:
        return (
            f"BookInstance(id={self.id}, book_id={self.book_id}, "
            f"status='{self.status}')"
        )
