"""
BookInstance Form Schema

book and imprint are required, due_back is an optional ISO-8601 date and
status is free text (blank falls back to the stored default).
"""

from datetime import date

from pydantic import field_validator

from catalog.models.book_instance import DEFAULT_STATUS
from catalog.schemas.common import FormSchema, optional_iso_date, required_text


class BookInstanceForm(FormSchema):
    """Fields accepted by the book instance create and update forms."""

    book: str = ""
    imprint: str = ""
    status: str = ""
    due_back: date | None = None

    @field_validator("book")
    @classmethod
    def book_required(cls, v: str) -> str:
        return required_text(v, "Book must be specified")

    @field_validator("imprint")
    @classmethod
    def imprint_required(cls, v: str) -> str:
        return required_text(v, "Imprint must be specified", max_length=255)

    @field_validator("status")
    @classmethod
    def status_default(cls, v: str) -> str:
        if not v:
            return DEFAULT_STATUS
        return required_text(v, "Status must be at most 50 characters", max_length=50)

    @field_validator("due_back", mode="before")
    @classmethod
    def parse_due_back(cls, v):
        return optional_iso_date(v, "Invalid date")
