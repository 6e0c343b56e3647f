"""
Book Form Schema

author is the id of an existing Author; genre may be submitted several
times (one checkbox per genre) and is optional.
"""

from pydantic import field_validator

from catalog.schemas.common import FormSchema, required_text


class BookForm(FormSchema):
    """Fields accepted by the book create and update forms."""

    multi_valued = ("genre",)

    title: str = ""
    author: str = ""
    summary: str = ""
    isbn: str = ""
    genre: list[str] = []

    @field_validator("title")
    @classmethod
    def title_required(cls, v: str) -> str:
        return required_text(v, "Title must not be empty.", max_length=500)

    @field_validator("author")
    @classmethod
    def author_required(cls, v: str) -> str:
        return required_text(v, "Author must not be empty.")

    @field_validator("summary")
    @classmethod
    def summary_required(cls, v: str) -> str:
        return required_text(v, "Summary must not be empty.")

    @field_validator("isbn")
    @classmethod
    def isbn_required(cls, v: str) -> str:
        return required_text(v, "ISBN must not be empty", max_length=20)
