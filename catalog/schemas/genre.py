"""
Genre Form Schema

A genre name is required and must be 3 to 100 characters long.
"""

from pydantic import field_validator

from catalog.schemas.common import FormSchema, required_text


class GenreForm(FormSchema):
    """Fields accepted by the genre create and update forms."""

    name: str = ""

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        return required_text(
            v,
            "Genre name required",
            min_length=3,
            max_length=100,
            length_message="Genre name must be between 3 and 100 characters",
        )
