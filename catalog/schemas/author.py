"""
Author Form Schema

Names are required (at most 100 characters); both dates are optional but
must be valid ISO-8601 dates when given.
"""

from datetime import date

from pydantic import field_validator

from catalog.schemas.common import FormSchema, optional_iso_date, required_text


class AuthorForm(FormSchema):
    """Fields accepted by the author create and update forms."""

    first_name: str = ""
    family_name: str = ""
    date_of_birth: date | None = None
    date_of_death: date | None = None

    @field_validator("first_name")
    @classmethod
    def first_name_required(cls, v: str) -> str:
        return required_text(
            v,
            "First name must be specified.",
            max_length=100,
            length_message="First name must be at most 100 characters.",
        )

    @field_validator("family_name")
    @classmethod
    def family_name_required(cls, v: str) -> str:
        return required_text(
            v,
            "Family name must be specified.",
            max_length=100,
            length_message="Family name must be at most 100 characters.",
        )

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def parse_date_of_birth(cls, v):
        return optional_iso_date(v, "Invalid date of birth")

    @field_validator("date_of_death", mode="before")
    @classmethod
    def parse_date_of_death(cls, v):
        return optional_iso_date(v, "Invalid date of death")
