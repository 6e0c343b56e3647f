"""
Pydantic Schemas Package

Form schemas for the four catalog entities and the validation pipeline
that applies them (see common.py).

Schema Naming Convention:
- XxxForm: Fields accepted from the Xxx create/update HTML form
"""

from catalog.schemas.author import AuthorForm
from catalog.schemas.book import BookForm
from catalog.schemas.book_instance import BookInstanceForm
from catalog.schemas.common import (
    FieldError,
    FormResult,
    FormSchema,
    validate_form,
)
from catalog.schemas.genre import GenreForm

__all__ = [
    "AuthorForm",
    "BookForm",
    "BookInstanceForm",
    "GenreForm",
    "FieldError",
    "FormResult",
    "FormSchema",
    "validate_form",
]
