"""
Form Validation Layer

Turns raw form fields into a sanitized draft plus a list of field errors.

Pipeline:
1. collect_values(): read each declared field from the submitted form and
   trim surrounding whitespace (multi-valued fields read every value)
2. schema.model_validate(): pydantic runs every field validator, so all
   fields are checked even when one fails
3. sanitize(): escape markup-significant characters in every string before
   the values go into the draft

Validation failures are returned as data (FormResult.errors), never raised.
"""

from collections.abc import Mapping
from datetime import date
from typing import Any, ClassVar

from dateutil.parser import isoparse
from markupsafe import escape
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_core import PydanticCustomError


class FieldError(BaseModel):
    """A single failed rule, shown next to the form."""

    field: str = Field(..., description="Name of the form field")
    message: str = Field(..., description="Human-readable reason")
    value: Any = Field(default=None, description="Sanitized submitted value")


class FormResult(BaseModel):
    """
    Output of validate_form().

    errors is empty exactly when draft is safe to persist.
    """

    errors: list[FieldError] = Field(default_factory=list)
    draft: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class FormSchema(BaseModel):
    """
    Base class for entity form schemas.

    Subclasses declare fields with defaults (a missing form field validates
    as blank) and list fields that may be submitted several times in
    multi_valued.
    """

    multi_valued: ClassVar[tuple[str, ...]] = ()

    model_config = ConfigDict(extra="ignore")


# =============================================================================
# Field rules
# =============================================================================
def required_text(
    value: str,
    message: str,
    *,
    min_length: int = 1,
    max_length: int | None = None,
    length_message: str | None = None,
) -> str:
    """
    Check a trimmed string for presence and length.

    The maximum applies to the escaped text, which is what gets stored.
    Raises PydanticCustomError so the message reaches the user verbatim.
    """
    if len(value) < 1:
        raise PydanticCustomError("required", message)
    too_short = len(value) < min_length
    too_long = max_length is not None and len(escape(value)) > max_length
    if too_short or too_long:
        raise PydanticCustomError("length", length_message or message)
    return value


def optional_iso_date(value: Any, message: str) -> date | None:
    """
    Parse an optional ISO-8601 date.

    Blank or missing means absent; anything else must parse.
    """
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    try:
        return isoparse(str(value)).date()
    except (ValueError, OverflowError):
        raise PydanticCustomError("date", message)


# =============================================================================
# Pipeline
# =============================================================================
def _clean(value: Any) -> str:
    return str(value).strip()


def collect_values(schema: type[FormSchema], form: Mapping[str, Any]) -> dict[str, Any]:
    """
    Read the schema's fields from a submitted form, trimming every value.

    Accepts Starlette FormData (getlist for repeated fields) or a plain dict.
    """
    values: dict[str, Any] = {}
    for name in schema.model_fields:
        if name in schema.multi_valued:
            if hasattr(form, "getlist"):
                raw = form.getlist(name)
            else:
                raw = form.get(name) or []
                if isinstance(raw, str):
                    raw = [raw]
            values[name] = [_clean(item) for item in raw if _clean(item)]
        else:
            raw = form.get(name)
            values[name] = "" if raw is None else _clean(raw)
    return values


def sanitize(value: Any) -> Any:
    """Escape markup-significant characters in strings (recursively in lists)."""
    if isinstance(value, str):
        return str(escape(value))
    if isinstance(value, list):
        return [sanitize(item) for item in value]
    return value


def validate_form(schema: type[FormSchema], form: Mapping[str, Any]) -> FormResult:
    """
    Validate a submitted form against a schema.

    On failure the draft holds the sanitized submitted values so the form
    can be re-rendered with them; on success it holds the validated values.
    """
    values = collect_values(schema, form)

    try:
        validated = schema.model_validate(values)
    except ValidationError as exc:
        errors = []
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "__all__"
            errors.append(
                FieldError(
                    field=field,
                    message=error["msg"],
                    value=sanitize(values.get(field)),
                )
            )
        draft = {name: sanitize(value) for name, value in values.items()}
        return FormResult(errors=errors, draft=draft)

    draft = {name: sanitize(value) for name, value in validated.model_dump().items()}
    return FormResult(errors=[], draft=draft)
