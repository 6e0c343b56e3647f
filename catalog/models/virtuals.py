"""
Derived (virtual) attributes.

Values computed from stored fields on read and never persisted. Each
function takes the record (or its identity) as input, so the same helpers
serve controllers, templates and tests.
"""

from datetime import date
from typing import Any

# Fixed English abbreviations; strftime("%b") follows the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def entity_url(kind: str, entity_id: Any) -> str:
    """Canonical detail path of a record: /catalog/<kind>/<id>."""
    return f"/catalog/{kind}/{entity_id}"


def list_url(kind: str) -> str:
    """Path of the list view for a kind, e.g. /catalog/genres."""
    return f"/catalog/{kind}s"


def record_url(record: Any) -> str:
    """Detail path of a stored record, keyed by its model's url_segment."""
    return entity_url(type(record).url_segment, record.id)


def format_date_medium(value: date | None) -> str:
    """
    Format a date in the medium human-readable style ("Jan 1, 1980").

    Returns an empty string for a missing date.
    """
    if value is None:
        return ""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.day}, {value.year}"


def format_date_iso(value: date | str | None) -> str:
    """
    Format a date as yyyy-MM-dd for prefilling date inputs.

    Strings are passed through so a rejected submission is echoed as typed.
    """
    if value is None:
        return ""
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return value


def author_name(author: Any) -> str:
    """Display name: "family_name first_name"."""
    return f"{author.family_name} {author.first_name}"


def author_lifespan(author: Any) -> str:
    """
    Birth to death range of an author.

    - both dates: "<birth> - <death>"
    - no death date: the birth date alone
    - no birth date and no death date: "-"
    """
    born = format_date_medium(author.date_of_birth)
    if author.date_of_death:
        return f"{born} - {format_date_medium(author.date_of_death)}"
    if not author.date_of_birth:
        return "-"
    return born
