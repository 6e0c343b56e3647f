"""
Tests for derived attributes (url, name, lifespan, date formatting).
"""

import locale
from datetime import date
from types import SimpleNamespace

import pytest

from catalog.models import Author, Book, BookInstance, Genre
from catalog.models.virtuals import (
    author_lifespan,
    author_name,
    entity_url,
    format_date_iso,
    format_date_medium,
    list_url,
    record_url,
)


@pytest.fixture
def german_time_locale():
    """Switch LC_TIME to German for one test, skipping where it is not installed."""
    previous = locale.setlocale(locale.LC_TIME)
    for name in ("de_DE.UTF-8", "de_DE.utf8", "de_DE"):
        try:
            locale.setlocale(locale.LC_TIME, name)
            break
        except locale.Error:
            continue
    else:
        pytest.skip("no German locale installed")

    yield

    locale.setlocale(locale.LC_TIME, previous)


def make_author(born=None, died=None):
    return SimpleNamespace(
        first_name="Isaac",
        family_name="Asimov",
        date_of_birth=born,
        date_of_death=died,
    )


class TestUrls:
    """Canonical catalog paths."""

    def test_entity_url(self):
        assert entity_url("genre", "abc123") == "/catalog/genre/abc123"

    def test_list_url(self):
        assert list_url("bookinstance") == "/catalog/bookinstances"

    def test_record_url_uses_model_segment(self):
        assert record_url(Genre(id="g1", name="Poetry")) == "/catalog/genre/g1"
        assert record_url(Author(id="a1")) == "/catalog/author/a1"
        assert record_url(Book(id="b1")) == "/catalog/book/b1"
        assert record_url(BookInstance(id="c1")) == "/catalog/bookinstance/c1"

    def test_url_is_stable(self):
        genre = Genre(id="g1", name="Poetry")
        assert record_url(genre) == record_url(genre)


class TestAuthorName:
    def test_family_name_first(self):
        assert author_name(make_author()) == "Asimov Isaac"


class TestAuthorLifespan:
    """Birth to death range in the medium date style."""

    def test_both_dates(self):
        author = make_author(date(1920, 1, 2), date(1992, 4, 6))
        assert author_lifespan(author) == "Jan 2, 1920 - Apr 6, 1992"

    def test_no_death_date(self):
        assert author_lifespan(make_author(date(1920, 1, 2))) == "Jan 2, 1920"

    def test_no_dates(self):
        assert author_lifespan(make_author()) == "-"

    def test_death_without_birth(self):
        assert author_lifespan(make_author(died=date(1992, 4, 6))) == " - Apr 6, 1992"


class TestDateFormatting:
    def test_medium(self):
        assert format_date_medium(date(2026, 11, 1)) == "Nov 1, 2026"

    def test_medium_month_names(self):
        expected = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
        for month, name in enumerate(expected, start=1):
            assert format_date_medium(date(1980, month, 1)) == f"{name} 1, 1980"

    def test_medium_ignores_process_locale(self, german_time_locale):
        assert format_date_medium(date(1980, 3, 1)) == "Mar 1, 1980"
        assert format_date_medium(date(1980, 10, 1)) == "Oct 1, 1980"

    def test_medium_missing(self):
        assert format_date_medium(None) == ""

    def test_iso(self):
        assert format_date_iso(date(1973, 6, 6)) == "1973-06-06"

    def test_iso_passes_strings_through(self):
        assert format_date_iso("not a date") == "not a date"

    def test_iso_missing(self):
        assert format_date_iso(None) == ""
