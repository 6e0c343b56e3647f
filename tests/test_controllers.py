"""
Tests for the record controllers, without HTTP.

Controller operations are coroutines; each test drives one with
asyncio.run() and inspects the Render or Redirect outcome.
"""

import asyncio

import pytest

from catalog.controllers import (
    AuthorController,
    BookController,
    BookInstanceController,
    GenreController,
    IndexController,
    Redirect,
    RecordNotFound,
    Render,
)
from catalog.repository import Catalog


class TestIndexController:
    def test_home_counts(self, catalog: Catalog, sample_book_instance):
        outcome = asyncio.run(IndexController(catalog).home())

        assert isinstance(outcome, Render)
        assert outcome.view == "index"
        assert outcome.context["title"] == "Local Library Home"
        assert outcome.context["data"] == {
            "book_count": 1,
            "book_instance_count": 1,
            "book_instance_available_count": 1,
            "author_count": 1,
            "genre_count": 1,
        }


class TestGenreController:
    def test_create_valid(self, catalog: Catalog):
        outcome = asyncio.run(GenreController(catalog).create_post({"name": "Poetry"}))

        genre = catalog.genres.find_one({"name": "Poetry"})
        assert outcome == Redirect(f"/catalog/genre/{genre.id}")

    def test_create_invalid_echoes_draft(self, catalog: Catalog):
        outcome = asyncio.run(GenreController(catalog).create_post({"name": " ab "}))

        assert isinstance(outcome, Render)
        assert outcome.view == "genre_form"
        assert outcome.context["genre"] == {"name": "ab"}
        assert [e.field for e in outcome.context["errors"]] == ["name"]

    def test_detail_missing(self, catalog: Catalog):
        with pytest.raises(RecordNotFound) as exc_info:
            asyncio.run(GenreController(catalog).detail("missing"))

        assert exc_info.value.message == "Genre not found"
        assert exc_info.value.status_code == 404

    def test_detail_context(self, catalog: Catalog, sample_genre, sample_book):
        outcome = asyncio.run(GenreController(catalog).detail(sample_genre.id))

        assert outcome.view == "genre_detail"
        assert outcome.context["genre"].id == sample_genre.id
        assert [b.id for b in outcome.context["genre_books"]] == [sample_book.id]

    def test_delete_refused_renders_confirmation(self, catalog: Catalog, sample_genre, sample_book):
        outcome = asyncio.run(
            GenreController(catalog).delete_post(sample_genre.id, {"genreid": sample_genre.id})
        )

        assert isinstance(outcome, Render)
        assert outcome.view == "genre_delete"
        assert len(outcome.context["genre_books"]) == 1

    def test_delete_uses_form_id(self, catalog: Catalog, sample_genre):
        outcome = asyncio.run(
            GenreController(catalog).delete_post("ignored", {"genreid": sample_genre.id})
        )

        assert outcome == Redirect("/catalog/genres")
        assert catalog.genres.count() == 0

    def test_update_same_name_lands_on_own_page(self, catalog: Catalog, sample_genre):
        outcome = asyncio.run(
            GenreController(catalog).update_post(sample_genre.id, {"name": "Fantasy"})
        )

        assert outcome == Redirect(f"/catalog/genre/{sample_genre.id}")


class TestAuthorController:
    def test_list_sorted(self, catalog: Catalog):
        catalog.authors.insert({"first_name": "Ben", "family_name": "Bova"})
        catalog.authors.insert({"first_name": "Isaac", "family_name": "Asimov"})

        outcome = asyncio.run(AuthorController(catalog).list_all())

        assert [a.family_name for a in outcome.context["author_list"]] == ["Asimov", "Bova"]

    def test_update_get_missing(self, catalog: Catalog):
        with pytest.raises(RecordNotFound, match="Author not found"):
            asyncio.run(AuthorController(catalog).update_get("missing"))

    def test_delete_get_missing_redirects(self, catalog: Catalog):
        outcome = asyncio.run(AuthorController(catalog).delete_get("missing"))

        assert outcome == Redirect("/catalog/authors")


class TestBookController:
    def test_update_get_selects_current_references(self, catalog: Catalog, sample_book, sample_author, sample_genre):
        outcome = asyncio.run(BookController(catalog).update_get(sample_book.id))

        assert outcome.context["selected_author"] == sample_author.id
        assert outcome.context["selected_genres"] == [sample_genre.id]
        assert [a.id for a in outcome.context["authors"]] == [sample_author.id]
        assert [g.id for g in outcome.context["genres"]] == [sample_genre.id]

    def test_invalid_post_keeps_selection(self, catalog: Catalog, sample_author, sample_genre):
        outcome = asyncio.run(
            BookController(catalog).create_post(
                {"author": sample_author.id, "genre": [sample_genre.id]}
            )
        )

        assert outcome.view == "book_form"
        assert outcome.context["selected_author"] == sample_author.id
        assert outcome.context["selected_genres"] == [sample_genre.id]
        assert {e.field for e in outcome.context["errors"]} == {"title", "summary", "isbn"}


class TestBookInstanceController:
    def test_create_get_choices(self, catalog: Catalog, sample_book_instance, sample_book):
        outcome = asyncio.run(BookInstanceController(catalog).create_get())

        assert outcome.view == "bookinstance_form"
        assert [b.title for b in outcome.context["book_list"]] == [sample_book.title]
        assert outcome.context["statuses"] == ["Available"]

    def test_invalid_post_keeps_selected_book(self, catalog: Catalog, sample_book):
        outcome = asyncio.run(
            BookInstanceController(catalog).create_post({"book": sample_book.id})
        )

        assert outcome.context["selected_book"] == sample_book.id
        assert [e.message for e in outcome.context["errors"]] == ["Imprint must be specified"]

    def test_detail_missing(self, catalog: Catalog):
        with pytest.raises(RecordNotFound, match="Book copy not found"):
            asyncio.run(BookInstanceController(catalog).detail("missing"))
