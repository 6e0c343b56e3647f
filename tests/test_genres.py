"""
Tests for the genre pages.

Form posts use follow_redirects=False so the redirect target can be
checked directly.
"""

import html
import re

from fastapi.testclient import TestClient

from catalog.repository import Catalog


def shown_value(page: str, field: str) -> str:
    """What a browser shows (and submits) for a text input on the page."""
    match = re.search(rf'name="{field}"[^>]*value="([^"]*)"', page)
    return html.unescape(match.group(1))


class TestListGenres:
    """Tests for GET /catalog/genres"""

    def test_list_empty(self, client: TestClient):
        response = client.get("/catalog/genres")

        assert response.status_code == 200
        assert "There are no genres." in response.text

    def test_list_sorted_by_name(self, client: TestClient, catalog: Catalog):
        for name in ("Poetry", "Fantasy", "Horror"):
            catalog.genres.insert({"name": name})

        response = client.get("/catalog/genres")

        text = response.text
        assert text.index("Fantasy") < text.index("Horror") < text.index("Poetry")


class TestGetGenre:
    """Tests for GET /catalog/genre/{id}"""

    def test_detail_lists_books(self, client: TestClient, sample_book, sample_genre):
        response = client.get(f"/catalog/genre/{sample_genre.id}")

        assert response.status_code == 200
        assert "Fantasy" in response.text
        assert sample_book.title in response.text

    def test_not_found(self, client: TestClient):
        response = client.get("/catalog/genre/missing")

        assert response.status_code == 404
        assert "Genre not found" in response.text


class TestCreateGenre:
    """Tests for GET/POST /catalog/genre/create"""

    def test_form(self, client: TestClient):
        response = client.get("/catalog/genre/create")

        assert response.status_code == 200
        assert "Create Genre" in response.text

    def test_create_redirects_to_new_genre(self, client: TestClient, catalog: Catalog):
        response = client.post(
            "/catalog/genre/create", data={"name": "Poetry"}, follow_redirects=False
        )

        assert response.status_code == 303
        genre = catalog.genres.find_one({"name": "Poetry"})
        assert response.headers["location"] == f"/catalog/genre/{genre.id}"

    def test_create_trims_name(self, client: TestClient, catalog: Catalog):
        client.post("/catalog/genre/create", data={"name": "  Poetry  "}, follow_redirects=False)

        assert catalog.genres.find_one({"name": "Poetry"}) is not None

    def test_duplicate_redirects_to_existing(self, client: TestClient, catalog: Catalog, sample_genre):
        response = client.post(
            "/catalog/genre/create", data={"name": "Fantasy"}, follow_redirects=False
        )

        assert response.status_code == 303
        assert response.headers["location"] == f"/catalog/genre/{sample_genre.id}"
        assert catalog.genres.count() == 1

    def test_invalid_rerenders_form(self, client: TestClient, catalog: Catalog):
        response = client.post("/catalog/genre/create", data={"name": "ab"})

        assert response.status_code == 200
        assert "Genre name must be between 3 and 100 characters" in response.text
        assert 'value="ab"' in response.text
        assert catalog.genres.count() == 0

    def test_empty_name(self, client: TestClient, catalog: Catalog):
        response = client.post("/catalog/genre/create", data={"name": ""})

        assert "Genre name required" in response.text
        assert catalog.genres.count() == 0


class TestUpdateGenre:
    """Tests for GET/POST /catalog/genre/{id}/update"""

    def test_form_prefilled(self, client: TestClient, sample_genre):
        response = client.get(f"/catalog/genre/{sample_genre.id}/update")

        assert response.status_code == 200
        assert 'value="Fantasy"' in response.text

    def test_form_not_found(self, client: TestClient):
        response = client.get("/catalog/genre/missing/update")

        assert response.status_code == 404

    def test_update(self, client: TestClient, catalog: Catalog, sample_genre):
        response = client.post(
            f"/catalog/genre/{sample_genre.id}/update",
            data={"name": "High Fantasy"},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == f"/catalog/genre/{sample_genre.id}"
        assert catalog.genres.find_by_id(sample_genre.id).name == "High Fantasy"

    def test_update_to_existing_name_redirects_there(self, client: TestClient, catalog: Catalog, sample_genre):
        poetry_id = catalog.genres.insert({"name": "Poetry"})

        response = client.post(
            f"/catalog/genre/{sample_genre.id}/update",
            data={"name": "Poetry"},
            follow_redirects=False,
        )

        assert response.headers["location"] == f"/catalog/genre/{poetry_id}"
        assert catalog.genres.find_by_id(sample_genre.id).name == "Fantasy"

    def test_invalid_update_keeps_record(self, client: TestClient, catalog: Catalog, sample_genre):
        response = client.post(f"/catalog/genre/{sample_genre.id}/update", data={"name": "x"})

        assert response.status_code == 200
        assert "Genre name must be between 3 and 100 characters" in response.text
        assert catalog.genres.find_by_id(sample_genre.id).name == "Fantasy"

    def test_update_missing(self, client: TestClient):
        response = client.post("/catalog/genre/missing/update", data={"name": "Poetry"})

        assert response.status_code == 404


class TestDeleteGenre:
    """Tests for GET/POST /catalog/genre/{id}/delete"""

    def test_confirmation_page(self, client: TestClient, sample_genre):
        response = client.get(f"/catalog/genre/{sample_genre.id}/delete")

        assert response.status_code == 200
        assert "Do you really want to delete this Genre?" in response.text

    def test_confirmation_for_missing_redirects_to_list(self, client: TestClient):
        response = client.get("/catalog/genre/missing/delete", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/catalog/genres"

    def test_delete(self, client: TestClient, catalog: Catalog, sample_genre):
        response = client.post(
            f"/catalog/genre/{sample_genre.id}/delete",
            data={"genreid": sample_genre.id},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/catalog/genres"
        assert catalog.genres.find_by_id(sample_genre.id) is None

    def test_delete_refused_while_books_reference_it(
        self, client: TestClient, catalog: Catalog, sample_book, sample_genre
    ):
        response = client.post(
            f"/catalog/genre/{sample_genre.id}/delete",
            data={"genreid": sample_genre.id},
        )

        assert response.status_code == 200
        assert "Delete the following books" in response.text
        assert sample_book.title in response.text
        assert catalog.genres.find_by_id(sample_genre.id) is not None


class TestGenreNameWithMarkup:
    """Names containing characters that HTML escapes survive editing."""

    def test_detail_shows_name_once_escaped(self, client: TestClient, catalog: Catalog):
        client.post("/catalog/genre/create", data={"name": "Rock & Roll"}, follow_redirects=False)
        genre = catalog.genres.find_one({"name": "Rock &amp; Roll"})

        response = client.get(f"/catalog/genre/{genre.id}")

        assert "Rock &amp; Roll" in response.text
        assert "&amp;amp;" not in response.text

    def test_resubmitting_update_form_keeps_name(self, client: TestClient, catalog: Catalog):
        client.post("/catalog/genre/create", data={"name": "Rock & Roll"}, follow_redirects=False)
        genre = catalog.genres.find_one({"name": "Rock &amp; Roll"})

        page = client.get(f"/catalog/genre/{genre.id}/update").text
        assert shown_value(page, "name") == "Rock & Roll"

        response = client.post(
            f"/catalog/genre/{genre.id}/update",
            data={"name": shown_value(page, "name")},
            follow_redirects=False,
        )

        assert response.headers["location"] == f"/catalog/genre/{genre.id}"
        assert catalog.genres.find_by_id(genre.id).name == "Rock &amp; Roll"
        assert catalog.genres.count() == 1
