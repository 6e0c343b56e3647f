"""
Genre Controller

List, detail, create, update and delete for genres.

Two rules beyond plain CRUD:
- Genre names are unique. Before a write the controller looks for a genre
  with the same name and, if there is one, redirects to it instead.
- A genre referenced by any book cannot be deleted; the delete page lists
  those books instead.
"""

import logging
from collections.abc import Mapping
from functools import partial
from typing import Any

from catalog.controllers.base import Outcome, Redirect, RecordController, RecordNotFound, Render
from catalog.models.virtuals import entity_url, list_url, record_url
from catalog.schemas import GenreForm, validate_form
from catalog.services.parallel import gather_reads, run_blocking

logger = logging.getLogger(__name__)


class GenreController(RecordController):
    """CRUD workflow for genres."""

    async def list_all(self) -> Render:
        genres = await run_blocking(self.catalog.genres.find, sort=[("name", "asc")])
        return Render("genre_list", {"title": "Genre List", "genre_list": genres})

    async def detail(self, genre_id: str) -> Render:
        results = await self._genre_with_books(genre_id)
        if results["genre"] is None:
            raise RecordNotFound("Genre not found")
        return Render(
            "genre_detail",
            {
                "title": "Genre Detail",
                "genre": results["genre"],
                "genre_books": results["genre_books"],
            },
        )

    async def create_get(self) -> Render:
        return Render("genre_form", {"title": "Create Genre"})

    async def create_post(self, form: Mapping[str, Any]) -> Outcome:
        result = validate_form(GenreForm, form)
        if not result.is_valid:
            return Render(
                "genre_form",
                {"title": "Create Genre", "genre": result.draft, "errors": result.errors},
            )

        existing = await self._find_by_name(result.draft["name"])
        if existing is not None:
            logger.info(f"Genre '{existing.name}' already exists as {existing.id}")
            return Redirect(record_url(existing))

        genre_id = await run_blocking(self.catalog.genres.insert, result.draft)
        logger.info(f"Created genre {genre_id}")
        return Redirect(entity_url("genre", genre_id))

    async def update_get(self, genre_id: str) -> Render:
        genre = await run_blocking(self.catalog.genres.find_by_id, genre_id)
        if genre is None:
            raise RecordNotFound("Genre not found")
        return Render("genre_form", {"title": "Update Genre", "genre": genre})

    async def update_post(self, genre_id: str, form: Mapping[str, Any]) -> Outcome:
        result = validate_form(GenreForm, form)
        if not result.is_valid:
            return Render(
                "genre_form",
                {
                    "title": "Update Genre",
                    "genre": {**result.draft, "id": genre_id},
                    "errors": result.errors,
                },
            )

        # The lookup does not exclude the genre being edited, so saving a
        # genre under its current name lands on its own page unchanged.
        existing = await self._find_by_name(result.draft["name"])
        if existing is not None:
            logger.info(f"Genre '{existing.name}' already exists as {existing.id}")
            return Redirect(record_url(existing))

        genre = await run_blocking(self.catalog.genres.update_by_id, genre_id, result.draft)
        if genre is None:
            raise RecordNotFound("Genre not found")
        logger.info(f"Updated genre {genre_id}")
        return Redirect(record_url(genre))

    async def delete_get(self, genre_id: str) -> Outcome:
        results = await self._genre_with_books(genre_id)
        if results["genre"] is None:
            return Redirect(list_url("genre"))
        return self._delete_page(results)

    async def delete_post(self, genre_id: str, form: Mapping[str, Any]) -> Outcome:
        target_id = form.get("genreid") or genre_id
        results = await self._genre_with_books(target_id)
        if results["genre_books"]:
            logger.info(
                f"Refused to delete genre {target_id}: "
                f"{len(results['genre_books'])} book(s) reference it"
            )
            return self._delete_page(results)

        await run_blocking(self.catalog.genres.delete_by_id, target_id)
        logger.info(f"Deleted genre {target_id}")
        return Redirect(list_url("genre"))

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    async def _genre_with_books(self, genre_id: str) -> dict[str, Any]:
        return await gather_reads(
            genre=partial(self.catalog.genres.find_by_id, genre_id),
            genre_books=partial(self.catalog.books.find, {"genre": genre_id}),
        )

    async def _find_by_name(self, name: str) -> Any:
        return await run_blocking(self.catalog.genres.find_one, {"name": name})

    @staticmethod
    def _delete_page(results: dict[str, Any]) -> Render:
        return Render(
            "genre_delete",
            {
                "title": "Delete Genre",
                "genre": results["genre"],
                "genre_books": results["genre_books"],
            },
        )
