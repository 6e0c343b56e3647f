"""
Author Controller

An author cannot be deleted while any book names them as its author.
"""

import logging
from collections.abc import Mapping
from functools import partial
from typing import Any

from catalog.controllers.base import Outcome, Redirect, RecordController, RecordNotFound, Render
from catalog.models.virtuals import entity_url, list_url, record_url
from catalog.schemas import AuthorForm, validate_form
from catalog.services.parallel import gather_reads, run_blocking

logger = logging.getLogger(__name__)


class AuthorController(RecordController):
    """CRUD workflow for authors."""

    async def list_all(self) -> Render:
        authors = await run_blocking(
            self.catalog.authors.find, sort=[("family_name", "asc")]
        )
        return Render("author_list", {"title": "Author List", "author_list": authors})

    async def detail(self, author_id: str) -> Render:
        results = await self._author_with_books(author_id)
        if results["author"] is None:
            raise RecordNotFound("Author not found")
        return Render(
            "author_detail",
            {
                "title": "Author Detail",
                "author": results["author"],
                "author_books": results["author_books"],
            },
        )

    async def create_get(self) -> Render:
        return Render("author_form", {"title": "Create Author"})

    async def create_post(self, form: Mapping[str, Any]) -> Outcome:
        result = validate_form(AuthorForm, form)
        if not result.is_valid:
            return Render(
                "author_form",
                {"title": "Create Author", "author": result.draft, "errors": result.errors},
            )

        author_id = await run_blocking(self.catalog.authors.insert, result.draft)
        logger.info(f"Created author {author_id}")
        return Redirect(entity_url("author", author_id))

    async def update_get(self, author_id: str) -> Render:
        author = await run_blocking(self.catalog.authors.find_by_id, author_id)
        if author is None:
            raise RecordNotFound("Author not found")
        return Render("author_form", {"title": "Update Author", "author": author})

    async def update_post(self, author_id: str, form: Mapping[str, Any]) -> Outcome:
        result = validate_form(AuthorForm, form)
        if not result.is_valid:
            return Render(
                "author_form",
                {
                    "title": "Update Author",
                    "author": {**result.draft, "id": author_id},
                    "errors": result.errors,
                },
            )

        author = await run_blocking(self.catalog.authors.update_by_id, author_id, result.draft)
        if author is None:
            raise RecordNotFound("Author not found")
        logger.info(f"Updated author {author_id}")
        return Redirect(record_url(author))

    async def delete_get(self, author_id: str) -> Outcome:
        results = await self._author_with_books(author_id)
        if results["author"] is None:
            return Redirect(list_url("author"))
        return self._delete_page(results)

    async def delete_post(self, author_id: str, form: Mapping[str, Any]) -> Outcome:
        target_id = form.get("authorid") or author_id
        results = await self._author_with_books(target_id)
        if results["author_books"]:
            logger.info(
                f"Refused to delete author {target_id}: "
                f"{len(results['author_books'])} book(s) reference them"
            )
            return self._delete_page(results)

        await run_blocking(self.catalog.authors.delete_by_id, target_id)
        logger.info(f"Deleted author {target_id}")
        return Redirect(list_url("author"))

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    async def _author_with_books(self, author_id: str) -> dict[str, Any]:
        return await gather_reads(
            author=partial(self.catalog.authors.find_by_id, author_id),
            author_books=partial(
                self.catalog.books.find,
                {"author": author_id},
                projection=("title", "summary"),
                sort=[("title", "asc")],
            ),
        )

    @staticmethod
    def _delete_page(results: dict[str, Any]) -> Render:
        return Render(
            "author_delete",
            {
                "title": "Delete Author",
                "author": results["author"],
                "author_books": results["author_books"],
            },
        )
