"""
Book Controller

The book form offers every author and genre. A book cannot be deleted while
copies of it (BookInstances) exist.
"""

import logging
from collections.abc import Mapping
from functools import partial
from typing import Any

from catalog.controllers.base import Outcome, Redirect, RecordController, RecordNotFound, Render
from catalog.models.virtuals import entity_url, list_url, record_url
from catalog.schemas import BookForm, FormResult, validate_form
from catalog.services.parallel import gather_reads, run_blocking

logger = logging.getLogger(__name__)


class BookController(RecordController):
    """CRUD workflow for books."""

    async def list_all(self) -> Render:
        books = await run_blocking(
            self.catalog.books.find, sort=[("title", "asc")], populate=("author",)
        )
        return Render("book_list", {"title": "Book List", "book_list": books})

    async def detail(self, book_id: str) -> Render:
        results = await self._book_with_instances(book_id, populate=("author", "genre"))
        if results["book"] is None:
            raise RecordNotFound("Book not found")
        return Render(
            "book_detail",
            {
                "title": results["book"].title,
                "book": results["book"],
                "book_instances": results["book_instances"],
            },
        )

    async def create_get(self) -> Render:
        choices = await gather_reads(**self._choice_reads())
        return Render("book_form", {"title": "Create Book", **choices})

    async def create_post(self, form: Mapping[str, Any]) -> Outcome:
        result = validate_form(BookForm, form)
        if not result.is_valid:
            return await self._invalid_form("Create Book", result)

        book_id = await run_blocking(self.catalog.books.insert, result.draft)
        logger.info(f"Created book {book_id}")
        return Redirect(entity_url("book", book_id))

    async def update_get(self, book_id: str) -> Render:
        results = await gather_reads(
            book=partial(self.catalog.books.find_by_id, book_id, ("author", "genre")),
            **self._choice_reads(),
        )
        book = results["book"]
        if book is None:
            raise RecordNotFound("Book not found")
        return Render(
            "book_form",
            {
                "title": "Update Book",
                "book": book,
                "selected_author": book.author_id,
                "selected_genres": [genre.id for genre in book.genre],
                "authors": results["authors"],
                "genres": results["genres"],
            },
        )

    async def update_post(self, book_id: str, form: Mapping[str, Any]) -> Outcome:
        result = validate_form(BookForm, form)
        if not result.is_valid:
            result.draft["id"] = book_id
            return await self._invalid_form("Update Book", result)

        book = await run_blocking(self.catalog.books.update_by_id, book_id, result.draft)
        if book is None:
            raise RecordNotFound("Book not found")
        logger.info(f"Updated book {book_id}")
        return Redirect(record_url(book))

    async def delete_get(self, book_id: str) -> Outcome:
        results = await self._book_with_instances(book_id, populate=("author",))
        if results["book"] is None:
            return Redirect(list_url("book"))
        return self._delete_page(results)

    async def delete_post(self, book_id: str, form: Mapping[str, Any]) -> Outcome:
        target_id = form.get("bookid") or book_id
        results = await self._book_with_instances(target_id, populate=("author",))
        if results["book_instances"]:
            logger.info(
                f"Refused to delete book {target_id}: "
                f"{len(results['book_instances'])} copy(ies) exist"
            )
            return self._delete_page(results)

        await run_blocking(self.catalog.books.delete_by_id, target_id)
        logger.info(f"Deleted book {target_id}")
        return Redirect(list_url("book"))

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _choice_reads(self) -> dict[str, Any]:
        return {
            "authors": partial(self.catalog.authors.find, sort=[("family_name", "asc")]),
            "genres": partial(self.catalog.genres.find, sort=[("name", "asc")]),
        }

    async def _book_with_instances(self, book_id: str, populate: tuple[str, ...]) -> dict[str, Any]:
        return await gather_reads(
            book=partial(self.catalog.books.find_by_id, book_id, populate),
            book_instances=partial(self.catalog.book_instances.find, {"book": book_id}),
        )

    async def _invalid_form(self, title: str, result: FormResult) -> Render:
        choices = await gather_reads(**self._choice_reads())
        return Render(
            "book_form",
            {
                "title": title,
                "book": result.draft,
                "selected_author": result.draft.get("author"),
                "selected_genres": result.draft.get("genre", []),
                "errors": result.errors,
                **choices,
            },
        )

    @staticmethod
    def _delete_page(results: dict[str, Any]) -> Render:
        return Render(
            "book_delete",
            {
                "title": "Delete Book",
                "book": results["book"],
                "book_instances": results["book_instances"],
            },
        )
