"""
BookInstance Controller

Copies of books. The form offers every book title and the status values
already in use; deleting a copy has no dependents to check.
"""

import logging
from collections.abc import Mapping
from functools import partial
from typing import Any

from catalog.controllers.base import Outcome, Redirect, RecordController, RecordNotFound, Render
from catalog.models.virtuals import entity_url, list_url, record_url
from catalog.schemas import BookInstanceForm, FormResult, validate_form
from catalog.services.parallel import gather_reads, run_blocking

logger = logging.getLogger(__name__)


class BookInstanceController(RecordController):
    """CRUD workflow for book instances."""

    async def list_all(self) -> Render:
        copies = await run_blocking(self.catalog.book_instances.find, populate=("book",))
        return Render(
            "bookinstance_list",
            {"title": "Book Instance List", "bookinstance_list": copies},
        )

    async def detail(self, bookinstance_id: str) -> Render:
        copy = await run_blocking(
            self.catalog.book_instances.find_by_id, bookinstance_id, ("book",)
        )
        if copy is None:
            raise RecordNotFound("Book copy not found")
        return Render(
            "bookinstance_detail",
            {"title": f"Copy: {copy.book.title}", "bookinstance": copy},
        )

    async def create_get(self) -> Render:
        choices = await self._form_choices()
        return Render("bookinstance_form", {"title": "Create BookInstance", **choices})

    async def create_post(self, form: Mapping[str, Any]) -> Outcome:
        result = validate_form(BookInstanceForm, form)
        if not result.is_valid:
            return await self._invalid_form("Create BookInstance", result)

        bookinstance_id = await run_blocking(self.catalog.book_instances.insert, result.draft)
        logger.info(f"Created book instance {bookinstance_id}")
        return Redirect(entity_url("bookinstance", bookinstance_id))

    async def update_get(self, bookinstance_id: str) -> Render:
        results = await gather_reads(
            bookinstance=partial(
                self.catalog.book_instances.find_by_id, bookinstance_id, ("book",)
            ),
            **self._choice_reads(),
        )
        copy = results["bookinstance"]
        if copy is None:
            raise RecordNotFound("Book copy not found")
        return Render(
            "bookinstance_form",
            {
                "title": "Update BookInstance",
                "bookinstance": copy,
                "selected_book": copy.book_id,
                "book_list": results["book_list"],
                "statuses": results["statuses"],
            },
        )

    async def update_post(self, bookinstance_id: str, form: Mapping[str, Any]) -> Outcome:
        result = validate_form(BookInstanceForm, form)
        if not result.is_valid:
            result.draft["id"] = bookinstance_id
            return await self._invalid_form("Update BookInstance", result)

        copy = await run_blocking(
            self.catalog.book_instances.update_by_id, bookinstance_id, result.draft
        )
        if copy is None:
            raise RecordNotFound("Book copy not found")
        logger.info(f"Updated book instance {bookinstance_id}")
        return Redirect(record_url(copy))

    async def delete_get(self, bookinstance_id: str) -> Outcome:
        copy = await run_blocking(
            self.catalog.book_instances.find_by_id, bookinstance_id, ("book",)
        )
        if copy is None:
            return Redirect(list_url("bookinstance"))
        return Render(
            "bookinstance_delete",
            {"title": "Delete Book Instance", "bookinstance": copy},
        )

    async def delete_post(self, bookinstance_id: str, form: Mapping[str, Any]) -> Redirect:
        target_id = form.get("bookinstanceid") or bookinstance_id
        await run_blocking(self.catalog.book_instances.delete_by_id, target_id)
        logger.info(f"Deleted book instance {target_id}")
        return Redirect(list_url("bookinstance"))

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _choice_reads(self) -> dict[str, Any]:
        return {
            "book_list": partial(
                self.catalog.books.find, projection=("title",), sort=[("title", "asc")]
            ),
            "statuses": partial(self.catalog.book_instances.distinct_values, "status"),
        }

    async def _form_choices(self) -> dict[str, Any]:
        return await gather_reads(**self._choice_reads())

    async def _invalid_form(self, title: str, result: FormResult) -> Render:
        choices = await self._form_choices()
        return Render(
            "bookinstance_form",
            {
                "title": title,
                "bookinstance": result.draft,
                "selected_book": result.draft.get("book"),
                "errors": result.errors,
                **choices,
            },
        )
