"""
Catalog home page: record counts for every collection.
"""

from functools import partial

from catalog.controllers.base import RecordController, Render
from catalog.services.parallel import gather_reads


class IndexController(RecordController):
    """Counts shown on the catalog home page."""

    async def home(self) -> Render:
        data = await gather_reads(
            book_count=self.catalog.books.count,
            book_instance_count=self.catalog.book_instances.count,
            book_instance_available_count=partial(
                self.catalog.book_instances.count, {"status": "Available"}
            ),
            author_count=self.catalog.authors.count,
            genre_count=self.catalog.genres.count,
        )
        return Render("index", {"title": "Local Library Home", "data": data})
