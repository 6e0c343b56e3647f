"""
Parallel Reads

Some pages need several independent reads before they can render (a genre
and the books in it, the five counts on the home page). gather_reads()
runs them concurrently in the threadpool and returns their results by name:

    results = await gather_reads(
        genre=partial(genres.find_by_id, genre_id),
        genre_books=partial(books.find, {"genre": genre_id}),
    )
    results["genre"], results["genre_books"]

All reads must succeed. The first failure cancels the reads still pending
and is re-raised unchanged, so exception handlers see the original error.
"""

import asyncio
from collections.abc import Callable
from typing import Any

from fastapi.concurrency import run_in_threadpool


async def gather_reads(**reads: Callable[[], Any]) -> dict[str, Any]:
    """Run named blocking reads concurrently and wait for all of them."""
    tasks = {
        name: asyncio.ensure_future(run_in_threadpool(read))
        for name, read in reads.items()
    }
    try:
        await asyncio.gather(*tasks.values())
    except BaseException:
        for task in tasks.values():
            task.cancel()
        raise
    return {name: task.result() for name, task in tasks.items()}


async def run_blocking(call: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run one blocking repository call (read or write) in the threadpool."""
    return await run_in_threadpool(call, *args, **kwargs)
