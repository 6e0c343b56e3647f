"""
Tests for concurrent named reads.
"""

import asyncio
import threading

import pytest

from catalog.services.parallel import gather_reads, run_blocking


class ReadFailed(Exception):
    pass


class TestGatherReads:
    def test_results_returned_by_name(self):
        results = asyncio.run(gather_reads(first=lambda: 1, second=lambda: "two"))
        assert results == {"first": 1, "second": "two"}

    def test_reads_run_off_the_event_loop_thread(self):
        async def run():
            loop_thread = threading.get_ident()
            results = await gather_reads(thread=threading.get_ident)
            return loop_thread, results["thread"]

        loop_thread, read_thread = asyncio.run(run())
        assert loop_thread != read_thread

    def test_failure_reraised_unchanged(self):
        error = ReadFailed("boom")

        def fail():
            raise error

        with pytest.raises(ReadFailed) as exc_info:
            asyncio.run(gather_reads(ok=lambda: 1, broken=fail))

        assert exc_info.value is error

    def test_no_reads(self):
        assert asyncio.run(gather_reads()) == {}


class TestRunBlocking:
    def test_passes_arguments(self):
        result = asyncio.run(run_blocking(divmod, 7, 2))
        assert result == (3, 1)
