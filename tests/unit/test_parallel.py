"""
Tests for the ordered parallel index map.

"""

from __future__ import annotations

import threading
import time

import pytest

from exact_split.library.utils import chunk_ranges, parallel_index_map


class TestChunkRanges:
    """Cutting an index range into contiguous chunks."""

    def test_chunks_cover_range_in_order(self):
        """Chunks are contiguous and cover every index once."""
        chunks = chunk_ranges(10, 3)

        assert chunks == [range(0, 3), range(3, 6), range(6, 9), range(9, 10)]
        assert [i for chunk in chunks for i in chunk] == list(range(10))

    def test_empty_range(self):
        """Zero indices give no chunks."""
        assert chunk_ranges(0, 5) == []

    def test_invalid_chunk_size(self):
        """Chunk size must be positive."""
        with pytest.raises(ValueError, match="chunk_size"):
            chunk_ranges(10, 0)


class TestParallelIndexMap:
    """Mapping over indices on a thread pool."""

    def test_results_ordered_by_index(self):
        """Output order follows the index even when early chunks finish last."""

        def slow_start(i):
            if i < 3:
                time.sleep(0.01)
            return i * i

        result = parallel_index_map(slow_start, 20, max_workers=4, chunk_size=3)

        assert result == [i * i for i in range(20)]

    def test_uses_worker_threads(self):
        """With several chunks the work runs off the calling thread."""
        caller = threading.get_ident()
        idents = parallel_index_map(
            lambda i: threading.get_ident(), 16, max_workers=2, chunk_size=4
        )

        assert len(idents) == 16
        assert caller not in set(idents)

    def test_single_worker_runs_inline(self):
        """max_workers=1 runs on the calling thread."""
        caller = threading.get_ident()
        idents = parallel_index_map(
            lambda i: threading.get_ident(), 16, max_workers=1, chunk_size=4
        )

        assert set(idents) == {caller}

    def test_zero_count(self):
        """No indices give an empty list."""
        assert parallel_index_map(lambda i: i, 0, max_workers=2) == []

    def test_worker_exception_propagates(self):
        """An exception in any worker reaches the caller."""

        def fail_at_seven(i):
            if i == 7:
                raise RuntimeError("boom")
            return i

        with pytest.raises(RuntimeError, match="boom"):
            parallel_index_map(fail_at_seven, 20, max_workers=3, chunk_size=2)

    def test_invalid_max_workers(self):
        """max_workers must be positive when given."""
        with pytest.raises(ValueError, match="max_workers"):
            parallel_index_map(lambda i: i, 5, max_workers=0)
