"""
Ordered parallel map over an integer index range.

"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def chunk_ranges(count: int, chunk_size: int) -> list[range]:
    """
    Cut ``range(count)`` into contiguous chunks of at most ``chunk_size``.

    Examples
    --------
    >>> chunk_ranges(5, 2)
    [range(0, 2), range(2, 4), range(4, 5)]
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return [
        range(start, min(start + chunk_size, count))
        for start in range(0, count, chunk_size)
    ]


def parallel_index_map(
    func: Callable[[int], T],
    count: int,
    max_workers: int | None = None,
    chunk_size: int = 4096,
) -> list[T]:
    """
    Apply ``func`` to every index in ``range(count)`` on a thread pool.

    Each worker handles one contiguous chunk of indices and writes its results
    into its own slots of a pre-sized list, so the output is ordered by index
    whatever order the chunks complete in.

    Parameters
    ----------
    func
        Function of the index. Must not depend on shared mutable state.
    count
        Number of indices to map
    max_workers
        Thread pool size. ``1`` runs inline without a pool; ``None`` uses the
        executor default.
    chunk_size
        Number of consecutive indices handed to a worker at once

    Returns
    -------
    list
        ``[func(0), func(1), ..., func(count - 1)]``

    Notes
    -----
    An exception raised by ``func`` in any worker propagates to the caller
    once the pool is shut down; no partial result is returned.
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be positive, got {max_workers}")

    results: list = [None] * count
    chunks = chunk_ranges(count, chunk_size)

    def fill(chunk: range) -> None:
        for i in chunk:
            results[i] = func(i)

    if max_workers == 1 or len(chunks) <= 1:
        for chunk in chunks:
            fill(chunk)
        return results

    logger.debug(
        "Mapping %d indices in %d chunks (max_workers=%s)",
        count,
        len(chunks),
        max_workers,
    )
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        # Consuming the iterator re-raises the first worker exception
        list(executor.map(fill, chunks))

    return results
