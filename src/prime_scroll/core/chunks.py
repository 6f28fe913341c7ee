"""Chunked prime generation.

A chunk is the next run of ``count`` primes strictly after a cursor. The
cursor is the last candidate examined by the previous call, so threading
the returned cursor into the next call continues the scan with no gaps
and no repeats:

    >>> first = next_chunk(0, 10)
    >>> first.primes.tolist()
    [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    >>> next_chunk(first.cursor, 5).primes.tolist()
    [31, 37, 41, 43, 47]

The scan always advances by exactly one after every tested candidate, prime
or not. Callers wanting a scan that includes ``n`` itself pass ``n - 1``.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterator, NamedTuple, Optional

import numpy as np

from prime_scroll.core.errors import (
    InvalidInputError,
    ResourceExhaustionError,
    ScanCancelledError,
)
from prime_scroll.core.primality import MAX_CANDIDATE, is_integer, is_prime

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 100


class Chunk(NamedTuple):
    """Primes found by one generation call and the cursor to resume from."""
    primes: np.ndarray
    cursor: int


def _validate(cursor, count: int) -> None:
    if not is_integer(cursor):
        raise InvalidInputError(f"cursor must be an integer, got {cursor!r}")
    if not is_integer(count):
        raise InvalidInputError(f"count must be an integer, got {count!r}")
    if cursor < 0:
        raise InvalidInputError(f"cursor must be >= 0, got {cursor}")
    if count < 0:
        raise InvalidInputError(f"count must be >= 0, got {count}")
    if cursor > MAX_CANDIDATE:
        raise InvalidInputError(f"cursor must be <= {MAX_CANDIDATE}, got {cursor}")


def next_chunk(
    cursor: int,
    count: int = DEFAULT_CHUNK_SIZE,
    cancel_event: Optional[threading.Event] = None,
    max_candidates: Optional[int] = None,
) -> Chunk:
    """Generate the next ``count`` primes after ``cursor``.

    Args:
        cursor: Last value examined. 0 or 1 start the scan at 2.
        count: Number of primes to return. 0 returns an empty chunk and
            leaves the cursor where it was.
        cancel_event: Polled between candidates; when set the scan stops.
        max_candidates: Optional bound on the number of candidates examined.

    Returns:
        Chunk of exactly ``count`` strictly increasing primes, and the last
        candidate examined as the new cursor.

    Raises:
        InvalidInputError: If cursor or count is not a non-negative integer,
            or cursor is beyond int64 range.
        ResourceExhaustionError: If ``max_candidates`` is exceeded or the
            scan would pass int64 range.
        ScanCancelledError: If ``cancel_event`` is set during the scan.
    """
    _validate(cursor, count)
    cursor = int(cursor)
    count = int(count)

    if max_candidates is not None and (not is_integer(max_candidates) or max_candidates < 1):
        raise InvalidInputError(f"max_candidates must be a positive integer, got {max_candidates!r}")

    primes = np.empty(count, dtype=np.int64)
    if count == 0:
        return Chunk(primes, cursor)

    candidate = max(cursor + 1, 2)
    found = 0
    examined = 0

    while True:
        if cancel_event is not None and cancel_event.is_set():
            raise ScanCancelledError(
                f"scan cancelled at {candidate} after {found}/{count} primes"
            )
        if candidate > MAX_CANDIDATE:
            raise ResourceExhaustionError(
                f"scan passed {MAX_CANDIDATE} with {found}/{count} primes found"
            )
        if max_candidates is not None and examined >= max_candidates:
            raise ResourceExhaustionError(
                f"examined {examined} candidates from {cursor + 1} "
                f"but found only {found}/{count} primes"
            )

        examined += 1
        if is_prime(candidate):
            primes[found] = candidate
            found += 1
            if found == count:
                break
        candidate += 1

    logger.debug("Chunk after %d: %d primes, %d candidates, cursor %d",
                 cursor, count, examined, candidate)
    return Chunk(primes, candidate)


def iter_chunks(cursor: int = 0, count: int = DEFAULT_CHUNK_SIZE) -> Iterator[Chunk]:
    """Yield successive chunks forever, threading the cursor between calls."""
    _validate(cursor, count)
    if count == 0:
        raise InvalidInputError("count must be >= 1 for an endless scan")

    while True:
        chunk = next_chunk(cursor, count)
        yield chunk
        cursor = chunk.cursor
