"""Session state for an endlessly scrolling prime list.

A PrimeScroll owns the accumulated primes, the cursor to resume from and a
loading flag. ``start`` resets the list; ``extend`` appends the next chunk.
Extensions are serialized: a call made while another is in flight is
dropped and returns None, so the list never gains duplicate or
out-of-order chunks.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Optional

import numpy as np

from prime_scroll.core.chunks import Chunk, next_chunk
from prime_scroll.core.errors import InvalidInputError
from prime_scroll.core.primality import is_integer
from prime_scroll.utils.config import ScrollConfig

logger = logging.getLogger(__name__)


class PrimeScroll:
    """Accumulating prime list fed by chunked generation."""

    def __init__(self, config: Optional[ScrollConfig] = None):
        """Initialize an empty session.

        Args:
            config: Chunk size, default start and start bound. Defaults to
                ScrollConfig().
        """
        self.config = config or ScrollConfig()
        self._lock = threading.Lock()
        self._chunks: list[np.ndarray] = []
        self._cursor: Optional[int] = None
        self._start_value: Optional[int] = None
        self._loading = False

    @property
    def primes(self) -> np.ndarray:
        """All primes generated since the last start, as a new int64 array."""
        if not self._chunks:
            return np.array([], dtype=np.int64)
        return np.concatenate(self._chunks)

    @property
    def cursor(self) -> Optional[int]:
        """Last candidate examined, or None before the first start."""
        return self._cursor

    @property
    def start_value(self) -> Optional[int]:
        return self._start_value

    @property
    def loading(self) -> bool:
        return self._loading

    def __len__(self) -> int:
        return sum(len(c) for c in self._chunks)

    def _validate_start(self, initial_value: Optional[int]) -> int:
        if initial_value is None:
            initial_value = self.config.start
        if not is_integer(initial_value):
            raise InvalidInputError(f"start must be an integer, got {initial_value!r}")
        if not 0 <= initial_value <= self.config.max_start:
            raise InvalidInputError(
                f"start must be in [0, {self.config.max_start}], got {initial_value}"
            )
        return int(initial_value)

    def _load_first(self, initial_value: int) -> Chunk:
        # Caller holds self._lock
        self._loading = True
        try:
            chunk = next_chunk(max(initial_value, 2) - 1, self.config.chunk_size)
            self._chunks = [chunk.primes]
            self._cursor = chunk.cursor
            self._start_value = initial_value
        finally:
            self._loading = False

        logger.debug("Started at %d, cursor %d", initial_value, chunk.cursor)
        return chunk

    def start(self, initial_value: Optional[int] = None) -> Chunk:
        """Reset the session and generate the first chunk.

        The first chunk includes ``initial_value`` itself when it is prime.
        Values below 2 start from 2. Waits for an in-flight extension.

        Args:
            initial_value: Where to begin. Defaults to config.start.

        Returns:
            The first chunk.

        Raises:
            InvalidInputError: If initial_value is not an integer in
                [0, config.max_start].
        """
        initial_value = self._validate_start(initial_value)
        with self._lock:
            return self._load_first(initial_value)

    def start_random(self, rng: Optional[random.Random] = None) -> Chunk:
        """Restart from a random value in [0, config.max_start)."""
        rng = rng or random.Random()
        return self.start(rng.randrange(self.config.max_start))

    def extend(self) -> Optional[Chunk]:
        """Append the next chunk to the list.

        Starts at config.start if the session has not been started. Shares
        the in-flight guard with other extensions.

        Returns:
            The appended chunk, or None if another start or extension was
            already in flight and this call was dropped.
        """
        if not self._lock.acquire(blocking=False):
            logger.debug("Extension already in flight, dropping request")
            return None

        try:
            if self._cursor is None:
                return self._load_first(self._validate_start(None))

            self._loading = True
            try:
                chunk = next_chunk(self._cursor, self.config.chunk_size)
                self._chunks.append(chunk.primes)
                self._cursor = chunk.cursor
            finally:
                self._loading = False
        finally:
            self._lock.release()

        logger.debug("Extended to %d primes, cursor %d", len(self), chunk.cursor)
        return chunk
