"""Core primality test and chunked prime generation."""

from prime_scroll.core.chunks import DEFAULT_CHUNK_SIZE, Chunk, iter_chunks, next_chunk
from prime_scroll.core.errors import (
    InvalidInputError,
    PrimeScrollError,
    ResourceExhaustionError,
    ScanCancelledError,
)
from prime_scroll.core.primality import MAX_CANDIDATE, is_prime, is_prime_array

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "Chunk",
    "iter_chunks",
    "next_chunk",
    "InvalidInputError",
    "PrimeScrollError",
    "ResourceExhaustionError",
    "ScanCancelledError",
    "MAX_CANDIDATE",
    "is_prime",
    "is_prime_array",
]
