"""prime_scroll - lazily generated, endlessly scrolling list of primes."""

__version__ = "0.1.0"

from prime_scroll.core.chunks import Chunk, iter_chunks, next_chunk
from prime_scroll.core.primality import is_prime, is_prime_array
from prime_scroll.session.scroll import PrimeScroll

__all__ = [
    "Chunk",
    "iter_chunks",
    "next_chunk",
    "is_prime",
    "is_prime_array",
    "PrimeScroll",
]
