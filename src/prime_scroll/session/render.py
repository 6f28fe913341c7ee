"""Plain-text rendering of a prime list."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def format_grid(primes: Sequence[int], columns: int = 4) -> str:
    """Lay primes out in a right-aligned grid, ``columns`` per row.

    Args:
        primes: Primes in display order.
        columns: Cells per row.

    Returns:
        The grid as a newline-joined string, empty for an empty list.
    """
    if columns < 1:
        raise ValueError(f"columns must be >= 1, got {columns}")

    values = np.asarray(primes, dtype=np.int64)
    if values.size == 0:
        return ""

    width = len(str(int(values.max())))
    cells = [str(int(p)).rjust(width) for p in values]
    rows = [
        "  ".join(cells[i:i + columns])
        for i in range(0, len(cells), columns)
    ]
    return "\n".join(rows)
