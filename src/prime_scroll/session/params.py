"""Validation of the externally supplied starting value (the ``n`` parameter)."""

from __future__ import annotations

import re
from typing import Optional

from prime_scroll.core.errors import InvalidInputError
from prime_scroll.utils.config import DEFAULT_MAX_START, DEFAULT_START

_DIGITS = re.compile(r"^\+?[0-9]+$")


def parse_start_param(
    value: Optional[str],
    default: int = DEFAULT_START,
    max_value: int = DEFAULT_MAX_START,
) -> int:
    """Parse a starting value such as the ``n`` query parameter.

    Args:
        value: Raw parameter text, or None when absent.
        default: Returned when the parameter is absent or blank.
        max_value: Largest accepted value.

    Returns:
        The starting value as an int in [0, max_value].

    Raises:
        InvalidInputError: If the value is not a plain decimal integer, is
            negative, or exceeds max_value.
    """
    if value is None:
        return default

    text = str(value).strip()
    if not text:
        return default

    if text.startswith("-") and _DIGITS.match(text[1:]):
        raise InvalidInputError(f"start must be >= 0, got {text}")
    if not _DIGITS.match(text):
        raise InvalidInputError(f"start must be a decimal integer, got {value!r}")

    # Reject overlong values before int(), which refuses very long digit strings
    digits = text.lstrip("+").lstrip("0")
    if len(digits) > len(str(max_value)):
        raise InvalidInputError(f"start must be <= {max_value}, got a {len(digits)}-digit value")

    start = int(text)
    if start > max_value:
        raise InvalidInputError(f"start must be <= {max_value}, got {start}")

    return start
