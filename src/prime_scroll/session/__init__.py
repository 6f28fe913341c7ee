"""Session layer: scroll state, start parameter parsing and rendering."""

from prime_scroll.session.params import parse_start_param
from prime_scroll.session.render import format_grid
from prime_scroll.session.scroll import PrimeScroll

__all__ = [
    "parse_start_param",
    "format_grid",
    "PrimeScroll",
]
