"""Response-tree navigation helpers shared by the parsers."""

from ytmweb.lib.fields import (
    first_text,
    format_iso_duration,
    get_text,
    get_thumbnail,
    is_duration,
    parse_count,
    parse_duration,
    to_str,
)
from ytmweb.lib.nav import nav, nav_first

__all__ = [
    "first_text",
    "format_iso_duration",
    "get_text",
    "get_thumbnail",
    "is_duration",
    "nav",
    "nav_first",
    "parse_count",
    "parse_duration",
    "to_str",
]
