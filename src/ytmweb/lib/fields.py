"""Accessors for shapes that recur across response trees."""

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from ytmweb.lib.nav import Path, nav, nav_first

logger = logging.getLogger(__name__)

__all__ = [
    "first_text",
    "format_iso_duration",
    "get_text",
    "get_thumbnail",
    "is_duration",
    "parse_count",
    "parse_duration",
    "to_str",
]

# Thumbnail lists appear either directly under "thumbnail" or wrapped in a
# musicThumbnailRenderer, depending on the renderer.
THUMBNAIL_PATHS = (
    ("thumbnail", "thumbnails"),
    ("thumbnail", "musicThumbnailRenderer", "thumbnail", "thumbnails"),
)

_DURATION_PATTERN = re.compile(r"^\d+:\d{1,2}(?::\d{1,2})?$")
_COUNT_PATTERN = re.compile(r"(\d[\d,.]*)")
_ISO_DURATION_PATTERN = re.compile(r"^PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?$")


def to_str(value: Any) -> str | None:
    """Coerce a scalar to ``str``, keeping ``None`` as ``None``."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def get_text(node: Any) -> str | None:
    """Get display text from a rich-text node.

    A label is either a ``runs`` list whose ``text`` fragments are
    concatenated in order, or a plain ``text`` field.
    """
    if not isinstance(node, Mapping):
        return None
    runs = node.get("runs")
    if isinstance(runs, list):
        return "".join(to_str(nav(run, "text")) or "" for run in runs)
    return to_str(node.get("text"))


def get_thumbnail(node: Any) -> str | None:
    """Get the URL of the highest-resolution thumbnail of ``node``.

    Thumbnails are listed in ascending resolution, so the last one wins.
    """
    for path in THUMBNAIL_PATHS:
        thumbnails = nav(node, *path)
        if isinstance(thumbnails, list) and thumbnails:
            return to_str(nav(thumbnails, -1, "url"))
    return None


def is_duration(text: str | None) -> bool:
    """Check whether ``text`` looks like ``M:SS`` or ``H:MM:SS``."""
    return bool(text) and _DURATION_PATTERN.match(text.strip()) is not None


def parse_duration(text: str | None) -> int | None:
    """Parse a duration string like '3:00' or '1:23:45' to seconds.

    Returns None for empty or unparseable input.
    """
    if not text:
        return None
    try:
        parts = [int(part) for part in text.strip().split(":")]
    except ValueError:
        logger.warning("Could not parse duration: %s", text)
        return None
    if len(parts) == 2:
        minutes, seconds = parts
        return minutes * 60 + seconds
    if len(parts) == 3:
        hours, minutes, seconds = parts
        return hours * 3600 + minutes * 60 + seconds
    logger.warning("Unexpected duration format: %s", text)
    return None


def parse_count(text: str | None) -> int | None:
    """Parse the leading number of a label like '12 songs' or '1,204 tracks'."""
    if not text:
        return None
    match = _COUNT_PATTERN.search(text)
    if match is None:
        return None
    digits = re.sub(r"[,.]", "", match.group(1))
    return int(digits) if digits else None


def format_iso_duration(value: str | None) -> str | None:
    """Render an ISO-8601 duration (``PT4M13S``) as ``4:13`` or ``1:02:03``."""
    if not value:
        return None
    match = _ISO_DURATION_PATTERN.match(value)
    if match is None:
        return None
    hours, minutes, seconds = (int(group or 0) for group in match.groups())
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def first_text(node: Any, paths: Iterable[Path]) -> str | None:
    """Get display text from the first candidate path that resolves."""
    return get_text(nav_first(node, paths))
