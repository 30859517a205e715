"""Lyrics page parser."""

from typing import Any

from ytmweb.lib.fields import get_text
from ytmweb.lib.nav import nav, nav_first
from ytmweb.models.domain import Lyrics
from ytmweb.parsers.paths import LYRICS_SECTIONS


def parse_lyrics(response: Any, browse_id: str) -> Lyrics:
    """Parse a lyrics ``browse`` response.

    Songs without lyrics return a page without a description shelf; the
    result then has ``lyrics`` set to None.
    """
    sections = nav_first(response, LYRICS_SECTIONS)
    shelf = nav(sections, 0, "musicDescriptionShelfRenderer")
    return Lyrics(
        browse_id=browse_id,
        lyrics=get_text(nav(shelf, "description")),
        source=get_text(nav(shelf, "footer")),
    )
