"""Classification of subtitle/byline runs.

A secondary line such as "Song • The Beatles • Abbey Road • 4:19" is a list
of text runs, some of which link to a browse page. The rules below are
inferred from observed responses and are best-effort: a line the rules do
not fit yields wrong or missing fields, not an error.

- A run linking to an artist channel (``UC...``) names the artist.
- A run linking to an album (``MPREb...``) names the album.
- The first unlinked run names the artist when no linked artist exists.
- A trailing run shaped like ``M:SS`` is the duration.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ytmweb.lib.fields import is_duration, to_str
from ytmweb.lib.nav import nav
from ytmweb.parsers.paths import ALBUM_ID_PREFIX, ARTIST_ID_PREFIX, BROWSE_ID

_SEPARATORS = frozenset({"", "•", "&", ","})
_MINUTES_SUFFIX = " min"


@dataclass(frozen=True)
class Byline:
    """Fields recovered from a secondary line."""

    artist: str | None = None
    artist_id: str | None = None
    album: str | None = None
    album_id: str | None = None
    duration: str | None = None


def _is_length(text: str) -> bool:
    return is_duration(text) or (
        text.endswith(_MINUTES_SUFFIX) and text[: -len(_MINUTES_SUFFIX)].isdigit()
    )


def classify_runs(
    runs: Sequence[Any] | None, positional_album: bool = False
) -> Byline:
    """Split a run list into artist, album and duration.

    Args:
        runs: The ``runs`` list of a subtitle or flex column.
        positional_album: Also take the second text as the album when no
            linked album exists and the line does not end in a length.
            Search results lay out unlinked albums this way.

    Returns:
        The fields that could be recognised.
    """
    if not runs:
        return Byline()

    texts: list[str] = []
    artist = artist_id = album = album_id = None
    first_unlinked: str | None = None

    for run in runs:
        text = to_str(nav(run, "text"))
        if text is None or text.strip() in _SEPARATORS:
            continue
        texts.append(text)

        browse_id = to_str(nav(run, *BROWSE_ID))
        if browse_id is None:
            if first_unlinked is None and not _is_length(text):
                first_unlinked = text
        elif browse_id.startswith(ARTIST_ID_PREFIX):
            if artist is None:
                artist, artist_id = text, browse_id
        elif browse_id.startswith(ALBUM_ID_PREFIX):
            album, album_id = text, browse_id

    if artist is None:
        artist = first_unlinked

    if (
        positional_album
        and album is None
        and len(texts) >= 2
        and not _is_length(texts[-1])
    ):
        album = texts[1]

    duration = texts[-1] if texts and is_duration(texts[-1]) else None

    return Byline(
        artist=artist,
        artist_id=artist_id,
        album=album,
        album_id=album_id,
        duration=duration,
    )
