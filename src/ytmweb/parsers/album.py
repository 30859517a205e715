"""Album page parser."""

import re
from typing import Any

from ytmweb.lib.fields import get_text, get_thumbnail, parse_count, to_str
from ytmweb.lib.nav import nav, nav_first
from ytmweb.models.domain import Album, Track
from ytmweb.parsers.common import (
    fixed_column_text,
    flex_runs,
    iter_shelves,
    menu_playlist_id,
    subtitle_texts,
)
from ytmweb.parsers.paths import (
    ALBUM_HEADERS,
    ALBUM_TRACK_SECTIONS,
    ARTIST_ID_PREFIX,
    BROWSE_ID,
    WATCH_VIDEO_ID,
)

_YEAR_PATTERN = re.compile(r"^\d{4}$")
_TRACK_COUNT_PATTERN = re.compile(r"^\d+ (?:song|track)")
_DURATION_WORDS = re.compile(r"hour|minute")


def parse_album(response: Any, browse_id: str, limit: int | None = None) -> Album:
    """Parse an album ``browse`` response.

    Args:
        response: Decoded response tree.
        browse_id: The album id that was requested. It is returned as-is;
            the page itself is not consulted for it.
        limit: Maximum number of tracks to extract (None for all).

    Returns:
        The album with its tracks numbered by position.
    """
    header = nav_first(response, ALBUM_HEADERS)
    fields: dict[str, Any] = {}

    if header is not None:
        fields.update(_parse_header(header))

    return Album(
        browse_id=browse_id,
        tracks=parse_album_tracks(response, limit),
        **fields,
    )


def _parse_header(header: Any) -> dict[str, Any]:
    artist = artist_id = None

    # Newer layouts put the artist in a strapline above the title
    strapline = nav(header, "straplineTextOne", "runs")
    if isinstance(strapline, list) and strapline:
        artist = to_str(nav(strapline, 0, "text"))
        artist_id = to_str(nav(strapline, 0, *BROWSE_ID))

    subtitle = nav(header, "subtitle", "runs")
    texts = subtitle_texts(subtitle)

    if artist is None and isinstance(subtitle, list):
        for run in subtitle:
            browse = to_str(nav(run, *BROWSE_ID))
            if browse is not None and browse.startswith(ARTIST_ID_PREFIX):
                artist, artist_id = to_str(nav(run, "text")), browse
                break

    track_count = duration = None
    second_subtitle = nav(header, "secondSubtitle", "runs")
    for text in subtitle_texts(second_subtitle):
        if _TRACK_COUNT_PATTERN.match(text):
            track_count = parse_count(text)
        elif _DURATION_WORDS.search(text):
            duration = text

    return {
        "title": get_text(nav(header, "title")),
        "artist": artist,
        "artist_id": artist_id,
        "type": texts[0] if texts else None,
        "year": next((t for t in texts if _YEAR_PATTERN.match(t)), None),
        "track_count": track_count,
        "duration": duration,
        "thumbnail": get_thumbnail(header),
        "description": get_text(nav(header, "description")),
        "audio_playlist_id": menu_playlist_id(header),
    }


def parse_album_tracks(response: Any, limit: int | None = None) -> list[Track]:
    """Parse the track listing of an album page.

    Track numbers are assigned from the position in the listing, starting
    at 1, whatever numbering the renderers carry themselves.
    """
    tracks: list[Track] = []
    sections = nav_first(response, ALBUM_TRACK_SECTIONS)

    for shelf in iter_shelves(sections, ("musicShelfRenderer",)):
        contents = nav(shelf, "contents")
        if not isinstance(contents, list):
            continue
        for item in contents:
            if limit is not None and len(tracks) >= limit:
                return tracks
            renderer = nav(item, "musicResponsiveListItemRenderer")
            if renderer is None:
                continue
            tracks.append(_parse_track(renderer, len(tracks) + 1))
    return tracks


def _parse_track(renderer: Any, track_number: int) -> Track:
    title = video_id = artist = artist_id = None

    title_runs = flex_runs(renderer, 0)
    if title_runs:
        title = to_str(nav(title_runs, 0, "text"))
        video_id = to_str(nav(title_runs, 0, *WATCH_VIDEO_ID))

    artist_runs = flex_runs(renderer, 1)
    if artist_runs:
        artist = to_str(nav(artist_runs, 0, "text"))
        artist_id = to_str(nav(artist_runs, 0, *BROWSE_ID))

    return Track(
        track_number=track_number,
        title=title,
        video_id=video_id,
        artist=artist,
        artist_id=artist_id,
        duration=fixed_column_text(renderer),
        thumbnail=get_thumbnail(renderer),
        is_available=nav(renderer, "playlistItemData", "videoId") is not None,
    )
