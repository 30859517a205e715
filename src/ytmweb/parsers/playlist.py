"""Playlist contents parser."""

import re
from typing import Any

from ytmweb.lib.fields import get_text, get_thumbnail, parse_count, to_str
from ytmweb.lib.nav import nav, nav_first
from ytmweb.models.domain import PlaylistDetails, PlaylistItem
from ytmweb.parsers.common import (
    fixed_column_text,
    flex_runs,
    iter_shelves,
    menu_playlist_id,
    subtitle_texts,
)
from ytmweb.parsers.paths import (
    PLAYLIST_HEADERS,
    PLAYLIST_SHELVES,
    SINGLE_COLUMN_SECTIONS,
    WATCH_VIDEO_ID,
)
from ytmweb.parsers.runs import classify_runs

_TRACK_COUNT_PATTERN = re.compile(r"\d+\s*(?:song|track)")


def parse_playlist(response: Any, limit: int) -> PlaylistDetails:
    """Parse a playlist ``browse`` response with its tracks.

    The playlist id comes from the header's play menu, or from the track
    shelf when the header has none.
    """
    header = nav_first(response, PLAYLIST_HEADERS)
    playlist_id = menu_playlist_id(header)

    track_count = None
    for text in subtitle_texts(nav(header, "subtitle", "runs")):
        if _TRACK_COUNT_PATTERN.search(text):
            track_count = parse_count(text)
            break

    tracks: list[PlaylistItem] = []
    sections = nav_first(response, SINGLE_COLUMN_SECTIONS)
    for shelf in iter_shelves(sections, PLAYLIST_SHELVES):
        if playlist_id is None:
            playlist_id = to_str(nav(shelf, "playlistId"))
        contents = nav(shelf, "contents")
        if not isinstance(contents, list):
            continue
        for item in contents:
            if len(tracks) >= limit:
                break
            renderer = nav(item, "musicResponsiveListItemRenderer")
            if renderer is None:
                continue
            tracks.append(parse_playlist_item(renderer))

    return PlaylistDetails(
        playlist_id=playlist_id,
        title=get_text(nav(header, "title")),
        description=get_text(nav(header, "description")),
        track_count=track_count,
        tracks=tracks,
    )


def parse_playlist_item(renderer: Any) -> PlaylistItem:
    """Parse one track row of a playlist, keeping its ``setVideoId``."""
    video_id = to_str(nav(renderer, "playlistItemData", "videoId"))
    title = None

    title_runs = flex_runs(renderer, 0)
    if title_runs:
        title = to_str(nav(title_runs, 0, "text"))
        if video_id is None:
            video_id = to_str(nav(title_runs, 0, *WATCH_VIDEO_ID))

    byline = classify_runs(flex_runs(renderer, 1))

    return PlaylistItem(
        video_id=video_id,
        set_video_id=to_str(nav(renderer, "playlistItemData", "playlistSetVideoId")),
        title=title,
        artist=byline.artist,
        artist_id=byline.artist_id,
        album=byline.album,
        album_id=byline.album_id,
        duration=fixed_column_text(renderer),
        thumbnail=get_thumbnail(renderer),
    )
