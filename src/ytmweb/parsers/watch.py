"""Watch playlist (play queue) parser."""

from typing import Any

from ytmweb.lib.fields import get_text, get_thumbnail, to_str
from ytmweb.lib.nav import nav, nav_first
from ytmweb.models.domain import PlaylistTrack, WatchPlaylist
from ytmweb.parsers.paths import BROWSE_ID, WATCH_LYRICS_ID, WATCH_PANEL, WATCH_TABS


def parse_watch_playlist(response: Any, limit: int) -> WatchPlaylist:
    """Parse a ``next`` response into the queue and its lyrics id.

    Args:
        response: Decoded response tree.
        limit: Maximum number of queue tracks to extract.
    """
    tabs = nav_first(response, WATCH_TABS)
    panel = nav(tabs, *WATCH_PANEL)

    tracks: list[PlaylistTrack] = []
    contents = nav(panel, "contents")
    if isinstance(contents, list):
        for item in contents:
            if len(tracks) >= limit:
                break
            renderer = nav(item, "playlistPanelVideoRenderer")
            if renderer is None:
                continue
            tracks.append(parse_queue_track(renderer))

    return WatchPlaylist(
        playlist_id=to_str(nav(panel, "playlistId")),
        tracks=tracks,
        lyrics_id=to_str(nav(tabs, *WATCH_LYRICS_ID)),
    )


def parse_queue_track(renderer: Any) -> PlaylistTrack:
    """Parse one ``playlistPanelVideoRenderer``."""
    return PlaylistTrack(
        video_id=to_str(nav(renderer, "videoId")),
        title=get_text(nav(renderer, "title")),
        artist=to_str(nav(renderer, "longBylineText", "runs", 0, "text")),
        artist_id=to_str(nav(renderer, "longBylineText", "runs", 0, *BROWSE_ID)),
        duration=get_text(nav(renderer, "lengthText")),
        thumbnail=get_thumbnail(renderer),
    )
