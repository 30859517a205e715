"""Library parsers.

Two sources feed the library: internal browse pages (saved albums,
artists, history) and the official YouTube Data API (owned playlists,
liked videos). The Data API returns flat, documented JSON.
"""

from typing import Any

from ytmweb.lib.fields import (
    format_iso_duration,
    get_text,
    get_thumbnail,
    to_str,
)
from ytmweb.lib.nav import nav, nav_first
from ytmweb.models.domain import LibraryItem, Playlist
from ytmweb.models.enums import LikeStatus
from ytmweb.parsers.common import (
    first_renderer,
    fixed_column_text,
    flex_runs,
    iter_shelves,
    shelf_items,
)
from ytmweb.parsers.paths import (
    BROWSE_ID,
    LIBRARY_SHELVES,
    LIST_RENDERERS,
    MENU_ICON,
    MENU_ITEMS,
    SINGLE_COLUMN_SECTIONS,
    WATCH_PLAYLIST_ID,
    WATCH_VIDEO_ID,
)
from ytmweb.parsers.runs import classify_runs

# Data API thumbnails are keyed by size name, largest first
_DATA_API_THUMBNAIL_SIZES = ("maxres", "standard", "high", "medium", "default")


def parse_library_items(response: Any, limit: int) -> list[LibraryItem]:
    """Parse a library ``browse`` page (list or grid shelves)."""
    items: list[LibraryItem] = []
    sections = nav_first(response, SINGLE_COLUMN_SECTIONS)

    for shelf in iter_shelves(sections, LIBRARY_SHELVES):
        for entry in shelf_items(shelf):
            if len(items) >= limit:
                return items
            found = first_renderer(entry, LIST_RENDERERS)
            if found is None:
                continue
            items.append(parse_library_item(found[1]))
    return items


def parse_library_item(renderer: Any) -> LibraryItem:
    """Parse one library renderer (two-row card or list row)."""
    fields: dict[str, Any] = {}

    title_node = nav(renderer, "title")
    if title_node is not None:
        fields["title"] = get_text(title_node)
        fields["browse_id"] = to_str(nav(renderer, *BROWSE_ID))

    runs = flex_runs(renderer, 0)
    if runs:
        fields["title"] = to_str(nav(runs, 0, "text"))
        fields["video_id"] = to_str(nav(runs, 0, *WATCH_VIDEO_ID))
        fields["playlist_id"] = to_str(nav(runs, 0, *WATCH_PLAYLIST_ID))

    byline = classify_runs(flex_runs(renderer, 1))
    artist = byline.artist
    if artist is None:
        artist = get_text(nav(renderer, "subtitle"))

    return LibraryItem(
        artist=artist,
        artist_id=byline.artist_id,
        album=byline.album,
        album_id=byline.album_id,
        duration=fixed_column_text(renderer),
        thumbnail=get_thumbnail(renderer),
        like_status=_like_status(renderer),
        **fields,
    )


def _like_status(renderer: Any) -> str | None:
    menu_items = nav(renderer, *MENU_ITEMS)
    if not isinstance(menu_items, list):
        return None
    for item in menu_items:
        icon = to_str(nav(item, *MENU_ICON))
        if icon in (LikeStatus.LIKE, LikeStatus.DISLIKE):
            return icon
    return None


def _data_api_thumbnail(snippet: Any) -> str | None:
    for size in _DATA_API_THUMBNAIL_SIZES:
        url = nav(snippet, "thumbnails", size, "url")
        if url is not None:
            return to_str(url)
    return None


def parse_data_api_playlist(item: Any) -> Playlist:
    """Parse a Data API ``playlist`` resource."""
    snippet = nav(item, "snippet")
    count = nav(item, "contentDetails", "itemCount")
    return Playlist(
        playlist_id=to_str(nav(item, "id")),
        title=to_str(nav(snippet, "title")),
        description=to_str(nav(snippet, "description")),
        thumbnail=_data_api_thumbnail(snippet),
        track_count=count if isinstance(count, int) else None,
        author=to_str(nav(snippet, "channelTitle")),
    )


def parse_data_api_video(item: Any) -> LibraryItem:
    """Parse a Data API ``video`` resource from the liked-videos listing."""
    snippet = nav(item, "snippet")
    return LibraryItem(
        title=to_str(nav(snippet, "title")),
        video_id=to_str(nav(item, "id")),
        artist=to_str(nav(snippet, "channelTitle")),
        artist_id=to_str(nav(snippet, "channelId")),
        duration=format_iso_duration(to_str(nav(item, "contentDetails", "duration"))),
        thumbnail=_data_api_thumbnail(snippet),
        like_status=LikeStatus.LIKE.value,
    )
