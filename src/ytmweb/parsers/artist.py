"""Artist page parser."""

from typing import Any

from ytmweb.lib.fields import first_text, get_text, get_thumbnail, to_str
from ytmweb.lib.nav import nav, nav_first
from ytmweb.models.domain import Artist, ArtistItem
from ytmweb.parsers.common import first_renderer, flex_runs, iter_shelves
from ytmweb.parsers.paths import (
    ARTIST_HEADERS,
    ARTIST_SHELF_TITLES,
    ARTIST_SHELVES,
    BROWSE_ID,
    LIST_RENDERERS,
    SINGLE_COLUMN_SECTIONS,
    WATCH_VIDEO_ID,
)


def section_key(title: str) -> str:
    """Normalise a shelf title to a section key.

    "Fans might also like" becomes "fans_might_also_like".
    """
    return title.replace(" ", "_").lower()


def parse_artist(response: Any, limit: int | None = None) -> Artist:
    """Parse an artist ``browse`` response.

    Every shelf with a resolvable title becomes a section, keyed by its
    normalised title. Which sections exist depends on the artist.

    Args:
        response: Decoded response tree.
        limit: Maximum number of items per section (None for all).
    """
    header = nav_first(response, ARTIST_HEADERS)
    subscribe = nav(header, "subscriptionButton", "subscribeButtonRenderer")

    sections: dict[str, list[ArtistItem]] = {}
    shelves = nav_first(response, SINGLE_COLUMN_SECTIONS)
    for shelf in iter_shelves(shelves, ARTIST_SHELVES):
        title = first_text(shelf, ARTIST_SHELF_TITLES)
        if not title:
            continue
        sections[section_key(title)] = parse_artist_section(shelf, limit)

    return Artist(
        name=get_text(nav(header, "title")),
        channel_id=to_str(nav(subscribe, "channelId")),
        description=get_text(nav(header, "description")),
        thumbnail=get_thumbnail(header),
        subscribers=to_str(
            nav(subscribe, "subscriberCountText", "runs", 0, "text")
        ),
        sections=sections,
    )


def parse_artist_section(
    shelf: Any, limit: int | None = None
) -> list[ArtistItem]:
    """Parse the items of one artist shelf.

    Shelves mix two-row cards (albums, singles, videos) and list rows
    (songs); both are handled.
    """
    items: list[ArtistItem] = []
    contents = nav(shelf, "contents")
    if not isinstance(contents, list):
        return items

    for item in contents:
        if limit is not None and len(items) >= limit:
            break
        found = first_renderer(item, LIST_RENDERERS)
        if found is None:
            continue
        items.append(_parse_item(found[1]))
    return items


def _parse_item(renderer: Any) -> ArtistItem:
    title = browse_id = video_id = None

    title_node = nav(renderer, "title")
    if title_node is not None:
        title = get_text(title_node)
        browse_id = to_str(nav(renderer, *BROWSE_ID))

    runs = flex_runs(renderer, 0)
    if runs:
        title = to_str(nav(runs, 0, "text"))
        video_id = to_str(nav(runs, 0, *WATCH_VIDEO_ID))

    return ArtistItem(
        title=title,
        browse_id=browse_id,
        video_id=video_id,
        thumbnail=get_thumbnail(renderer),
        subtitle=get_text(nav(renderer, "subtitle")),
    )
