"""Search results parser."""

from typing import Any

from ytmweb.lib.fields import get_thumbnail, to_str
from ytmweb.lib.nav import nav, nav_first
from ytmweb.models.domain import SearchResult
from ytmweb.parsers.common import flex_runs, iter_shelves
from ytmweb.parsers.paths import BROWSE_ID, SEARCH_SECTIONS, WATCH_VIDEO_ID
from ytmweb.parsers.runs import classify_runs


def parse_search_results(response: Any, limit: int) -> list[SearchResult]:
    """Parse a search response into at most ``limit`` results.

    Results are taken from every ``musicShelfRenderer`` in document order.
    Filtered searches come back as a single tabbed result list, unfiltered
    ones as a plain section list.
    """
    results: list[SearchResult] = []
    if limit <= 0:
        return results

    sections = nav_first(response, SEARCH_SECTIONS)
    for shelf in iter_shelves(sections, ("musicShelfRenderer",)):
        contents = nav(shelf, "contents")
        if not isinstance(contents, list):
            continue
        for item in contents:
            renderer = nav(item, "musicResponsiveListItemRenderer")
            if renderer is None:
                continue
            result = parse_search_item(renderer)
            if result is not None:
                results.append(result)
                if len(results) >= limit:
                    return results
    return results


def parse_search_item(renderer: Any) -> SearchResult | None:
    """Parse one ``musicResponsiveListItemRenderer`` of a search shelf.

    Returns None for renderers without flex columns.
    """
    if nav(renderer, "flexColumns") is None:
        return None

    title = video_id = browse_id = None
    title_runs = flex_runs(renderer, 0)
    if title_runs:
        title = to_str(nav(title_runs, 0, "text"))
        video_id = to_str(nav(title_runs, 0, *WATCH_VIDEO_ID))
        browse_id = to_str(nav(title_runs, 0, *BROWSE_ID))

    # Albums, artists and playlists link from the renderer itself
    if browse_id is None:
        browse_id = to_str(nav(renderer, *BROWSE_ID))

    byline = classify_runs(flex_runs(renderer, 1), positional_album=True)

    return SearchResult(
        title=title,
        video_id=video_id,
        browse_id=browse_id,
        artist=byline.artist,
        artist_id=byline.artist_id,
        album=byline.album,
        album_id=byline.album_id,
        duration=byline.duration,
        thumbnail=get_thumbnail(renderer),
    )
