"""Building blocks shared by the entity parsers."""

from collections.abc import Iterable, Iterator
from typing import Any

from ytmweb.lib.fields import get_text, to_str
from ytmweb.lib.nav import nav, nav_first
from ytmweb.parsers.paths import (
    FIXED_COLUMN_TEXT,
    LIBRARY_SHELF_ITEMS,
    MENU_ITEMS,
    MENU_PLAYLIST_ID,
    TITLE_RUNS,
)


def first_renderer(item: Any, keys: Iterable[str]) -> tuple[str, Any] | None:
    """Unwrap the first matching renderer key of ``item``.

    Returns:
        ``(key, renderer)`` or None when no key matches.
    """
    for key in keys:
        renderer = nav(item, key)
        if renderer is not None:
            return key, renderer
    return None


def iter_shelves(sections: Any, shelf_keys: Iterable[str]) -> Iterator[Any]:
    """Yield the shelves of a section list, in document order."""
    if not isinstance(sections, list):
        return
    shelf_keys = tuple(shelf_keys)
    for section in sections:
        found = first_renderer(section, shelf_keys)
        if found is not None:
            yield found[1]


def shelf_items(shelf: Any) -> list[Any]:
    """Get the item list of a shelf (``contents`` or, for grids, ``items``)."""
    items = nav_first(shelf, LIBRARY_SHELF_ITEMS)
    return items if isinstance(items, list) else []


def flex_runs(renderer: Any, column: int) -> list[Any] | None:
    """Get the text runs of a flex column of a list-item renderer."""
    runs = nav(renderer, "flexColumns", column, *TITLE_RUNS)
    return runs if isinstance(runs, list) and runs else None


def fixed_column_text(renderer: Any) -> str | None:
    """Get the text of the first fixed column (usually the duration)."""
    return get_text(nav(renderer, "fixedColumns", 0, *FIXED_COLUMN_TEXT))


def menu_playlist_id(header: Any) -> str | None:
    """Get the playlist id behind the "play" entry of a header menu."""
    items = nav(header, *MENU_ITEMS)
    if not isinstance(items, list):
        return None
    for item in items:
        playlist_id = nav(item, *MENU_PLAYLIST_ID)
        if playlist_id is not None:
            return to_str(playlist_id)
    return None


def subtitle_texts(runs: Any) -> list[str]:
    """Get the non-separator texts of a subtitle run list."""
    if not isinstance(runs, list):
        return []
    texts = []
    for run in runs:
        text = to_str(nav(run, "text"))
        if text is not None and text.strip() not in ("", "•"):
            texts.append(text)
    return texts
