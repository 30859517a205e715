"""Candidate paths into YouTube Music response trees.

The same logical node appears at different locations depending on the
page type, the response version and the region it was served from. Each
tuple below lists equally valid layouts in priority order; parsers take
the first one that resolves. Supporting a new layout means adding a path
here, not touching the parsers.
"""

ARTIST_ID_PREFIX = "UC"
ALBUM_ID_PREFIX = "MPREb"
PLAYLIST_BROWSE_PREFIX = "VL"

PLAYABLE_STATUS = "OK"

_SECTION_LIST = ("tabRenderer", "content", "sectionListRenderer", "contents")

# Common sub-paths
TITLE_RUNS = ("musicResponsiveListItemFlexColumnRenderer", "text", "runs")
FIXED_COLUMN_TEXT = ("musicResponsiveListItemFixedColumnRenderer", "text")
WATCH_VIDEO_ID = ("navigationEndpoint", "watchEndpoint", "videoId")
WATCH_PLAYLIST_ID = ("navigationEndpoint", "watchEndpoint", "playlistId")
BROWSE_ID = ("navigationEndpoint", "browseEndpoint", "browseId")
MENU_ITEMS = ("menu", "menuRenderer", "items")
MENU_PLAYLIST_ID = (
    "menuNavigationItemRenderer",
    "navigationEndpoint",
    "watchPlaylistEndpoint",
    "playlistId",
)
MENU_ICON = ("menuServiceItemRenderer", "icon", "iconType")

SEARCH_SECTIONS = (
    ("contents", "tabbedSearchResultsRenderer", "tabs", 0, *_SECTION_LIST),
    ("contents", "sectionListRenderer", "contents"),
)

SINGLE_COLUMN_SECTIONS = (
    ("contents", "singleColumnBrowseResultsRenderer", "tabs", 0, *_SECTION_LIST),
)

ARTIST_HEADERS = (
    ("header", "musicImmersiveHeaderRenderer"),
    ("header", "musicVisualHeaderRenderer"),
)
ARTIST_SHELVES = ("musicShelfRenderer", "musicCarouselShelfRenderer")
ARTIST_SHELF_TITLES = (
    ("header", "musicCarouselShelfBasicHeaderRenderer", "title"),
    ("header", "musicShelfBasicHeaderRenderer", "title"),
)

ALBUM_HEADERS = (
    (
        "contents",
        "twoColumnBrowseResultsRenderer",
        "tabs",
        0,
        *_SECTION_LIST,
        0,
        "musicResponsiveHeaderRenderer",
    ),
    ("header", "musicDetailHeaderRenderer"),
    ("header", "musicResponsiveHeaderRenderer"),
)
ALBUM_TRACK_SECTIONS = (
    (
        "contents",
        "twoColumnBrowseResultsRenderer",
        "secondaryContents",
        "sectionListRenderer",
        "contents",
    ),
    *SINGLE_COLUMN_SECTIONS,
)

PLAYLIST_HEADERS = (
    ("header", "musicDetailHeaderRenderer"),
    (
        "header",
        "musicEditablePlaylistDetailHeaderRenderer",
        "header",
        "musicDetailHeaderRenderer",
    ),
)
PLAYLIST_SHELVES = ("musicPlaylistShelfRenderer", "musicShelfRenderer")

LIBRARY_SHELVES = ("musicShelfRenderer", "gridRenderer")
LIBRARY_SHELF_ITEMS = (("contents",), ("items",))

LIST_RENDERERS = ("musicResponsiveListItemRenderer", "musicTwoRowItemRenderer")

WATCH_TABS = (
    (
        "contents",
        "singleColumnMusicWatchNextResultsRenderer",
        "tabbedRenderer",
        "watchNextTabbedResultsRenderer",
        "tabs",
    ),
)
WATCH_PANEL = (
    0,
    "tabRenderer",
    "content",
    "musicQueueRenderer",
    "content",
    "playlistPanelRenderer",
)
# The lyrics tab is the second tab of the watch-next panel when present.
WATCH_LYRICS_ID = (1, "tabRenderer", "endpoint", "browseEndpoint", "browseId")

LYRICS_SECTIONS = (("contents", "sectionListRenderer", "contents"),)
