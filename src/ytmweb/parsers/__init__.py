"""Response parsers, one per entity.

Each parser is a pure function from a decoded response tree to a record.
Missing fields come back as None; parsers never raise for them.
"""

from ytmweb.parsers.album import parse_album, parse_album_tracks
from ytmweb.parsers.artist import parse_artist, parse_artist_section
from ytmweb.parsers.library import (
    parse_data_api_playlist,
    parse_data_api_video,
    parse_library_items,
)
from ytmweb.parsers.lyrics import parse_lyrics
from ytmweb.parsers.playlist import parse_playlist
from ytmweb.parsers.search import parse_search_results
from ytmweb.parsers.song import parse_song
from ytmweb.parsers.watch import parse_watch_playlist

__all__ = [
    "parse_album",
    "parse_album_tracks",
    "parse_artist",
    "parse_artist_section",
    "parse_data_api_playlist",
    "parse_data_api_video",
    "parse_library_items",
    "parse_lyrics",
    "parse_playlist",
    "parse_search_results",
    "parse_song",
    "parse_watch_playlist",
]
