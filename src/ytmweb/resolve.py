"""Identifier resolution for derived records.

Fetching "the artist of this song" or "the album of this search result"
needs an identifier the source record may not carry. These helpers pick
the identifier or raise :class:`MissingIdentifierError` naming the field
and the record type.
"""

from ytmweb.exceptions import MissingIdentifierError
from ytmweb.models.domain import (
    Album,
    ArtistItem,
    LibraryItem,
    PlaylistItem,
    PlaylistTrack,
    SearchResult,
    Song,
    Track,
)
from ytmweb.parsers.paths import ALBUM_ID_PREFIX, ARTIST_ID_PREFIX

VideoSource = SearchResult | Song | Track | PlaylistTrack | PlaylistItem | LibraryItem
ArtistSource = (
    SearchResult
    | Song
    | Album
    | Track
    | PlaylistTrack
    | PlaylistItem
    | LibraryItem
    | ArtistItem
)


def _source(record: object) -> str:
    return type(record).__name__


def video_id_of(record: VideoSource) -> str:
    """Get the video id of a record."""
    if not record.video_id:
        raise MissingIdentifierError("videoId", _source(record))
    return record.video_id


def album_id_of(record: SearchResult | LibraryItem | PlaylistItem) -> str:
    """Get the album browse id of a record.

    Search results and library items are albums themselves when their
    ``browse_id`` has the album prefix. Otherwise the album the track
    belongs to is used.
    """
    browse_id = getattr(record, "browse_id", None)
    if browse_id and browse_id.startswith(ALBUM_ID_PREFIX):
        return browse_id
    if record.album_id:
        return record.album_id
    raise MissingIdentifierError(
        "browseId", _source(record), f"no id starting with {ALBUM_ID_PREFIX}"
    )


def artist_id_of(record: ArtistSource) -> str:
    """Get the artist channel id of a record."""
    if isinstance(record, Song):
        if not record.channel_id:
            raise MissingIdentifierError("channelId", _source(record))
        return record.channel_id

    browse_id = getattr(record, "browse_id", None)
    if browse_id and browse_id.startswith(ARTIST_ID_PREFIX):
        return browse_id
    if isinstance(record, ArtistItem):
        raise MissingIdentifierError(
            "browseId", _source(record), f"no id starting with {ARTIST_ID_PREFIX}"
        )

    if not record.artist_id:
        raise MissingIdentifierError("artistId", _source(record))
    return record.artist_id
