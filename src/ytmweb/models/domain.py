"""Domain records extracted from YouTube Music responses.

Every field except the derived booleans and positional numbers is
optional: the service changes its response layout without notice, and a
field that cannot be found is None rather than an error. Records
serialise under the camelCase names the web client uses (``videoId``,
``setVideoId``) and accept either spelling on input.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "Album",
    "Artist",
    "ArtistItem",
    "LibraryItem",
    "Lyrics",
    "Playlist",
    "PlaylistDetails",
    "PlaylistEditResult",
    "PlaylistItem",
    "PlaylistTrack",
    "SearchResult",
    "Song",
    "Track",
    "WatchPlaylist",
]


class YTMusicRecord(BaseModel):
    """Base model for extracted records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class SearchResult(YTMusicRecord):
    """Search result of any category.

    Song and video results carry ``video_id``; album, artist and playlist
    results carry ``browse_id``.
    """

    title: str | None = None
    video_id: str | None = None
    browse_id: str | None = None
    artist: str | None = None
    artist_id: str | None = None
    album: str | None = None
    album_id: str | None = None
    duration: str | None = None
    thumbnail: str | None = None


class Song(YTMusicRecord):
    """Detailed song information from the player endpoint."""

    video_id: str | None = None
    title: str | None = None
    artist: str | None = None
    channel_id: str | None = None
    length_seconds: str | None = None
    view_count: str | None = None
    thumbnail: str | None = None
    playability_status: str | None = None
    is_playable: bool = False
    category: str | None = None
    publish_date: str | None = None
    upload_date: str | None = None


class Track(YTMusicRecord):
    """Track in an album.

    ``track_number`` is the 1-based position in the album listing.
    """

    track_number: int
    title: str | None = None
    video_id: str | None = None
    artist: str | None = None
    artist_id: str | None = None
    duration: str | None = None
    thumbnail: str | None = None
    is_available: bool = False


class Album(YTMusicRecord):
    """Album page."""

    browse_id: str | None = None
    title: str | None = None
    artist: str | None = None
    artist_id: str | None = None
    year: str | None = None
    type: str | None = None
    track_count: int | None = None
    duration: str | None = None
    thumbnail: str | None = None
    description: str | None = None
    audio_playlist_id: str | None = None
    tracks: list[Track] = Field(default_factory=list)


class ArtistItem(YTMusicRecord):
    """Entry in one of an artist's catalogue sections."""

    title: str | None = None
    browse_id: str | None = None
    video_id: str | None = None
    thumbnail: str | None = None
    subtitle: str | None = None


class Artist(YTMusicRecord):
    """Artist page.

    ``sections`` maps normalised shelf titles (``"songs"``, ``"albums"``,
    ``"fans_might_also_like"``, ...) to their items. The set of sections
    differs between artists.
    """

    name: str | None = None
    channel_id: str | None = None
    description: str | None = None
    thumbnail: str | None = None
    subscribers: str | None = None
    sections: dict[str, list[ArtistItem]] = Field(default_factory=dict)


class Lyrics(YTMusicRecord):
    """Lyrics for a song. ``lyrics`` is None when the song has none."""

    browse_id: str | None = None
    lyrics: str | None = None
    source: str | None = None


class PlaylistTrack(YTMusicRecord):
    """Track in a watch playlist (play queue)."""

    video_id: str | None = None
    title: str | None = None
    artist: str | None = None
    artist_id: str | None = None
    duration: str | None = None
    thumbnail: str | None = None


class WatchPlaylist(YTMusicRecord):
    """Play queue for a video, with the lyrics browse id when available."""

    playlist_id: str | None = None
    tracks: list[PlaylistTrack] = Field(default_factory=list)
    lyrics_id: str | None = None


class Playlist(YTMusicRecord):
    """Playlist owned by or saved to the user's library."""

    playlist_id: str | None = None
    title: str | None = None
    description: str | None = None
    thumbnail: str | None = None
    track_count: int | None = None
    author: str | None = None


class PlaylistItem(YTMusicRecord):
    """Track inside a playlist's contents.

    ``set_video_id`` identifies this occurrence of the video in the
    playlist. Removing a track from a playlist requires it; the plain
    ``video_id`` is not accepted by the removal endpoint.
    """

    video_id: str | None = None
    set_video_id: str | None = None
    title: str | None = None
    artist: str | None = None
    artist_id: str | None = None
    album: str | None = None
    album_id: str | None = None
    duration: str | None = None
    thumbnail: str | None = None


class PlaylistDetails(YTMusicRecord):
    """Playlist header together with its tracks."""

    playlist_id: str | None = None
    title: str | None = None
    description: str | None = None
    track_count: int | None = None
    tracks: list[PlaylistItem] = Field(default_factory=list)


class LibraryItem(YTMusicRecord):
    """Song, album, artist or history entry from the user's library."""

    title: str | None = None
    video_id: str | None = None
    browse_id: str | None = None
    playlist_id: str | None = None
    artist: str | None = None
    artist_id: str | None = None
    album: str | None = None
    album_id: str | None = None
    duration: str | None = None
    thumbnail: str | None = None
    like_status: str | None = None


class PlaylistEditResult(YTMusicRecord):
    """Outcome of adding or removing playlist items."""

    status: str = "UNKNOWN"
    results: list[dict[str, Any]] = Field(
        default_factory=list, alias="playlistEditResults"
    )

    @property
    def succeeded(self) -> bool:
        """Whether the service reported success."""
        return self.status == "STATUS_SUCCEEDED" or self.status == "SUCCESS"
