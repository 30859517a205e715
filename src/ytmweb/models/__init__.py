"""Data models for ytmweb.

Public API:
    domain.py - Records extracted from YouTube Music responses
    auth.py - OAuth credentials, tokens and device codes
    enums.py - Search filters, privacy settings, flow states
"""

from ytmweb.models.auth import DeviceCode, OAuthCredentials, OAuthToken
from ytmweb.models.domain import (
    Album,
    Artist,
    ArtistItem,
    LibraryItem,
    Lyrics,
    Playlist,
    PlaylistDetails,
    PlaylistEditResult,
    PlaylistItem,
    PlaylistTrack,
    SearchResult,
    Song,
    Track,
    WatchPlaylist,
)
from ytmweb.models.enums import (
    CredentialState,
    FlowState,
    LikeStatus,
    Privacy,
    SearchFilter,
)

__all__ = [
    "Album",
    "Artist",
    "ArtistItem",
    "CredentialState",
    "DeviceCode",
    "FlowState",
    "LibraryItem",
    "LikeStatus",
    "Lyrics",
    "OAuthCredentials",
    "OAuthToken",
    "Playlist",
    "PlaylistDetails",
    "PlaylistEditResult",
    "PlaylistItem",
    "PlaylistTrack",
    "Privacy",
    "SearchFilter",
    "SearchResult",
    "Song",
    "Track",
    "WatchPlaylist",
]
