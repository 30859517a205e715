"""ytmweb - YouTube Music through its private web API.

This library searches the YouTube Music catalogue, reads album, artist,
playlist and lyrics pages, and manages the signed-in user's library and
playlists. Responses are parsed into typed, immutable records; fields the
service omits come back as None instead of raising.

Designed for use as a library, with a CLI for debugging and development.

Examples:
    Search and follow a result:
    ```python
    from ytmweb import YTMusicClient

    with YTMusicClient() as client:
        results = client.search("daft punk", filter="albums", limit=5)
        album = client.album_from(results[0])
        for track in album.tracks:
            print(track.track_number, track.title)
    ```

    Authenticate once, then reuse the saved token:
    ```python
    from pathlib import Path
    from ytmweb import YTMusicClient

    client = YTMusicClient.from_file(Path("client_secret.json"))
    client.authenticate(save_to=Path("~/.config/ytmweb/oauth.json").expanduser())
    playlist_id = client.create_playlist("Road trip")
    ```
"""

from ytmweb.auth import DeviceFlow, OAuthClient, TokenManager, inspect_credentials
from ytmweb.client import YTMusicClient
from ytmweb.config import ClientConfig
from ytmweb.default import get_default_client, reset_default_client, set_default_client
from ytmweb.exceptions import (
    APIError,
    AuthenticationRequiredError,
    AuthorizationExpiredError,
    AuthorizationTimedOutError,
    CredentialsFileError,
    DeviceCodeRequestError,
    MissingIdentifierError,
    OAuthError,
    OAuthProviderError,
    TokenRefreshError,
    UserDeniedAccessError,
    YTMusicError,
)
from ytmweb.models import (
    Album,
    Artist,
    ArtistItem,
    CredentialState,
    DeviceCode,
    FlowState,
    LibraryItem,
    LikeStatus,
    Lyrics,
    OAuthCredentials,
    OAuthToken,
    Playlist,
    PlaylistDetails,
    PlaylistEditResult,
    PlaylistItem,
    PlaylistTrack,
    Privacy,
    SearchFilter,
    SearchResult,
    Song,
    Track,
    WatchPlaylist,
)
from ytmweb.settings import Settings

__all__ = [
    "APIError",
    "Album",
    "Artist",
    "ArtistItem",
    "AuthenticationRequiredError",
    "AuthorizationExpiredError",
    "AuthorizationTimedOutError",
    "ClientConfig",
    "CredentialState",
    "CredentialsFileError",
    "DeviceCode",
    "DeviceCodeRequestError",
    "DeviceFlow",
    "FlowState",
    "LibraryItem",
    "LikeStatus",
    "Lyrics",
    "MissingIdentifierError",
    "OAuthClient",
    "OAuthCredentials",
    "OAuthError",
    "OAuthProviderError",
    "OAuthToken",
    "Playlist",
    "PlaylistDetails",
    "PlaylistEditResult",
    "PlaylistItem",
    "PlaylistTrack",
    "Privacy",
    "SearchFilter",
    "SearchResult",
    "Settings",
    "Song",
    "TokenManager",
    "TokenRefreshError",
    "Track",
    "UserDeniedAccessError",
    "WatchPlaylist",
    "YTMusicClient",
    "YTMusicError",
    "get_default_client",
    "inspect_credentials",
    "reset_default_client",
    "set_default_client",
]
