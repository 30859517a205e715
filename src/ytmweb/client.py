"""YouTube Music web client."""

import logging
import re
import threading
import time
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import httpx

from ytmweb import endpoints, resolve
from ytmweb.auth.oauth import DeviceFlow, OAuthClient
from ytmweb.auth.session import TokenManager
from ytmweb.auth.store import load_credentials, save_credentials
from ytmweb.config import ClientConfig
from ytmweb.exceptions import (
    APIError,
    AuthenticationRequiredError,
    MissingIdentifierError,
)
from ytmweb.lib.nav import nav
from ytmweb.models.auth import DeviceCode, OAuthCredentials, OAuthToken
from ytmweb.models.domain import (
    Album,
    Artist,
    LibraryItem,
    Lyrics,
    Playlist,
    PlaylistDetails,
    PlaylistEditResult,
    PlaylistItem,
    SearchResult,
    Song,
    WatchPlaylist,
)
from ytmweb.models.enums import Privacy
from ytmweb.parsers import (
    parse_album,
    parse_artist,
    parse_data_api_playlist,
    parse_data_api_video,
    parse_library_items,
    parse_lyrics,
    parse_playlist,
    parse_search_results,
    parse_song,
    parse_watch_playlist,
)

logger = logging.getLogger(__name__)

_VISITOR_ID_RE = re.compile(r'ytcfg\.set\s*\(\s*\{[^}]*"VISITOR_DATA"\s*:\s*"([^"]+)"')

# Data API page size cap
_DATA_API_PAGE_SIZE = 50


def _require_id(value: str, name: str) -> None:
    if not value or not value.strip():
        raise ValueError(f"{name} cannot be empty")


class YTMusicClient:
    """Client for the private YouTube Music web API.

    Catalogue operations work anonymously. Library and playlist-management
    operations need an OAuth token, obtained with :meth:`authenticate` or
    loaded with :meth:`from_file`; an expired token is refreshed before
    the request is sent.

    Example:
        >>> with YTMusicClient() as client:
        ...     results = client.search("daft punk", filter="albums", limit=5)
        ...     album = client.album_from(results[0])
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        credentials: OAuthCredentials | None = None,
        token: OAuthToken | None = None,
        http: httpx.Client | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration. Uses defaults if not provided.
            credentials: OAuth client credentials, needed to authenticate or
                refresh a token.
            token: Optional OAuth token from an earlier device flow.
            http: Optional httpx client. Creates one if not provided.
            now: Clock returning an aware datetime, for token expiry.
        """
        self._config = config or ClientConfig()
        self._http = http or httpx.Client(
            timeout=self._config.timeout, follow_redirects=True
        )
        self._owns_http = http is None
        self._now = now or (lambda: datetime.now(UTC))

        self._credentials = credentials
        self._oauth = (
            OAuthClient(credentials, http=self._http, now=self._now)
            if credentials is not None
            else None
        )
        self._tokens = (
            TokenManager(self._oauth, token, now=self._now)
            if self._oauth is not None
            else None
        )
        if token is not None and self._tokens is None:
            raise ValueError("A token needs the OAuth credentials it was issued to")

        self._visitor_id: str | None = None
        self._visitor_checked = not self._config.fetch_visitor_id
        self._visitor_lock = threading.Lock()

    @classmethod
    def from_file(
        cls,
        path: Path,
        config: ClientConfig | None = None,
        http: httpx.Client | None = None,
    ) -> "YTMusicClient":
        """Create a client from an OAuth credential file.

        A file holding only client credentials gives an unauthenticated
        client that can run :meth:`authenticate`.

        Raises:
            CredentialsFileError: If the file is missing or malformed.
        """
        credentials, token = load_credentials(path)
        return cls(config=config, credentials=credentials, token=token, http=http)

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "YTMusicClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        auth = ", authenticated=True" if self.is_authenticated else ""
        return (
            f"YTMusicClient(language={self._config.language!r}, "
            f"location={self._config.location!r}{auth})"
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def is_authenticated(self) -> bool:
        """Whether the client holds an access token."""
        if self._tokens is None:
            return False
        token = self._tokens.token
        return token is not None and bool(token.access_token)

    @property
    def token(self) -> OAuthToken | None:
        return self._tokens.token if self._tokens is not None else None

    # -- transport ---------------------------------------------------------

    def _base_headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": endpoints.USER_AGENT,
            "Accept": "*/*",
            "Accept-Language": f"{self._config.language},en-US;q=0.9,en;q=0.8",
            "Content-Type": "application/json",
            "Origin": endpoints.YTM_DOMAIN,
            "Referer": f"{endpoints.YTM_DOMAIN}/",
        }
        visitor_id = self._get_visitor_id()
        if visitor_id:
            headers["X-Goog-Visitor-Id"] = visitor_id
        return headers

    def _get_visitor_id(self) -> str | None:
        """Scrape the visitor id from the home page, once per client."""
        with self._visitor_lock:
            if self._visitor_checked:
                return self._visitor_id
            self._visitor_checked = True
            try:
                response = self._http.get(
                    endpoints.YTM_DOMAIN,
                    headers={"User-Agent": endpoints.USER_AGENT},
                )
            except httpx.HTTPError as e:
                logger.warning("Could not fetch visitor id: %s", e)
                return None
            match = _VISITOR_ID_RE.search(response.text)
            if match is None:
                logger.warning("Visitor id not found on the home page")
                return None
            self._visitor_id = match.group(1)
            return self._visitor_id

    def _access_token(self) -> OAuthToken:
        if self._tokens is None or not self.is_authenticated:
            raise AuthenticationRequiredError(
                "This operation requires authentication. "
                "Run authenticate() or load a credential file first."
            )
        return self._tokens.ensure_valid()

    def _send_request(
        self, endpoint: str, body: dict[str, Any], requires_auth: bool = False
    ) -> dict[str, Any]:
        """POST to an internal API endpoint and decode the response.

        Raises:
            AuthenticationRequiredError: If ``requires_auth`` and the client
                has no token.
            TokenRefreshError: If the token expired and could not be refreshed.
            APIError: If the request fails or returns a non-200 status.
        """
        token = self._access_token() if requires_auth else None

        headers = self._base_headers()
        if token is not None:
            headers["Authorization"] = f"Bearer {token.access_token}"
            headers["X-Goog-Request-Time"] = str(int(time.time()))

        payload = {
            **body,
            "context": endpoints.build_context(
                self._config.language, self._config.location
            ),
        }
        logger.debug("Sending request: %s", endpoint)
        try:
            response = self._http.post(
                endpoints.YTM_BASE_API + endpoint,
                params=endpoints.YTM_PARAMS,
                headers=headers,
                json=payload,
            )
        except httpx.HTTPError as e:
            raise APIError(f"Request to {endpoint} failed: {e}") from e
        return self._decode(response, endpoint)

    def _data_api_get(self, resource: str, params: dict[str, str]) -> dict[str, Any]:
        """GET from the official YouTube Data API with bearer auth."""
        token = self._access_token()
        logger.debug("Sending Data API request: %s", resource)
        try:
            response = self._http.get(
                endpoints.DATA_API + resource,
                params={"alt": "json", **params},
                headers={
                    "Authorization": f"Bearer {token.access_token}",
                    "Accept": "application/json",
                },
            )
        except httpx.HTTPError as e:
            raise APIError(f"Data API request to {resource} failed: {e}") from e
        return self._decode(response, resource)

    @staticmethod
    def _decode(response: httpx.Response, name: str) -> dict[str, Any]:
        if not response.is_success:
            logger.warning("Request to %s failed: HTTP %d", name, response.status_code)
            raise APIError(
                f"API request failed with status {response.status_code}: "
                f"{response.text}",
                response_status=response.status_code,
                body=response.text,
            )
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            raise APIError(
                f"Invalid JSON from {name}",
                response_status=response.status_code,
                body=response.text,
            ) from e
        return data if isinstance(data, dict) else {}

    # -- catalogue ---------------------------------------------------------

    def search(
        self, query: str, filter: str | None = None, limit: int = 20
    ) -> list[SearchResult]:
        """Search the catalogue.

        Args:
            query: Search text.
            filter: Optional result category (``songs``, ``videos``,
                ``albums``, ``artists``, ``playlists``,
                ``community_playlists``, ``featured_playlists``,
                ``podcasts``, ``episodes``).
            limit: Maximum number of results.

        Raises:
            ValueError: If the query is empty or the filter is unknown.
            APIError: If the request fails.
        """
        _require_id(query, "query")
        body = endpoints.search_body(query, filter)
        response = self._send_request("search", body)
        return parse_search_results(response, limit)

    def get_song(self, video_id: str) -> Song:
        """Fetch song details from the player endpoint."""
        _require_id(video_id, "video_id")
        logger.debug("Fetching song: %s", video_id)
        response = self._send_request("player", endpoints.player_body(video_id))
        return parse_song(response)

    def get_album(self, browse_id: str) -> Album:
        """Fetch an album by its ``MPREb`` browse id."""
        _require_id(browse_id, "browse_id")
        logger.debug("Fetching album: %s", browse_id)
        response = self._send_request("browse", endpoints.browse_body(browse_id))
        return parse_album(response, browse_id)

    def get_artist(self, channel_id: str) -> Artist:
        """Fetch an artist page by channel id."""
        _require_id(channel_id, "channel_id")
        logger.debug("Fetching artist: %s", channel_id)
        response = self._send_request("browse", endpoints.browse_body(channel_id))
        return parse_artist(response)

    def get_lyrics(self, browse_id: str) -> Lyrics:
        """Fetch lyrics by the lyrics browse id of a watch playlist."""
        _require_id(browse_id, "browse_id")
        logger.debug("Fetching lyrics: %s", browse_id)
        response = self._send_request("browse", endpoints.browse_body(browse_id))
        return parse_lyrics(response, browse_id)

    def get_watch_playlist(self, video_id: str, limit: int = 25) -> WatchPlaylist:
        """Fetch the play queue (radio) for a video."""
        _require_id(video_id, "video_id")
        logger.debug("Fetching watch playlist: %s", video_id)
        response = self._send_request(
            "next", endpoints.watch_playlist_body(video_id)
        )
        return parse_watch_playlist(response, limit)

    def get_playlist(self, playlist_id: str, limit: int = 100) -> PlaylistDetails:
        """Fetch a playlist and its tracks.

        The token is sent when the client has one, so private playlists of
        the signed-in user are readable.
        """
        _require_id(playlist_id, "playlist_id")
        logger.debug("Fetching playlist: %s", playlist_id)
        body = endpoints.browse_body(endpoints.playlist_browse_id(playlist_id))
        response = self._send_request(
            "browse", body, requires_auth=self.is_authenticated
        )
        return parse_playlist(response, limit)

    # -- derived records ---------------------------------------------------

    def song_from(self, record: resolve.VideoSource) -> Song:
        """Fetch the song behind a search result or track."""
        return self.get_song(resolve.video_id_of(record))

    def album_from(self, record: SearchResult | LibraryItem | PlaylistItem) -> Album:
        """Fetch the album a record is or belongs to."""
        return self.get_album(resolve.album_id_of(record))

    def artist_from(self, record: resolve.ArtistSource) -> Artist:
        """Fetch the artist of a record."""
        return self.get_artist(resolve.artist_id_of(record))

    def watch_playlist_from(
        self, record: resolve.VideoSource, limit: int = 25
    ) -> WatchPlaylist:
        """Fetch the play queue started from a record."""
        return self.get_watch_playlist(resolve.video_id_of(record), limit=limit)

    def lyrics_from(self, watch_playlist: WatchPlaylist) -> Lyrics:
        """Fetch the lyrics referenced by a watch playlist."""
        if not watch_playlist.lyrics_id:
            raise MissingIdentifierError("lyricsId", type(watch_playlist).__name__)
        return self.get_lyrics(watch_playlist.lyrics_id)

    # -- library -----------------------------------------------------------

    def _data_api_list(
        self,
        resource: str,
        params: dict[str, str],
        parse: Callable[[Any], Any],
        limit: int,
    ) -> list[Any]:
        items: list[Any] = []
        page_token: str | None = None
        while len(items) < limit:
            page_params = {
                **params,
                "maxResults": str(min(_DATA_API_PAGE_SIZE, limit - len(items))),
            }
            if page_token:
                page_params["pageToken"] = page_token
            response = self._data_api_get(resource, page_params)

            for item in response.get("items") or []:
                if len(items) >= limit:
                    break
                items.append(parse(item))

            page_token = response.get("nextPageToken")
            if not page_token:
                break
        return items

    def get_library_playlists(self, limit: int = 25) -> list[Playlist]:
        """List the user's own playlists (Data API)."""
        return self._data_api_list(
            "playlists",
            {"part": "snippet,contentDetails", "mine": "true"},
            parse_data_api_playlist,
            limit,
        )

    def get_library_songs(self, limit: int = 25) -> list[LibraryItem]:
        """List the user's liked songs (Data API)."""
        return self._data_api_list(
            "videos",
            {"part": "snippet,contentDetails", "myRating": "like"},
            parse_data_api_video,
            limit,
        )

    get_liked_songs = get_library_songs

    def _browse_library(self, section: str, limit: int) -> list[LibraryItem]:
        browse_id = endpoints.LIBRARY_BROWSE_IDS[section]
        logger.debug("Fetching library %s", section)
        response = self._send_request(
            "browse", endpoints.browse_body(browse_id), requires_auth=True
        )
        return parse_library_items(response, limit)

    def get_library_albums(self, limit: int = 25) -> list[LibraryItem]:
        """List albums saved to the library."""
        return self._browse_library("albums", limit)

    def get_library_artists(self, limit: int = 25) -> list[LibraryItem]:
        """List artists of songs in the library."""
        return self._browse_library("artists", limit)

    def get_library_subscriptions(self, limit: int = 25) -> list[LibraryItem]:
        """List subscribed artists."""
        return self._browse_library("subscriptions", limit)

    def get_history(self, limit: int = 25) -> list[LibraryItem]:
        """List recently played items."""
        return self._browse_library("history", limit)

    # -- playlist management -----------------------------------------------

    def create_playlist(
        self, title: str, description: str = "", privacy: str = Privacy.PRIVATE
    ) -> str:
        """Create a playlist and return its id.

        Raises:
            ValueError: If the title is empty or the privacy value is invalid.
            APIError: If the response carries no playlist id.
        """
        _require_id(title, "title")
        body = endpoints.create_playlist_body(title, description, privacy)
        response = self._send_request("playlist/create", body, requires_auth=True)
        playlist_id = nav(response, "playlistId")
        if not isinstance(playlist_id, str) or not playlist_id:
            raise APIError(
                "Playlist creation returned no playlistId", body=str(response)
            )
        logger.info("Created playlist %s", playlist_id)
        return playlist_id

    def _edit_playlist(
        self, playlist_id: str, actions: list[dict[str, Any]]
    ) -> PlaylistEditResult:
        if not actions:
            return PlaylistEditResult(status="SUCCESS")
        body = endpoints.edit_playlist_body(playlist_id, actions)
        response = self._send_request(
            "browse/edit_playlist", body, requires_auth=True
        )
        return PlaylistEditResult.model_validate(
            {k: v for k, v in response.items() if v is not None}
        )

    def add_playlist_items(
        self, playlist_id: str, video_ids: str | Iterable[str]
    ) -> PlaylistEditResult:
        """Append videos to a playlist.

        ``video_ids`` is one video id or an iterable of them.
        """
        _require_id(playlist_id, "playlist_id")
        logger.debug("Adding items to playlist: %s", playlist_id)
        return self._edit_playlist(playlist_id, endpoints.add_actions(video_ids))

    def remove_playlist_items(
        self,
        playlist_id: str,
        items: PlaylistItem | str | Iterable[PlaylistItem | str],
    ) -> PlaylistEditResult:
        """Remove tracks from a playlist.

        Args:
            playlist_id: Playlist to edit.
            items: A playlist item from :meth:`get_playlist` or its set video
                id, or an iterable of either. Plain video ids do not
                identify a playlist entry.

        Raises:
            MissingIdentifierError: If an item has no ``set_video_id``.
        """
        _require_id(playlist_id, "playlist_id")
        logger.debug("Removing items from playlist: %s", playlist_id)
        return self._edit_playlist(playlist_id, endpoints.remove_actions(items))

    def delete_playlist(self, playlist_id: str) -> None:
        """Delete a playlist owned by the user."""
        _require_id(playlist_id, "playlist_id")
        self._send_request(
            "playlist/delete", {"playlistId": playlist_id}, requires_auth=True
        )
        logger.info("Deleted playlist %s", playlist_id)

    # -- authentication ----------------------------------------------------

    def authenticate(
        self,
        on_code: Callable[[DeviceCode], None] | None = None,
        save_to: Path | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> OAuthToken:
        """Run the device flow and keep the resulting token.

        Args:
            on_code: Called with the device code so the verification URL and
                user code can be shown to the user.
            save_to: Optional credential file to write once authorized.
            sleep: Blocking sleep used between polls.
            clock: Monotonic clock for the approval deadline.

        Raises:
            AuthenticationRequiredError: If the client has no credentials.
            OAuthError: If the flow ends without a token.
        """
        if self._oauth is None or self._tokens is None:
            raise AuthenticationRequiredError(
                "OAuth credentials are required to authenticate"
            )
        flow = DeviceFlow(self._oauth, on_code=on_code, sleep=sleep, clock=clock)
        token = flow.run()
        self._tokens.replace(token)
        if save_to is not None:
            self.save(save_to)
        return token

    def refresh_token(self) -> OAuthToken:
        """Refresh the access token now, regardless of expiry."""
        if self._tokens is None or not self._tokens.has_token:
            raise AuthenticationRequiredError("No token to refresh")
        return self._tokens.refresh()

    def save(self, path: Path) -> None:
        """Write the credentials and current token to a credential file."""
        token = self.token
        if self._credentials is None or token is None:
            raise AuthenticationRequiredError("No credentials and token to save")
        save_credentials(path, self._credentials, token)

