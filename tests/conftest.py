"""Test fixtures and response-tree builders."""

import json
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import httpx
import pytest
from ytmweb.client import YTMusicClient
from ytmweb.config import ClientConfig
from ytmweb.models.auth import OAuthCredentials, OAuthToken

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)

# -- response-tree builders --------------------------------------------------


def text_run(
    text: str, browse_id: str | None = None, video_id: str | None = None
) -> dict[str, Any]:
    """Build a text run, optionally linking to a browse page or video."""
    run: dict[str, Any] = {"text": text}
    if browse_id is not None:
        run["navigationEndpoint"] = {"browseEndpoint": {"browseId": browse_id}}
    elif video_id is not None:
        run["navigationEndpoint"] = {"watchEndpoint": {"videoId": video_id}}
    return run


def thumbnails(*urls: str) -> list[dict[str, Any]]:
    """Build a thumbnail list in ascending resolution."""
    return [
        {"url": url, "width": 60 * (i + 1), "height": 60 * (i + 1)}
        for i, url in enumerate(urls)
    ]


def list_item(
    title: str,
    video_id: str | None = None,
    byline: list[dict[str, Any]] | None = None,
    duration: str | None = None,
    playlist_item_data: dict[str, Any] | None = None,
    browse_id: str | None = None,
    thumbs: list[dict[str, Any]] | None = None,
    extra: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a ``musicResponsiveListItemRenderer`` wrapper."""
    columns = [
        {
            "musicResponsiveListItemFlexColumnRenderer": {
                "text": {"runs": [text_run(title, video_id=video_id)]}
            }
        }
    ]
    if byline is not None:
        columns.append(
            {"musicResponsiveListItemFlexColumnRenderer": {"text": {"runs": byline}}}
        )
    renderer: dict[str, Any] = {"flexColumns": columns}
    if duration is not None:
        renderer["fixedColumns"] = [
            {
                "musicResponsiveListItemFixedColumnRenderer": {
                    "text": {"runs": [{"text": duration}]}
                }
            }
        ]
    if playlist_item_data is not None:
        renderer["playlistItemData"] = playlist_item_data
    if browse_id is not None:
        renderer["navigationEndpoint"] = {"browseEndpoint": {"browseId": browse_id}}
    if thumbs is not None:
        renderer["thumbnail"] = {
            "musicThumbnailRenderer": {"thumbnail": {"thumbnails": thumbs}}
        }
    if extra:
        renderer.update(extra)
    return {"musicResponsiveListItemRenderer": renderer}


def two_row_item(
    title: str,
    browse_id: str | None = None,
    subtitle: str | None = None,
    thumbs: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build a ``musicTwoRowItemRenderer`` wrapper (album/artist cards)."""
    renderer: dict[str, Any] = {"title": {"runs": [text_run(title)]}}
    if browse_id is not None:
        renderer["navigationEndpoint"] = {"browseEndpoint": {"browseId": browse_id}}
    if subtitle is not None:
        renderer["subtitle"] = {"runs": [{"text": subtitle}]}
    if thumbs is not None:
        renderer["thumbnail"] = {"thumbnails": thumbs}
    return {"musicTwoRowItemRenderer": renderer}


def shelf(items: list[dict[str, Any]], **fields: Any) -> dict[str, Any]:
    """Build a ``musicShelfRenderer`` section."""
    return {"musicShelfRenderer": {"contents": items, **fields}}


def single_column(sections: list[dict[str, Any]]) -> dict[str, Any]:
    """Wrap sections in a single-column browse page."""
    return {
        "contents": {
            "singleColumnBrowseResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {"sectionListRenderer": {"contents": sections}}
                        }
                    }
                ]
            }
        }
    }


# -- HTTP --------------------------------------------------------------------


class FakeAPI:
    """In-memory HTTP backend for httpx.MockTransport.

    Responses are registered per URL path and served in order; the last
    one registered for a path keeps being served. Unknown paths get 404.
    Every request is recorded.
    """

    def __init__(self) -> None:
        self.routes: dict[str, list[tuple[int, Any, str | None]]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self, path: str, json: Any = None, status: int = 200, text: str | None = None
    ) -> None:
        self.routes.setdefault(path, []).append((status, json, text))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        entries = self.routes.get(request.url.path)
        if not entries:
            return httpx.Response(404, text="not found")
        status, payload, text = entries.pop(0) if len(entries) > 1 else entries[0]
        if text is not None:
            return httpx.Response(status, text=text)
        return httpx.Response(status, json=payload)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def json_body(self, path: str, index: int = -1) -> Any:
        """Decoded JSON body of a recorded request."""
        return json.loads(self.requests_to(path)[index].content)


def form_body(request: httpx.Request) -> dict[str, str]:
    """Decode a form-encoded request body."""
    return dict(httpx.QueryParams(request.content.decode()))


@pytest.fixture
def fake_api() -> FakeAPI:
    """Create an empty fake backend."""
    return FakeAPI()


@pytest.fixture
def credentials() -> OAuthCredentials:
    """Create sample OAuth client credentials."""
    return OAuthCredentials(client_id="client-123", client_secret="secret-456")


@pytest.fixture
def clock_now() -> Callable[[], datetime]:
    """Fixed wall clock."""
    return lambda: NOW


@pytest.fixture
def valid_token() -> OAuthToken:
    """Create a token valid for another hour."""
    return OAuthToken(
        access_token="access-valid",
        refresh_token="refresh-1",
        expires_at=NOW + timedelta(hours=1),
    )


@pytest.fixture
def expired_token() -> OAuthToken:
    """Create a token that expired five minutes ago."""
    return OAuthToken(
        access_token="access-old",
        refresh_token="refresh-1",
        expires_at=NOW - timedelta(minutes=5),
    )


@pytest.fixture
def client(fake_api: FakeAPI) -> YTMusicClient:
    """Create an anonymous client on the fake backend."""
    return YTMusicClient(
        config=ClientConfig(fetch_visitor_id=False), http=fake_api.client()
    )


@pytest.fixture
def auth_client(
    fake_api: FakeAPI,
    credentials: OAuthCredentials,
    valid_token: OAuthToken,
    clock_now: Callable[[], datetime],
) -> YTMusicClient:
    """Create an authenticated client on the fake backend."""
    return YTMusicClient(
        config=ClientConfig(fetch_visitor_id=False),
        credentials=credentials,
        token=valid_token,
        http=fake_api.client(),
        now=clock_now,
    )
