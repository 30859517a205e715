"""Endpoint constants and request-body builders.

Bodies are plain dicts; the client adds the ``context`` block and posts
them as JSON.
"""

import time
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

from ytmweb.exceptions import MissingIdentifierError
from ytmweb.models.domain import PlaylistItem
from ytmweb.models.enums import Privacy, SearchFilter
from ytmweb.parsers.paths import PLAYLIST_BROWSE_PREFIX

YTM_DOMAIN = "https://music.youtube.com"
YTM_BASE_API = f"{YTM_DOMAIN}/youtubei/v1/"
YTM_PARAMS = {"alt": "json"}
DATA_API = "https://www.googleapis.com/youtube/v3/"

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:88.0) "
    "Gecko/20100101 Firefox/88.0"
)
CLIENT_NAME = "WEB_REMIX"

OAUTH_CODE_URL = "https://www.youtube.com/o/oauth2/device/code"
OAUTH_TOKEN_URL = "https://oauth2.googleapis.com/token"
OAUTH_SCOPE = "https://www.googleapis.com/auth/youtube"
OAUTH_USER_AGENT = f"{USER_AGENT} Cobalt/Version"
OAUTH_GRANT_TYPE_DEVICE = "http://oauth.net/grant_type/device/1.0"
OAUTH_GRANT_TYPE_REFRESH = "refresh_token"

SEARCH_PARAMS: dict[SearchFilter, str] = {
    SearchFilter.SONGS: "EgWKAQIIAWoMEAMQBBAJEA4QChAF",
    SearchFilter.VIDEOS: "EgWKAQIQAWoMEAMQBBAJEA4QChAF",
    SearchFilter.ALBUMS: "EgWKAQIYAWoMEAMQBBAJEA4QChAF",
    SearchFilter.ARTISTS: "EgWKAQIgAWoMEAMQBBAJEA4QChAF",
    SearchFilter.PLAYLISTS: "EgWKAQIoAWoMEAMQBBAJEA4QChAF",
    SearchFilter.COMMUNITY_PLAYLISTS: "EgWKAQIoAWoMEAMQBBAJEA4QChAF",
    SearchFilter.FEATURED_PLAYLISTS: "EgWKAQIoBWoMEAMQBBAJEA4QChAF",
    SearchFilter.PODCASTS: "EgWKAQJQAWoMEAMQBBAJEA4QChAF",
    SearchFilter.EPISODES: "EgWKAQJYAWoMEAMQBBAJEA4QChAF",
}

LIBRARY_BROWSE_IDS = {
    "albums": "FEmusic_liked_albums",
    "artists": "FEmusic_library_corpus_track_artists",
    "subscriptions": "FEmusic_library_corpus_artists",
    "history": "FEmusic_history",
}

ACTION_ADD_VIDEO = "ACTION_ADD_VIDEO"
ACTION_REMOVE_VIDEO = "ACTION_REMOVE_VIDEO"


def client_version(now: datetime | None = None) -> str:
    """Web client version string, derived from the current UTC date."""
    now = now or datetime.now(UTC)
    return f"1.{now:%Y%m%d}.01.00"


def build_context(language: str, location: str) -> dict[str, Any]:
    """Build the ``context`` block sent with every API request."""
    return {
        "client": {
            "clientName": CLIENT_NAME,
            "clientVersion": client_version(),
            "hl": language,
            "gl": location,
        },
        "user": {},
    }


def search_body(query: str, filter: str | None = None) -> dict[str, Any]:
    """Build a ``search`` request body.

    Raises:
        ValueError: If ``filter`` is not a known search filter.
    """
    body: dict[str, Any] = {"query": query}
    if filter is not None:
        try:
            search_filter = SearchFilter(filter)
        except ValueError:
            valid = ", ".join(f.value for f in SearchFilter)
            raise ValueError(
                f"Invalid filter: {filter}. Valid filters: {valid}"
            ) from None
        body["params"] = SEARCH_PARAMS[search_filter]
    return body


def browse_body(browse_id: str) -> dict[str, Any]:
    """Build a ``browse`` request body."""
    return {"browseId": browse_id}


def playlist_browse_id(playlist_id: str) -> str:
    """Prefix a playlist id with ``VL`` for browsing, unless it already is."""
    if playlist_id.startswith(PLAYLIST_BROWSE_PREFIX):
        return playlist_id
    return PLAYLIST_BROWSE_PREFIX + playlist_id


def player_body(video_id: str, now: float | None = None) -> dict[str, Any]:
    """Build a ``player`` request body.

    The signature timestamp is the current day, in whole days since epoch
    expressed in seconds.
    """
    now = time.time() if now is None else now
    return {
        "video_id": video_id,
        "playbackContext": {
            "contentPlaybackContext": {
                "signatureTimestamp": int(now) // 86400 * 86400,
            }
        },
    }


def watch_playlist_body(video_id: str) -> dict[str, Any]:
    """Build a ``next`` request body for the radio queue of a video."""
    return {
        "enablePersistentPlaylistPanel": True,
        "tunerSettingValue": "AUTOMIX_SETTING_NORMAL",
        "videoId": video_id,
        "playlistId": f"RDAMVM{video_id}",
        "watchEndpointMusicSupportedConfigs": {
            "watchEndpointMusicConfig": {
                "musicVideoType": "MUSIC_VIDEO_TYPE_ATV",
            }
        },
        "isAudioOnly": True,
    }


def create_playlist_body(
    title: str, description: str = "", privacy: str = Privacy.PRIVATE
) -> dict[str, Any]:
    """Build a ``playlist/create`` request body.

    Raises:
        ValueError: If ``privacy`` is not PRIVATE, PUBLIC or UNLISTED.
    """
    try:
        privacy_status = Privacy(privacy)
    except ValueError:
        raise ValueError(
            f"Invalid privacy setting: {privacy}. "
            "Must be PRIVATE, PUBLIC, or UNLISTED."
        ) from None
    return {
        "title": title,
        "description": description,
        "privacyStatus": privacy_status.value,
    }


def add_actions(video_ids: str | Iterable[str]) -> list[dict[str, Any]]:
    """Build ``ACTION_ADD_VIDEO`` edit actions.

    A single video id may be passed as a plain string.
    """
    if isinstance(video_ids, str):
        video_ids = [video_ids]
    return [
        {"action": ACTION_ADD_VIDEO, "addedVideoId": video_id}
        for video_id in video_ids
    ]


def remove_actions(
    items: PlaylistItem | str | Iterable[PlaylistItem | str],
) -> list[dict[str, Any]]:
    """Build ``ACTION_REMOVE_VIDEO`` edit actions.

    Removal addresses the occurrence of a track in the playlist, so each
    action carries the ``setVideoId``. Strings are taken to be set video
    ids already. A single item or string is treated as a one-element list.

    Raises:
        MissingIdentifierError: If a PlaylistItem has no ``set_video_id``.
    """
    if isinstance(items, (PlaylistItem, str)):
        items = [items]
    actions = []
    for item in items:
        if isinstance(item, PlaylistItem):
            if not item.set_video_id:
                raise MissingIdentifierError(
                    "setVideoId", "PlaylistItem", "removal needs the set video id"
                )
            set_video_id = item.set_video_id
        else:
            set_video_id = item
        actions.append({"action": ACTION_REMOVE_VIDEO, "setVideoId": set_video_id})
    return actions


def edit_playlist_body(
    playlist_id: str, actions: list[dict[str, Any]]
) -> dict[str, Any]:
    """Build a ``browse/edit_playlist`` request body."""
    return {"playlistId": playlist_id, "actions": actions}
