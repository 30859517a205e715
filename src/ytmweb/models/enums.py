"""Enums for ytmweb."""

from enum import StrEnum


class SearchFilter(StrEnum):
    """Result category a search can be restricted to."""

    SONGS = "songs"
    VIDEOS = "videos"
    ALBUMS = "albums"
    ARTISTS = "artists"
    PLAYLISTS = "playlists"
    COMMUNITY_PLAYLISTS = "community_playlists"
    FEATURED_PLAYLISTS = "featured_playlists"
    PODCASTS = "podcasts"
    EPISODES = "episodes"


class Privacy(StrEnum):
    """Playlist privacy setting."""

    PRIVATE = "PRIVATE"
    PUBLIC = "PUBLIC"
    UNLISTED = "UNLISTED"


class LikeStatus(StrEnum):
    """Rating the user gave to a library item."""

    LIKE = "LIKE"
    DISLIKE = "DISLIKE"


class FlowState(StrEnum):
    """States of the OAuth device-authorization flow."""

    AWAITING_DEVICE_CODE = "awaiting_device_code"
    AWAITING_APPROVAL = "awaiting_approval"
    AUTHORIZED = "authorized"
    FAILED = "failed"


class CredentialState(StrEnum):
    """What a credential file provides at startup."""

    NO_FILE = "no_file"
    CREDENTIALS_ONLY = "credentials_only"
    VALID_TOKEN = "valid_token"
    EXPIRED_TOKEN = "expired_token"
