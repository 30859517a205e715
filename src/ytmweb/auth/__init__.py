"""OAuth device flow, token ownership and credential files."""

from ytmweb.auth.oauth import DeviceFlow, OAuthClient, TokenPoll
from ytmweb.auth.session import TokenManager
from ytmweb.auth.store import (
    dump_credentials,
    inspect_credentials,
    load_credentials,
    parse_credentials,
    save_credentials,
)

__all__ = [
    "DeviceFlow",
    "OAuthClient",
    "TokenManager",
    "TokenPoll",
    "dump_credentials",
    "inspect_credentials",
    "load_credentials",
    "parse_credentials",
    "save_credentials",
]
