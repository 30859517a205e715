"""Process-wide default client for applications and scripts.

Library code should create a :class:`YTMusicClient` and pass it around.
This module is a convenience for the application boundary: it builds one
client from :class:`Settings` on first use.
"""

import logging
import threading
from collections.abc import Callable

from ytmweb.auth.store import inspect_credentials
from ytmweb.client import YTMusicClient
from ytmweb.config import ClientConfig
from ytmweb.models.auth import DeviceCode
from ytmweb.models.enums import CredentialState
from ytmweb.settings import Settings

logger = logging.getLogger(__name__)

_default_client: YTMusicClient | None = None
_lock = threading.Lock()


def _print_code(code: DeviceCode) -> None:
    print(f"Go to {code.verification_url} and enter the code {code.user_code}")


def create_client_from_settings(
    settings: Settings | None = None,
    on_code: Callable[[DeviceCode], None] = _print_code,
) -> YTMusicClient:
    """Build a client from environment settings.

    With no credential file the client is anonymous. With a file holding
    only client credentials, the device flow runs when
    :meth:`Settings.should_authenticate` allows it and the token is saved
    back to the file.
    """
    settings = settings or Settings()
    config = ClientConfig(language=settings.language, location=settings.location)
    path = settings.resolve_oauth_file()

    state = inspect_credentials(path)
    logger.debug("Credential file %s: %s", path, state)
    if path is None or state == CredentialState.NO_FILE:
        return YTMusicClient(config=config)

    client = YTMusicClient.from_file(path, config=config)
    if state == CredentialState.CREDENTIALS_ONLY:
        if settings.should_authenticate():
            logger.info("No token in %s, starting device flow", path)
            client.authenticate(on_code=on_code, save_to=path)
        else:
            logger.info("No token in %s, client is unauthenticated", path)
    return client


def get_default_client() -> YTMusicClient:
    """Get the default client, creating it on first use."""
    global _default_client
    with _lock:
        if _default_client is None:
            _default_client = create_client_from_settings()
        return _default_client


def set_default_client(client: YTMusicClient) -> None:
    """Replace the default client."""
    global _default_client
    with _lock:
        _default_client = client


def reset_default_client() -> None:
    """Drop the default client, closing it."""
    global _default_client
    with _lock:
        if _default_client is not None:
            _default_client.close()
        _default_client = None
