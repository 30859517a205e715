"""OAuth credential file reading and writing.

Two shapes are accepted on load:

- the saved shape written by :func:`save_credentials`, with the client
  credentials and a token side by side::

    {"client_id": ..., "client_secret": ..., "access_token": ...,
     "refresh_token": ..., "token_type": ..., "expires_at": ..., "scope": ...}

- the ``installed`` shape downloaded from the Google Cloud console, which
  only carries the credentials::

    {"installed": {"client_id": ..., "client_secret": ..., ...}}

``expires_at`` is written as an ISO 8601 timestamp with offset.
"""

import json
import logging
import os
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from ytmweb.endpoints import OAUTH_SCOPE
from ytmweb.exceptions import CredentialsFileError
from ytmweb.models.auth import OAuthCredentials, OAuthToken
from ytmweb.models.enums import CredentialState

logger = logging.getLogger(__name__)

FILE_MODE = 0o600


class _SavedFile(BaseModel):
    client_id: str
    client_secret: str
    access_token: str
    refresh_token: str = ""
    token_type: str = "Bearer"
    expires_at: datetime
    scope: str = OAUTH_SCOPE


class _InstalledFile(BaseModel):
    installed: OAuthCredentials


def _first_error_field(e: ValidationError) -> str:
    errors = e.errors()
    if not errors:
        return "unknown"
    return ".".join(str(part) for part in errors[0]["loc"]) or "unknown"


def parse_credentials(
    data: Any, source: str = "credentials"
) -> tuple[OAuthCredentials, OAuthToken | None]:
    """Parse decoded credential JSON.

    Returns:
        The client credentials, and the token when the data carries one.

    Raises:
        CredentialsFileError: If a required field is missing or malformed.
    """
    if not isinstance(data, dict):
        raise CredentialsFileError(f"{source}: expected a JSON object")

    try:
        if "installed" in data:
            installed = _InstalledFile.model_validate(data)
            return installed.installed, None
        saved = _SavedFile.model_validate(data)
    except ValidationError as e:
        field = _first_error_field(e)
        raise CredentialsFileError(
            f"{source}: missing or invalid field '{field}'", field=field
        ) from e

    credentials = OAuthCredentials(
        client_id=saved.client_id, client_secret=saved.client_secret
    )
    token = OAuthToken(
        access_token=saved.access_token,
        refresh_token=saved.refresh_token,
        token_type=saved.token_type,
        expires_at=saved.expires_at,
        scope=saved.scope,
    )
    return credentials, token


def load_credentials(path: Path) -> tuple[OAuthCredentials, OAuthToken | None]:
    """Load a credential file.

    Raises:
        CredentialsFileError: If the file cannot be read, is not JSON, or
            lacks a required field.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CredentialsFileError(f"Cannot read {path}: {e}") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CredentialsFileError(f"{path}: invalid JSON: {e}") from e

    credentials, token = parse_credentials(data, source=str(path))
    logger.debug(
        "Loaded credentials from %s (%s)", path, "with token" if token else "no token"
    )
    return credentials, token


def dump_credentials(
    credentials: OAuthCredentials, token: OAuthToken
) -> dict[str, str]:
    """Serialize credentials and token to the saved shape."""
    return {
        "client_id": credentials.client_id,
        "client_secret": credentials.client_secret,
        "access_token": token.access_token,
        "refresh_token": token.refresh_token,
        "token_type": token.token_type,
        "expires_at": token.expires_at.astimezone(UTC).isoformat(),
        "scope": token.scope,
    }


def save_credentials(
    path: Path, credentials: OAuthCredentials, token: OAuthToken
) -> None:
    """Write credentials and token, readable by the owner only."""
    path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(dump_credentials(credentials, token), indent=2) + "\n"

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(content)
    os.chmod(path, FILE_MODE)
    logger.info("Saved credentials to %s", path)


def inspect_credentials(
    path: Path | None, now: datetime | None = None
) -> CredentialState:
    """Classify a credential file without touching the network.

    Raises:
        CredentialsFileError: If the file exists but is malformed.
    """
    if path is None or not path.is_file():
        return CredentialState.NO_FILE
    _, token = load_credentials(path)
    if token is None:
        return CredentialState.CREDENTIALS_ONLY
    if token.is_expired(now):
        return CredentialState.EXPIRED_TOKEN
    return CredentialState.VALID_TOKEN
