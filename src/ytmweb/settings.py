"""Environment settings using pydantic-settings."""

from pathlib import Path
from typing import Annotated

from pydantic import BeforeValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_OAUTH_FILE = Path.home() / ".config" / "ytmweb" / "oauth.json"


def _expand_path(v: object) -> object:
    """Expand ``~`` in path settings."""
    if isinstance(v, str) and v:
        return Path(v).expanduser()
    return v


ExpandedPath = Annotated[Path, BeforeValidator(_expand_path)]


class Settings(BaseSettings):
    """Settings read from ``YTMWEB_*`` environment variables.

    ``YTMWEB_OAUTH_FILE`` names the OAuth credential file. It is only
    consulted when a default client is created.
    """

    model_config = SettingsConfigDict(
        env_prefix="YTMWEB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    oauth_file: ExpandedPath | None = Field(
        default=None, description="OAuth credential file"
    )
    language: str = Field(default="en", description="Interface language")
    location: str = Field(default="US", description="Content region")
    auto_authenticate: bool | None = Field(
        default=None,
        description=(
            "Run the device flow when the credential file has no token "
            "(default: when oauth_file is set)"
        ),
    )

    def resolve_oauth_file(self) -> Path | None:
        """Get the credential file to load, if any exists.

        Checks the configured path first, then the default location.
        """
        if self.oauth_file is not None and self.oauth_file.is_file():
            return self.oauth_file
        if DEFAULT_OAUTH_FILE.is_file():
            return DEFAULT_OAUTH_FILE
        return None

    def should_authenticate(self) -> bool:
        """Whether a credentials-only file starts the device flow.

        Unset ``auto_authenticate`` follows ``oauth_file``: naming a file
        explicitly opts in.
        """
        if self.auto_authenticate is not None:
            return self.auto_authenticate
        return self.oauth_file is not None
