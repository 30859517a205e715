"""OAuth records."""

from datetime import UTC, datetime, timedelta

from pydantic import BaseModel, ConfigDict, field_validator

__all__ = [
    "EXPIRY_SKEW",
    "DeviceCode",
    "OAuthCredentials",
    "OAuthToken",
]

# A token this close to its expiry is already treated as expired.
EXPIRY_SKEW = timedelta(seconds=60)


class OAuthCredentials(BaseModel):
    """OAuth client credentials issued for the application."""

    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: str

    def __repr__(self) -> str:
        return f"OAuthCredentials(client_id={self.client_id!r})"


class OAuthToken(BaseModel):
    """Access/refresh token pair.

    Tokens are immutable values. A refresh produces a new token via
    :meth:`refreshed`, which the owning session swaps in as a whole.
    """

    model_config = ConfigDict(frozen=True)

    access_token: str = ""
    refresh_token: str = ""
    token_type: str = "Bearer"
    expires_at: datetime = datetime(1970, 1, 1, tzinfo=UTC)
    scope: str = ""

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the token expires within the skew buffer."""
        now = now or datetime.now(UTC)
        return now + EXPIRY_SKEW >= self.expires_at

    def refreshed(
        self,
        access_token: str,
        expires_at: datetime,
        refresh_token: str | None = None,
    ) -> "OAuthToken":
        """Return a copy carrying a new access token (and rotated refresh token)."""
        update: dict[str, object] = {
            "access_token": access_token,
            "expires_at": expires_at,
        }
        if refresh_token:
            update["refresh_token"] = refresh_token
        return self.model_copy(update=update)

    @field_validator("expires_at")
    @classmethod
    def aware_expiry(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        return v if v.tzinfo else v.replace(tzinfo=UTC)

    def __repr__(self) -> str:
        return (
            f"OAuthToken(expires_at={self.expires_at.isoformat()}, "
            f"expired={self.is_expired()})"
        )


class DeviceCode(BaseModel):
    """Device-code grant issued at the start of the device flow.

    ``verification_url`` and ``user_code`` are what the user needs to
    approve the request on another device.
    """

    model_config = ConfigDict(frozen=True)

    device_code: str
    user_code: str
    verification_url: str = "https://www.google.com/device"
    interval: int = 5
    expires_in: int = 1800
