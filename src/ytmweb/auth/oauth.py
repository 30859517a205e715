"""OAuth 2.0 device-authorization flow.

:class:`OAuthClient` talks to the two provider endpoints (device code and
token). :class:`DeviceFlow` drives one authorization attempt from device
code to access token, sleeping between polls as the provider dictates.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import httpx

from ytmweb.endpoints import (
    OAUTH_CODE_URL,
    OAUTH_GRANT_TYPE_DEVICE,
    OAUTH_GRANT_TYPE_REFRESH,
    OAUTH_SCOPE,
    OAUTH_TOKEN_URL,
    OAUTH_USER_AGENT,
)
from ytmweb.exceptions import (
    AuthorizationExpiredError,
    AuthorizationTimedOutError,
    DeviceCodeRequestError,
    OAuthError,
    OAuthProviderError,
    TokenRefreshError,
    UserDeniedAccessError,
)
from ytmweb.models.auth import DeviceCode, OAuthCredentials, OAuthToken
from ytmweb.models.enums import FlowState

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_LIFETIME = 3600

# Token endpoint error codes
PENDING = "authorization_pending"
SLOW_DOWN = "slow_down"
ACCESS_DENIED = "access_denied"
EXPIRED_TOKEN = "expired_token"


@dataclass(frozen=True)
class TokenPoll:
    """Outcome of one device-code exchange.

    Exactly one of ``token`` and ``error`` is set.
    """

    token: OAuthToken | None = None
    error: str | None = None


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


class OAuthClient:
    """Client for the device-code and token endpoints.

    Requests are form-encoded and sent with the TV-client user agent the
    provider expects for device-flow credentials.
    """

    def __init__(
        self,
        credentials: OAuthCredentials,
        http: httpx.Client | None = None,
        timeout: float = 30.0,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            credentials: OAuth client id and secret.
            http: Optional httpx client. Creates one if not provided.
            timeout: Request timeout in seconds for a created client.
            now: Clock returning an aware datetime, for token expiry.
        """
        self.credentials = credentials
        self._http = http or httpx.Client(timeout=timeout)
        self._owns_http = http is None
        self._now = now or (lambda: datetime.now(UTC))

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "OAuthClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _post(self, url: str, data: dict[str, str]) -> httpx.Response:
        return self._http.post(
            url, data=data, headers={"User-Agent": OAUTH_USER_AGENT}
        )

    def request_device_code(self) -> DeviceCode:
        """Request a device code and user code.

        Raises:
            DeviceCodeRequestError: If the endpoint does not return a code.
        """
        logger.debug("Requesting device code")
        try:
            response = self._post(
                OAUTH_CODE_URL,
                {"client_id": self.credentials.client_id, "scope": OAUTH_SCOPE},
            )
        except httpx.HTTPError as e:
            raise DeviceCodeRequestError(f"Device code request failed: {e}") from e

        data = _json_or_none(response)
        if response.status_code != 200 or not isinstance(data, dict):
            raise DeviceCodeRequestError(
                f"Device code request failed with status {response.status_code}: "
                f"{response.text}"
            )
        try:
            code = DeviceCode.model_validate(
                {k: v for k, v in data.items() if v is not None}
            )
        except ValueError as e:
            raise DeviceCodeRequestError(f"Invalid device code response: {e}") from e

        logger.info("Device code issued, user code %s", code.user_code)
        return code

    def exchange_device_code(self, device_code: str) -> TokenPoll:
        """Try once to exchange a device code for a token.

        Returns:
            The token when the user has approved, otherwise the provider's
            error code (``authorization_pending``, ``slow_down``, ...).

        Raises:
            OAuthProviderError: If the response is neither a token nor an
                error code.
        """
        try:
            response = self._post(
                OAUTH_TOKEN_URL,
                {
                    "client_id": self.credentials.client_id,
                    "client_secret": self.credentials.client_secret,
                    "code": device_code,
                    "grant_type": OAUTH_GRANT_TYPE_DEVICE,
                },
            )
        except httpx.HTTPError as e:
            raise OAuthProviderError(f"network: {e}") from e

        data = _json_or_none(response)
        if isinstance(data, dict):
            if response.status_code == 200 and data.get("access_token"):
                return TokenPoll(token=self._token_from(data))
            if data.get("error"):
                return TokenPoll(error=str(data["error"]))
        raise OAuthProviderError(f"http_{response.status_code}")

    def refresh(self, token: OAuthToken) -> OAuthToken:
        """Refresh an access token.

        Returns:
            A new token. The refresh token is kept unless the provider
            rotated it.

        Raises:
            TokenRefreshError: If there is no refresh token or the provider
                rejects the refresh.
        """
        if not token.refresh_token:
            raise TokenRefreshError("No refresh token available")

        logger.debug("Refreshing access token")
        try:
            response = self._post(
                OAUTH_TOKEN_URL,
                {
                    "client_id": self.credentials.client_id,
                    "client_secret": self.credentials.client_secret,
                    "refresh_token": token.refresh_token,
                    "grant_type": OAUTH_GRANT_TYPE_REFRESH,
                },
            )
        except httpx.HTTPError as e:
            raise TokenRefreshError(f"Token refresh failed: {e}") from e

        data = _json_or_none(response)
        if (
            response.status_code != 200
            or not isinstance(data, dict)
            or not data.get("access_token")
        ):
            error = data.get("error") if isinstance(data, dict) else None
            raise TokenRefreshError(
                f"Token refresh failed with status {response.status_code}"
                + (f": {error}" if error else "")
            )

        refreshed = token.refreshed(
            access_token=data["access_token"],
            expires_at=self._expires_at(data),
            refresh_token=data.get("refresh_token"),
        )
        logger.info("Access token refreshed")
        return refreshed

    def _expires_at(self, data: dict[str, Any]) -> datetime:
        lifetime = data.get("expires_in") or DEFAULT_TOKEN_LIFETIME
        return self._now() + timedelta(seconds=int(lifetime))

    def _token_from(self, data: dict[str, Any]) -> OAuthToken:
        return OAuthToken(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token") or "",
            token_type=data.get("token_type") or "Bearer",
            expires_at=self._expires_at(data),
            scope=data.get("scope") or OAUTH_SCOPE,
        )


class DeviceFlow:
    """One run of the device-authorization flow.

    The flow blocks the calling thread while polling. Each ``slow_down``
    answer adds one second to the poll interval for the rest of the run.
    Every other error code ends the run.

    Example:
        >>> flow = DeviceFlow(OAuthClient(credentials), on_code=print_code)
        >>> token = flow.run()
    """

    def __init__(
        self,
        oauth: OAuthClient,
        on_code: Callable[[DeviceCode], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the flow.

        Args:
            oauth: Client for the provider endpoints.
            on_code: Called with the device code once it is issued, to show
                the verification URL and user code to the user.
            sleep: Blocking sleep, in seconds.
            clock: Monotonic clock, in seconds, for the poll deadline.
        """
        self._oauth = oauth
        self._on_code = on_code
        self._sleep = sleep
        self._clock = clock
        self.state = FlowState.AWAITING_DEVICE_CODE
        self.interval = 0
        self.device_code: DeviceCode | None = None
        self._deadline = 0.0

    def start(self) -> DeviceCode:
        """Request the device code and start the approval deadline."""
        try:
            code = self._oauth.request_device_code()
        except OAuthError:
            self.state = FlowState.FAILED
            raise
        self.device_code = code
        self.interval = code.interval
        self._deadline = self._clock() + code.expires_in
        self.state = FlowState.AWAITING_APPROVAL
        if self._on_code is not None:
            self._on_code(code)
        return code

    def poll(self) -> OAuthToken:
        """Poll the token endpoint until the user answers.

        Raises:
            RuntimeError: If :meth:`start` has not been called.
            UserDeniedAccessError: If the user declined.
            AuthorizationExpiredError: If the device code expired.
            AuthorizationTimedOutError: If the deadline passed first.
            OAuthProviderError: For any other error code.
        """
        if self.device_code is None:
            raise RuntimeError("Device flow has not been started")

        try:
            token = self._poll_until_answered(self.device_code)
        except OAuthError:
            self.state = FlowState.FAILED
            raise
        self.state = FlowState.AUTHORIZED
        logger.info("Device authorized")
        return token

    def _poll_until_answered(self, code: DeviceCode) -> OAuthToken:
        while True:
            if self._clock() >= self._deadline:
                raise AuthorizationTimedOutError(
                    f"No approval within {code.expires_in} seconds"
                )
            self._sleep(self.interval)

            result = self._oauth.exchange_device_code(code.device_code)
            if result.token is not None:
                return result.token

            error = result.error
            if error == PENDING:
                continue
            if error == SLOW_DOWN:
                self.interval += 1
                logger.debug("Slowing down, polling every %d seconds", self.interval)
                continue
            if error == ACCESS_DENIED:
                raise UserDeniedAccessError("The user denied access")
            if error == EXPIRED_TOKEN:
                raise AuthorizationExpiredError("The device code has expired")
            raise OAuthProviderError(str(error))

    def run(self) -> OAuthToken:
        """Run the whole flow and return the authorized token."""
        self.start()
        return self.poll()
