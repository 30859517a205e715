"""Token ownership for an authenticated client."""

import logging
import threading
from collections.abc import Callable
from datetime import UTC, datetime

from ytmweb.auth.oauth import OAuthClient
from ytmweb.exceptions import AuthenticationRequiredError
from ytmweb.models.auth import OAuthToken

logger = logging.getLogger(__name__)


class TokenManager:
    """Holds the current token and refreshes it on demand.

    The token is the only shared mutable state of a client. It is replaced
    as a whole under a lock, so concurrent callers see either the old or
    the new token. A caller arriving while another refreshes waits and
    then uses the fresh token without refreshing again.
    """

    def __init__(
        self,
        oauth: OAuthClient,
        token: OAuthToken | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._oauth = oauth
        self._token = token
        self._now = now or (lambda: datetime.now(UTC))
        self._lock = threading.Lock()

    @property
    def token(self) -> OAuthToken | None:
        return self._token

    @property
    def has_token(self) -> bool:
        return self._token is not None

    def replace(self, token: OAuthToken | None) -> None:
        """Swap in a new token (e.g. after a device flow)."""
        with self._lock:
            self._token = token

    def ensure_valid(self) -> OAuthToken:
        """Return a token that is not expired, refreshing at most once.

        Raises:
            AuthenticationRequiredError: If there is no token.
            TokenRefreshError: If the token expired and refreshing failed.
        """
        with self._lock:
            token = self._token
            if token is None:
                raise AuthenticationRequiredError(
                    "Authentication required. Run the device flow first."
                )
            if token.is_expired(self._now()):
                logger.debug("Access token expired at %s", token.expires_at)
                token = self._oauth.refresh(token)
                self._token = token
            return token

    def refresh(self) -> OAuthToken:
        """Refresh the token unconditionally."""
        with self._lock:
            if self._token is None:
                raise AuthenticationRequiredError(
                    "Authentication required. Run the device flow first."
                )
            self._token = self._oauth.refresh(self._token)
            return self._token
