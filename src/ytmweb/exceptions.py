"""Custom exceptions for ytmweb.

All exceptions include an HTTP status_code attribute for easy
integration with web frameworks.

Schema misses are never errors: a field the parsers cannot find is
returned as None. Exceptions are reserved for failed requests, missing
authentication, OAuth terminal states and caller-side precondition
violations.
"""


class YTMusicError(Exception):
    """Base exception for ytmweb.

    Attributes:
        status_code: HTTP status code for API error responses.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class APIError(YTMusicError):
    """YouTube Music API request failed.

    Raised for any non-success HTTP response and for network failures.
    The upstream status and body are kept verbatim.

    Attributes:
        response_status: Upstream HTTP status, or None for network failures.
        body: Upstream response body.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)

    def __init__(
        self, message: str, response_status: int | None = None, body: str = ""
    ) -> None:
        super().__init__(message)
        self.response_status = response_status
        self.body = body


class AuthenticationRequiredError(YTMusicError):
    """Operation requires an authenticated client.

    Raised when an authenticated operation is called without a token.
    """

    status_code: int = 401  # Unauthorized


class MissingIdentifierError(YTMusicError):
    """A record lacks the identifier needed to build a derived record.

    Raised e.g. when fetching the artist of a song without a channelId.

    Attributes:
        field: Name of the missing identifier field.
        source: Name of the record type it was missing from.
    """

    status_code: int = 400  # Bad Request

    def __init__(self, field: str, source: str, detail: str = "") -> None:
        message = f"{source} does not have a {field}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.field = field
        self.source = source


class CredentialsFileError(YTMusicError):
    """OAuth credential file is missing, malformed or incomplete.

    Attributes:
        field: Offending field name, when a single field is at fault.
    """

    status_code: int = 400  # Bad Request

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class OAuthError(YTMusicError):
    """Base exception for OAuth device-flow and refresh failures."""

    status_code: int = 401  # Unauthorized


class DeviceCodeRequestError(OAuthError):
    """The device-code endpoint rejected the request."""

    status_code: int = 502  # Bad Gateway (upstream failure)


class UserDeniedAccessError(OAuthError):
    """The user declined the authorization request."""

    status_code: int = 403  # Forbidden


class AuthorizationExpiredError(OAuthError):
    """The device code expired before the user approved it."""


class AuthorizationTimedOutError(OAuthError):
    """No terminal answer arrived before the device-code deadline."""

    status_code: int = 408  # Request Timeout


class OAuthProviderError(OAuthError):
    """The token endpoint answered with an unexpected error code.

    Attributes:
        code: Error code returned by the provider.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)

    def __init__(self, code: str) -> None:
        super().__init__(f"OAuth error: {code}")
        self.code = code


class TokenRefreshError(OAuthError, AuthenticationRequiredError):
    """Refreshing the access token failed.

    Callers usually respond by running the device flow again.
    """
