"""Tests for the exception hierarchy."""

import pytest
from ytmweb.exceptions import (
    APIError,
    AuthenticationRequiredError,
    AuthorizationExpiredError,
    AuthorizationTimedOutError,
    CredentialsFileError,
    DeviceCodeRequestError,
    MissingIdentifierError,
    OAuthError,
    OAuthProviderError,
    TokenRefreshError,
    UserDeniedAccessError,
    YTMusicError,
)


class TestStatusCodes:
    @pytest.mark.parametrize(
        ("exc", "status"),
        [
            (YTMusicError("x"), 500),
            (APIError("x"), 502),
            (AuthenticationRequiredError("x"), 401),
            (MissingIdentifierError("videoId", "Song"), 400),
            (CredentialsFileError("x"), 400),
            (DeviceCodeRequestError("x"), 502),
            (UserDeniedAccessError("x"), 403),
            (AuthorizationExpiredError("x"), 401),
            (AuthorizationTimedOutError("x"), 408),
            (OAuthProviderError("server_error"), 502),
            (TokenRefreshError("x"), 401),
        ],
        ids=lambda v: type(v).__name__ if isinstance(v, Exception) else str(v),
    )
    def test_status_code(self, exc: YTMusicError, status: int) -> None:
        assert exc.status_code == status


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type",
        [
            DeviceCodeRequestError,
            UserDeniedAccessError,
            AuthorizationExpiredError,
            AuthorizationTimedOutError,
            TokenRefreshError,
        ],
    )
    def test_oauth_errors(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, OAuthError)
        assert issubclass(exc_type, YTMusicError)

    def test_refresh_failure_means_authentication_required(self) -> None:
        with pytest.raises(AuthenticationRequiredError):
            raise TokenRefreshError("refresh token revoked")


class TestMessages:
    def test_api_error_keeps_upstream_response(self) -> None:
        exc = APIError("Server returned 500", response_status=500, body="oops")
        assert exc.message == "Server returned 500"
        assert exc.response_status == 500
        assert exc.body == "oops"

    def test_missing_identifier(self) -> None:
        exc = MissingIdentifierError("channelId", "Song")
        assert str(exc) == "Song does not have a channelId"
        assert exc.field == "channelId"

    def test_missing_identifier_detail(self) -> None:
        exc = MissingIdentifierError("browseId", "SearchResult", "not an album")
        assert str(exc) == "SearchResult does not have a browseId (not an album)"

    def test_provider_error_code(self) -> None:
        exc = OAuthProviderError("invalid_client")
        assert exc.code == "invalid_client"
        assert "invalid_client" in exc.message

    def test_credentials_file_field(self) -> None:
        exc = CredentialsFileError("missing client_id", field="client_id")
        assert exc.field == "client_id"
