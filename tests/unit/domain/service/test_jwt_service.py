"""Unit tests for JWTService."""

from datetime import timedelta

import pytest

from bookofmemes.config import AuthSettings
from bookofmemes.domain.error import AuthError
from bookofmemes.domain.service import JWTService
from tests.conftest import make_token


@pytest.fixture
def settings() -> AuthSettings:
    return AuthSettings(jwt_secret="unit-test-secret-that-is-long-enough-for-hs256")


@pytest.fixture
def service(settings) -> JWTService:
    return JWTService(settings)


class TestAuthenticate:
    """Tests for JWTService.authenticate()."""

    def test_valid_token(self, service, settings):
        """Should return the token's subject."""
        token = make_token("user-1", settings)

        assert service.authenticate(f"Bearer {token}") == "user-1"

    def test_scheme_is_case_insensitive(self, service, settings):
        """Should accept a lower-case bearer scheme."""
        token = make_token("user-1", settings)

        assert service.authenticate(f"bearer {token}") == "user-1"

    @pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer   ", "Basic abc"])
    def test_missing_or_malformed_header(self, service, header):
        """Should reject a header without a bearer token."""
        with pytest.raises(AuthError) as exc_info:
            service.authenticate(header)
        assert exc_info.value.message == "Missing or invalid authorization header"

    def test_expired_token(self, service, settings):
        """Should reject an expired token."""
        token = make_token("user-1", settings, expires_in=timedelta(minutes=-5))

        with pytest.raises(AuthError) as exc_info:
            service.authenticate(f"Bearer {token}")
        assert exc_info.value.message == "Token has expired"

    def test_wrong_secret(self, service):
        """Should reject a token signed with another secret."""
        other = AuthSettings(jwt_secret="another-secret-that-is-also-long-enough-1234")
        token = make_token("user-1", other)

        with pytest.raises(AuthError) as exc_info:
            service.authenticate(f"Bearer {token}")
        assert exc_info.value.message == "Invalid token"

    def test_wrong_audience(self, service, settings):
        """Should reject a token issued for another audience."""
        token = make_token("user-1", settings, audience="anon")

        with pytest.raises(AuthError):
            service.authenticate(f"Bearer {token}")
