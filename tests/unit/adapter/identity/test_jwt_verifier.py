"""Unit tests for the token verifiers."""

from datetime import timedelta

import jwt
import pytest

from forum.adapter.error import UpstreamAuthError
from forum.adapter.identity import JWTTokenVerifier, MockTokenVerifier
from forum.config import AuthSettings
from forum.util.jwt import JWTError, create_token, verify_token

SECRET = "test-secret-that-is-long-enough-for-hs256"


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret=SECRET)


class TestVerifyToken:
    """Tests for verify_token."""

    def test_round_trips_uid(self, auth_settings):
        # Arrange
        token = create_token("alice", auth_settings)

        # Act
        payload = verify_token(token, auth_settings)

        # Assert
        assert payload.uid == "alice"
        assert payload.exp is not None

    def test_expired_token_is_rejected(self, auth_settings):
        token = create_token("alice", auth_settings, expires_in=timedelta(seconds=-10))

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, auth_settings)

    def test_wrong_secret_is_rejected(self, auth_settings):
        other = AuthSettings(jwt_secret="another-secret-that-is-long-enough-too")
        token = create_token("alice", other)

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, auth_settings)

    def test_audience_is_checked_when_configured(self):
        # Arrange
        issuer = AuthSettings(jwt_secret=SECRET, jwt_audience="mobile")
        forum = AuthSettings(jwt_secret=SECRET, jwt_audience="forum")
        token = create_token("alice", issuer)

        # Act & Assert
        with pytest.raises(JWTError):
            verify_token(token, forum)

    def test_token_without_uid_is_rejected(self, auth_settings):
        token = jwt.encode({"name": "Alice"}, SECRET, algorithm="HS256")

        with pytest.raises(JWTError, match="sub"):
            verify_token(token, auth_settings)

    def test_custom_uid_claim(self):
        settings = AuthSettings(jwt_secret=SECRET, uid_claim="student_id")
        token = create_token("s1234", settings)

        assert verify_token(token, settings).uid == "s1234"


class TestJWTTokenVerifier:
    """Tests for JWTTokenVerifier."""

    @pytest.mark.asyncio
    async def test_valid_token_yields_user_id(self, auth_settings):
        verifier = JWTTokenVerifier(auth_settings)

        uid = await verifier.verify(create_token("alice", auth_settings))

        assert uid == "alice"

    @pytest.mark.asyncio
    async def test_invalid_token_raises_upstream_auth_error(self, auth_settings):
        verifier = JWTTokenVerifier(auth_settings)

        with pytest.raises(UpstreamAuthError):
            await verifier.verify("not-a-jwt")


class TestMockTokenVerifier:
    """Tests for MockTokenVerifier."""

    @pytest.mark.asyncio
    async def test_token_is_the_user_id(self):
        assert await MockTokenVerifier().verify("bob") == "bob"

    @pytest.mark.asyncio
    async def test_rejected_token(self):
        with pytest.raises(UpstreamAuthError):
            await MockTokenVerifier().verify(MockTokenVerifier.REJECTED_TOKEN)
