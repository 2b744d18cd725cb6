"""Token verifier backed by PyJWT."""

import logfire

from forum.adapter.error import UpstreamAuthError
from forum.config import AuthSettings
from forum.domain.service import TokenVerifier
from forum.domain.value import UserId
from forum.util.jwt import JWTError, verify_token


class JWTTokenVerifier(TokenVerifier):
    """Verifies identity provider tokens signed with the configured key."""

    def __init__(self, settings: AuthSettings) -> None:
        self.settings = settings

    async def verify(self, token: str) -> UserId:
        """Verify a token and return its user ID.

        Raises:
            UpstreamAuthError: If the token is invalid or expired
        """
        try:
            payload = verify_token(token, self.settings)
        except JWTError as e:
            logfire.warn("Token rejected", reason=str(e))
            raise UpstreamAuthError(str(e)) from e
        return UserId(payload.uid)
