"""Identity domain service.

Users are identified by the external identity provider; this service only
turns a bearer token into the caller's user ID.
"""

import logfire

from forum.domain.value import UserId

from .base import Service


class TokenVerifier:
    """Verifies identity tokens issued by the external identity provider."""

    async def verify(self, token: str) -> UserId:
        """Verify a token and return the user it identifies.

        Args:
            token: Bearer token presented by the client

        Returns:
            The authenticated user's ID

        Raises:
            UpstreamAuthError: If the token is invalid or expired
        """
        raise NotImplementedError


class IdentityService(Service):
    """Domain service for authenticating requests."""

    def __init__(self, token_verifier: TokenVerifier) -> None:
        """Initialize identity service.

        Args:
            token_verifier: Token verifier implementation
        """
        self.token_verifier = token_verifier

    async def authenticate(self, token: str) -> UserId:
        """Resolve the user behind a bearer token.

        Raises:
            UpstreamAuthError: If the token is rejected
        """
        with logfire.span("identity_service.authenticate"):
            uid = await self.token_verifier.verify(token)
            logfire.debug("Request authenticated", uid=uid)
            return uid
