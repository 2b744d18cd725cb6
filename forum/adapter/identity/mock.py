"""Token verifier for tests and local development."""

import logfire

from forum.adapter.error import UpstreamAuthError
from forum.domain.service import TokenVerifier
from forum.domain.value import UserId


class MockTokenVerifier(TokenVerifier):
    """Mock token verifier.

    The token is taken to be the user ID itself, so ``Bearer alice``
    authenticates as ``alice``. The token ``invalid`` is always rejected.
    """

    REJECTED_TOKEN = "invalid"

    async def verify(self, token: str) -> UserId:
        if token == self.REJECTED_TOKEN:
            logfire.warn("Mock token rejected")
            raise UpstreamAuthError("Invalid token")
        return UserId(token)
