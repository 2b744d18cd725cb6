"""Bearer token helpers for routes."""

import logfire

from forum.adapter.error import UpstreamAuthError
from forum.domain.service import IdentityService
from forum.domain.value import UserId
from forum.interface.error import AuthenticationRequiredError


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_user(
    identity_service: IdentityService, authorization: str | None
) -> UserId:
    """Resolve the caller or fail.

    Raises:
        AuthenticationRequiredError: If no bearer token was sent
        UpstreamAuthError: If the token was rejected
    """
    token = bearer_token(authorization)
    if not token:
        raise AuthenticationRequiredError("Authentication required")
    return await identity_service.authenticate(token)


async def optional_user(
    identity_service: IdentityService, authorization: str | None
) -> UserId | None:
    """Resolve the caller on read endpoints.

    A missing or rejected token reads as anonymous.
    """
    token = bearer_token(authorization)
    if not token:
        return None
    try:
        return await identity_service.authenticate(token)
    except UpstreamAuthError:
        logfire.debug("Ignoring rejected token on read")
        return None
