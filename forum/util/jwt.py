"""JWT token utilities.

Tokens are issued by the external identity provider. The service verifies
them and reads the user ID claim; ``create_token`` exists for development
tooling and tests that need a token the verifier will accept.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from forum.config import AuthSettings


class TokenPayload(BaseModel):
    """Verified identity token claims the forum relies on."""

    uid: str
    exp: datetime | None = None


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(uid: str, settings: AuthSettings, expires_in: timedelta = timedelta(hours=1)) -> str:
    """Create a signed token identifying ``uid``.

    Args:
        uid: User ID to place in the configured claim
        settings: Authentication settings
        expires_in: Lifetime of the token

    Returns:
        Encoded JWT token
    """
    payload: dict[str, object] = {
        settings.uid_claim: uid,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    if settings.jwt_audience:
        payload["aud"] = settings.jwt_audience

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If the token is invalid, expired or lacks a user ID
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"verify_aud": settings.jwt_audience is not None},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    uid = payload.get(settings.uid_claim) or payload.get("uid")
    if not uid:
        raise JWTError(f"Token has no {settings.uid_claim} claim")

    exp = payload.get("exp")
    return TokenPayload(
        uid=str(uid),
        exp=datetime.fromtimestamp(exp, timezone.utc) if exp else None,
    )
