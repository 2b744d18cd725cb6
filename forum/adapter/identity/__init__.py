"""Identity provider adapters."""

from .jwt import JWTTokenVerifier
from .mock import MockTokenVerifier

__all__ = ["JWTTokenVerifier", "MockTokenVerifier"]
