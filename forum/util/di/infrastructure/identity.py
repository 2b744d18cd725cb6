"""Identity component: who is calling."""

from dishka import Scope, provide

from forum.adapter.identity import JWTTokenVerifier
from forum.config import AuthSettings
from forum.domain.service import TokenVerifier
from forum.util.di.base import ProviderBase


class IdentityProvider(ProviderBase):
    """Provides the bearer token verifier."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Verifies tokens signed by the identity provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def provide_token_verifier(self, auth_settings: AuthSettings) -> TokenVerifier:
        return JWTTokenVerifier(auth_settings)
