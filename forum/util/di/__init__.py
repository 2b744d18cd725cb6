"""Dependency injection wiring.

``PROVIDERS`` lists every provider the app needs, in the order they are
registered. Component bases are resolved to an implementation by
``get_provider``.
"""

from typing import Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase, ProviderSelectionError
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import (
    IdentityProvider,
    PersistenceProvider,
    ProdIdentityProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    IdentityProvider,
    PersistenceProvider,
]


def is_component(base: Type[ProviderBase]) -> bool:
    """Whether ``base`` names a swappable component."""
    return base.__mock_component__ is not None


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider from ``PROVIDERS`` to the class to instantiate.

    Plain providers resolve to themselves. For a component base, the
    subclass whose ``__is_mock__`` equals ``use_mock`` is chosen; mock
    subclasses only exist once ``tests.di`` has been imported.

    Raises:
        ProviderSelectionError: If the component has no such implementation
    """
    if not is_component(base):
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    flavour = "mock" if use_mock else "production"
    raise ProviderSelectionError(
        f"Component {base.__mock_component__!r} has no {flavour} provider"
    )


__all__ = [
    "Component",
    "IdentityProvider",
    "PersistenceProvider",
    "PROVIDERS",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdIdentityProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "ProviderSelectionError",
    "get_provider",
    "is_component",
]
