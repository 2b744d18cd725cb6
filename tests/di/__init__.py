"""Test doubles for the mockable DI components.

Importing this package registers the mock providers as subclasses of the
component bases, which is what ``get_provider(..., use_mock=True)`` finds.
"""

from .container import build_test_container, mockable_components
from .identity import MockIdentityProvider
from .persistence import MockPersistenceProvider

__all__ = [
    "MockIdentityProvider",
    "MockPersistenceProvider",
    "build_test_container",
    "mockable_components",
]
