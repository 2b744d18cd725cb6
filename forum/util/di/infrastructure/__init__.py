"""Mockable infrastructure components.

Each component has a base provider that names it and a production
subclass; test doubles subclass the same base (see ``tests/di``).
"""

from .identity import IdentityProvider, ProdIdentityProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "IdentityProvider",
    "PersistenceProvider",
    "ProdIdentityProvider",
    "ProdPersistenceProvider",
]
