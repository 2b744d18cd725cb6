"""Shared base for the forum's value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable; two instances with equal fields are interchangeable.

    Parent references, owner references and page requests are value
    objects. Entities, which carry an identity, live in ``forum.domain.model``.
    """

    model_config = ConfigDict(frozen=True)
