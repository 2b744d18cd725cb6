"""Base model for all forum entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for forum entities.

    Entities are frozen; changes produce a new instance via ``evolve``.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a re-validated copy with the given fields replaced."""
        return self.model_validate({**self.model_dump(), **changes})
