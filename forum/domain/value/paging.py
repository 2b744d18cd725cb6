"""Page requests and paged results.

Pages are 1-indexed, fixed-size windows over a totally ordered result set.
"""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from forum.domain.value.common import ValueObject

T = TypeVar("T")


def coerce_page(raw: str | int | None) -> int:
    """Parse a page number permissively.

    Absent, non-numeric and non-positive values all mean the first page.
    """
    if raw is None:
        return 1
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


class PageRequest(ValueObject):
    """A 1-indexed page of a given size."""

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


class Page(BaseModel, Generic[T]):
    """One page of rows plus the totals needed to page through the rest."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    rows: list[T]
    current_page: int
    total_count: int
    total_pages: int

    @classmethod
    def build(cls, rows: list[T], request: PageRequest, total_count: int) -> "Page[T]":
        """Assemble a page, deriving ``total_pages`` from the count."""
        return cls(
            rows=rows,
            current_page=request.page,
            total_count=total_count,
            total_pages=math.ceil(total_count / request.page_size),
        )
