"""UTC timestamps.

Every ``created_at`` the forum stores or serves is timezone-aware UTC, so
values stamped in-process and values read back from a ``timestamptz``
column order against each other.
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator


def as_utc(value: datetime) -> datetime:
    """Return ``value`` in UTC; a naive value is taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]
