"""Group entity.

Groups are the topic boards posts are filed under.
"""

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import GroupId, OwnerRef, UtcDateTime, utc_now


class Group(DomainModel):
    """Group entity.

    ``post_count`` is denormalized and only ever changed through the
    atomic counter updates that accompany post creation and deletion.
    """

    id: GroupId
    group_name: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=2000)
    post_count: int = Field(default=0, ge=0)
    owner: OwnerRef
    created_at: UtcDateTime = Field(default_factory=utc_now)
