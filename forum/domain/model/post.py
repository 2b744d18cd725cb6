"""Post entity."""

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import GroupId, PostId, UserId, UtcDateTime, utc_now


class Post(DomainModel):
    """Post entity.

    Belongs to exactly one group. Counters:
    - likes: number of likes on the post
    - replies: number of root comments (direct children only)
    - views: number of times the thread was opened
    """

    id: PostId
    group_id: GroupId
    title: str = Field(min_length=1, max_length=300)
    details: str = Field(default="", max_length=10000)
    uid: UserId
    likes: int = Field(default=0, ge=0)
    replies: int = Field(default=0, ge=0)
    views: int = Field(default=0, ge=0)
    created_at: UtcDateTime = Field(default_factory=utc_now)
