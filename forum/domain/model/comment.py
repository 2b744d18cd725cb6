"""Comment entity.

Comments are threaded replies with unlimited depth. A comment's parent is
either a post or another comment; the tagged ``parent`` says which.
"""

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import (
    CommentId,
    ParentRef,
    ParentType,
    PostId,
    UserId,
    UtcDateTime,
    utc_now,
)


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent: PostParent for root comments, CommentParent for nested replies
    - post_id: the post at the root of the thread, copied from the parent
    - replies: number of direct children
    """

    id: CommentId
    post_id: PostId
    parent: ParentRef
    comment: str = Field(min_length=1, max_length=10000)
    uid: UserId
    replies: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
    created_at: UtcDateTime = Field(default_factory=utc_now)

    @property
    def is_root(self) -> bool:
        """True if this comment replies directly to a post."""
        return self.parent.parent_type == ParentType.POST
