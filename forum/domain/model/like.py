"""Like entity.

Each user can like a given post or comment at most once.
"""

from uuid import UUID

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import LikeId, LikeTargetType, UserId, UtcDateTime, utc_now


class Like(DomainModel):
    """Like entity.

    Business rules:
    - One like per (uid, target_type, target_id), enforced by a unique constraint
    - Polymorphic reference to the target (post or comment)
    """

    id: LikeId
    uid: UserId
    target_type: LikeTargetType
    target_id: UUID  # PostId or CommentId
    created_at: UtcDateTime = Field(default_factory=utc_now)
