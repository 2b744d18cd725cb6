"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from typing import Annotated, Literal, Union
from uuid import UUID

from pydantic import Field, TypeAdapter

from forum.domain.value.common import ValueObject
from forum.domain.value.identifiers import CommentId, PostId, UserId


class ParentType(str, Enum):
    """Kind tag of a comment's parent.

    The stored values match the ``parent_type`` column.
    """

    POST = "ParentPost"
    COMMENT = "ParentComment"


class OwnerType(str, Enum):
    """Kind of entity that can own a group."""

    USER = "User"


class LikeTargetType(str, Enum):
    """Type of entity that can be liked."""

    POST = "post"
    COMMENT = "comment"


class PostParent(ValueObject):
    """A comment attached directly to a post (a root comment)."""

    parent_type: Literal[ParentType.POST] = ParentType.POST
    id: PostId


class CommentParent(ValueObject):
    """A comment nested under another comment."""

    parent_type: Literal[ParentType.COMMENT] = ParentType.COMMENT
    id: CommentId


ParentRef = Annotated[
    Union[PostParent, CommentParent], Field(discriminator="parent_type")
]

_parent_adapter: TypeAdapter[PostParent | CommentParent] = TypeAdapter(ParentRef)


def parent_from_columns(parent_id: UUID | str, parent_type: str) -> PostParent | CommentParent:
    """Rebuild the tagged parent from its two storage columns.

    Raises:
        pydantic.ValidationError: If ``parent_type`` is not a known tag
    """
    return _parent_adapter.validate_python(
        {"parent_type": parent_type, "id": parent_id}
    )


class OwnerRef(ValueObject):
    """Typed reference to the owner of a group."""

    owner_id: UserId
    owner_type: OwnerType = OwnerType.USER

    @classmethod
    def user(cls, uid: UserId) -> "OwnerRef":
        """Owner reference for a user."""
        return cls(owner_id=uid, owner_type=OwnerType.USER)
