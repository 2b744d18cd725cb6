"""Strongly typed identifiers for forum entities.

User ids come from the external identity provider and are opaque strings;
everything the forum creates itself is keyed by UUID.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", str)
GroupId = NewType("GroupId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)
