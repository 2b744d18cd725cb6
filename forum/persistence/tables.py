"""SQLAlchemy table definitions for the forum.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# GROUPS TABLE
# ============================================================================
groups_table = Table(
    "groups",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("group_name", String(100), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("post_count", Integer, nullable=False, server_default="0"),
    Column("owner_id", String(128), nullable=False),
    Column(
        "owner_type",
        Enum("User", name="owner_type", create_type=False),
        nullable=False,
        server_default="User",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("post_count >= 0", name="group_post_count_non_negative"),
)

Index("idx_groups_group_name", groups_table.c.group_name, groups_table.c.id)
Index("idx_groups_owner", groups_table.c.owner_type, groups_table.c.owner_id)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "group_id",
        UUID(as_uuid=True),
        ForeignKey("groups.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(300), nullable=False),
    Column("details", Text, nullable=False, server_default=""),
    Column("uid", String(128), nullable=False),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("replies", Integer, nullable=False, server_default="0"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes >= 0", name="post_likes_non_negative"),
    CheckConstraint("replies >= 0", name="post_replies_non_negative"),
)

Index("idx_posts_created_at_id", posts_table.c.created_at.desc(), posts_table.c.id)
Index("idx_posts_group_id", posts_table.c.group_id)
Index("idx_posts_uid", posts_table.c.uid)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# parent_id indexes into posts or comments depending on parent_type, so it
# carries no foreign key. post_id (the thread root) does, and cascades.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("parent_id", UUID(as_uuid=True), nullable=False),
    Column(
        "parent_type",
        Enum("ParentPost", "ParentComment", name="parent_type", create_type=False),
        nullable=False,
    ),
    Column("comment", Text, nullable=False),
    Column("uid", String(128), nullable=False),
    Column("replies", Integer, nullable=False, server_default="0"),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes >= 0", name="comment_likes_non_negative"),
    CheckConstraint("replies >= 0", name="comment_replies_non_negative"),
    CheckConstraint(
        "parent_type <> 'ParentPost' OR parent_id = post_id",
        name="root_comment_parent_is_thread_post",
    ),
)

Index(
    "idx_comments_parent",
    comments_table.c.parent_type,
    comments_table.c.parent_id,
    comments_table.c.created_at.desc(),
)
Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_uid", comments_table.c.uid)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("uid", String(128), nullable=False),
    Column(
        "target_type",
        Enum("post", "comment", name="like_target_type", create_type=False),
        nullable=False,
    ),
    Column("target_id", UUID(as_uuid=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("uid", "target_type", "target_id", name="unique_like"),
)

Index("idx_likes_target", likes_table.c.target_type, likes_table.c.target_id)
