"""initial_schema

Create the schema for the campus forum:
- Groups (owned by a user, searchable by name)
- Posts (belong to a group; like, reply and view counters)
- Comments (threaded with unlimited depth; parent is a post or a comment)
- Likes (one per user and target, polymorphic target)

Revision ID: 3c1f0e9a7b21
Revises:
Create Date: 2024-01-15 10:12:44.318052

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0e9a7b21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE owner_type AS ENUM ('User');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE parent_type AS ENUM ('ParentPost', 'ParentComment');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE like_target_type AS ENUM ('post', 'comment');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # GROUPS table
    # ========================================================================
    op.create_table(
        "groups",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("group_name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), server_default="", nullable=False),
        sa.Column("post_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("owner_id", sa.String(length=128), nullable=False),
        sa.Column(
            "owner_type",
            postgresql.ENUM("User", name="owner_type", create_type=False),
            server_default="User",
            nullable=False,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("post_count >= 0", name="group_post_count_non_negative"),
    )
    op.create_index("idx_groups_group_name", "groups", ["group_name", "id"])
    op.create_index("idx_groups_owner", "groups", ["owner_type", "owner_id"])

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("group_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("details", sa.Text(), server_default="", nullable=False),
        sa.Column("uid", sa.String(length=128), nullable=False),
        sa.Column("likes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("replies", sa.Integer(), server_default="0", nullable=False),
        sa.Column("views", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="CASCADE"),
        sa.CheckConstraint("likes >= 0", name="post_likes_non_negative"),
        sa.CheckConstraint("replies >= 0", name="post_replies_non_negative"),
    )
    op.create_index(
        "idx_posts_created_at_id", "posts", [sa.text("created_at DESC"), "id"]
    )
    op.create_index("idx_posts_group_id", "posts", ["group_id"])
    op.create_index("idx_posts_uid", "posts", ["uid"])

    # ========================================================================
    # COMMENTS table (parent_id points at a post or a comment, no FK)
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=False),
        sa.Column(
            "parent_type",
            postgresql.ENUM(
                "ParentPost", "ParentComment", name="parent_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("comment", sa.Text(), nullable=False),
        sa.Column("uid", sa.String(length=128), nullable=False),
        sa.Column("replies", sa.Integer(), server_default="0", nullable=False),
        sa.Column("likes", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.CheckConstraint("likes >= 0", name="comment_likes_non_negative"),
        sa.CheckConstraint("replies >= 0", name="comment_replies_non_negative"),
        sa.CheckConstraint(
            "parent_type <> 'ParentPost' OR parent_id = post_id",
            name="root_comment_parent_is_thread_post",
        ),
    )
    op.create_index(
        "idx_comments_parent",
        "comments",
        ["parent_type", "parent_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])
    op.create_index("idx_comments_uid", "comments", ["uid"])

    # ========================================================================
    # LIKES table
    # ========================================================================
    op.create_table(
        "likes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("uid", sa.String(length=128), nullable=False),
        sa.Column(
            "target_type",
            postgresql.ENUM("post", "comment", name="like_target_type", create_type=False),
            nullable=False,
        ),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("uid", "target_type", "target_id", name="unique_like"),
    )
    op.create_index("idx_likes_target", "likes", ["target_type", "target_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_likes_target", table_name="likes")
    op.drop_table("likes")

    op.drop_index("idx_comments_uid", table_name="comments")
    op.drop_index("idx_comments_post_id", table_name="comments")
    op.drop_index("idx_comments_parent", table_name="comments")
    op.drop_table("comments")

    op.drop_index("idx_posts_uid", table_name="posts")
    op.drop_index("idx_posts_group_id", table_name="posts")
    op.drop_index("idx_posts_created_at_id", table_name="posts")
    op.drop_table("posts")

    op.drop_index("idx_groups_owner", table_name="groups")
    op.drop_index("idx_groups_group_name", table_name="groups")
    op.drop_table("groups")

    op.execute("DROP TYPE IF EXISTS like_target_type")
    op.execute("DROP TYPE IF EXISTS parent_type")
    op.execute("DROP TYPE IF EXISTS owner_type")
