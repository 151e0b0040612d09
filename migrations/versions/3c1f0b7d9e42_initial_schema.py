"""initial_schema

Create the forum schema:
- Users (keyed by identity provider subject id, unique username)
- Posts (hardware/software categories, denormalized tallies and reply count)
- Replies (flat per post, optional parent reply, solution flag)
- Votes (polymorphic post/reply target, one vote per user and target)

Revision ID: 3c1f0b7d9e42
Revises:
Create Date: 2026-10-18 10:12:04.518230

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0b7d9e42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=128), nullable=False),
        sa.Column("username", sa.String(length=30), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=20), nullable=False),
        sa.Column("author_id", sa.String(length=128), nullable=False),
        sa.Column("upvotes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("downvotes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("reply_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("solution_id", sa.UUID(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "category IN ('hardware', 'software')", name="valid_category"
        ),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0", name="posts_non_negative_votes"
        ),
    )
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")], unique=False
    )
    op.create_index("idx_posts_category", "posts", ["category"], unique=False)

    # ========================================================================
    # REPLIES table
    # ========================================================================
    op.create_table(
        "replies",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.String(length=128), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("parent_reply_id", sa.UUID(), nullable=True),
        sa.Column("upvotes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("downvotes", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "is_solution", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0", name="replies_non_negative_votes"
        ),
    )
    op.create_index(
        "idx_replies_post_id_created_at",
        "replies",
        ["post_id", "created_at"],
        unique=False,
    )

    # ========================================================================
    # VOTES table (polymorphic target)
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.String(length=128), nullable=False),
        sa.Column("votable_type", sa.String(length=10), nullable=False),
        sa.Column("votable_id", sa.UUID(), nullable=False),
        sa.Column("vote_type", sa.String(length=10), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "votable_type", "votable_id", name="uq_user_votable_vote"
        ),
        sa.CheckConstraint(
            "votable_type IN ('post', 'reply')", name="valid_votable_type"
        ),
        sa.CheckConstraint(
            "vote_type IN ('upvote', 'downvote')", name="valid_vote_type"
        ),
    )
    op.create_index(
        "idx_votes_votable", "votes", ["votable_type", "votable_id"], unique=False
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votes_votable", table_name="votes")
    op.drop_table("votes")
    op.drop_index("idx_replies_post_id_created_at", table_name="replies")
    op.drop_table("replies")
    op.drop_index("idx_posts_category", table_name="posts")
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_table("posts")
    op.drop_table("users")
