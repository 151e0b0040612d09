"""SQLAlchemy table definitions for the forum.

They match the schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
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
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(128), primary_key=True),  # Identity provider subject id
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column("category", String(20), nullable=False),
    Column(
        "author_id",
        String(128),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    # No foreign key: the reply may be deleted independently
    Column("solution_id", UUID(as_uuid=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("category IN ('hardware', 'software')", name="valid_category"),
    CheckConstraint("upvotes >= 0 AND downvotes >= 0", name="non_negative_votes"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_category", posts_table.c.category)

# ============================================================================
# REPLIES TABLE
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        String(128),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    # No foreign key: children survive their parent's deletion
    Column("parent_reply_id", UUID(as_uuid=True), nullable=True),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("is_solution", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvotes >= 0 AND downvotes >= 0", name="non_negative_votes"),
)

Index("idx_replies_post_id_created_at", replies_table.c.post_id, replies_table.c.created_at)

# ============================================================================
# VOTES TABLE (Polymorphic)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "user_id",
        String(128),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("votable_type", String(10), nullable=False),  # 'post' or 'reply'
    Column("votable_id", UUID(as_uuid=True), nullable=False),
    Column("vote_type", String(10), nullable=False),  # 'upvote' or 'downvote'
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "user_id", "votable_type", "votable_id", name="uq_user_votable_vote"
    ),
    CheckConstraint("votable_type IN ('post', 'reply')", name="valid_votable_type"),
    CheckConstraint("vote_type IN ('upvote', 'downvote')", name="valid_vote_type"),
)

Index("idx_votes_votable", votes_table.c.votable_type, votes_table.c.votable_id)
