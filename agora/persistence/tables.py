"""SQLAlchemy table definitions for Agora.

Domain models are plain pydantic objects; these Core tables are mapped to
them by hand in mappers.py. They match the schema in the Alembic migrations.

Vote ledgers live on the owning row as UUID[] columns, so saving a thread
or comment writes its ledger in the same single-row UPDATE.
"""

from sqlalchemy import (
    Boolean,
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
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

THREAD_CATEGORIES = (
    "General",
    "Questions",
    "Showcase",
    "Resources",
    "Collaboration",
    "Feedback",
    "Other",
)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("author_id", UUID, nullable=False),  # Owned by the identity service
    Column(
        "category",
        Enum(*THREAD_CATEGORIES, name="thread_category", create_type=False),
        nullable=False,
    ),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("upvotes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("downvotes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("likes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("viewed_by", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("is_pinned", Boolean, nullable=False, server_default="false"),
    Column("is_closed", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("views >= 0", name="views_non_negative"),
    CheckConstraint("NOT (upvotes && downvotes)", name="threads_votes_disjoint"),
)

Index(
    "idx_threads_author_created",
    threads_table.c.author_id,
    threads_table.c.created_at.desc(),
)
Index(
    "idx_threads_category_created",
    threads_table.c.category,
    threads_table.c.created_at.desc(),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "thread_id", UUID, ForeignKey("threads.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("author_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column("upvotes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("downvotes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("likes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("NOT (upvotes && downvotes)", name="comments_votes_disjoint"),
)

Index(
    "idx_comments_thread_created",
    comments_table.c.thread_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
