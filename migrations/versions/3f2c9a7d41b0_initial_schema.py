"""initial_schema

Create the discussion schema for Agora:
- Threads (category, tags, view tracking, likes)
- Comments (top-level and replies, cascade with their thread)
- Vote ledgers stored on each row as UUID[] upvote/downvote sets

Revision ID: 3f2c9a7d41b0
Revises:
Create Date: 2026-10-17 10:12:44.381207

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9a7d41b0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE thread_category AS ENUM (
                'General', 'Questions', 'Showcase', 'Resources',
                'Collaboration', 'Feedback', 'Other'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    uuid_array_default = sa.text("'{}'::uuid[]")

    # ========================================================================
    # THREADS table
    # ========================================================================
    op.create_table(
        "threads",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column(
            "category",
            postgresql.ENUM(name="thread_category", create_type=False),
            nullable=False,
        ),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.Text()),
            server_default=sa.text("'{}'::text[]"),
            nullable=False,
        ),
        sa.Column(
            "upvotes",
            postgresql.ARRAY(sa.UUID()),
            server_default=uuid_array_default,
            nullable=False,
        ),
        sa.Column(
            "downvotes",
            postgresql.ARRAY(sa.UUID()),
            server_default=uuid_array_default,
            nullable=False,
        ),
        sa.Column(
            "likes",
            postgresql.ARRAY(sa.UUID()),
            server_default=uuid_array_default,
            nullable=False,
        ),
        sa.Column("views", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column(
            "viewed_by",
            postgresql.ARRAY(sa.UUID()),
            server_default=uuid_array_default,
            nullable=False,
        ),
        sa.Column(
            "is_pinned", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column(
            "is_closed", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("views >= 0", name="views_non_negative"),
        sa.CheckConstraint(
            "NOT (upvotes && downvotes)", name="threads_votes_disjoint"
        ),
    )
    op.create_index(
        "idx_threads_author_created",
        "threads",
        ["author_id", sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_threads_category_created",
        "threads",
        ["category", sa.text("created_at DESC")],
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("thread_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "upvotes",
            postgresql.ARRAY(sa.UUID()),
            server_default=uuid_array_default,
            nullable=False,
        ),
        sa.Column(
            "downvotes",
            postgresql.ARRAY(sa.UUID()),
            server_default=uuid_array_default,
            nullable=False,
        ),
        sa.Column(
            "likes",
            postgresql.ARRAY(sa.UUID()),
            server_default=uuid_array_default,
            nullable=False,
        ),
        sa.Column(
            "is_edited", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["thread_id"], ["threads.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "NOT (upvotes && downvotes)", name="comments_votes_disjoint"
        ),
    )
    op.create_index(
        "idx_comments_thread_created", "comments", ["thread_id", "created_at"]
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_parent_id", table_name="comments")
    op.drop_index("idx_comments_thread_created", table_name="comments")
    op.drop_table("comments")

    op.drop_index("idx_threads_category_created", table_name="threads")
    op.drop_index("idx_threads_author_created", table_name="threads")
    op.drop_table("threads")

    op.execute("DROP TYPE IF EXISTS thread_category")
