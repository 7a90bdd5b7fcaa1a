"""PostgreSQL implementation of Comment repository."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Comment
from agora.domain.repository import CommentRepository
from agora.domain.value import CommentId, ThreadId
from agora.persistence.error import storage_errors
from agora.persistence.mappers import comment_to_dict, row_to_comment
from agora.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        if for_update:
            stmt = stmt.with_for_update()
        with storage_errors("comment.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(
        self, thread_id: ThreadId, limit: int = 20, offset: int = 0
    ) -> List[Comment]:
        """Find top-level comments of a thread, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.thread_id == thread_id)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        with storage_errors("comment.find_top_level"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def count_top_level(self, thread_id: ThreadId) -> int:
        """Count top-level comments of a thread."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.thread_id == thread_id)
            .where(comments_table.c.parent_id.is_(None))
        )
        with storage_errors("comment.count_top_level"):
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find direct replies to the given comments (batch query)."""
        if not parent_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.in_(parent_ids))
            .order_by(comments_table.c.created_at)
        )
        with storage_errors("comment.find_replies"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def count_by_thread(
        self, thread_ids: Sequence[ThreadId]
    ) -> Dict[ThreadId, int]:
        """Count all comments of each thread in one grouped query."""
        if not thread_ids:
            return {}

        stmt = (
            select(comments_table.c.thread_id, func.count())
            .where(comments_table.c.thread_id.in_(thread_ids))
            .group_by(comments_table.c.thread_id)
        )
        with storage_errors("comment.count_by_thread"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return {ThreadId(thread_id): count for thread_id, count in rows}

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update) in a single statement."""
        values = comment_to_dict(comment)
        stmt = insert(comments_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[comments_table.c.id],
            set_={
                k: v
                for k, v in values.items()
                if k not in ("id", "thread_id", "parent_id", "created_at")
            },
        )
        with storage_errors("comment.save"):
            await self.session.execute(stmt)
            await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        with storage_errors("comment.delete"):
            await self.session.execute(stmt)
            await self.session.flush()

    async def delete_by_thread(self, thread_id: ThreadId) -> int:
        """Delete every comment of a thread."""
        stmt = delete(comments_table).where(comments_table.c.thread_id == thread_id)
        with storage_errors("comment.delete_by_thread"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete_by_parent(self, parent_id: CommentId) -> int:
        """Delete every reply below a comment, at any depth."""
        tree = (
            select(comments_table.c.id)
            .where(comments_table.c.parent_id == parent_id)
            .cte("reply_tree", recursive=True)
        )
        tree = tree.union_all(
            select(comments_table.c.id).where(comments_table.c.parent_id == tree.c.id)
        )
        stmt = delete(comments_table).where(
            comments_table.c.id.in_(select(tree.c.id))
        )
        with storage_errors("comment.delete_by_parent"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
