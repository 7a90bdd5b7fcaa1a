"""PostgreSQL implementation of Thread repository."""

from typing import List, Optional, Sequence

from sqlalchemy import Text, and_, delete, desc, func, or_, select, true
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Thread
from agora.domain.repository import ThreadRepository, ThreadSortOrder
from agora.domain.value import ThreadCategory, ThreadId, UserId
from agora.persistence.error import storage_errors
from agora.persistence.mappers import row_to_thread, thread_to_dict
from agora.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _filters(category: Optional[ThreadCategory], search_words: Sequence[str]):
        """Build WHERE clauses for category and search filters."""
        clauses = []
        if category is not None:
            clauses.append(threads_table.c.category == category.value)

        tags_text = func.array_to_string(threads_table.c.tags, " ", type_=Text)
        for word in search_words:
            clauses.append(
                or_(
                    threads_table.c.title.icontains(word, autoescape=True),
                    threads_table.c.content.icontains(word, autoescape=True),
                    tags_text.icontains(word, autoescape=True),
                )
            )
        return and_(true(), *clauses)

    @staticmethod
    def _ordering(sort: ThreadSortOrder):
        created = threads_table.c.created_at
        if sort == ThreadSortOrder.OLDEST:
            return [created]
        if sort == ThreadSortOrder.TOP:
            score = func.cardinality(threads_table.c.upvotes) - func.cardinality(
                threads_table.c.downvotes
            )
            return [desc(score), desc(created)]
        if sort == ThreadSortOrder.VIEWS:
            return [desc(threads_table.c.views), desc(created)]
        return [desc(created)]

    async def find_by_id(
        self, thread_id: ThreadId, for_update: bool = False
    ) -> Optional[Thread]:
        """Find a thread by ID."""
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        if for_update:
            stmt = stmt.with_for_update()
        with storage_errors("thread.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def find_all(
        self,
        category: Optional[ThreadCategory] = None,
        search_words: Sequence[str] = (),
        sort: ThreadSortOrder = ThreadSortOrder.RECENT,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Thread]:
        """Find threads with filtering and pagination."""
        stmt = (
            select(threads_table)
            .where(self._filters(category, search_words))
            .order_by(*self._ordering(sort))
            .limit(limit)
            .offset(offset)
        )
        with storage_errors("thread.find_all"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_thread(row._asdict()) for row in rows]

    async def count(
        self,
        category: Optional[ThreadCategory] = None,
        search_words: Sequence[str] = (),
    ) -> int:
        """Count threads matching the filters."""
        stmt = (
            select(func.count())
            .select_from(threads_table)
            .where(self._filters(category, search_words))
        )
        with storage_errors("thread.count"):
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Thread]:
        """Find threads by a specific author, newest first."""
        stmt = (
            select(threads_table)
            .where(threads_table.c.author_id == author_id)
            .order_by(desc(threads_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        with storage_errors("thread.find_by_author"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_thread(row._asdict()) for row in rows]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count threads by a specific author."""
        stmt = (
            select(func.count())
            .select_from(threads_table)
            .where(threads_table.c.author_id == author_id)
        )
        with storage_errors("thread.count_by_author"):
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update) in a single statement."""
        values = thread_to_dict(thread)
        stmt = insert(threads_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[threads_table.c.id],
            set_={k: v for k, v in values.items() if k not in ("id", "created_at")},
        )
        with storage_errors("thread.save"):
            await self.session.execute(stmt)
            await self.session.flush()
        return thread

    async def delete(self, thread_id: ThreadId) -> None:
        """Delete a thread (hard delete)."""
        stmt = delete(threads_table).where(threads_table.c.id == thread_id)
        with storage_errors("thread.delete"):
            await self.session.execute(stmt)
            await self.session.flush()
