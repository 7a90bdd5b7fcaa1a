"""Thread domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from agora.domain.error import NotAuthorizedError, NotFoundError
from agora.domain.model.thread import Thread
from agora.domain.repository import (
    CommentRepository,
    ThreadRepository,
    ThreadSortOrder,
)
from agora.domain.value import ThreadCategory, ThreadId, UserId

from .base import Service


class ThreadService(Service):
    """Domain service for thread operations."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository (for cascade deletes)
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository

    async def create_thread(
        self,
        author_id: UserId,
        title: str,
        content: str,
        category: ThreadCategory,
        tags: list[str] | None = None,
    ) -> Thread:
        """Create a thread with an empty vote ledger.

        Args:
            author_id: Author user ID
            title: Thread title
            content: Thread body
            category: Thread category
            tags: Optional free-form tags

        Returns:
            Created thread
        """
        with logfire.span(
            "thread_service.create_thread",
            author_id=str(author_id),
            category=category.value,
        ):
            now = datetime.now()
            thread = Thread(
                id=ThreadId(uuid4()),
                title=title,
                content=content,
                author_id=author_id,
                category=category,
                tags=tags or [],
                created_at=now,
                updated_at=now,
            )
            saved = await self.thread_repository.save(thread)
            logfire.info(
                "Thread created",
                thread_id=str(saved.id),
                author_id=str(author_id),
                tag_count=len(saved.tags),
            )
            return saved

    async def get_thread(self, thread_id: ThreadId) -> Thread:
        """Get a thread by ID.

        Raises:
            NotFoundError: If the thread doesn't exist
        """
        with logfire.span("thread_service.get_thread", thread_id=str(thread_id)):
            thread = await self.thread_repository.find_by_id(thread_id)
            if not thread:
                logfire.warn("Thread not found", thread_id=str(thread_id))
                raise NotFoundError("Thread", str(thread_id))
            return thread

    async def record_view(self, thread: Thread, viewer_id: UserId | None) -> Thread:
        """Count a view of the thread.

        Authenticated viewers are counted once; anonymous views always count.

        Args:
            thread: Thread being viewed
            viewer_id: Viewing user (None for anonymous viewers)

        Returns:
            Thread with updated view count (unchanged for repeat viewers)
        """
        with logfire.span(
            "thread_service.record_view",
            thread_id=str(thread.id),
            authenticated=viewer_id is not None,
        ):
            if viewer_id is not None and viewer_id in thread.viewed_by:
                return thread

            update: dict = {"views": thread.views + 1}
            if viewer_id is not None:
                update["viewed_by"] = thread.viewed_by | {viewer_id}

            saved = await self.thread_repository.save(thread.model_copy(update=update))
            logfire.debug(
                "Thread view recorded", thread_id=str(thread.id), views=saved.views
            )
            return saved

    async def list_threads(
        self,
        category: ThreadCategory | None = None,
        search: str | None = None,
        sort: ThreadSortOrder = ThreadSortOrder.RECENT,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[Thread], int]:
        """List threads with filtering, search and pagination.

        Args:
            category: Only threads in this category (None for all)
            search: Whitespace-separated words that must all match
            sort: Sort order
            page: 1-based page number
            limit: Page size

        Returns:
            Tuple of (threads on the page, total matching threads)
        """
        search_words = search.split() if search else []
        with logfire.span(
            "thread_service.list_threads",
            category=category.value if category else None,
            search_words=len(search_words),
            sort=sort.value,
            page=page,
            limit=limit,
        ):
            offset = (page - 1) * limit
            threads = await self.thread_repository.find_all(
                category=category,
                search_words=search_words,
                sort=sort,
                limit=limit,
                offset=offset,
            )
            total = await self.thread_repository.count(
                category=category, search_words=search_words
            )
            logfire.info("Threads listed", count=len(threads), total=total)
            return threads, total

    async def list_user_threads(
        self, author_id: UserId, page: int = 1, limit: int = 10
    ) -> tuple[list[Thread], int]:
        """List threads by one author, newest first.

        Returns:
            Tuple of (threads on the page, total threads by the author)
        """
        with logfire.span(
            "thread_service.list_user_threads",
            author_id=str(author_id),
            page=page,
            limit=limit,
        ):
            threads = await self.thread_repository.find_by_author(
                author_id, limit=limit, offset=(page - 1) * limit
            )
            total = await self.thread_repository.count_by_author(author_id)
            return threads, total

    async def count_comments(self, thread_ids: list[ThreadId]) -> dict[ThreadId, int]:
        """Count the comments (replies included) of each thread.

        Returns:
            Mapping of every requested thread ID to its comment count
        """
        counts = await self.comment_repository.count_by_thread(thread_ids)
        return {thread_id: counts.get(thread_id, 0) for thread_id in thread_ids}

    async def update_thread(
        self,
        thread_id: ThreadId,
        user_id: UserId,
        title: str,
        content: str,
        category: ThreadCategory,
        tags: list[str] | None = None,
    ) -> Thread:
        """Update a thread's editable fields.

        Only the author may update. The vote ledger is left untouched.

        Raises:
            NotFoundError: If the thread doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "thread_service.update_thread",
            thread_id=str(thread_id),
            user_id=str(user_id),
        ):
            thread = await self.get_thread(thread_id)
            self._require_author(thread, user_id)

            # Re-validate through the model so title/tag rules still apply
            updated = Thread.model_validate(
                {
                    **thread.model_dump(),
                    "title": title,
                    "content": content,
                    "category": category,
                    "tags": tags or [],
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.thread_repository.save(updated)
            logfire.info("Thread updated", thread_id=str(thread_id))
            return saved

    async def delete_thread(self, thread_id: ThreadId, user_id: UserId) -> None:
        """Delete a thread and all of its comments.

        Raises:
            NotFoundError: If the thread doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "thread_service.delete_thread",
            thread_id=str(thread_id),
            user_id=str(user_id),
        ):
            thread = await self.get_thread(thread_id)
            self._require_author(thread, user_id)

            removed = await self.comment_repository.delete_by_thread(thread_id)
            await self.thread_repository.delete(thread_id)
            logfire.info(
                "Thread deleted",
                thread_id=str(thread_id),
                comments_deleted=removed,
            )

    async def toggle_like(
        self, thread_id: ThreadId, user_id: UserId
    ) -> tuple[int, bool]:
        """Like a thread, or remove an existing like.

        Returns:
            Tuple of (like count, whether the user now likes the thread)

        Raises:
            NotFoundError: If the thread doesn't exist
        """
        with logfire.span(
            "thread_service.toggle_like",
            thread_id=str(thread_id),
            user_id=str(user_id),
        ):
            thread = await self.thread_repository.find_by_id(thread_id, for_update=True)
            if not thread:
                raise NotFoundError("Thread", str(thread_id))

            is_liked = user_id not in thread.likes
            if is_liked:
                likes = thread.likes | {user_id}
            else:
                likes = thread.likes - {user_id}
            saved = await self.thread_repository.save(
                thread.model_copy(update={"likes": likes})
            )
            return len(saved.likes), is_liked

    @staticmethod
    def _require_author(thread: Thread, user_id: UserId) -> None:
        if thread.author_id != user_id:
            logfire.warn(
                "Thread change by non-author",
                thread_id=str(thread.id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("thread", str(thread.id), str(user_id))
