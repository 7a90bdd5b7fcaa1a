"""In-memory thread repository for testing."""

from typing import Optional, Sequence

from agora.domain.model.thread import Thread
from agora.domain.repository.thread import ThreadRepository, ThreadSortOrder
from agora.domain.value import ThreadCategory, ThreadId, UserId


def _matches(thread: Thread, word: str) -> bool:
    word = word.lower()
    return (
        word in thread.title.lower()
        or word in thread.content.lower()
        or word in " ".join(thread.tags).lower()
    )


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}

    def _filter(
        self, category: Optional[ThreadCategory], search_words: Sequence[str]
    ) -> list[Thread]:
        threads = list(self._threads.values())
        if category is not None:
            threads = [t for t in threads if t.category == category]
        for word in search_words:
            threads = [t for t in threads if _matches(t, word)]
        return threads

    async def find_by_id(
        self, thread_id: ThreadId, for_update: bool = False
    ) -> Optional[Thread]:
        """Find a thread by ID."""
        return self._threads.get(thread_id)

    async def find_all(
        self,
        category: Optional[ThreadCategory] = None,
        search_words: Sequence[str] = (),
        sort: ThreadSortOrder = ThreadSortOrder.RECENT,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Thread]:
        """Find threads with filtering and pagination."""
        threads = self._filter(category, search_words)

        # Newest first as the base order; stable sorts below keep it as tiebreak
        threads.sort(key=lambda t: t.created_at, reverse=True)
        if sort == ThreadSortOrder.OLDEST:
            threads.reverse()
        elif sort == ThreadSortOrder.TOP:
            threads.sort(key=lambda t: t.vote_score, reverse=True)
        elif sort == ThreadSortOrder.VIEWS:
            threads.sort(key=lambda t: t.views, reverse=True)

        return threads[offset : offset + limit]

    async def count(
        self,
        category: Optional[ThreadCategory] = None,
        search_words: Sequence[str] = (),
    ) -> int:
        """Count threads matching the filters."""
        return len(self._filter(category, search_words))

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Thread]:
        """Find threads by a specific author, newest first."""
        threads = [t for t in self._threads.values() if t.author_id == author_id]
        threads.sort(key=lambda t: t.created_at, reverse=True)
        return threads[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count threads by a specific author."""
        return sum(1 for t in self._threads.values() if t.author_id == author_id)

    async def save(self, thread: Thread) -> Thread:
        """Save or update a thread."""
        self._threads[thread.id] = thread
        return thread

    async def delete(self, thread_id: ThreadId) -> None:
        """Delete a thread."""
        self._threads.pop(thread_id, None)
