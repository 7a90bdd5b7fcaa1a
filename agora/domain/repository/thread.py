"""Thread repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Sequence

from agora.domain.model.thread import Thread
from agora.domain.value import ThreadCategory, ThreadId, UserId


class ThreadSortOrder(str, Enum):
    """Sort order for thread listings."""

    RECENT = "recent"  # Newest first
    OLDEST = "oldest"  # Oldest first
    TOP = "top"  # Highest vote score first
    VIEWS = "views"  # Most viewed first


class ThreadRepository(ABC):
    """Repository for Thread aggregate.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    Implementations raise StorageError when the backing store fails.
    """

    @abstractmethod
    async def find_by_id(
        self, thread_id: ThreadId, for_update: bool = False
    ) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier
            for_update: Lock the row until the current transaction ends

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        category: Optional[ThreadCategory] = None,
        search_words: Sequence[str] = (),
        sort: ThreadSortOrder = ThreadSortOrder.RECENT,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Thread]:
        """Find threads with filtering and pagination.

        Every search word must match (case-insensitive substring) the
        title, the content, or one of the tags.

        Args:
            category: Only threads in this category (None for all)
            search_words: Words that must all match
            sort: Sort order
            limit: Maximum number of threads to return
            offset: Number of threads to skip

        Returns:
            List of threads
        """
        pass

    @abstractmethod
    async def count(
        self,
        category: Optional[ThreadCategory] = None,
        search_words: Sequence[str] = (),
    ) -> int:
        """Count threads matching the same filters as find_all.

        Args:
            category: Only threads in this category (None for all)
            search_words: Words that must all match

        Returns:
            Number of matching threads
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Thread]:
        """Find threads by a specific author, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of threads to return
            offset: Number of threads to skip

        Returns:
            List of threads by the author
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count threads by a specific author."""
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update).

        The whole row, vote ledger included, is written in one statement.

        Args:
            thread: The thread to save

        Returns:
            The saved thread
        """
        pass

    @abstractmethod
    async def delete(self, thread_id: ThreadId) -> None:
        """Delete a thread (hard delete).

        Args:
            thread_id: The thread ID to delete
        """
        pass
