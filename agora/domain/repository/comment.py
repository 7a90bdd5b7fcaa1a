"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from agora.domain.model.comment import Comment
from agora.domain.value import CommentId, ThreadId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    Implementations raise StorageError when the backing store fails.
    """

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier
            for_update: Lock the row until the current transaction ends

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self, thread_id: ThreadId, limit: int = 20, offset: int = 0
    ) -> List[Comment]:
        """Find top-level comments of a thread, newest first.

        Args:
            thread_id: The thread ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments without a parent
        """
        pass

    @abstractmethod
    async def count_top_level(self, thread_id: ThreadId) -> int:
        """Count top-level comments of a thread."""
        pass

    @abstractmethod
    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find direct replies to the given comments (batch query).

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Replies, oldest first
        """
        pass

    @abstractmethod
    async def count_by_thread(
        self, thread_ids: Sequence[ThreadId]
    ) -> Dict[ThreadId, int]:
        """Count all comments (replies included) of each thread (batch query).

        Args:
            thread_ids: Thread IDs

        Returns:
            Comment count per thread; threads without comments are omitted
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        pass

    @abstractmethod
    async def delete_by_thread(self, thread_id: ThreadId) -> int:
        """Delete every comment of a thread.

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    async def delete_by_parent(self, parent_id: CommentId) -> int:
        """Delete every reply below a comment, at any depth.

        Returns:
            Number of comments deleted
        """
        pass
