"""In-memory comment repository for testing."""

from collections import Counter
from typing import Optional, Sequence

from agora.domain.model.comment import Comment
from agora.domain.repository.comment import CommentRepository
from agora.domain.value import CommentId, ThreadId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _top_level(self, thread_id: ThreadId) -> list[Comment]:
        return [
            c
            for c in self._comments.values()
            if c.thread_id == thread_id and c.parent_id is None
        ]

    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(
        self, thread_id: ThreadId, limit: int = 20, offset: int = 0
    ) -> list[Comment]:
        """Find top-level comments of a thread, newest first."""
        comments = self._top_level(thread_id)
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[offset : offset + limit]

    async def count_top_level(self, thread_id: ThreadId) -> int:
        """Count top-level comments of a thread."""
        return len(self._top_level(thread_id))

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Find direct replies to the given comments, oldest first."""
        wanted = set(parent_ids)
        replies = [c for c in self._comments.values() if c.parent_id in wanted]
        replies.sort(key=lambda c: c.created_at)
        return replies

    async def count_by_thread(
        self, thread_ids: Sequence[ThreadId]
    ) -> dict[ThreadId, int]:
        """Count all comments of each thread."""
        wanted = set(thread_ids)
        return dict(
            Counter(
                c.thread_id for c in self._comments.values() if c.thread_id in wanted
            )
        )

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    async def delete_by_thread(self, thread_id: ThreadId) -> int:
        """Delete every comment of a thread."""
        doomed = [cid for cid, c in self._comments.items() if c.thread_id == thread_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)

    async def delete_by_parent(self, parent_id: CommentId) -> int:
        """Delete every reply below a comment, at any depth."""
        removed = 0
        frontier = {parent_id}
        while frontier:
            doomed = [
                cid for cid, c in self._comments.items() if c.parent_id in frontier
            ]
            for comment_id in doomed:
                del self._comments[comment_id]
            removed += len(doomed)
            frontier = set(doomed)
        return removed
