"""Comment domain service."""

import logfire
from datetime import datetime
from uuid import uuid4

from agora.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from agora.domain.model.comment import Comment
from agora.domain.repository import CommentRepository, ThreadRepository
from agora.domain.value import CommentId, ThreadId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            thread_repository: Thread repository (to check the thread exists)
        """
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository

    async def add_comment(
        self,
        thread_id: ThreadId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Add a comment to a thread or reply to another comment.

        Args:
            thread_id: Thread ID
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment with an empty vote ledger

        Raises:
            NotFoundError: If the thread doesn't exist
            ValidationError: If the parent is missing or on another thread
        """
        with logfire.span(
            "comment_service.add_comment",
            thread_id=str(thread_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            thread = await self.thread_repository.find_by_id(thread_id)
            if not thread:
                logfire.warn("Comment on non-existent thread", thread_id=str(thread_id))
                raise NotFoundError("Thread", str(thread_id))

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        thread_id=str(thread_id),
                    )
                    raise ValidationError("Parent comment not found")
                if parent.thread_id != thread_id:
                    logfire.error(
                        "Parent comment does not belong to thread",
                        parent_id=str(parent_id),
                        parent_thread_id=str(parent.thread_id),
                        target_thread_id=str(thread_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this thread"
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                thread_id=thread_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                thread_id=str(thread_id),
                is_reply=parent_id is not None,
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_comments(
        self, thread_id: ThreadId, page: int = 1, limit: int = 20
    ) -> tuple[list[tuple[Comment, list[Comment]]], int]:
        """Get a page of top-level comments with their direct replies.

        Args:
            thread_id: Thread ID
            page: 1-based page number
            limit: Page size (top-level comments)

        Returns:
            Tuple of ([(comment, replies)], total top-level comments)
        """
        with logfire.span(
            "comment_service.get_comments",
            thread_id=str(thread_id),
            page=page,
            limit=limit,
        ):
            top_level = await self.comment_repository.find_top_level(
                thread_id, limit=limit, offset=(page - 1) * limit
            )

            # Batch query replies for the whole page (avoid N+1)
            replies = await self.comment_repository.find_replies(
                [c.id for c in top_level]
            )
            by_parent: dict[CommentId, list[Comment]] = {}
            for reply in replies:
                if reply.parent_id is not None:
                    by_parent.setdefault(reply.parent_id, []).append(reply)

            total = await self.comment_repository.count_top_level(thread_id)
            logfire.info(
                "Comments retrieved for thread",
                thread_id=str(thread_id),
                count=len(top_level),
                replies=len(replies),
                total=total,
            )
            return [(c, by_parent.get(c.id, [])) for c in top_level], total

    async def update_comment(
        self, comment_id: CommentId, user_id: UserId, content: str
    ) -> Comment:
        """Update a comment's content and mark it edited.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
            content_length=len(content),
        ):
            comment = await self.get_comment(comment_id)
            self._require_author(comment, user_id)

            updated = Comment.model_validate(
                {
                    **comment.model_dump(),
                    "content": content,
                    "is_edited": True,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.comment_repository.save(updated)
            logfire.info("Comment updated", comment_id=str(comment_id))
            return saved

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> None:
        """Delete a comment and every reply below it.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.get_comment(comment_id)
            self._require_author(comment, user_id)

            removed = await self.comment_repository.delete_by_parent(comment_id)
            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                replies_deleted=removed,
            )

    async def toggle_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> tuple[int, bool]:
        """Like a comment, or remove an existing like.

        Returns:
            Tuple of (like count, whether the user now likes the comment)

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "comment_service.toggle_like",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_repository.find_by_id(
                comment_id, for_update=True
            )
            if not comment:
                raise NotFoundError("Comment", str(comment_id))

            is_liked = user_id not in comment.likes
            if is_liked:
                likes = comment.likes | {user_id}
            else:
                likes = comment.likes - {user_id}
            saved = await self.comment_repository.save(
                comment.model_copy(update={"likes": likes})
            )
            return len(saved.likes), is_liked

    @staticmethod
    def _require_author(comment: Comment, user_id: UserId) -> None:
        if comment.author_id != user_id:
            logfire.warn(
                "Comment change by non-author",
                comment_id=str(comment.id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("comment", str(comment.id), str(user_id))
