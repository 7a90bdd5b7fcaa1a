"""Shared response items and helpers for use cases."""

from datetime import datetime
from math import ceil
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from agora.domain.error import NotFoundError
from agora.domain.model import Comment, Thread
from agora.domain.value import UserId, UserVote, VoteView


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Pagination(CamelModel):
    """Page metadata for list responses."""

    current_page: int
    total_pages: int
    total: int

    @classmethod
    def of(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(current_page=page, total_pages=ceil(total / limit), total=total)


class ThreadItem(CamelModel):
    """Thread in a response, annotated for the viewer."""

    id: str
    title: str
    content: str
    author_id: str
    category: str
    tags: list[str]
    views: int
    likes: int
    upvotes: int
    downvotes: int
    vote_score: int
    user_vote: UserVote | None
    comment_count: int
    is_pinned: bool
    is_closed: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(
        cls, thread: Thread, view: VoteView, comment_count: int = 0
    ) -> "ThreadItem":
        return cls(
            id=str(thread.id),
            title=thread.title,
            content=thread.content,
            author_id=str(thread.author_id),
            category=thread.category.value,
            tags=thread.tags,
            views=thread.views,
            likes=len(thread.likes),
            upvotes=len(thread.upvotes),
            downvotes=len(thread.downvotes),
            vote_score=view.vote_score,
            user_vote=view.user_vote,
            comment_count=comment_count,
            is_pinned=thread.is_pinned,
            is_closed=thread.is_closed,
            created_at=thread.created_at,
            updated_at=thread.updated_at,
        )


class CommentItem(CamelModel):
    """Comment in a response, annotated for the viewer."""

    id: str
    thread_id: str
    author_id: str
    content: str
    parent_id: str | None
    likes: int
    upvotes: int
    downvotes: int
    vote_score: int
    user_vote: UserVote | None
    is_edited: bool
    created_at: datetime
    updated_at: datetime
    replies: list["CommentItem"] = []

    @classmethod
    def build(
        cls,
        comment: Comment,
        view: VoteView,
        replies: list["CommentItem"] | None = None,
    ) -> "CommentItem":
        return cls(
            id=str(comment.id),
            thread_id=str(comment.thread_id),
            author_id=str(comment.author_id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            likes=len(comment.likes),
            upvotes=len(comment.upvotes),
            downvotes=len(comment.downvotes),
            vote_score=view.vote_score,
            user_vote=view.user_vote,
            is_edited=comment.is_edited,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            replies=replies or [],
        )


def parse_id(value: str, resource: str) -> UUID:
    """Parse a path identifier.

    Malformed identifiers cannot name an existing resource.

    Raises:
        NotFoundError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except ValueError:
        raise NotFoundError(resource, value)


def parse_user_id(value: str | None) -> UserId | None:
    """Parse an acting/viewing user ID (None stays None)."""
    return UserId(UUID(value)) if value else None


def page_window(page: int | None, limit: int | None, default: int, maximum: int):
    """Clamp requested page and page size.

    Returns:
        Tuple of (page >= 1, 1 <= limit <= maximum)
    """
    page = max(page or 1, 1)
    limit = min(max(limit or default, 1), maximum)
    return page, limit
