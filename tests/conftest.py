"""Test configuration and helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

from agora.config import Settings
from agora.domain.model import Comment, Thread
from agora.domain.value import (
    CommentId,
    ThreadCategory,
    ThreadId,
    UserId,
)
from agora.util.jwt import create_token


def new_user() -> UserId:
    """Generate a fresh user ID."""
    return UserId(uuid4())


def make_thread(
    author_id: UserId | None = None,
    title: str = "How do you structure FastAPI projects?",
    content: str = "Looking for layouts that scale past a handful of routers.",
    category: ThreadCategory = ThreadCategory.QUESTIONS,
    tags: list[str] | None = None,
    upvotes: set[UserId] | None = None,
    downvotes: set[UserId] | None = None,
    age: timedelta = timedelta(0),
    **fields,
) -> Thread:
    """Build a thread with sensible defaults.

    Args:
        age: How long ago the thread was created
        **fields: Any other Thread field to override
    """
    created = datetime.now() - age
    return Thread(
        id=ThreadId(uuid4()),
        title=title,
        content=content,
        author_id=author_id or new_user(),
        category=category,
        tags=tags or [],
        upvotes=frozenset(upvotes or ()),
        downvotes=frozenset(downvotes or ()),
        created_at=created,
        updated_at=created,
        **fields,
    )


def make_comment(
    thread_id: ThreadId,
    author_id: UserId | None = None,
    content: str = "Split by feature, not by layer.",
    parent_id: CommentId | None = None,
    upvotes: set[UserId] | None = None,
    downvotes: set[UserId] | None = None,
    age: timedelta = timedelta(0),
) -> Comment:
    """Build a comment with sensible defaults."""
    created = datetime.now() - age
    return Comment(
        id=CommentId(uuid4()),
        thread_id=thread_id,
        author_id=author_id or new_user(),
        content=content,
        parent_id=parent_id,
        upvotes=frozenset(upvotes or ()),
        downvotes=frozenset(downvotes or ()),
        created_at=created,
        updated_at=created,
    )


def bearer(user_id: UserId) -> dict[str, str]:
    """Authorization header for a user, signed with the configured secret."""
    token = create_token(str(user_id), Settings().auth)
    return {"Authorization": f"Bearer {token}"}
