"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from agora.domain.model import Comment, Thread
from agora.domain.value import CommentId, ThreadCategory, ThreadId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _user_set(values: Optional[Iterable[Any]]) -> frozenset[UserId]:
    """Convert a UUID[] column into a set of user IDs."""
    return frozenset(UserId(_uuid(v)) for v in values or ())


def _user_list(values: frozenset[UserId]) -> list[UUID]:
    """Convert a set of user IDs into a sorted UUID[] column value."""
    return sorted(values, key=str)


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        category=ThreadCategory(row["category"]),
        tags=list(row.get("tags") or []),
        upvotes=_user_set(row.get("upvotes")),
        downvotes=_user_set(row.get("downvotes")),
        likes=_user_set(row.get("likes")),
        views=row["views"],
        viewed_by=_user_set(row.get("viewed_by")),
        is_pinned=row["is_pinned"],
        is_closed=row["is_closed"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict.

    Args:
        thread: Thread domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = thread.model_dump()
    data["category"] = thread.category.value
    for field in ("upvotes", "downvotes", "likes", "viewed_by"):
        data[field] = _user_list(getattr(thread, field))
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        thread_id=ThreadId(_uuid(row["thread_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        upvotes=_user_set(row.get("upvotes")),
        downvotes=_user_set(row.get("downvotes")),
        likes=_user_set(row.get("likes")),
        is_edited=row["is_edited"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump()
    for field in ("upvotes", "downvotes", "likes"):
        data[field] = _user_list(getattr(comment, field))
    return data
