"""Comment entity.

Comments belong to a thread. A comment with a parent is a reply; replies
are returned nested under their parent.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from agora.domain.model.common import Votable
from agora.domain.value import CommentId, ThreadId, UserId


class Comment(Votable):
    """Comment entity.

    Represents a comment on a thread or a reply to another comment.
    - parent_id: Direct parent comment (None for top-level)
    - is_edited: Set once the author changes the content
    """

    id: CommentId
    thread_id: ThreadId
    author_id: UserId
    content: str = Field(min_length=1, max_length=5000)
    parent_id: Optional[CommentId] = None
    is_edited: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v: str) -> str:
        """Trim surrounding whitespace from the content."""
        return v.strip() if isinstance(v, str) else v
