"""Thread aggregate root.

Threads are the top-level discussion items. Each carries its own vote
ledger, like set and view tracking.
"""

from datetime import datetime

from pydantic import Field, field_validator

from agora.domain.model.common import Votable
from agora.domain.value import ThreadCategory, ThreadId, UserId


class Thread(Votable):
    """Thread aggregate root.

    Business rules:
    - Title and content are required (trimmed title up to 200 chars)
    - Authenticated viewers are counted once; anonymous views always count
    - Deleting a thread deletes all of its comments
    """

    id: ThreadId
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=10000)
    author_id: UserId
    category: ThreadCategory
    tags: list[str] = Field(default_factory=list)
    views: int = Field(default=0, ge=0)
    viewed_by: frozenset[UserId] = frozenset()
    is_pinned: bool = False
    is_closed: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: str) -> str:
        """Trim surrounding whitespace from the title."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("tags", mode="before")
    @classmethod
    def clean_tags(cls, v: list[str] | None) -> list[str]:
        """Trim tags and drop empty ones."""
        if v is None:
            return []
        return [tag.strip() for tag in v if isinstance(tag, str) and tag.strip()]
