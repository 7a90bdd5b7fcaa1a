"""PostgreSQL repository implementations."""

from agora.persistence.repository.comment import PostgresCommentRepository
from agora.persistence.repository.thread import PostgresThreadRepository

__all__ = [
    "PostgresThreadRepository",
    "PostgresCommentRepository",
]
