"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .thread import InMemoryThreadRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryThreadRepository",
]
