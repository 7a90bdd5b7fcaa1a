"""Repository interfaces for Agora domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from agora.domain.repository.comment import CommentRepository
from agora.domain.repository.thread import ThreadRepository, ThreadSortOrder

__all__ = [
    "ThreadRepository",
    "ThreadSortOrder",
    "CommentRepository",
]
