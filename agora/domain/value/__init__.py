"""Domain value objects for Agora."""

from agora.domain.value.identifiers import CommentId, ThreadId, UserId
from agora.domain.value.types import (
    ThreadCategory,
    UserVote,
    VotableType,
    VoteIntent,
    VoteTally,
    VoteView,
)

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommentId",
    # Types
    "ThreadCategory",
    "UserVote",
    "VotableType",
    "VoteIntent",
    "VoteTally",
    "VoteView",
]
