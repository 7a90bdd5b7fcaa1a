"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .score import ScoreAggregator
from .thread_service import ThreadService
from .vote_ledger import VoteLedger
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "JWTService",
    "ScoreAggregator",
    "Service",
    "ThreadService",
    "VoteLedger",
    "VoteService",
]
