"""Domain model entities for Agora."""

from agora.domain.model.comment import Comment
from agora.domain.model.common import DomainModel, Votable
from agora.domain.model.thread import Thread

__all__ = [
    "DomainModel",
    "Votable",
    "Thread",
    "Comment",
]
