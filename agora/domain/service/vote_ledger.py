"""Vote ledger: durable storage of per-entity vote sets."""

from typing import Union
from uuid import UUID

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model import Comment, Thread
from agora.domain.repository import CommentRepository, ThreadRepository
from agora.domain.value import CommentId, ThreadId, VotableType

from .base import Service

VotableEntity = Union[Thread, Comment]


class VoteLedger(Service):
    """Loads and saves the vote sets of threads and comments.

    The sets live on the entity row, so saving them is one write of the
    whole entity. No vote semantics are checked here.
    """

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize vote ledger.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository

    async def load(self, votable_type: VotableType, entity_id: UUID) -> VotableEntity:
        """Load an entity with its current vote sets.

        The row stays locked until the surrounding transaction ends, so
        concurrent votes on the same entity are applied one after another.

        Args:
            votable_type: Thread or comment
            entity_id: Entity ID

        Returns:
            The thread or comment

        Raises:
            NotFoundError: If no entity exists for the ID
            StorageError: If the backing store fails
        """
        with logfire.span(
            "vote_ledger.load",
            votable_type=votable_type.value,
            entity_id=str(entity_id),
        ):
            entity: VotableEntity | None
            if votable_type == VotableType.THREAD:
                entity = await self.thread_repository.find_by_id(
                    ThreadId(entity_id), for_update=True
                )
                resource = "Thread"
            else:  # VotableType.COMMENT
                entity = await self.comment_repository.find_by_id(
                    CommentId(entity_id), for_update=True
                )
                resource = "Comment"

            if entity is None:
                logfire.warn(
                    "Vote target not found",
                    votable_type=votable_type.value,
                    entity_id=str(entity_id),
                )
                raise NotFoundError(resource, str(entity_id))

            return entity

    async def save(self, entity: VotableEntity) -> VotableEntity:
        """Persist an entity together with its vote sets.

        Args:
            entity: Thread or comment with mutated vote sets

        Returns:
            The saved entity

        Raises:
            StorageError: If the backing store fails
        """
        with logfire.span(
            "vote_ledger.save",
            entity_type=type(entity).__name__,
            entity_id=str(entity.id),
            upvotes=len(entity.upvotes),
            downvotes=len(entity.downvotes),
        ):
            if isinstance(entity, Thread):
                return await self.thread_repository.save(entity)
            return await self.comment_repository.save(entity)
