"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.common import CamelModel, parse_id
from agora.domain.service import VoteService
from agora.domain.service.vote_service import parse_intent
from agora.domain.value import UserId, UserVote, VotableType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string from the path
    user_id: str  # User ID from authenticated user
    vote_type: str  # "upvote" or "downvote", validated by the domain


class CastVoteResponse(CamelModel):
    """Cast vote response (acting user's view plus raw counts)."""

    vote_score: int
    upvotes: int
    downvotes: int
    user_vote: UserVote | None


class CastVoteUseCase:
    """Use case for voting on a thread or comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute vote flow.

        The vote type is checked before the target is looked up.

        Args:
            request: Cast vote request

        Returns:
            Vote tally for the acting user

        Raises:
            InvalidVoteIntentError: If vote type is not recognized
            NotFoundError: If the thread or comment doesn't exist
            StorageError: If persistence fails
        """
        intent = parse_intent(request.vote_type)
        resource = (
            "Thread" if request.votable_type == VotableType.THREAD else "Comment"
        )

        tally = await self.vote_service.apply_vote(
            votable_type=request.votable_type,
            entity_id=parse_id(request.votable_id, resource),
            user_id=UserId(UUID(request.user_id)),
            intent=intent,
        )

        return CastVoteResponse(
            vote_score=tally.vote_score,
            upvotes=tally.upvotes,
            downvotes=tally.downvotes,
            user_vote=tally.user_vote,
        )
