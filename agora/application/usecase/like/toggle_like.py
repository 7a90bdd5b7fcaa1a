"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.common import CamelModel, parse_id
from agora.domain.service import CommentService, ThreadService
from agora.domain.value import CommentId, ThreadId, UserId, VotableType


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    votable_type: VotableType
    votable_id: str  # UUID string from the path
    user_id: str  # User ID from authenticated user


class ToggleLikeResponse(CamelModel):
    """Toggle like response."""

    likes: int
    is_liked: bool


class ToggleLikeUseCase:
    """Use case for liking or unliking a thread or comment."""

    def __init__(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> None:
        """Initialize toggle like use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
        """
        self.thread_service = thread_service
        self.comment_service = comment_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Raises:
            NotFoundError: If the thread or comment doesn't exist
        """
        user_id = UserId(UUID(request.user_id))

        if request.votable_type == VotableType.THREAD:
            thread_id = ThreadId(parse_id(request.votable_id, "Thread"))
            likes, is_liked = await self.thread_service.toggle_like(thread_id, user_id)
        else:  # VotableType.COMMENT
            comment_id = CommentId(parse_id(request.votable_id, "Comment"))
            likes, is_liked = await self.comment_service.toggle_like(
                comment_id, user_id
            )

        return ToggleLikeResponse(likes=likes, is_liked=is_liked)
