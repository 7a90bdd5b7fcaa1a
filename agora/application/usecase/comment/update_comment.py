"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.common import CommentItem, parse_id
from agora.domain.service import CommentService, ScoreAggregator
from agora.domain.value import CommentId, UserId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string from the path
    user_id: str  # User ID from authenticated user
    content: str


class UpdateCommentUseCase:
    """Use case for editing a comment (author only)."""

    def __init__(
        self, comment_service: CommentService, score_aggregator: ScoreAggregator
    ) -> None:
        self.comment_service = comment_service
        self.score_aggregator = score_aggregator

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        user_id = UserId(UUID(request.user_id))
        comment = await self.comment_service.update_comment(
            comment_id=CommentId(parse_id(request.comment_id, "Comment")),
            user_id=user_id,
            content=request.content,
        )
        return CommentItem.build(
            comment, self.score_aggregator.compute_view(comment, user_id)
        )
