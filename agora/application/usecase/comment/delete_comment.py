"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.common import parse_id
from agora.domain.service import CommentService
from agora.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string from the path
    user_id: str  # User ID from authenticated user


class DeleteCommentUseCase:
    """Use case for deleting a comment and its replies (author only)."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        await self.comment_service.delete_comment(
            comment_id=CommentId(parse_id(request.comment_id, "Comment")),
            user_id=UserId(UUID(request.user_id)),
        )
