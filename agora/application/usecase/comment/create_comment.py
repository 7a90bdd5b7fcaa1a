"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.common import CommentItem, parse_id
from agora.domain.error import ValidationError
from agora.domain.service import CommentService, ScoreAggregator
from agora.domain.value import CommentId, ThreadId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    thread_id: str  # UUID string from the path
    author_id: str  # User ID from authenticated user
    content: str
    parent_id: str | None = None  # UUID string for replies


class CreateCommentUseCase:
    """Use case for commenting on a thread or replying to a comment."""

    def __init__(
        self, comment_service: CommentService, score_aggregator: ScoreAggregator
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            score_aggregator: Aggregator for the vote annotation
        """
        self.comment_service = comment_service
        self.score_aggregator = score_aggregator

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Created comment (empty vote ledger)

        Raises:
            NotFoundError: If the thread doesn't exist
            ValidationError: If the parent comment is invalid
        """
        author_id = UserId(UUID(request.author_id))

        parent_id = None
        if request.parent_id:
            try:
                parent_id = CommentId(UUID(request.parent_id))
            except ValueError:
                raise ValidationError("Parent comment not found")

        comment = await self.comment_service.add_comment(
            thread_id=ThreadId(parse_id(request.thread_id, "Thread")),
            author_id=author_id,
            content=request.content,
            parent_id=parent_id,
        )
        return CommentItem.build(
            comment, self.score_aggregator.compute_view(comment, author_id)
        )
