"""Get comments use case."""

from pydantic import BaseModel

from agora.application.usecase.common import (
    CommentItem,
    Pagination,
    page_window,
    parse_id,
    parse_user_id,
)
from agora.config import PaginationSettings
from agora.domain.service import CommentService, ScoreAggregator
from agora.domain.value import ThreadId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    thread_id: str  # UUID string from the path
    page: int | None = None
    limit: int | None = None
    viewer_id: str | None = None  # Authenticated viewer, if any


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentItem]
    pagination: Pagination


class GetCommentsUseCase:
    """Use case for reading a thread's discussion."""

    def __init__(
        self,
        comment_service: CommentService,
        score_aggregator: ScoreAggregator,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            score_aggregator: Aggregator for the vote annotations
            pagination: Page size settings
        """
        self.comment_service = comment_service
        self.score_aggregator = score_aggregator
        self.pagination = pagination

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Top-level comments come newest first, each with its direct replies
        oldest first. Every comment and reply carries the viewer's vote.

        Args:
            request: Get comments request

        Returns:
            Page of annotated comments with page metadata
        """
        thread_id = ThreadId(parse_id(request.thread_id, "Thread"))
        viewer_id = parse_user_id(request.viewer_id)
        page, limit = page_window(
            request.page,
            request.limit,
            default=self.pagination.comment_page_size,
            maximum=self.pagination.max_page_size,
        )

        entries, total = await self.comment_service.get_comments(
            thread_id, page=page, limit=limit
        )

        view = self.score_aggregator.compute_view
        comments = [
            CommentItem.build(
                comment,
                view(comment, viewer_id),
                replies=[
                    CommentItem.build(reply, view(reply, viewer_id))
                    for reply in replies
                ],
            )
            for comment, replies in entries
        ]

        return GetCommentsResponse(
            comments=comments, pagination=Pagination.of(page, limit, total)
        )
