"""List user threads use case."""

from pydantic import BaseModel

from agora.application.usecase.common import (
    Pagination,
    ThreadItem,
    page_window,
    parse_id,
    parse_user_id,
)
from agora.application.usecase.thread.list_threads import ListThreadsResponse
from agora.config import PaginationSettings
from agora.domain.service import ScoreAggregator, ThreadService
from agora.domain.value import UserId


class ListUserThreadsRequest(BaseModel):
    """List user threads request."""

    author_id: str  # UUID string from the path
    page: int | None = None
    limit: int | None = None
    viewer_id: str | None = None


class ListUserThreadsUseCase:
    """Use case for listing the threads one user started."""

    def __init__(
        self,
        thread_service: ThreadService,
        score_aggregator: ScoreAggregator,
        pagination: PaginationSettings,
    ) -> None:
        self.thread_service = thread_service
        self.score_aggregator = score_aggregator
        self.pagination = pagination

    async def execute(self, request: ListUserThreadsRequest) -> ListThreadsResponse:
        """Execute list user threads flow.

        Raises:
            NotFoundError: If the author ID is malformed
        """
        author_id = UserId(parse_id(request.author_id, "User"))
        page, limit = page_window(
            request.page,
            request.limit,
            default=self.pagination.thread_page_size,
            maximum=self.pagination.max_page_size,
        )
        viewer_id = parse_user_id(request.viewer_id)

        threads, total = await self.thread_service.list_user_threads(
            author_id, page=page, limit=limit
        )

        comment_counts = await self.thread_service.count_comments(
            [t.id for t in threads]
        )

        return ListThreadsResponse(
            threads=[
                ThreadItem.build(
                    t,
                    self.score_aggregator.compute_view(t, viewer_id),
                    comment_count=comment_counts[t.id],
                )
                for t in threads
            ],
            pagination=Pagination.of(page, limit, total),
        )
