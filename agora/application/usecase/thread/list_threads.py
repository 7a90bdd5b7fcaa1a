"""List threads use case."""

from pydantic import BaseModel

from agora.application.usecase.common import (
    Pagination,
    ThreadItem,
    page_window,
    parse_user_id,
)
from agora.config import PaginationSettings
from agora.domain.error import ValidationError
from agora.domain.repository import ThreadSortOrder
from agora.domain.service import ScoreAggregator, ThreadService
from agora.domain.value import ThreadCategory

ALL_CATEGORIES = "All"


class ListThreadsRequest(BaseModel):
    """List threads request."""

    category: str | None = None  # None or "All" for every category
    search: str | None = None
    sort: ThreadSortOrder = ThreadSortOrder.RECENT
    page: int | None = None
    limit: int | None = None
    viewer_id: str | None = None


class ListThreadsResponse(BaseModel):
    """List threads response."""

    threads: list[ThreadItem]
    pagination: Pagination


class ListThreadsUseCase:
    """Use case for browsing and searching threads."""

    def __init__(
        self,
        thread_service: ThreadService,
        score_aggregator: ScoreAggregator,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list threads use case.

        Args:
            thread_service: Thread domain service
            score_aggregator: Aggregator for the vote annotation
            pagination: Page size settings
        """
        self.thread_service = thread_service
        self.score_aggregator = score_aggregator
        self.pagination = pagination

    async def execute(self, request: ListThreadsRequest) -> ListThreadsResponse:
        """Execute list threads flow.

        Args:
            request: Filters, sort order and page

        Returns:
            Page of threads annotated for the viewer, with page metadata

        Raises:
            ValidationError: If the category is unknown
        """
        category = None
        if request.category and request.category != ALL_CATEGORIES:
            try:
                category = ThreadCategory(request.category)
            except ValueError:
                raise ValidationError(f"Unknown category: {request.category}")

        page, limit = page_window(
            request.page,
            request.limit,
            default=self.pagination.thread_page_size,
            maximum=self.pagination.max_page_size,
        )
        viewer_id = parse_user_id(request.viewer_id)

        threads, total = await self.thread_service.list_threads(
            category=category,
            search=request.search,
            sort=request.sort,
            page=page,
            limit=limit,
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
