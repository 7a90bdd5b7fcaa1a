"""Create thread use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.common import ThreadItem
from agora.domain.service import ScoreAggregator, ThreadService
from agora.domain.value import ThreadCategory, UserId


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    author_id: str  # User ID from authenticated user
    title: str
    content: str
    category: ThreadCategory
    tags: list[str] = []


class CreateThreadUseCase:
    """Use case for starting a discussion thread."""

    def __init__(
        self, thread_service: ThreadService, score_aggregator: ScoreAggregator
    ) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
            score_aggregator: Aggregator for the vote annotation
        """
        self.thread_service = thread_service
        self.score_aggregator = score_aggregator

    async def execute(self, request: CreateThreadRequest) -> ThreadItem:
        """Execute create thread flow.

        Args:
            request: Create thread request

        Returns:
            Created thread (empty vote ledger)
        """
        author_id = UserId(UUID(request.author_id))
        thread = await self.thread_service.create_thread(
            author_id=author_id,
            title=request.title,
            content=request.content,
            category=request.category,
            tags=request.tags,
        )
        return ThreadItem.build(
            thread, self.score_aggregator.compute_view(thread, author_id)
        )
