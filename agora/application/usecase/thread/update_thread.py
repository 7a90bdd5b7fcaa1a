"""Update thread use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.common import ThreadItem, parse_id
from agora.domain.service import ScoreAggregator, ThreadService
from agora.domain.value import ThreadCategory, ThreadId, UserId


class UpdateThreadRequest(BaseModel):
    """Update thread request."""

    thread_id: str  # UUID string from the path
    user_id: str  # User ID from authenticated user
    title: str
    content: str
    category: ThreadCategory
    tags: list[str] = []


class UpdateThreadUseCase:
    """Use case for editing a thread (author only)."""

    def __init__(
        self, thread_service: ThreadService, score_aggregator: ScoreAggregator
    ) -> None:
        """Initialize update thread use case.

        Args:
            thread_service: Thread domain service
            score_aggregator: Aggregator for the vote annotation
        """
        self.thread_service = thread_service
        self.score_aggregator = score_aggregator

    async def execute(self, request: UpdateThreadRequest) -> ThreadItem:
        """Execute update thread flow.

        Args:
            request: Update thread request

        Returns:
            Updated thread annotated for the author

        Raises:
            NotFoundError: If the thread doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        user_id = UserId(UUID(request.user_id))
        thread = await self.thread_service.update_thread(
            thread_id=ThreadId(parse_id(request.thread_id, "Thread")),
            user_id=user_id,
            title=request.title,
            content=request.content,
            category=request.category,
            tags=request.tags,
        )
        comment_counts = await self.thread_service.count_comments([thread.id])
        return ThreadItem.build(
            thread,
            self.score_aggregator.compute_view(thread, user_id),
            comment_count=comment_counts[thread.id],
        )
