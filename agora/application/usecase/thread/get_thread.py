"""Get thread use case."""

from pydantic import BaseModel

from agora.application.usecase.common import ThreadItem, parse_id, parse_user_id
from agora.domain.service import ScoreAggregator, ThreadService
from agora.domain.value import ThreadId


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str  # UUID string from the path
    viewer_id: str | None = None  # Authenticated viewer, if any


class GetThreadUseCase:
    """Use case for opening a thread (counts the view)."""

    def __init__(
        self, thread_service: ThreadService, score_aggregator: ScoreAggregator
    ) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
            score_aggregator: Aggregator for the vote annotation
        """
        self.thread_service = thread_service
        self.score_aggregator = score_aggregator

    async def execute(self, request: GetThreadRequest) -> ThreadItem:
        """Execute get thread flow.

        Records the view, then annotates the thread with the viewer's vote.

        Args:
            request: Get thread request

        Returns:
            Thread with vote score and the viewer's vote

        Raises:
            NotFoundError: If the thread doesn't exist
        """
        thread_id = ThreadId(parse_id(request.thread_id, "Thread"))
        viewer_id = parse_user_id(request.viewer_id)

        thread = await self.thread_service.get_thread(thread_id)
        thread = await self.thread_service.record_view(thread, viewer_id)
        comment_counts = await self.thread_service.count_comments([thread.id])

        return ThreadItem.build(
            thread,
            self.score_aggregator.compute_view(thread, viewer_id),
            comment_count=comment_counts[thread.id],
        )
