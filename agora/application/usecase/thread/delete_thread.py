"""Delete thread use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.common import parse_id
from agora.domain.service import ThreadService
from agora.domain.value import ThreadId, UserId


class DeleteThreadRequest(BaseModel):
    """Delete thread request."""

    thread_id: str  # UUID string from the path
    user_id: str  # User ID from authenticated user


class DeleteThreadUseCase:
    """Use case for deleting a thread with its comments (author only)."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: DeleteThreadRequest) -> None:
        """Execute delete thread flow.

        Raises:
            NotFoundError: If the thread doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        await self.thread_service.delete_thread(
            thread_id=ThreadId(parse_id(request.thread_id, "Thread")),
            user_id=UserId(UUID(request.user_id)),
        )
