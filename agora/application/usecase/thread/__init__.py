"""Thread use cases."""

from .create_thread import CreateThreadRequest, CreateThreadUseCase
from .delete_thread import DeleteThreadRequest, DeleteThreadUseCase
from .get_thread import GetThreadRequest, GetThreadUseCase
from .list_threads import ListThreadsRequest, ListThreadsResponse, ListThreadsUseCase
from .list_user_threads import ListUserThreadsRequest, ListUserThreadsUseCase
from .update_thread import UpdateThreadRequest, UpdateThreadUseCase

__all__ = [
    "CreateThreadRequest",
    "CreateThreadUseCase",
    "DeleteThreadRequest",
    "DeleteThreadUseCase",
    "GetThreadRequest",
    "GetThreadUseCase",
    "ListThreadsRequest",
    "ListThreadsResponse",
    "ListThreadsUseCase",
    "ListUserThreadsRequest",
    "ListUserThreadsUseCase",
    "UpdateThreadRequest",
    "UpdateThreadUseCase",
]
