"""Thread routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from agora.application.usecase.thread import (
    CreateThreadRequest,
    CreateThreadUseCase,
    DeleteThreadRequest,
    DeleteThreadUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    ListThreadsRequest,
    ListThreadsUseCase,
    ListUserThreadsRequest,
    ListUserThreadsUseCase,
    UpdateThreadRequest,
    UpdateThreadUseCase,
)
from agora.domain.repository import ThreadSortOrder
from agora.domain.service import JWTService
from agora.domain.value import ThreadCategory, UserId
from agora.interface.api.auth import request_token, require_user
from agora.interface.api.response import success

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)

creator = require_user("create threads")
editor = require_user("update threads")
remover = require_user("delete threads")


class ThreadAPIRequest(BaseModel):
    """API request body for creating or editing a thread."""

    # Length limits are checked by the domain model, after trimming
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    category: ThreadCategory = ThreadCategory.GENERAL
    tags: list[str] = []


def _viewer(jwt_service: JWTService, token: str | None) -> str | None:
    user_id = jwt_service.get_user_id_from_token(token)
    return str(user_id) if user_id else None


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_thread(
    body: ThreadAPIRequest,
    create_thread_use_case: FromDishka[CreateThreadUseCase],
    user_id: UserId = Depends(creator),
) -> dict:
    """Start a discussion thread.

    Requires authentication.
    """
    thread = await create_thread_use_case.execute(
        CreateThreadRequest(
            author_id=str(user_id),
            title=body.title,
            content=body.content,
            category=body.category,
            tags=body.tags,
        )
    )
    return success(thread)


@router.get("")
async def list_threads(
    list_threads_use_case: FromDishka[ListThreadsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1),
    category: str | None = None,
    search: str | None = None,
    sort: ThreadSortOrder = ThreadSortOrder.RECENT,
    token: str | None = Depends(request_token),
) -> dict:
    """List threads with optional category filter, search and sort.

    Args:
        page: 1-based page number
        limit: Page size (capped by configuration)
        category: Category name, or "All"
        search: Words that must all appear in title, content or tags
        sort: recent, oldest, top or views
    """
    response = await list_threads_use_case.execute(
        ListThreadsRequest(
            category=category,
            search=search,
            sort=sort,
            page=page,
            limit=limit,
            viewer_id=_viewer(jwt_service, token),
        )
    )
    return success(response.threads, pagination=response.pagination)


@router.get("/user/{user_id}")
async def list_user_threads(
    user_id: str,
    list_user_threads_use_case: FromDishka[ListUserThreadsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1),
    token: str | None = Depends(request_token),
) -> dict:
    """List the threads a user started, newest first."""
    response = await list_user_threads_use_case.execute(
        ListUserThreadsRequest(
            author_id=user_id,
            page=page,
            limit=limit,
            viewer_id=_viewer(jwt_service, token),
        )
    )
    return success(response.threads, pagination=response.pagination)


@router.get("/{thread_id}")
async def get_thread(
    thread_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(request_token),
) -> dict:
    """Open a thread.

    Authentication is optional: signed-in viewers are counted once and
    see their own vote; anonymous views always count.
    """
    thread = await get_thread_use_case.execute(
        GetThreadRequest(thread_id=thread_id, viewer_id=_viewer(jwt_service, token))
    )
    return success(thread)


@router.put("/{thread_id}")
async def update_thread(
    thread_id: str,
    body: ThreadAPIRequest,
    update_thread_use_case: FromDishka[UpdateThreadUseCase],
    user_id: UserId = Depends(editor),
) -> dict:
    """Edit a thread.

    Requires authentication; only the author may edit.
    """
    thread = await update_thread_use_case.execute(
        UpdateThreadRequest(
            thread_id=thread_id,
            user_id=str(user_id),
            title=body.title,
            content=body.content,
            category=body.category,
            tags=body.tags,
        )
    )
    return success(thread)


@router.delete("/{thread_id}")
async def delete_thread(
    thread_id: str,
    delete_thread_use_case: FromDishka[DeleteThreadUseCase],
    user_id: UserId = Depends(remover),
) -> dict:
    """Delete a thread together with its comments.

    Requires authentication; only the author may delete.
    """
    await delete_thread_use_case.execute(
        DeleteThreadRequest(thread_id=thread_id, user_id=str(user_id))
    )
    return success(message="Thread deleted successfully")
