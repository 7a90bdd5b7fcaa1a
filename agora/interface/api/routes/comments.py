"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from agora.domain.service import JWTService
from agora.domain.value import UserId
from agora.interface.api.auth import request_token, require_user
from agora.interface.api.response import success

router = APIRouter(prefix="/threads", tags=["comments"], route_class=DishkaRoute)

commenter = require_user("comment")
editor = require_user("update comments")
remover = require_user("delete comments")


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    # Length limit is checked by the domain model, after trimming
    content: str = Field(min_length=1)
    parent_comment: str | None = Field(default=None, alias="parentComment")


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str = Field(min_length=1)


@router.post("/{thread_id}/comments", status_code=status.HTTP_201_CREATED)
async def create_comment(
    thread_id: str,
    body: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    user_id: UserId = Depends(commenter),
) -> dict:
    """Comment on a thread, or reply to a comment with parentComment.

    Requires authentication.
    """
    comment = await create_comment_use_case.execute(
        CreateCommentRequest(
            thread_id=thread_id,
            author_id=str(user_id),
            content=body.content,
            parent_id=body.parent_comment,
        )
    )
    return success(comment)


@router.get("/{thread_id}/comments")
async def get_comments(
    thread_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1),
    token: str | None = Depends(request_token),
) -> dict:
    """Get top-level comments of a thread with their replies.

    Authentication is optional; signed-in viewers see their own votes.
    """
    user_id = jwt_service.get_user_id_from_token(token)

    response = await get_comments_use_case.execute(
        GetCommentsRequest(
            thread_id=thread_id,
            page=page,
            limit=limit,
            viewer_id=str(user_id) if user_id else None,
        )
    )
    return success(response.comments, pagination=response.pagination)


@router.put("/comments/{comment_id}")
async def update_comment(
    comment_id: str,
    body: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    user_id: UserId = Depends(editor),
) -> dict:
    """Edit a comment.

    Requires authentication; only the author may edit.
    """
    comment = await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, user_id=str(user_id), content=body.content
        )
    )
    return success(comment)


@router.delete("/comments/{comment_id}")
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    user_id: UserId = Depends(remover),
) -> dict:
    """Delete a comment together with its replies.

    Requires authentication; only the author may delete.
    """
    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=str(user_id))
    )
    return success(message="Comment deleted successfully")
