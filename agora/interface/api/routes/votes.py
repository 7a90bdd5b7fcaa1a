"""Vote and like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from agora.application.usecase.like import ToggleLikeRequest, ToggleLikeUseCase
from agora.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from agora.domain.value import UserId, VotableType
from agora.interface.api.auth import require_user
from agora.interface.api.response import success

router = APIRouter(prefix="/threads", tags=["votes"], route_class=DishkaRoute)

voter = require_user("vote")
liker = require_user("like")


class VoteAPIRequest(BaseModel):
    """API request body for a vote."""

    vote_type: str = Field(alias="voteType")


async def _cast_vote(
    votable_type: VotableType,
    votable_id: str,
    body: VoteAPIRequest,
    use_case: CastVoteUseCase,
    user_id: UserId,
) -> dict:
    response = await use_case.execute(
        CastVoteRequest(
            votable_type=votable_type,
            votable_id=votable_id,
            user_id=str(user_id),
            vote_type=body.vote_type,
        )
    )
    return success(response)


async def _toggle_like(
    votable_type: VotableType,
    votable_id: str,
    use_case: ToggleLikeUseCase,
    user_id: UserId,
) -> dict:
    response = await use_case.execute(
        ToggleLikeRequest(
            votable_type=votable_type, votable_id=votable_id, user_id=str(user_id)
        )
    )
    return success(response)


@router.put("/{thread_id}/vote")
async def vote_thread(
    thread_id: str,
    body: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    user_id: UserId = Depends(voter),
) -> dict:
    """Upvote or downvote a thread.

    Repeating the same vote cancels it; the opposite vote switches it.
    Requires authentication.

    Returns:
        {voteScore, upvotes, downvotes, userVote} for the acting user
    """
    return await _cast_vote(
        VotableType.THREAD, thread_id, body, cast_vote_use_case, user_id
    )


@router.put("/{thread_id}/like")
async def like_thread(
    thread_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    user_id: UserId = Depends(liker),
) -> dict:
    """Like or unlike a thread. Requires authentication."""
    return await _toggle_like(
        VotableType.THREAD, thread_id, toggle_like_use_case, user_id
    )


@router.put("/comments/{comment_id}/vote")
async def vote_comment(
    comment_id: str,
    body: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    user_id: UserId = Depends(voter),
) -> dict:
    """Upvote or downvote a comment.

    Same contract as voting on a thread. Requires authentication.
    """
    return await _cast_vote(
        VotableType.COMMENT, comment_id, body, cast_vote_use_case, user_id
    )


@router.put("/comments/{comment_id}/like")
async def like_comment(
    comment_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    user_id: UserId = Depends(liker),
) -> dict:
    """Like or unlike a comment. Requires authentication."""
    return await _toggle_like(
        VotableType.COMMENT, comment_id, toggle_like_use_case, user_id
    )
