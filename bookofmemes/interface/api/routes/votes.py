"""Comment vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, Field

from bookofmemes.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    RemoveVoteRequest,
    RemoveVoteUseCase,
    VoteResponse,
)
from bookofmemes.domain.value import VoteType

router = APIRouter(prefix="/comments", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting on a comment."""

    user_id: str = Field(min_length=1)
    vote_type: VoteType


class RemoveVoteAPIRequest(BaseModel):
    """API request for withdrawing a vote."""

    user_id: str = Field(min_length=1)


@router.post("/{comment_id}/vote", response_model=VoteResponse, summary="Update vote")
async def cast_vote(
    comment_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> VoteResponse:
    """Like or dislike a comment. A second vote replaces the first."""
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            comment_id=comment_id,
            user_id=request.user_id,
            vote_type=request.vote_type,
        )
    )


@router.delete("/{comment_id}/vote", response_model=VoteResponse, summary="Remove vote")
async def remove_vote(
    comment_id: str,
    request: RemoveVoteAPIRequest,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
) -> VoteResponse:
    """Withdraw a vote on a comment."""
    return await remove_vote_use_case.execute(
        RemoveVoteRequest(comment_id=comment_id, user_id=request.user_id)
    )
