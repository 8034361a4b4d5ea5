"""Follow routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status

from bookofmemes.application.usecase.follow import (
    FollowRequest,
    FollowResponse,
    FollowStatusResponse,
    FollowUserUseCase,
    GetFollowStatusRequest,
    GetFollowStatusUseCase,
    UnfollowResponse,
    UnfollowUserUseCase,
)

router = APIRouter(prefix="/follow", tags=["follow"], route_class=DishkaRoute)


@router.post(
    "",
    response_model=FollowResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Follow user",
)
async def follow_user(
    request: FollowRequest,
    follow_user_use_case: FromDishka[FollowUserUseCase],
) -> FollowResponse:
    """Follow a user."""
    return await follow_user_use_case.execute(request)


@router.delete("", response_model=UnfollowResponse, summary="Unfollow user")
async def unfollow_user(
    request: FollowRequest,
    unfollow_user_use_case: FromDishka[UnfollowUserUseCase],
) -> UnfollowResponse:
    """Stop following a user."""
    return await unfollow_user_use_case.execute(request)


@router.get(
    "/status", response_model=FollowStatusResponse, summary="Check follow status"
)
async def get_follow_status(
    get_follow_status_use_case: FromDishka[GetFollowStatusUseCase],
    follower: str = Query(min_length=1),
    following: str = Query(min_length=1),
) -> FollowStatusResponse:
    """Whether ``follower`` follows ``following``."""
    return await get_follow_status_use_case.execute(
        GetFollowStatusRequest(follower_id=follower, following_id=following)
    )
