"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from bookofmemes.application.usecase.follow import (
    FollowEdgeItem,
    ListFollowersUseCase,
    ListFollowingUseCase,
    ListFollowsRequest,
)
from bookofmemes.application.usecase.user import (
    GetPostsCountRequest,
    GetPostsCountUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    GetUserContentRequest,
    GetUserContentUseCase,
    GetUserSummaryRequest,
    GetUserSummaryUseCase,
    PostsCountResponse,
    ProfileResponse,
    UserContentItem,
    UserSummaryResponse,
)

router = APIRouter(tags=["users"], route_class=DishkaRoute)


@router.get(
    "/users/{user_id}", response_model=UserSummaryResponse, summary="Fetch user profile"
)
async def get_user(
    user_id: str,
    get_user_summary_use_case: FromDishka[GetUserSummaryUseCase],
) -> UserSummaryResponse:
    """A user's profile with posts, followers and following counts.

    Args:
        user_id: User ID
        get_user_summary_use_case: Get user summary use case from DI

    Returns:
        Profile and counters
    """
    return await get_user_summary_use_case.execute(GetUserSummaryRequest(user_id=user_id))


@router.get(
    "/users/{user_id}/followers",
    response_model=list[FollowEdgeItem],
    summary="Fetch followers",
)
async def list_followers(
    user_id: str,
    list_followers_use_case: FromDishka[ListFollowersUseCase],
) -> list[FollowEdgeItem]:
    """Users following this user, each with the follower's profile."""
    return await list_followers_use_case.execute(ListFollowsRequest(user_id=user_id))


@router.get(
    "/users/{user_id}/following",
    response_model=list[FollowEdgeItem],
    summary="Fetch following",
)
async def list_following(
    user_id: str,
    list_following_use_case: FromDishka[ListFollowingUseCase],
) -> list[FollowEdgeItem]:
    """Users this user follows, each with the followed user's profile."""
    return await list_following_use_case.execute(ListFollowsRequest(user_id=user_id))


@router.get(
    "/users/{user_id}/content",
    response_model=list[UserContentItem],
    summary="Fetch user content",
)
async def get_user_content(
    user_id: str,
    get_user_content_use_case: FromDishka[GetUserContentUseCase],
) -> list[UserContentItem]:
    """Everything a user has published, each item with its main cover."""
    return await get_user_content_use_case.execute(GetUserContentRequest(user_id=user_id))


@router.get(
    "/users/{user_id}/posts/count",
    response_model=PostsCountResponse,
    summary="Fetch posts count",
)
async def get_posts_count(
    user_id: str,
    get_posts_count_use_case: FromDishka[GetPostsCountUseCase],
) -> PostsCountResponse:
    """Number of items a user has published."""
    return await get_posts_count_use_case.execute(GetPostsCountRequest(user_id=user_id))


@router.get(
    "/profiles/{user_id}", response_model=ProfileResponse, summary="Fetch profile"
)
async def get_profile(
    user_id: str,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ProfileResponse:
    """A user's display name and avatar."""
    return await get_profile_use_case.execute(GetProfileRequest(user_id=user_id))
