"""Feed routes."""

from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from bookofmemes.application.usecase.feed import (
    CombinedFeedResponse,
    FeedEntryItem,
    FeedPostItem,
    GetCombinedFeedUseCase,
    GetCommentHistoryRequest,
    GetCommentHistoryUseCase,
    GetFeedPostRequest,
    GetFeedPostUseCase,
    GetMentionsRequest,
    GetMentionsUseCase,
    GetRecentActivityRequest,
    GetRecentActivityUseCase,
    GetUserFeedRequest,
    GetUserFeedUseCase,
)

router = APIRouter(prefix="/feeds", tags=["feeds"], route_class=DishkaRoute)


@router.get("", response_model=list[FeedEntryItem], summary="Fetch feeds")
async def get_recent_activity(
    get_recent_activity_use_case: FromDishka[GetRecentActivityUseCase],
    limit: int = Query(default=20, ge=1, le=100),
) -> list[FeedEntryItem]:
    """Most recent comments across the site."""
    return await get_recent_activity_use_case.execute(
        GetRecentActivityRequest(limit=limit)
    )


@router.get("/user", response_model=list[FeedEntryItem], summary="Fetch user feed")
async def get_user_feed(
    get_user_feed_use_case: FromDishka[GetUserFeedUseCase],
    user_id: str = Query(alias="userId", min_length=1),
) -> list[FeedEntryItem]:
    """A user's activity feed.

    Comments on the user's items come first, then replies to those
    comments. A user with neither gets the most liked comments instead.
    """
    return await get_user_feed_use_case.execute(GetUserFeedRequest(user_id=user_id))


@router.get(
    "/mentions", response_model=list[FeedEntryItem], summary="Fetch mentions"
)
async def get_mentions(
    get_mentions_use_case: FromDishka[GetMentionsUseCase],
    user_id: str = Query(alias="userId", min_length=1),
) -> list[FeedEntryItem]:
    """Comments mentioning ``@<userId>``, newest first."""
    return await get_mentions_use_case.execute(GetMentionsRequest(user_id=user_id))


@router.get(
    "/interactions/{user_id}",
    response_model=list[FeedEntryItem],
    summary="Fetch interactions",
)
async def get_comment_history(
    user_id: str,
    get_comment_history_use_case: FromDishka[GetCommentHistoryUseCase],
    history_type: Literal["feeds", "mentions"] = Query(
        default="feeds", alias="type"
    ),
) -> list[FeedEntryItem]:
    """Comments the user has written, newest first.

    With ``type=mentions`` only comments on other users' items are listed.
    """
    return await get_comment_history_use_case.execute(
        GetCommentHistoryRequest(user_id=user_id, type=history_type)
    )


@router.get("/item/{post_id}", response_model=FeedPostItem, summary="Fetch feed")
async def get_feed_post(
    post_id: str,
    get_feed_post_use_case: FromDishka[GetFeedPostUseCase],
) -> FeedPostItem:
    """One feed post with its author's name."""
    return await get_feed_post_use_case.execute(GetFeedPostRequest(post_id=post_id))


@router.get(
    "/combined/{user_id}",
    response_model=CombinedFeedResponse,
    summary="Fetch combined feed",
)
async def get_combined_feed(
    user_id: str,
    get_combined_feed_use_case: FromDishka[GetCombinedFeedUseCase],
) -> CombinedFeedResponse:
    """Every story and every feed post, each list newest first.

    The feed is the same for every user.
    """
    return await get_combined_feed_use_case.execute()
