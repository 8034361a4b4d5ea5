"""Bookmark routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from bookofmemes.application.usecase.bookmark import (
    AddBookmarkUseCase,
    BookmarkItem,
    BookmarkRequest,
    BookmarkUserItem,
    ListBookmarksRequest,
    ListBookmarksUseCase,
    ListBookmarkUsersRequest,
    ListBookmarkUsersUseCase,
    RemoveBookmarkResponse,
    RemoveBookmarkUseCase,
)

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"], route_class=DishkaRoute)


@router.get("", response_model=list[BookmarkItem], summary="Fetch bookmarks")
async def list_bookmarks(
    list_bookmarks_use_case: FromDishka[ListBookmarksUseCase],
    user_id: str = Query(min_length=1),
    item_type: str | None = None,
) -> list[BookmarkItem]:
    """A user's bookmarks, newest first."""
    return await list_bookmarks_use_case.execute(
        ListBookmarksRequest(user_id=user_id, item_type=item_type)
    )


@router.post("", response_model=BookmarkItem, summary="Save bookmark")
async def add_bookmark(
    request: BookmarkRequest,
    add_bookmark_use_case: FromDishka[AddBookmarkUseCase],
) -> BookmarkItem:
    """Bookmark an item."""
    return await add_bookmark_use_case.execute(request)


@router.delete("", response_model=RemoveBookmarkResponse, summary="Remove bookmark")
async def remove_bookmark(
    request: BookmarkRequest,
    remove_bookmark_use_case: FromDishka[RemoveBookmarkUseCase],
) -> RemoveBookmarkResponse:
    """Remove a bookmark."""
    return await remove_bookmark_use_case.execute(request)


@router.get(
    "/users", response_model=list[BookmarkUserItem], summary="Fetch bookmark users"
)
async def list_bookmark_users(
    list_bookmark_users_use_case: FromDishka[ListBookmarkUsersUseCase],
    item_id: str = Query(min_length=1),
    item_type: str = Query(min_length=1),
) -> list[BookmarkUserItem]:
    """Users who bookmarked an item."""
    return await list_bookmark_users_use_case.execute(
        ListBookmarkUsersRequest(item_id=item_id, item_type=item_type)
    )
