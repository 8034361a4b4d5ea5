"""List bookmark users use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from bookofmemes.domain.service import BookmarkService
from bookofmemes.domain.value import ItemId


class BookmarkUserItem(BaseModel):
    """A user who bookmarked an item."""

    user_id: str
    full_name: str | None
    avatar_url: str | None
    created_at: datetime


class ListBookmarkUsersRequest(BaseModel):
    """List bookmark users request."""

    item_id: str = Field(min_length=1)
    item_type: str = Field(min_length=1)


class ListBookmarkUsersUseCase:
    """Use case for listing who bookmarked an item."""

    def __init__(self, bookmark_service: BookmarkService) -> None:
        self.bookmark_service = bookmark_service

    async def execute(self, request: ListBookmarkUsersRequest) -> list[BookmarkUserItem]:
        users = await self.bookmark_service.list_users(
            ItemId(request.item_id), request.item_type
        )
        return [
            BookmarkUserItem(
                user_id=bookmark.user_id,
                full_name=profile.full_name if profile else None,
                avatar_url=profile.avatar_url if profile else None,
                created_at=bookmark.created_at,
            )
            for bookmark, profile in users
        ]
