"""Add and remove bookmark use cases."""

from pydantic import BaseModel, Field

from bookofmemes.domain.service import BookmarkService
from bookofmemes.domain.value import ItemId, UserId

from .list_bookmarks import BookmarkItem


class BookmarkRequest(BaseModel):
    """Identifies one bookmark."""

    user_id: str = Field(min_length=1)
    item_id: str = Field(min_length=1)
    item_type: str = Field(min_length=1)


class RemoveBookmarkResponse(BaseModel):
    """Remove bookmark response."""

    message: str


class AddBookmarkUseCase:
    """Use case for bookmarking an item (idempotent)."""

    def __init__(self, bookmark_service: BookmarkService) -> None:
        self.bookmark_service = bookmark_service

    async def execute(self, request: BookmarkRequest) -> BookmarkItem:
        bookmark = await self.bookmark_service.add_bookmark(
            UserId(request.user_id), ItemId(request.item_id), request.item_type
        )
        return BookmarkItem.from_domain(bookmark)


class RemoveBookmarkUseCase:
    """Use case for removing a bookmark."""

    def __init__(self, bookmark_service: BookmarkService) -> None:
        self.bookmark_service = bookmark_service

    async def execute(self, request: BookmarkRequest) -> RemoveBookmarkResponse:
        await self.bookmark_service.remove_bookmark(
            UserId(request.user_id), ItemId(request.item_id), request.item_type
        )
        return RemoveBookmarkResponse(message="Bookmark removed")
