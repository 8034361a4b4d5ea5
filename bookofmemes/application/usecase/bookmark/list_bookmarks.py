"""List bookmarks use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from bookofmemes.domain.model import Bookmark
from bookofmemes.domain.service import BookmarkService
from bookofmemes.domain.value import UserId


class BookmarkItem(BaseModel):
    """Bookmark row in response."""

    id: str | None
    user_id: str
    item_id: str
    item_type: str
    created_at: datetime

    @classmethod
    def from_domain(cls, bookmark: Bookmark) -> "BookmarkItem":
        return cls(
            id=bookmark.id,
            user_id=bookmark.user_id,
            item_id=bookmark.item_id,
            item_type=bookmark.item_type,
            created_at=bookmark.created_at,
        )


class ListBookmarksRequest(BaseModel):
    """List bookmarks request."""

    user_id: str = Field(min_length=1)
    item_type: str | None = None


class ListBookmarksUseCase:
    """Use case for listing a user's bookmarks."""

    def __init__(self, bookmark_service: BookmarkService) -> None:
        """Initialize list bookmarks use case.

        Args:
            bookmark_service: Bookmark domain service
        """
        self.bookmark_service = bookmark_service

    async def execute(self, request: ListBookmarksRequest) -> list[BookmarkItem]:
        bookmarks = await self.bookmark_service.list_bookmarks(
            UserId(request.user_id), request.item_type
        )
        return [BookmarkItem.from_domain(b) for b in bookmarks]
