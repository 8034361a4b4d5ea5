"""Get user content use case."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from bookofmemes.domain.model import Cover
from bookofmemes.domain.service import ContentService, UserContentEntry
from bookofmemes.domain.value import ContentType, UserId


class CoverItem(BaseModel):
    """Main cover of a content item."""

    image_url: str | None
    is_main_cover: bool

    @classmethod
    def from_domain(cls, cover: Cover) -> "CoverItem":
        return cls(image_url=cover.image_url, is_main_cover=cover.is_main_cover)


class UserContentItem(BaseModel):
    """A content item of any type.

    Type-specific columns are passed through as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    title: str | None = None
    author_id: str | None = None
    created_at: datetime | None = None
    item_type: ContentType
    content_covers: CoverItem | None

    @classmethod
    def from_domain(cls, entry: UserContentEntry) -> "UserContentItem":
        return cls(
            **entry.item.model_dump(),
            item_type=entry.item_type,
            content_covers=CoverItem.from_domain(entry.cover) if entry.cover else None,
        )


class GetUserContentRequest(BaseModel):
    """Get user content request."""

    user_id: str


class GetUserContentUseCase:
    """Use case for everything a user has published."""

    def __init__(self, content_service: ContentService) -> None:
        """Initialize get user content use case.

        Args:
            content_service: Content domain service
        """
        self.content_service = content_service

    async def execute(self, request: GetUserContentRequest) -> list[UserContentItem]:
        """Execute get user content flow.

        Content types that fail to load are left out rather than failing
        the request.

        Returns:
            Stories, memes, puzzles and kids collections, each with its
            main cover when it has one
        """
        entries = await self.content_service.list_user_content(UserId(request.user_id))
        return [UserContentItem.from_domain(entry) for entry in entries]
