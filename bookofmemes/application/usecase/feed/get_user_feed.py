"""Get user feed use case."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bookofmemes.domain.service import FeedEntry, FeedService
from bookofmemes.domain.value import FeedEntryType, UserId


class FeedEntryItem(BaseModel):
    """Feed entry in response (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    type: FeedEntryType
    item_id: str
    item_type: str | None
    content: str
    user_id: str
    author_name: str
    avatar_url: str
    likes: int
    created_at: datetime
    original_comment: str | None = None

    @classmethod
    def from_domain(cls, entry: FeedEntry) -> "FeedEntryItem":
        comment = entry.comment
        return cls(
            id=comment.id,
            type=entry.type,
            item_id=comment.item_id,
            item_type=comment.item_type,
            content=comment.content,
            user_id=comment.user_id,
            author_name=entry.author.full_name,
            avatar_url=entry.author.avatar_url,
            likes=comment.likes,
            created_at=comment.created_at,
            original_comment=entry.original_comment,
        )


class GetUserFeedRequest(BaseModel):
    """Get user feed request."""

    user_id: str = Field(min_length=1)


class GetUserFeedUseCase:
    """Use case for a user's activity feed."""

    def __init__(self, feed_service: FeedService) -> None:
        """Initialize get user feed use case.

        Args:
            feed_service: Feed domain service
        """
        self.feed_service = feed_service

    async def execute(self, request: GetUserFeedRequest) -> list[FeedEntryItem]:
        """Execute get user feed flow.

        Args:
            request: Feed owner

        Returns:
            Comments on the user's items, then replies to them, or the top
            comments system-wide when the user has no activity
        """
        feed = await self.feed_service.get_user_feed(UserId(request.user_id))
        return [FeedEntryItem.from_domain(entry) for entry in feed]
