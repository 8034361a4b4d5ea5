"""Get mentions use case."""

from pydantic import BaseModel, Field

from bookofmemes.domain.service import FeedService
from bookofmemes.domain.value import UserId

from .get_user_feed import FeedEntryItem


class GetMentionsRequest(BaseModel):
    """Get mentions request."""

    user_id: str = Field(min_length=1)


class GetMentionsUseCase:
    """Use case for comments that mention a user."""

    def __init__(self, feed_service: FeedService) -> None:
        self.feed_service = feed_service

    async def execute(self, request: GetMentionsRequest) -> list[FeedEntryItem]:
        mentions = await self.feed_service.get_mentions(UserId(request.user_id))
        return [FeedEntryItem.from_domain(entry) for entry in mentions]
