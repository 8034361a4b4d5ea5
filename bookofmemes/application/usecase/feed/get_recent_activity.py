"""Get recent activity use case."""

from pydantic import BaseModel, Field

from bookofmemes.domain.service import FeedService

from .get_user_feed import FeedEntryItem


class GetRecentActivityRequest(BaseModel):
    """Get recent activity request."""

    limit: int = Field(default=20, ge=1, le=100)


class GetRecentActivityUseCase:
    """Use case for the global feed of recent comments."""

    def __init__(self, feed_service: FeedService) -> None:
        """Initialize get recent activity use case.

        Args:
            feed_service: Feed domain service
        """
        self.feed_service = feed_service

    async def execute(self, request: GetRecentActivityRequest) -> list[FeedEntryItem]:
        """Execute get recent activity flow.

        Returns:
            Most recent comments first, tagged reply or item comment
        """
        activity = await self.feed_service.get_recent_activity(request.limit)
        return [FeedEntryItem.from_domain(entry) for entry in activity]
