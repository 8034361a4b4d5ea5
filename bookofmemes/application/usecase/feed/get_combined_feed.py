"""Get combined feed use case."""

from datetime import datetime

from pydantic import BaseModel

from bookofmemes.application.usecase.story import StoryItem
from bookofmemes.domain.model import FeedPost
from bookofmemes.domain.service import FeedService


class FeedPostSummary(BaseModel):
    """Feed post as listed in the combined feed."""

    id: str
    caption: str | None
    image_url: str | None
    author_id: str | None
    created_at: datetime | None

    @classmethod
    def from_domain(cls, post: FeedPost) -> "FeedPostSummary":
        return cls(
            id=post.id,
            caption=post.caption,
            image_url=post.image_url,
            author_id=post.author_id,
            created_at=post.created_at,
        )


class CombinedFeedResponse(BaseModel):
    """Stories and feed posts, each newest first."""

    stories: list[StoryItem]
    feeds: list[FeedPostSummary]


class GetCombinedFeedUseCase:
    """Use case for the combined story and post feed."""

    def __init__(self, feed_service: FeedService) -> None:
        self.feed_service = feed_service

    async def execute(self) -> CombinedFeedResponse:
        combined = await self.feed_service.get_combined()
        return CombinedFeedResponse(
            stories=[StoryItem.from_domain(story) for story in combined.stories],
            feeds=[FeedPostSummary.from_domain(post) for post in combined.posts],
        )
