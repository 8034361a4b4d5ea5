"""Get feed post use case."""

from datetime import datetime

from pydantic import BaseModel

from bookofmemes.domain.service import FeedPostView, FeedService


class FeedPostItem(BaseModel):
    """Feed post in response."""

    id: str
    image_url: str | None
    caption: str | None
    author_name: str
    created_at: datetime | None

    @classmethod
    def from_domain(cls, view: FeedPostView) -> "FeedPostItem":
        return cls(
            id=view.post.id,
            image_url=view.post.image_url,
            caption=view.post.caption,
            author_name=view.author_name,
            created_at=view.post.created_at,
        )


class GetFeedPostRequest(BaseModel):
    """Get feed post request."""

    post_id: str


class GetFeedPostUseCase:
    """Use case for reading one feed post."""

    def __init__(self, feed_service: FeedService) -> None:
        """Initialize get feed post use case.

        Args:
            feed_service: Feed domain service
        """
        self.feed_service = feed_service

    async def execute(self, request: GetFeedPostRequest) -> FeedPostItem:
        """Execute get feed post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        view = await self.feed_service.get_post(request.post_id)
        return FeedPostItem.from_domain(view)
