"""Get posts count use case."""

from pydantic import BaseModel, ConfigDict, Field

from bookofmemes.domain.service import ContentService
from bookofmemes.domain.value import UserId


class GetPostsCountRequest(BaseModel):
    """Get posts count request."""

    user_id: str


class PostsCountResponse(BaseModel):
    """Number of items a user authored across all content types."""

    model_config = ConfigDict(populate_by_name=True)

    posts_count: int = Field(alias="postsCount")


class GetPostsCountUseCase:
    """Use case for counting a user's posts."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: GetPostsCountRequest) -> PostsCountResponse:
        total = await self.content_service.count_posts(UserId(request.user_id))
        return PostsCountResponse(posts_count=total)
