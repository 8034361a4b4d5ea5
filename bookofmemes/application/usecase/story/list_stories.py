"""List stories use case."""

from pydantic import BaseModel

from bookofmemes.domain.model import Story
from bookofmemes.domain.service import ContentService


class StoryItem(BaseModel):
    """Story in response."""

    id: str
    title: str | None
    author_id: str | None

    @classmethod
    def from_domain(cls, story: Story) -> "StoryItem":
        return cls(id=story.id, title=story.title, author_id=story.author_id)


class ListStoriesUseCase:
    """Use case for listing every story, newest first."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self) -> list[StoryItem]:
        stories = await self.content_service.list_stories()
        return [StoryItem.from_domain(story) for story in stories]
