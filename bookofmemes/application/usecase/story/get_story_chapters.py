"""Get story chapters use case."""

from pydantic import BaseModel, ConfigDict

from bookofmemes.domain.service import ContentService
from bookofmemes.domain.value import ItemId

from .list_stories import StoryItem


class ChapterItem(BaseModel):
    """Chapter in response. Extra columns are passed through."""

    model_config = ConfigDict(extra="allow")

    id: str
    story_id: str
    chapter_number: int
    title: str | None = None


class GetStoryChaptersRequest(BaseModel):
    """Get story chapters request."""

    story_id: str


class StoryChaptersResponse(BaseModel):
    """A story and its chapters in reading order."""

    story: StoryItem
    chapters: list[ChapterItem]


class GetStoryChaptersUseCase:
    """Use case for reading a story chapter by chapter."""

    def __init__(self, content_service: ContentService) -> None:
        """Initialize get story chapters use case.

        Args:
            content_service: Content domain service
        """
        self.content_service = content_service

    async def execute(self, request: GetStoryChaptersRequest) -> StoryChaptersResponse:
        """Execute get story chapters flow.

        Raises:
            NotFoundError: If the story does not exist
        """
        result = await self.content_service.get_story_chapters(ItemId(request.story_id))
        return StoryChaptersResponse(
            story=StoryItem.from_domain(result.story),
            chapters=[ChapterItem(**chapter.model_dump()) for chapter in result.chapters],
        )
