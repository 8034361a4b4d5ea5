"""Story routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from bookofmemes.application.usecase.story import (
    GetStoryChaptersRequest,
    GetStoryChaptersUseCase,
    ListStoriesUseCase,
    StoryChaptersResponse,
    StoryItem,
)

router = APIRouter(prefix="/stories", tags=["stories"], route_class=DishkaRoute)


@router.get("", response_model=list[StoryItem], summary="Fetch stories")
async def list_stories(
    list_stories_use_case: FromDishka[ListStoriesUseCase],
) -> list[StoryItem]:
    """All stories, newest first."""
    return await list_stories_use_case.execute()


@router.get(
    "/{story_id}/chapters",
    response_model=StoryChaptersResponse,
    summary="Fetch chapters",
)
async def get_story_chapters(
    story_id: str,
    get_story_chapters_use_case: FromDishka[GetStoryChaptersUseCase],
) -> StoryChaptersResponse:
    """A story with its chapters in reading order."""
    return await get_story_chapters_use_case.execute(
        GetStoryChaptersRequest(story_id=story_id)
    )
