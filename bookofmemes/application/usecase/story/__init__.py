"""Story use cases."""

from .get_story_chapters import (
    ChapterItem,
    GetStoryChaptersRequest,
    GetStoryChaptersUseCase,
    StoryChaptersResponse,
)
from .list_stories import ListStoriesUseCase, StoryItem

__all__ = [
    "ChapterItem",
    "GetStoryChaptersRequest",
    "GetStoryChaptersUseCase",
    "ListStoriesUseCase",
    "StoryChaptersResponse",
    "StoryItem",
]
