"""Content entities.

A user's content comes in a closed set of variants, one collection each.
Variant-specific columns are carried through untouched.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import ConfigDict

from bookofmemes.domain.model.common import DomainModel
from bookofmemes.domain.value import ContentType, ItemId, UserId


class ContentItem(DomainModel):
    """Fields shared by every content variant."""

    model_config = ConfigDict(frozen=True, extra="allow")

    content_type: ClassVar[ContentType]

    id: ItemId
    author_id: Optional[UserId] = None
    title: Optional[str] = None
    created_at: Optional[datetime] = None


class Story(ContentItem):
    content_type = ContentType.STORY


class Meme(ContentItem):
    content_type = ContentType.MEME


class Puzzle(ContentItem):
    content_type = ContentType.PUZZLE


class KidsCollection(ContentItem):
    content_type = ContentType.KIDS_COLLECTION


CONTENT_MODELS: dict[ContentType, type[ContentItem]] = {
    model.content_type: model for model in (Story, Meme, Puzzle, KidsCollection)
}


class Cover(DomainModel):
    """Cover image of a content item. At most one per item is the main cover."""

    item_id: ItemId
    item_type: str
    image_url: Optional[str] = None
    is_main_cover: bool = False


class Chapter(DomainModel):
    """A chapter of a story."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    story_id: ItemId
    chapter_number: int
    title: Optional[str] = None


class FeedPost(DomainModel):
    """An image post in the public feed."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    caption: Optional[str] = None
    image_url: Optional[str] = None
    author_id: Optional[UserId] = None
    created_at: Optional[datetime] = None
