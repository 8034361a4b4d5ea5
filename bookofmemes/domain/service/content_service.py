"""Content domain service."""

from dataclasses import dataclass
from typing import Optional

import logfire

from bookofmemes.domain.error import NotFoundError, UpstreamError
from bookofmemes.domain.model import CONTENT_MODELS, Chapter, ContentItem, Cover, Story
from bookofmemes.domain.repository import Query, RecordStore, eq, in_
from bookofmemes.domain.value import Collection, ContentType, ItemId, UserId

from .base import Service


@dataclass
class UserContentEntry:
    """A user's content item stamped with its type and main cover."""

    item: ContentItem
    item_type: ContentType
    cover: Optional[Cover]


@dataclass
class StoryChapters:
    """A story together with its chapters in reading order."""

    story: Story
    chapters: list[Chapter]


class ContentService(Service):
    """Domain service for content items across all content types."""

    def __init__(self, record_store: RecordStore) -> None:
        """Initialize content service.

        Args:
            record_store: Record store
        """
        self.record_store = record_store

    async def find_item(
        self, item_id: ItemId, item_type: ContentType | None = None
    ) -> ContentItem | None:
        """Look an item up by ID.

        Args:
            item_id: Item ID
            item_type: Restrict the lookup to one content type

        Returns:
            The item if any content collection holds it, None otherwise
        """
        content_types = [item_type] if item_type else list(ContentType)
        with logfire.span(
            "content_service.find_item",
            item_id=item_id,
            item_types=[t.value for t in content_types],
        ):
            for content_type in content_types:
                row = await self.record_store.find_one(
                    content_type.collection, Query.where(eq("id", item_id))
                )
                if row is not None:
                    return CONTENT_MODELS[content_type].model_validate(row)

            logfire.warn("Item not found", item_id=item_id)
            return None

    async def list_user_content(self, user_id: UserId) -> list[UserContentEntry]:
        """Collect a user's items of every content type, joined to main covers.

        A failure while fetching one content type is logged and that type is
        skipped. A failure while fetching covers leaves that type's covers
        empty.

        Args:
            user_id: Author of the content

        Returns:
            Entries grouped by content type, in enum order
        """
        with logfire.span("content_service.list_user_content", user_id=user_id):
            entries: list[UserContentEntry] = []

            for content_type in ContentType:
                model = CONTENT_MODELS[content_type]
                try:
                    rows = await self.record_store.find(
                        content_type.collection,
                        Query.where(eq("author_id", user_id)),
                    )
                except UpstreamError as e:
                    logfire.warn(
                        "Skipping content type",
                        content_type=content_type.value,
                        error=e.detail,
                    )
                    continue

                if not rows:
                    continue

                covers = await self._main_covers(
                    content_type, [ItemId(row["id"]) for row in rows]
                )
                for row in rows:
                    entries.append(
                        UserContentEntry(
                            item=model.model_validate(row),
                            item_type=content_type,
                            cover=covers.get(ItemId(row["id"])),
                        )
                    )

            logfire.info("User content collected", user_id=user_id, count=len(entries))
            return entries

    async def _main_covers(
        self, content_type: ContentType, item_ids: list[ItemId]
    ) -> dict[ItemId, Cover]:
        try:
            rows = await self.record_store.find(
                Collection.CONTENT_COVERS,
                Query.where(
                    in_("item_id", item_ids),
                    eq("item_type", content_type.value),
                    eq("is_main_cover", True),
                ),
            )
        except UpstreamError as e:
            logfire.warn(
                "Cover fetch failed",
                content_type=content_type.value,
                error=e.detail,
            )
            return {}
        return {ItemId(row["item_id"]): Cover.model_validate(row) for row in rows}

    async def count_posts(self, user_id: UserId) -> int:
        """Total number of items the user authored across all content types."""
        with logfire.span("content_service.count_posts", user_id=user_id):
            total = 0
            for content_type in ContentType:
                total += await self.record_store.count(
                    content_type.collection, Query.where(eq("author_id", user_id))
                )
            return total

    async def list_stories(self) -> list[Story]:
        """All stories, newest first."""
        rows = await self.record_store.find(
            Collection.STORIES,
            Query().order("created_at", descending=True).select(
                "id", "title", "author_id", "created_at"
            ),
        )
        return [Story.model_validate(row) for row in rows]

    async def get_story_chapters(self, story_id: ItemId) -> StoryChapters:
        """Get a story and its chapters ordered by chapter number.

        Raises:
            NotFoundError: If the story does not exist
        """
        with logfire.span("content_service.get_story_chapters", story_id=story_id):
            row = await self.record_store.find_one(
                Collection.STORIES, Query.where(eq("id", story_id))
            )
            if row is None:
                logfire.warn("Story not found", story_id=story_id)
                raise NotFoundError("Story", story_id)

            chapter_rows = await self.record_store.find(
                Collection.CHAPTERS,
                Query.where(eq("story_id", story_id)).order("chapter_number"),
            )
            return StoryChapters(
                story=Story.model_validate(row),
                chapters=[Chapter.model_validate(r) for r in chapter_rows],
            )
