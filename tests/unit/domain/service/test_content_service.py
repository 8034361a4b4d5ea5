"""Unit tests for ContentService."""

import pytest

from bookofmemes.domain.error import NotFoundError, UpstreamError
from bookofmemes.domain.service import ContentService
from bookofmemes.domain.value import Collection, ContentType, ItemId, UserId
from bookofmemes.persistence.repository.inmemory import InMemoryRecordStore
from tests.conftest import at


class FlakyRecordStore(InMemoryRecordStore):
    """In-memory store whose reads fail for selected collections."""

    def __init__(self, failing: set[Collection]) -> None:
        super().__init__()
        self.failing = failing

    async def find(self, collection, query):
        if collection in self.failing:
            raise UpstreamError("find", collection.value, "connection reset")
        return await super().find(collection, query)


def seed_content(store: InMemoryRecordStore) -> None:
    store.seed(
        Collection.STORIES,
        {"id": "s1", "author_id": "u1", "title": "Story", "genre": "fantasy"},
    )
    store.seed(Collection.MEMES, {"id": "m1", "author_id": "u1", "title": "Meme"})
    store.seed(Collection.PUZZLES, {"id": "p1", "author_id": "someone-else"})
    store.seed(
        Collection.CONTENT_COVERS,
        {"item_id": "s1", "item_type": "stories", "image_url": "main.png", "is_main_cover": True},
        {"item_id": "s1", "item_type": "stories", "image_url": "alt.png", "is_main_cover": False},
    )


class TestListUserContent:
    """Tests for ContentService.list_user_content()."""

    @pytest.mark.asyncio
    async def test_collects_every_type_with_main_cover(self):
        """Should stamp each item with its type and main cover."""
        # Arrange
        store = InMemoryRecordStore()
        seed_content(store)
        service = ContentService(store)

        # Act
        entries = await service.list_user_content(UserId("u1"))

        # Assert
        assert [(e.item.id, e.item_type) for e in entries] == [
            ("s1", ContentType.STORY),
            ("m1", ContentType.MEME),
        ]
        assert entries[0].cover.image_url == "main.png"
        assert entries[1].cover is None

    @pytest.mark.asyncio
    async def test_variant_columns_pass_through(self):
        """Should keep columns specific to a content type."""
        # Arrange
        store = InMemoryRecordStore()
        seed_content(store)
        service = ContentService(store)

        # Act
        entries = await service.list_user_content(UserId("u1"))

        # Assert
        assert entries[0].item.model_dump()["genre"] == "fantasy"

    @pytest.mark.asyncio
    async def test_failing_type_is_skipped(self):
        """Should return the other types when one collection fails."""
        # Arrange
        store = FlakyRecordStore(failing={Collection.STORIES})
        seed_content(store)
        service = ContentService(store)

        # Act
        entries = await service.list_user_content(UserId("u1"))

        # Assert
        assert [e.item.id for e in entries] == ["m1"]

    @pytest.mark.asyncio
    async def test_failing_covers_leave_items_uncovered(self):
        """Should still return items when the cover lookup fails."""
        # Arrange
        store = FlakyRecordStore(failing={Collection.CONTENT_COVERS})
        seed_content(store)
        service = ContentService(store)

        # Act
        entries = await service.list_user_content(UserId("u1"))

        # Assert
        assert [e.item.id for e in entries] == ["s1", "m1"]
        assert all(e.cover is None for e in entries)


class TestCountPosts:
    """Tests for ContentService.count_posts()."""

    @pytest.mark.asyncio
    async def test_sums_all_content_types(self):
        """Should add up the user's items across collections."""
        # Arrange
        store = InMemoryRecordStore()
        seed_content(store)
        store.seed(Collection.KIDS_COLLECTIONS, {"id": "k1", "author_id": "u1"})
        service = ContentService(store)

        # Act & Assert
        assert await service.count_posts(UserId("u1")) == 3
        assert await service.count_posts(UserId("nobody")) == 0


class TestFindItem:
    """Tests for ContentService.find_item()."""

    @pytest.mark.asyncio
    async def test_searches_every_collection(self):
        """Should find an item in whichever collection holds it."""
        # Arrange
        store = InMemoryRecordStore()
        seed_content(store)
        service = ContentService(store)

        # Act
        item = await service.find_item(ItemId("p1"))

        # Assert
        assert item.content_type == ContentType.PUZZLE
        assert item.author_id == "someone-else"

    @pytest.mark.asyncio
    async def test_restricted_to_given_type(self):
        """Should not look outside the given content type."""
        # Arrange
        store = InMemoryRecordStore()
        seed_content(store)
        service = ContentService(store)

        # Act & Assert
        assert await service.find_item(ItemId("p1"), ContentType.STORY) is None


class TestStories:
    """Tests for listing stories and their chapters."""

    @pytest.mark.asyncio
    async def test_list_stories_newest_first(self):
        """Should order stories by creation time, newest first."""
        # Arrange
        store = InMemoryRecordStore()
        store.seed(
            Collection.STORIES,
            {"id": "old", "title": "Old", "created_at": at(0)},
            {"id": "new", "title": "New", "created_at": at(10)},
        )
        service = ContentService(store)

        # Act
        stories = await service.list_stories()

        # Assert
        assert [s.id for s in stories] == ["new", "old"]

    @pytest.mark.asyncio
    async def test_chapters_in_reading_order(self):
        """Should order chapters by chapter number."""
        # Arrange
        store = InMemoryRecordStore()
        store.seed(Collection.STORIES, {"id": "s1", "title": "Saga"})
        store.seed(
            Collection.CHAPTERS,
            {"story_id": "s1", "chapter_number": 2, "title": "Two"},
            {"story_id": "s1", "chapter_number": 1, "title": "One"},
            {"story_id": "s2", "chapter_number": 1, "title": "Elsewhere"},
        )
        service = ContentService(store)

        # Act
        result = await service.get_story_chapters(ItemId("s1"))

        # Assert
        assert result.story.title == "Saga"
        assert [c.title for c in result.chapters] == ["One", "Two"]

    @pytest.mark.asyncio
    async def test_missing_story_raises_not_found(self):
        """Should report a story that does not exist."""
        # Arrange
        service = ContentService(InMemoryRecordStore())

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await service.get_story_chapters(ItemId("nope"))
        assert exc_info.value.message == "Story not found"
