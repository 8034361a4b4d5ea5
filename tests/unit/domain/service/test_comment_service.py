"""Unit tests for CommentService."""

import pytest

from bookofmemes.domain.error import NotFoundError, ValidationError
from bookofmemes.domain.service import CommentService
from bookofmemes.domain.value import (
    Collection,
    CommentId,
    ContentType,
    ItemId,
    UserId,
    VoteType,
)
from bookofmemes.persistence.repository.inmemory import InMemoryRecordStore
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed_story(unit_env, story_id: str = "item-1", owner: str = "owner-1"):
    store = await unit_env.get(InMemoryRecordStore)
    store.seed(
        Collection.STORIES, {"id": story_id, "author_id": owner, "title": "A story"}
    )
    return store


class TestGetThreadedComments:
    """Tests for CommentService.get_threaded_comments()."""

    @pytest.mark.asyncio
    async def test_threads_replies_under_parents(self, unit_env):
        """Should nest replies under their parent comment."""
        # Arrange
        service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(
            Collection.COMMENTS,
            make_comment("c1", minutes=0),
            make_comment("c2", minutes=1),
            make_comment("r1", parent_id="c1", minutes=2),
        )

        # Act
        tree = await service.get_threaded_comments(item_id=ItemId("item-1"))

        # Assert
        assert [n.comment.id for n in tree] == ["c1", "c2"]
        assert [r.comment.id for r in tree[0].replies] == ["r1"]
        assert tree[1].replies == []

    @pytest.mark.asyncio
    async def test_missing_profile_gets_defaults(self, unit_env):
        """Should fall back to placeholder name and avatar."""
        # Arrange
        service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.COMMENTS, make_comment("c1", user_id="ghost"))

        # Act
        tree = await service.get_threaded_comments(item_id=ItemId("item-1"))

        # Assert
        assert tree[0].author.full_name == "Unknown"
        assert tree[0].author.avatar_url == "https://via.placeholder.com/36"

    @pytest.mark.asyncio
    async def test_writer_profile_is_attached(self, unit_env):
        """Should decorate comments with the writer's profile."""
        # Arrange
        service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(
            Collection.PROFILES,
            {"id": "writer-1", "full_name": "Wendy", "avatar_url": "w.png"},
        )
        store.seed(Collection.COMMENTS, make_comment("c1"))

        # Act
        tree = await service.get_threaded_comments(item_id=ItemId("item-1"))

        # Assert
        assert tree[0].author.full_name == "Wendy"
        assert tree[0].author.avatar_url == "w.png"

    @pytest.mark.asyncio
    async def test_votes_are_split_into_likers_and_dislikers(self, unit_env):
        """Should roll votes up into liked and disliked users."""
        # Arrange
        service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.PROFILES, {"id": "fan", "full_name": "Fan"})
        store.seed(Collection.COMMENTS, make_comment("c1"))
        store.seed(
            Collection.COMMENT_VOTES,
            {"user_id": "fan", "comment_id": "c1", "vote_type": VoteType.LIKE.value},
            {"user_id": "critic", "comment_id": "c1", "vote_type": "dislike"},
        )

        # Act
        tree = await service.get_threaded_comments(item_id=ItemId("item-1"))

        # Assert
        node = tree[0]
        assert [v.user_id for v in node.liked_users] == ["fan"]
        assert node.liked_users[0].full_name == "Fan"
        assert [v.user_id for v in node.disliked_users] == ["critic"]
        assert node.disliked_users[0].full_name == "Unknown"

    @pytest.mark.asyncio
    async def test_filters_by_owner_excluding_self(self, unit_env):
        """Should leave out the owner's own comments when asked."""
        # Arrange
        service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(
            Collection.COMMENTS,
            make_comment("theirs", user_id="someone", author_id="owner-1"),
            make_comment("mine", user_id="owner-1", author_id="owner-1", minutes=1),
            make_comment("other", user_id="someone", author_id="owner-2", minutes=2),
        )

        # Act
        tree = await service.get_threaded_comments(
            author_id=UserId("owner-1"), exclude_self=True
        )

        # Assert
        assert [n.comment.id for n in tree] == ["theirs"]

    @pytest.mark.asyncio
    async def test_min_likes_and_limit(self, unit_env):
        """Should apply the likes threshold and the fetch limit."""
        # Arrange
        service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(
            Collection.COMMENTS,
            make_comment("low", likes=1, minutes=0),
            make_comment("high1", likes=5, minutes=1),
            make_comment("high2", likes=9, minutes=2),
        )

        # Act
        tree = await service.get_threaded_comments(min_likes=5, limit=1)

        # Assert
        assert [n.comment.id for n in tree] == ["high1"]


class TestCreateComment:
    """Tests for CommentService.create_comment()."""

    @pytest.mark.asyncio
    async def test_addresses_comment_to_item_owner(self, unit_env):
        """Should stamp the item owner as the comment's author."""
        # Arrange
        service = await unit_env.get(CommentService)
        store = await seed_story(unit_env, owner="owner-7")

        # Act
        comment, author = await service.create_comment(
            content="Great read",
            user_id=UserId("writer-1"),
            item_id=ItemId("item-1"),
        )

        # Assert
        assert comment.author_id == "owner-7"
        assert comment.user_id == "writer-1"
        assert comment.item_type == ContentType.STORY.value
        assert comment.likes == 0
        assert author.full_name == "Unknown"
        assert len(store.rows(Collection.COMMENTS)) == 1

    @pytest.mark.asyncio
    async def test_uses_given_item_type(self, unit_env):
        """Should only look in the collection of the given content type."""
        # Arrange
        service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.MEMES, {"id": "meme-1", "author_id": "owner-1"})

        # Act
        comment, _ = await service.create_comment(
            content="lol",
            user_id=UserId("writer-1"),
            item_id=ItemId("meme-1"),
            item_type=ContentType.MEME,
        )

        # Assert
        assert comment.item_type == "memes"

    @pytest.mark.asyncio
    async def test_missing_item_raises_not_found(self, unit_env):
        """Should refuse to comment on an unknown item."""
        # Arrange
        service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryRecordStore)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await service.create_comment(
                content="hello", user_id=UserId("u"), item_id=ItemId("nope")
            )
        assert exc_info.value.message == "Item not found"
        assert store.rows(Collection.COMMENTS) == []

    @pytest.mark.asyncio
    async def test_item_without_owner_raises_not_found(self, unit_env):
        """Should refuse to comment on an item nobody owns."""
        # Arrange
        service = await unit_env.get(CommentService)
        await seed_story(unit_env, owner=None)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.create_comment(
                content="hello", user_id=UserId("u"), item_id=ItemId("item-1")
            )

    @pytest.mark.asyncio
    async def test_reply_to_comment_on_same_item(self, unit_env):
        """Should accept a parent comment on the same item."""
        # Arrange
        service = await unit_env.get(CommentService)
        store = await seed_story(unit_env)
        store.seed(Collection.COMMENTS, make_comment("parent"))

        # Act
        comment, _ = await service.create_comment(
            content="reply",
            user_id=UserId("u"),
            item_id=ItemId("item-1"),
            parent_id=CommentId("parent"),
        )

        # Assert
        assert comment.parent_id == "parent"

    @pytest.mark.asyncio
    async def test_reply_to_comment_on_other_item_is_rejected(self, unit_env):
        """Should reject a parent that belongs to another item."""
        # Arrange
        service = await unit_env.get(CommentService)
        store = await seed_story(unit_env)
        store.seed(Collection.COMMENTS, make_comment("elsewhere", item_id="item-2"))

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.create_comment(
                content="reply",
                user_id=UserId("u"),
                item_id=ItemId("item-1"),
                parent_id=CommentId("elsewhere"),
            )


class TestDeleteComment:
    """Tests for CommentService.delete_comment()."""

    @pytest.mark.asyncio
    async def test_owner_deletes_comment(self, unit_env):
        """Should delete a comment addressed to the owner."""
        # Arrange
        service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.COMMENTS, make_comment("c1", author_id="owner-1"))

        # Act
        await service.delete_comment(CommentId("c1"), UserId("owner-1"))

        # Assert
        assert store.rows(Collection.COMMENTS) == []

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, unit_env):
        """Should leave the comment in place for anyone but the owner."""
        # Arrange
        service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.COMMENTS, make_comment("c1", author_id="owner-1"))

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await service.delete_comment(CommentId("c1"), UserId("intruder"))
        assert exc_info.value.message == "Comment not found"
        assert len(store.rows(Collection.COMMENTS)) == 1

    @pytest.mark.asyncio
    async def test_item_type_must_match(self, unit_env):
        """Should only delete when the item type matches."""
        # Arrange
        service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.COMMENTS, make_comment("c1", item_type="memes"))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.delete_comment(
                CommentId("c1"), UserId("owner-1"), item_type="stories"
            )
        await service.delete_comment(
            CommentId("c1"), UserId("owner-1"), item_type="memes"
        )
        assert store.rows(Collection.COMMENTS) == []
