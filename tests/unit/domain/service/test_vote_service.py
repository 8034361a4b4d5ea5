"""Unit tests for VoteService."""

import pytest

from bookofmemes.config import CommentSettings
from bookofmemes.domain.error import NotFoundError
from bookofmemes.domain.service import ProfileService, VoteService
from bookofmemes.domain.value import Collection, CommentId, UserId, VoteType
from bookofmemes.persistence.repository.inmemory import InMemoryRecordStore
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class VoteDroppingRecordStore(InMemoryRecordStore):
    """In-memory store that accepts vote writes without keeping them."""

    async def upsert(self, collection, values, on_conflict):
        if collection == Collection.COMMENT_VOTES:
            return dict(values)
        return await super().upsert(collection, values, on_conflict)


class TestCastVote:
    """Tests for VoteService.cast_vote()."""

    @pytest.mark.asyncio
    async def test_vote_twice_leaves_one_row(self, unit_env):
        """Should keep a single vote per user per comment."""
        # Arrange
        service = await unit_env.get(VoteService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.COMMENTS, make_comment("c1"))

        # Act
        await service.cast_vote(CommentId("c1"), UserId("u1"), VoteType.LIKE)
        await service.cast_vote(CommentId("c1"), UserId("u1"), VoteType.LIKE)

        # Assert
        votes = store.rows(Collection.COMMENT_VOTES)
        assert len(votes) == 1
        assert votes[0]["vote_type"] == "like"

    @pytest.mark.asyncio
    async def test_other_vote_type_replaces_previous(self, unit_env):
        """Should switch a like to a dislike in place."""
        # Arrange
        service = await unit_env.get(VoteService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.COMMENTS, make_comment("c1"))
        await service.cast_vote(CommentId("c1"), UserId("u1"), VoteType.LIKE)

        # Act
        tally = await service.cast_vote(CommentId("c1"), UserId("u1"), VoteType.DISLIKE)

        # Assert
        votes = store.rows(Collection.COMMENT_VOTES)
        assert [v["vote_type"] for v in votes] == ["dislike"]
        assert tally.current_user_vote == VoteType.DISLIKE

    @pytest.mark.asyncio
    async def test_different_users_vote_independently(self, unit_env):
        """Should keep one row per voter."""
        # Arrange
        service = await unit_env.get(VoteService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.COMMENTS, make_comment("c1"))

        # Act
        await service.cast_vote(CommentId("c1"), UserId("u1"), VoteType.LIKE)
        await service.cast_vote(CommentId("c1"), UserId("u2"), VoteType.DISLIKE)

        # Assert
        assert len(store.rows(Collection.COMMENT_VOTES)) == 2

    @pytest.mark.asyncio
    async def test_returns_stored_counters(self, unit_env):
        """Should read the comment's counters back from the store."""
        # Arrange
        service = await unit_env.get(VoteService)
        store = await unit_env.get(InMemoryRecordStore)
        row = make_comment("c1", likes=4)
        row["dislikes"] = 2
        store.seed(Collection.COMMENTS, row)

        # Act
        tally = await service.cast_vote(CommentId("c1"), UserId("u1"), VoteType.LIKE)

        # Assert
        assert tally.comment_id == "c1"
        assert tally.likes == 4
        assert tally.dislikes == 2

    @pytest.mark.asyncio
    async def test_current_vote_is_read_back_from_store(self):
        """Should report the vote the store holds, not the one requested."""
        # Arrange
        store = VoteDroppingRecordStore()
        store.seed(Collection.COMMENTS, make_comment("c1"))
        store.seed(
            Collection.COMMENT_VOTES,
            {"user_id": "u1", "comment_id": "c1", "vote_type": "dislike"},
        )
        service = VoteService(store, ProfileService(store), CommentSettings())

        # Act
        tally = await service.cast_vote(CommentId("c1"), UserId("u1"), VoteType.LIKE)
        other = await service.cast_vote(CommentId("c1"), UserId("u2"), VoteType.LIKE)

        # Assert
        assert tally.current_user_vote == VoteType.DISLIKE
        assert other.current_user_vote is None

    @pytest.mark.asyncio
    async def test_unknown_comment_raises_not_found(self, unit_env):
        """Should refuse votes on a comment that does not exist."""
        # Arrange
        service = await unit_env.get(VoteService)
        store = await unit_env.get(InMemoryRecordStore)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await service.cast_vote(CommentId("nope"), UserId("u1"), VoteType.LIKE)
        assert exc_info.value.message == "Comment not found"
        assert store.rows(Collection.COMMENT_VOTES) == []


class TestRemoveVote:
    """Tests for VoteService.remove_vote()."""

    @pytest.mark.asyncio
    async def test_removes_only_callers_vote(self, unit_env):
        """Should delete the caller's vote and keep everyone else's."""
        # Arrange
        service = await unit_env.get(VoteService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.COMMENTS, make_comment("c1"))
        await service.cast_vote(CommentId("c1"), UserId("u1"), VoteType.LIKE)
        await service.cast_vote(CommentId("c1"), UserId("u2"), VoteType.LIKE)

        # Act
        tally = await service.remove_vote(CommentId("c1"), UserId("u1"))

        # Assert
        assert [v["user_id"] for v in store.rows(Collection.COMMENT_VOTES)] == ["u2"]
        assert tally.current_user_vote is None

    @pytest.mark.asyncio
    async def test_unknown_comment_raises_not_found(self, unit_env):
        """Should report a missing comment."""
        # Arrange
        service = await unit_env.get(VoteService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.remove_vote(CommentId("nope"), UserId("u1"))


class TestRollUp:
    """Tests for VoteService.roll_up()."""

    @pytest.mark.asyncio
    async def test_unvoted_comments_get_empty_lists(self, unit_env):
        """Should return an entry for every requested comment."""
        # Arrange
        service = await unit_env.get(VoteService)

        # Act
        roll_ups = await service.roll_up([CommentId("a"), CommentId("b")])

        # Assert
        assert set(roll_ups) == {"a", "b"}
        assert roll_ups["a"].liked_users == []
        assert roll_ups["b"].disliked_users == []

    @pytest.mark.asyncio
    async def test_no_comments(self, unit_env):
        """Should skip the store entirely for an empty request."""
        # Arrange
        service = await unit_env.get(VoteService)

        # Act & Assert
        assert await service.roll_up([]) == {}
