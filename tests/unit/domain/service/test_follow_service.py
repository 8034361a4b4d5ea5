"""Unit tests for FollowService and UserService."""

import pytest

from bookofmemes.domain.error import NotFoundError
from bookofmemes.domain.service import FollowService, UserService
from bookofmemes.domain.value import Collection, UserId
from bookofmemes.persistence.repository.inmemory import InMemoryRecordStore
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestFollowService:
    """Tests for the follow graph."""

    @pytest.mark.asyncio
    async def test_follow_and_status(self, unit_env):
        """Should report a follow edge in one direction only."""
        # Arrange
        service = await unit_env.get(FollowService)

        # Act
        follow = await service.follow(UserId("alice"), UserId("bob"))

        # Assert
        assert follow.id is not None
        assert await service.is_following(UserId("alice"), UserId("bob"))
        assert not await service.is_following(UserId("bob"), UserId("alice"))

    @pytest.mark.asyncio
    async def test_unfollow(self, unit_env):
        """Should remove the edge."""
        # Arrange
        service = await unit_env.get(FollowService)
        await service.follow(UserId("alice"), UserId("bob"))

        # Act
        removed = await service.unfollow(UserId("alice"), UserId("bob"))

        # Assert
        assert removed == 1
        assert not await service.is_following(UserId("alice"), UserId("bob"))

    @pytest.mark.asyncio
    async def test_counts(self, unit_env):
        """Should count edges in each direction."""
        # Arrange
        service = await unit_env.get(FollowService)
        await service.follow(UserId("alice"), UserId("bob"))
        await service.follow(UserId("carol"), UserId("bob"))
        await service.follow(UserId("bob"), UserId("alice"))

        # Act & Assert
        assert await service.count_followers(UserId("bob")) == 2
        assert await service.count_following(UserId("bob")) == 1

    @pytest.mark.asyncio
    async def test_lists_carry_the_other_users_profile(self, unit_env):
        """Should pair each edge with the profile on its far end."""
        # Arrange
        service = await unit_env.get(FollowService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.PROFILES, {"id": "alice", "full_name": "Alice"})
        await service.follow(UserId("alice"), UserId("bob"))

        # Act
        followers = await service.list_followers(UserId("bob"))
        following = await service.list_following(UserId("alice"))

        # Assert
        assert [(f.follower_id, p.full_name) for f, p in followers] == [
            ("alice", "Alice")
        ]
        assert [(f.following_id, p) for f, p in following] == [("bob", None)]


class TestUserService:
    """Tests for user summaries."""

    @pytest.mark.asyncio
    async def test_summary_counts(self, unit_env):
        """Should combine the profile with post and follow counts."""
        # Arrange
        service = await unit_env.get(UserService)
        follows = await unit_env.get(FollowService)
        store = await unit_env.get(InMemoryRecordStore)
        store.seed(Collection.PROFILES, {"id": "u1", "full_name": "Una"})
        store.seed(Collection.STORIES, {"id": "s1", "author_id": "u1"})
        store.seed(Collection.MEMES, {"id": "m1", "author_id": "u1"})
        await follows.follow(UserId("fan"), UserId("u1"))

        # Act
        summary = await service.get_summary(UserId("u1"))

        # Assert
        assert summary.profile.full_name == "Una"
        assert summary.posts_count == 2
        assert summary.followers_count == 1
        assert summary.following_count == 0

    @pytest.mark.asyncio
    async def test_missing_profile_raises_not_found(self, unit_env):
        """Should report a user without a profile."""
        # Arrange
        service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await service.get_summary(UserId("ghost"))
        assert exc_info.value.message == "User profile not found"
