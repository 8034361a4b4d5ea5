"""Follow graph domain service."""

import logfire

from bookofmemes.domain.model import Follow, Profile
from bookofmemes.domain.repository import Query, RecordStore, eq
from bookofmemes.domain.value import Collection, UserId

from .base import Service
from .profile_service import ProfileService


class FollowService(Service):
    """Domain service for the directed follow graph.

    Self-follows are not rejected.
    """

    def __init__(
        self, record_store: RecordStore, profile_service: ProfileService
    ) -> None:
        """Initialize follow service.

        Args:
            record_store: Record store
            profile_service: Profile domain service
        """
        self.record_store = record_store
        self.profile_service = profile_service

    async def follow(self, follower_id: UserId, following_id: UserId) -> Follow:
        """Add a follow edge."""
        with logfire.span(
            "follow_service.follow", follower_id=follower_id, following_id=following_id
        ):
            row = await self.record_store.insert(
                Collection.FOLLOWS,
                {"follower_id": follower_id, "following_id": following_id},
            )
            logfire.info("User followed", follower_id=follower_id, following_id=following_id)
            return Follow.model_validate(row)

    async def unfollow(self, follower_id: UserId, following_id: UserId) -> int:
        """Remove a follow edge. Returns the number of rows removed."""
        with logfire.span(
            "follow_service.unfollow",
            follower_id=follower_id,
            following_id=following_id,
        ):
            return await self.record_store.delete(
                Collection.FOLLOWS, self._edge(follower_id, following_id)
            )

    async def is_following(self, follower_id: UserId, following_id: UserId) -> bool:
        count = await self.record_store.count(
            Collection.FOLLOWS, self._edge(follower_id, following_id)
        )
        return count > 0

    async def count_followers(self, user_id: UserId) -> int:
        return await self.record_store.count(
            Collection.FOLLOWS, Query.where(eq("following_id", user_id))
        )

    async def count_following(self, user_id: UserId) -> int:
        return await self.record_store.count(
            Collection.FOLLOWS, Query.where(eq("follower_id", user_id))
        )

    async def list_followers(self, user_id: UserId) -> list[tuple[Follow, Profile | None]]:
        """Edges pointing at the user, each with the follower's profile."""
        follows = await self._edges(Query.where(eq("following_id", user_id)))
        profiles = await self.profile_service.get_profiles(
            f.follower_id for f in follows
        )
        return [(f, profiles.get(f.follower_id)) for f in follows]

    async def list_following(self, user_id: UserId) -> list[tuple[Follow, Profile | None]]:
        """Edges leaving the user, each with the followed user's profile."""
        follows = await self._edges(Query.where(eq("follower_id", user_id)))
        profiles = await self.profile_service.get_profiles(
            f.following_id for f in follows
        )
        return [(f, profiles.get(f.following_id)) for f in follows]

    async def _edges(self, query: Query) -> list[Follow]:
        rows = await self.record_store.find(
            Collection.FOLLOWS, query.order("created_at", descending=True)
        )
        return [Follow.model_validate(row) for row in rows]

    @staticmethod
    def _edge(follower_id: UserId, following_id: UserId) -> Query:
        return Query.where(
            eq("follower_id", follower_id), eq("following_id", following_id)
        )
