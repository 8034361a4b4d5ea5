"""User summary domain service."""

from dataclasses import dataclass

import logfire

from bookofmemes.domain.error import NotFoundError
from bookofmemes.domain.model import Profile
from bookofmemes.domain.value import UserId

from .base import Service
from .content_service import ContentService
from .follow_service import FollowService
from .profile_service import ProfileService


@dataclass
class UserSummary:
    """A profile with its activity counters."""

    profile: Profile
    posts_count: int
    followers_count: int
    following_count: int


class UserService(Service):
    """Domain service for user profile summaries."""

    def __init__(
        self,
        profile_service: ProfileService,
        content_service: ContentService,
        follow_service: FollowService,
    ) -> None:
        """Initialize user service.

        Args:
            profile_service: Profile domain service
            content_service: Content domain service (posts count)
            follow_service: Follow domain service (follower counts)
        """
        self.profile_service = profile_service
        self.content_service = content_service
        self.follow_service = follow_service

    async def get_profile(self, user_id: UserId) -> Profile:
        """Get a user's profile.

        Raises:
            NotFoundError: If the user has no profile
        """
        profile = await self.profile_service.get_profile(user_id)
        if profile is None:
            raise NotFoundError("User profile", user_id)
        return profile

    async def get_summary(self, user_id: UserId) -> UserSummary:
        """Get a user's profile with posts, followers and following counts.

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span("user_service.get_summary", user_id=user_id):
            profile = await self.get_profile(user_id)
            summary = UserSummary(
                profile=profile,
                posts_count=await self.content_service.count_posts(user_id),
                followers_count=await self.follow_service.count_followers(user_id),
                following_count=await self.follow_service.count_following(user_id),
            )
            logfire.info(
                "User summary built",
                user_id=user_id,
                posts_count=summary.posts_count,
                followers_count=summary.followers_count,
            )
            return summary
