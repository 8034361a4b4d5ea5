"""Follow and unfollow use cases."""

from datetime import datetime

from pydantic import BaseModel, Field

from bookofmemes.domain.service import FollowService
from bookofmemes.domain.value import UserId


class FollowRequest(BaseModel):
    """Identifies one follow edge."""

    follower_id: str = Field(min_length=1)
    following_id: str = Field(min_length=1)


class FollowResponse(BaseModel):
    """Created follow edge."""

    id: str | None
    follower_id: str
    following_id: str
    created_at: datetime


class UnfollowResponse(BaseModel):
    """Unfollow response."""

    message: str


class FollowUserUseCase:
    """Use case for following a user."""

    def __init__(self, follow_service: FollowService) -> None:
        """Initialize follow user use case.

        Args:
            follow_service: Follow domain service
        """
        self.follow_service = follow_service

    async def execute(self, request: FollowRequest) -> FollowResponse:
        follow = await self.follow_service.follow(
            UserId(request.follower_id), UserId(request.following_id)
        )
        return FollowResponse(
            id=follow.id,
            follower_id=follow.follower_id,
            following_id=follow.following_id,
            created_at=follow.created_at,
        )


class UnfollowUserUseCase:
    """Use case for unfollowing a user."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: FollowRequest) -> UnfollowResponse:
        await self.follow_service.unfollow(
            UserId(request.follower_id), UserId(request.following_id)
        )
        return UnfollowResponse(message="Unfollowed successfully")
