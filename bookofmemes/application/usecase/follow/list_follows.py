"""List followers and following use cases."""

from datetime import datetime

from pydantic import BaseModel

from bookofmemes.domain.model import Profile
from bookofmemes.domain.service import FollowService
from bookofmemes.domain.value import UserId


class FollowProfile(BaseModel):
    """Public details of the other party of a follow edge."""

    id: str
    full_name: str | None
    username: str | None
    avatar_url: str | None

    @classmethod
    def from_domain(cls, profile: Profile) -> "FollowProfile":
        return cls(
            id=profile.id,
            full_name=profile.full_name,
            username=profile.username,
            avatar_url=profile.avatar_url,
        )


class FollowEdgeItem(BaseModel):
    """Follow edge with the other party's profile (None when it has none)."""

    id: str | None
    follower_id: str
    following_id: str
    created_at: datetime
    profile: FollowProfile | None


class ListFollowsRequest(BaseModel):
    """List followers or following request."""

    user_id: str


class ListFollowersUseCase:
    """Use case for listing the users following someone."""

    def __init__(self, follow_service: FollowService) -> None:
        """Initialize list followers use case.

        Args:
            follow_service: Follow domain service
        """
        self.follow_service = follow_service

    async def execute(self, request: ListFollowsRequest) -> list[FollowEdgeItem]:
        edges = await self.follow_service.list_followers(UserId(request.user_id))
        return _edge_items(edges)


class ListFollowingUseCase:
    """Use case for listing the users someone follows."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: ListFollowsRequest) -> list[FollowEdgeItem]:
        edges = await self.follow_service.list_following(UserId(request.user_id))
        return _edge_items(edges)


def _edge_items(edges) -> list[FollowEdgeItem]:
    return [
        FollowEdgeItem(
            id=follow.id,
            follower_id=follow.follower_id,
            following_id=follow.following_id,
            created_at=follow.created_at,
            profile=FollowProfile.from_domain(profile) if profile else None,
        )
        for follow, profile in edges
    ]
