"""Get follow status use case."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bookofmemes.domain.service import FollowService
from bookofmemes.domain.value import UserId


class GetFollowStatusRequest(BaseModel):
    """Get follow status request."""

    follower_id: str = Field(min_length=1)
    following_id: str = Field(min_length=1)


class FollowStatusResponse(BaseModel):
    """Whether the follow edge exists."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_following: bool


class GetFollowStatusUseCase:
    """Use case for checking whether one user follows another."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: GetFollowStatusRequest) -> FollowStatusResponse:
        is_following = await self.follow_service.is_following(
            UserId(request.follower_id), UserId(request.following_id)
        )
        return FollowStatusResponse(is_following=is_following)
