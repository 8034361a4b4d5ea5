"""Get user summary use case."""

from pydantic import BaseModel, ConfigDict, Field

from bookofmemes.domain.service import UserService
from bookofmemes.domain.value import UserId


class GetUserSummaryRequest(BaseModel):
    """Get user summary request."""

    user_id: str


class UserSummaryResponse(BaseModel):
    """Profile with activity counters."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    full_name: str | None
    username: str | None
    bio: str | None
    avatar_url: str | None
    posts_count: int = Field(alias="postsCount")
    followers_count: int = Field(alias="followersCount")
    following_count: int = Field(alias="followingCount")


class GetUserSummaryUseCase:
    """Use case for a user's profile page header."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user summary use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserSummaryRequest) -> UserSummaryResponse:
        """Execute get user summary flow.

        Raises:
            NotFoundError: If the user has no profile
        """
        summary = await self.user_service.get_summary(UserId(request.user_id))
        profile = summary.profile
        return UserSummaryResponse(
            id=profile.id,
            full_name=profile.full_name,
            username=profile.username,
            bio=profile.bio,
            avatar_url=profile.avatar_url,
            posts_count=summary.posts_count,
            followers_count=summary.followers_count,
            following_count=summary.following_count,
        )
