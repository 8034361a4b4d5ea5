"""Get profile use case."""

from pydantic import BaseModel

from bookofmemes.domain.service import UserService
from bookofmemes.domain.value import UserId


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str


class ProfileResponse(BaseModel):
    """Display details of a user."""

    full_name: str | None
    avatar_url: str | None


class GetProfileUseCase:
    """Use case for a user's display name and avatar."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If the user has no profile
        """
        profile = await self.user_service.get_profile(UserId(request.user_id))
        return ProfileResponse(full_name=profile.full_name, avatar_url=profile.avatar_url)
