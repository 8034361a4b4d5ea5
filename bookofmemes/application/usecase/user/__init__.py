"""User use cases."""

from .get_posts_count import GetPostsCountRequest, GetPostsCountUseCase, PostsCountResponse
from .get_profile import GetProfileRequest, GetProfileUseCase, ProfileResponse
from .get_user_content import (
    CoverItem,
    GetUserContentRequest,
    GetUserContentUseCase,
    UserContentItem,
)
from .get_user_summary import (
    GetUserSummaryRequest,
    GetUserSummaryUseCase,
    UserSummaryResponse,
)

__all__ = [
    "CoverItem",
    "GetPostsCountRequest",
    "GetPostsCountUseCase",
    "GetProfileRequest",
    "GetProfileUseCase",
    "GetUserContentRequest",
    "GetUserContentUseCase",
    "GetUserSummaryRequest",
    "GetUserSummaryUseCase",
    "PostsCountResponse",
    "ProfileResponse",
    "UserContentItem",
    "UserSummaryResponse",
]
