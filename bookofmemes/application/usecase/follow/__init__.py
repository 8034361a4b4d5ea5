"""Follow use cases."""

from .follow_user import (
    FollowRequest,
    FollowResponse,
    FollowUserUseCase,
    UnfollowResponse,
    UnfollowUserUseCase,
)
from .get_follow_status import (
    FollowStatusResponse,
    GetFollowStatusRequest,
    GetFollowStatusUseCase,
)
from .list_follows import (
    FollowEdgeItem,
    FollowProfile,
    ListFollowersUseCase,
    ListFollowingUseCase,
    ListFollowsRequest,
)

__all__ = [
    "FollowEdgeItem",
    "FollowProfile",
    "FollowRequest",
    "FollowResponse",
    "FollowStatusResponse",
    "FollowUserUseCase",
    "GetFollowStatusRequest",
    "GetFollowStatusUseCase",
    "ListFollowersUseCase",
    "ListFollowingUseCase",
    "ListFollowsRequest",
    "UnfollowResponse",
    "UnfollowUserUseCase",
]
