"""Feed use cases."""

from .get_combined_feed import (
    CombinedFeedResponse,
    FeedPostSummary,
    GetCombinedFeedUseCase,
)
from .get_comment_history import GetCommentHistoryRequest, GetCommentHistoryUseCase
from .get_feed_post import FeedPostItem, GetFeedPostRequest, GetFeedPostUseCase
from .get_mentions import GetMentionsRequest, GetMentionsUseCase
from .get_recent_activity import GetRecentActivityRequest, GetRecentActivityUseCase
from .get_user_feed import FeedEntryItem, GetUserFeedRequest, GetUserFeedUseCase

__all__ = [
    "CombinedFeedResponse",
    "FeedEntryItem",
    "FeedPostItem",
    "FeedPostSummary",
    "GetCombinedFeedUseCase",
    "GetCommentHistoryRequest",
    "GetCommentHistoryUseCase",
    "GetFeedPostRequest",
    "GetFeedPostUseCase",
    "GetMentionsRequest",
    "GetMentionsUseCase",
    "GetRecentActivityRequest",
    "GetRecentActivityUseCase",
    "GetUserFeedRequest",
    "GetUserFeedUseCase",
]
