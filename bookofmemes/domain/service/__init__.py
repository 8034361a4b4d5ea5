"""Domain services."""

from .base import Service
from .bookmark_service import BookmarkService
from .comment_service import AuthorProfile, CommentNode, CommentService, build_comment_tree
from .content_service import ContentService, StoryChapters, UserContentEntry
from .feed_service import CombinedFeed, FeedEntry, FeedPostView, FeedService
from .follow_service import FollowService
from .interaction_service import InteractionService
from .jwt_service import JWTService
from .profile_service import ProfileService
from .user_service import UserService, UserSummary
from .vote_service import Voter, VoteRollUp, VoteService, VoteTally
from .wallet_transaction_service import WalletTransactionService

__all__ = [
    "AuthorProfile",
    "BookmarkService",
    "CombinedFeed",
    "CommentNode",
    "CommentService",
    "ContentService",
    "FeedEntry",
    "FeedPostView",
    "FeedService",
    "FollowService",
    "InteractionService",
    "JWTService",
    "ProfileService",
    "Service",
    "StoryChapters",
    "UserContentEntry",
    "UserService",
    "UserSummary",
    "VoteRollUp",
    "VoteService",
    "VoteTally",
    "Voter",
    "WalletTransactionService",
    "build_comment_tree",
]
