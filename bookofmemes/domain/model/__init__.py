"""Domain model entities for Book of Memes."""

from bookofmemes.domain.model.comment import Comment, CommentVote
from bookofmemes.domain.model.content import (
    CONTENT_MODELS,
    Chapter,
    ContentItem,
    Cover,
    FeedPost,
    KidsCollection,
    Meme,
    Puzzle,
    Story,
)
from bookofmemes.domain.model.follow import Follow
from bookofmemes.domain.model.interaction import Bookmark, Interaction
from bookofmemes.domain.model.profile import Profile
from bookofmemes.domain.model.wallet import WalletTransaction

__all__ = [
    "Bookmark",
    "CONTENT_MODELS",
    "Chapter",
    "Comment",
    "CommentVote",
    "ContentItem",
    "Cover",
    "FeedPost",
    "Follow",
    "Interaction",
    "KidsCollection",
    "Meme",
    "Profile",
    "Puzzle",
    "Story",
    "WalletTransaction",
]
