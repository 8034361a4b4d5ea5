"""Domain value objects for Book of Memes."""

from bookofmemes.domain.value.identifiers import (
    CommentId,
    ItemId,
    TransactionId,
    UserId,
    WalletId,
)
from bookofmemes.domain.value.types import (
    Collection,
    ContentType,
    FeedEntryType,
    InteractionType,
    TransactionStatus,
    TransactionType,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "ItemId",
    "CommentId",
    "WalletId",
    "TransactionId",
    # Types
    "Collection",
    "ContentType",
    "FeedEntryType",
    "InteractionType",
    "TransactionStatus",
    "TransactionType",
    "VoteType",
]
