"""Domain value types for Book of Memes."""

from enum import Enum


class Collection(str, Enum):
    """Record store collections the service reads and writes."""

    PROFILES = "profiles"
    COMMENTS = "comments"
    COMMENT_VOTES = "comment_votes"
    INTERACTIONS = "interactions"
    BOOKMARKS = "bookmarks"
    FOLLOWS = "follows"
    STORIES = "stories"
    MEMES = "memes"
    PUZZLES = "puzzles"
    KIDS_COLLECTIONS = "kids_collections"
    CONTENT_COVERS = "content_covers"
    CHAPTERS = "chapters"
    FEEDS = "feeds"
    WALLET_TRANSACTIONS = "wallet_transactions"


class ContentType(str, Enum):
    """Closed set of content variants a user can author.

    The value is the ``item_type`` stamped on comments, bookmarks,
    interactions and covers; it matches the collection name.
    """

    STORY = "stories"
    MEME = "memes"
    PUZZLE = "puzzles"
    KIDS_COLLECTION = "kids_collections"

    @property
    def collection(self) -> Collection:
        """Collection holding items of this type."""
        return Collection(self.value)


class VoteType(str, Enum):
    """Comment vote direction."""

    LIKE = "like"
    DISLIKE = "dislike"


class InteractionType(str, Enum):
    """Kinds of interaction a user can have with an item."""

    LIKE = "like"
    COMMENT = "comment"
    VIEW = "view"
    BOOKMARK = "bookmark"
    SHARE = "share"


class FeedEntryType(str, Enum):
    """Why an activity record appears in a feed."""

    ITEM_COMMENT = "item_comment"
    REPLY = "reply"
    TOP_COMMENT = "top_comment"
    MENTION = "mention"


class TransactionType(str, Enum):
    """Wallet transaction kinds."""

    DEPOSIT = "deposit"
    CASHOUT = "cashout"
    REWARD = "reward"
    TOKEN_PURCHASE = "token_purchase"
    MONEY_TRANSFER = "money_transfer"
    AFFILIATE_COMMISSION = "affiliate_commission"
    PREMIUM_BILL = "premium_bill"


class TransactionStatus(str, Enum):
    """Wallet transaction lifecycle states."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
