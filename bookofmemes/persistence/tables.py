"""SQLAlchemy table definitions for Book of Memes.

These describe the hosted database's tables to the query layer. The
schema itself (including the triggers that maintain comment like and
dislike counters) is owned by the hosting service; nothing here creates
or alters tables.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

from bookofmemes.domain.value import Collection

metadata = MetaData(schema="public")


def _id() -> Column:
    return Column(
        "id",
        UUID(as_uuid=False),
        primary_key=True,
        server_default=text("gen_random_uuid()"),
    )


def _created_at() -> Column:
    return Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("now()")
    )


def _user_ref(name: str, nullable: bool = False) -> Column:
    return Column(name, UUID(as_uuid=False), nullable=nullable)


# ============================================================================
# PROFILES
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID(as_uuid=False), primary_key=True),
    Column("full_name", Text, nullable=True),
    Column("username", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column("avatar_url", Text, nullable=True),
)

# ============================================================================
# COMMENTS AND VOTES
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    _id(),
    Column("content", Text, nullable=False),
    _user_ref("user_id"),  # Writer of the comment
    _user_ref("author_id"),  # Owner of the commented-on item
    Column("item_id", UUID(as_uuid=False), nullable=False),
    Column("item_type", String(50), nullable=True),
    Column("parent_id", UUID(as_uuid=False), nullable=True),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("dislikes", Integer, nullable=False, server_default="0"),
    _created_at(),
)

comment_votes_table = Table(
    "comment_votes",
    metadata,
    _id(),
    _user_ref("user_id"),
    Column("comment_id", UUID(as_uuid=False), nullable=False),
    Column("vote_type", String(10), nullable=False),  # 'like' or 'dislike'
    _created_at(),
)

# ============================================================================
# INTERACTIONS, BOOKMARKS, FOLLOWS
# ============================================================================
interactions_table = Table(
    "interactions",
    metadata,
    _id(),
    _user_ref("user_id"),
    Column("item_id", UUID(as_uuid=False), nullable=False),
    Column("item_type", String(50), nullable=False),
    Column("interaction_type", String(20), nullable=False),
    _created_at(),
)

bookmarks_table = Table(
    "bookmarks",
    metadata,
    _id(),
    _user_ref("user_id"),
    Column("item_id", UUID(as_uuid=False), nullable=False),
    Column("item_type", String(50), nullable=False),
    _created_at(),
)

follows_table = Table(
    "follows",
    metadata,
    _id(),
    _user_ref("follower_id"),
    _user_ref("following_id"),
    _created_at(),
)


# ============================================================================
# CONTENT
# ============================================================================
def _content_table(name: str) -> Table:
    return Table(
        name,
        metadata,
        _id(),
        Column("title", Text, nullable=True),
        _user_ref("author_id", nullable=True),
        _created_at(),
    )


stories_table = _content_table("stories")
memes_table = _content_table("memes")
puzzles_table = _content_table("puzzles")
kids_collections_table = _content_table("kids_collections")

content_covers_table = Table(
    "content_covers",
    metadata,
    _id(),
    Column("item_id", UUID(as_uuid=False), nullable=False),
    Column("item_type", String(50), nullable=False),
    Column("image_url", Text, nullable=True),
    Column("is_main_cover", Boolean, nullable=False, server_default="false"),
)

chapters_table = Table(
    "chapters",
    metadata,
    _id(),
    Column("story_id", UUID(as_uuid=False), nullable=False),
    Column("chapter_number", Integer, nullable=False),
    Column("title", Text, nullable=True),
    Column("content", Text, nullable=True),
    _created_at(),
)

feeds_table = Table(
    "feeds",
    metadata,
    _id(),
    Column("caption", Text, nullable=True),
    Column("image_url", Text, nullable=True),
    _user_ref("author_id", nullable=True),
    _created_at(),
)

# ============================================================================
# WALLET
# ============================================================================
wallet_transactions_table = Table(
    "wallet_transactions",
    metadata,
    _id(),
    Column("wallet_id", UUID(as_uuid=False), nullable=True),  # ON DELETE CASCADE
    Column("type", String(30), nullable=False),
    Column("amount", Numeric(12, 2), nullable=False),
    Column("description", Text, nullable=True),
    Column("metadata", JSONB, nullable=True),
    Column("status", String(20), nullable=False, server_default="pending"),
    _created_at(),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=True, server_default=text("now()")
    ),
)

TABLES: dict[Collection, Table] = {
    Collection.PROFILES: profiles_table,
    Collection.COMMENTS: comments_table,
    Collection.COMMENT_VOTES: comment_votes_table,
    Collection.INTERACTIONS: interactions_table,
    Collection.BOOKMARKS: bookmarks_table,
    Collection.FOLLOWS: follows_table,
    Collection.STORIES: stories_table,
    Collection.MEMES: memes_table,
    Collection.PUZZLES: puzzles_table,
    Collection.KIDS_COLLECTIONS: kids_collections_table,
    Collection.CONTENT_COVERS: content_covers_table,
    Collection.CHAPTERS: chapters_table,
    Collection.FEEDS: feeds_table,
    Collection.WALLET_TRANSACTIONS: wallet_transactions_table,
}
