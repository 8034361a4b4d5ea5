"""Activity feed domain service."""

from dataclasses import dataclass
from typing import Callable, Optional

import logfire

from bookofmemes.config import FeedSettings
from bookofmemes.domain.error import NotFoundError
from bookofmemes.domain.model import Comment, FeedPost, Story
from bookofmemes.domain.repository import Query, RecordStore, eq, ilike, in_, neq
from bookofmemes.domain.value import Collection, FeedEntryType, UserId

from .base import Service
from .comment_service import AuthorProfile, CommentService


@dataclass
class FeedEntry:
    """A comment shown in a feed, tagged with why it appears."""

    type: FeedEntryType
    comment: Comment
    author: AuthorProfile
    original_comment: Optional[str] = None


@dataclass
class FeedPostView:
    post: FeedPost
    author_name: str


@dataclass
class CombinedFeed:
    stories: list[Story]
    posts: list[FeedPost]


class FeedService(Service):
    """Domain service merging comment activity into tagged feeds."""

    def __init__(
        self,
        record_store: RecordStore,
        comment_service: CommentService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize feed service.

        Args:
            record_store: Record store
            comment_service: Comment domain service (writer display details)
            feed_settings: Feed limits
        """
        self.record_store = record_store
        self.comment_service = comment_service
        self.feed_settings = feed_settings

    async def get_user_feed(self, user_id: UserId) -> list[FeedEntry]:
        """Build a user's activity feed.

        Entries come in buckets: top-level comments on the user's items,
        then replies at any depth in those threads. Only when both buckets
        are empty is the feed filled with the most liked comments
        system-wide. Each bucket is ordered newest first.

        Args:
            user_id: Owner of the feed

        Returns:
            Feed entries, bucket by bucket
        """
        with logfire.span("feed_service.get_user_feed", user_id=user_id):
            # Replies carry the item owner's author_id, so one query
            # covers every depth of the user's threads.
            addressed = await self._comments(
                Query.where(eq("author_id", user_id)).order(
                    "created_at", descending=True
                )
            )
            item_comments = [c for c in addressed if c.parent_id is None]
            replies = [c for c in addressed if c.parent_id is not None]

            top_comments: list[Comment] = []
            if not addressed:
                logfire.info("Empty feed, falling back to top comments", user_id=user_id)
                top_comments = await self._comments(
                    Query()
                    .order("likes", descending=True)
                    .take(self.feed_settings.top_comments_limit)
                )

            parents = await self._parent_contents(addressed, replies)
            profiles = await self.comment_service.profile_service.get_profiles(
                c.user_id for c in item_comments + replies + top_comments
            )

            def entry(
                entry_type: FeedEntryType, comment: Comment, original: str | None = None
            ) -> FeedEntry:
                return FeedEntry(
                    type=entry_type,
                    comment=comment,
                    author=self.comment_service.author_profile(
                        profiles.get(comment.user_id)
                    ),
                    original_comment=original,
                )

            feed = (
                [entry(FeedEntryType.ITEM_COMMENT, c) for c in item_comments]
                + [
                    entry(FeedEntryType.REPLY, c, parents.get(c.parent_id))
                    for c in replies
                ]
                + [entry(FeedEntryType.TOP_COMMENT, c) for c in top_comments]
            )
            logfire.info(
                "Feed built",
                user_id=user_id,
                item_comments=len(item_comments),
                replies=len(replies),
                top_comments=len(top_comments),
            )
            return feed

    async def get_mentions(self, user_id: UserId) -> list[FeedEntry]:
        """Comments mentioning ``@<user_id>``, newest first."""
        with logfire.span("feed_service.get_mentions", user_id=user_id):
            comments = await self._comments(
                Query.where(ilike("content", f"%@{_escape_like(user_id)}%"))
                .order("created_at", descending=True)
                .take(self.feed_settings.mentions_limit)
            )
            return await self._entries(comments, lambda _: FeedEntryType.MENTION)

    async def get_recent_activity(self, limit: int) -> list[FeedEntry]:
        """The most recent comments system-wide, tagged reply or item comment."""
        with logfire.span("feed_service.get_recent_activity", limit=limit):
            comments = await self._comments(
                Query().order("created_at", descending=True).take(limit)
            )
            return await self._entries(
                comments,
                lambda c: FeedEntryType.REPLY
                if c.parent_id
                else FeedEntryType.ITEM_COMMENT,
            )

    async def get_comment_history(
        self, user_id: UserId, on_others_only: bool = False
    ) -> list[FeedEntry]:
        """Comments the user wrote, newest first, tagged reply or item comment.

        Args:
            user_id: Writer of the comments
            on_others_only: Only comments on items the user does not own,
                capped at the mentions limit
        """
        with logfire.span(
            "feed_service.get_comment_history",
            user_id=user_id,
            on_others_only=on_others_only,
        ):
            query = Query.where(eq("user_id", user_id)).order(
                "created_at", descending=True
            )
            if on_others_only:
                query = query.and_(neq("author_id", user_id)).take(
                    self.feed_settings.mentions_limit
                )
            comments = await self._comments(query)

            entries = await self._entries(
                comments,
                lambda c: FeedEntryType.REPLY
                if c.parent_id
                else FeedEntryType.ITEM_COMMENT,
            )
            parents = await self._parent_contents(
                comments, [c for c in comments if c.parent_id]
            )
            for entry in entries:
                if entry.comment.parent_id:
                    entry.original_comment = parents.get(entry.comment.parent_id)
            return entries

    async def get_post(self, post_id: str) -> FeedPostView:
        """Get one feed post with its author's display name.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("feed_service.get_post", post_id=post_id):
            row = await self.record_store.find_one(
                Collection.FEEDS, Query.where(eq("id", post_id))
            )
            if row is None:
                logfire.warn("Feed post not found", post_id=post_id)
                raise NotFoundError("Feed", post_id)

            post = FeedPost.model_validate(row)
            profile = None
            if post.author_id:
                profile = await self.comment_service.profile_service.get_profile(
                    post.author_id
                )
            return FeedPostView(
                post=post,
                author_name=self.comment_service.author_profile(profile).full_name,
            )

    async def get_combined(self) -> CombinedFeed:
        """Every story and every feed post, each list newest first."""
        with logfire.span("feed_service.get_combined"):
            stories = await self.comment_service.content_service.list_stories()
            rows = await self.record_store.find(
                Collection.FEEDS, Query().order("created_at", descending=True)
            )
            return CombinedFeed(
                stories=stories, posts=[FeedPost.model_validate(row) for row in rows]
            )

    async def _parent_contents(
        self, known: list[Comment], replies: list[Comment]
    ) -> dict[str, str]:
        """Map each reply's parent ID to the parent's content."""
        contents = {c.id: c.content for c in known}
        missing = sorted({c.parent_id for c in replies} - contents.keys())
        if missing:
            contents.update(
                (c.id, c.content)
                for c in await self._comments(Query.where(in_("id", missing)))
            )
        return contents

    async def _comments(self, query: Query) -> list[Comment]:
        rows = await self.record_store.find(Collection.COMMENTS, query)
        return [Comment.model_validate(row) for row in rows]

    async def _entries(
        self, comments: list[Comment], tag: Callable[[Comment], FeedEntryType]
    ) -> list[FeedEntry]:
        profiles = await self.comment_service.profile_service.get_profiles(
            c.user_id for c in comments
        )
        return [
            FeedEntry(
                type=tag(comment),
                comment=comment,
                author=self.comment_service.author_profile(
                    profiles.get(comment.user_id)
                ),
            )
            for comment in comments
        ]


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards in a literal."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
