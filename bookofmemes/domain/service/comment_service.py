"""Comment domain service."""

from dataclasses import dataclass, field
from typing import Optional, Sequence

import logfire

from bookofmemes.config import CommentSettings
from bookofmemes.domain.error import NotFoundError, ValidationError
from bookofmemes.domain.model import Comment, Profile
from bookofmemes.domain.repository import Query, RecordStore, eq, gte, neq
from bookofmemes.domain.value import Collection, CommentId, ContentType, ItemId, UserId

from .base import Service
from .content_service import ContentService
from .profile_service import ProfileService
from .vote_service import Voter, VoteService


@dataclass
class AuthorProfile:
    """Display details of a comment's writer."""

    full_name: str
    avatar_url: str


@dataclass
class CommentNode:
    """Node in a comment thread.

    Represents a comment decorated with its writer's profile and vote
    roll-up, plus its direct replies (each a node of the same shape).
    """

    comment: Comment
    author: AuthorProfile
    liked_users: list[Voter] = field(default_factory=list)
    disliked_users: list[Voter] = field(default_factory=list)
    replies: list["CommentNode"] = field(default_factory=list)


def build_comment_tree(nodes: Sequence[CommentNode]) -> list[CommentNode]:
    """Arrange a flat list of comment nodes into reply threads.

    A reply is attached to its parent's ``replies`` when the parent is in
    ``nodes``. Replies whose parent is missing are dropped. Roots and
    replies keep their input order.

    Args:
        nodes: Comment nodes, usually ordered by creation time ascending

    Returns:
        Root nodes with their full reply subtrees
    """
    lookup: dict[CommentId, CommentNode] = {}
    for node in nodes:
        node.replies = []
        lookup[node.comment.id] = node

    roots: list[CommentNode] = []
    for node in nodes:
        parent_id = node.comment.parent_id
        if parent_id is None:
            roots.append(node)
        elif parent_id in lookup and parent_id != node.comment.id:
            lookup[parent_id].replies.append(node)
        else:
            logfire.debug(
                "Dropping orphan reply",
                comment_id=node.comment.id,
                parent_id=parent_id,
            )
    return roots


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        record_store: RecordStore,
        profile_service: ProfileService,
        vote_service: VoteService,
        content_service: ContentService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            record_store: Record store
            profile_service: Profile domain service
            vote_service: Vote domain service (roll-ups)
            content_service: Content domain service (item owner lookup)
            comment_settings: Display defaults
        """
        self.record_store = record_store
        self.profile_service = profile_service
        self.vote_service = vote_service
        self.content_service = content_service
        self.comment_settings = comment_settings

    def author_profile(self, profile: Optional[Profile]) -> AuthorProfile:
        """Display details for a writer, with defaults for missing fields."""
        return AuthorProfile(
            full_name=(profile and profile.full_name)
            or self.comment_settings.unknown_author_name,
            avatar_url=(profile and profile.avatar_url)
            or self.comment_settings.placeholder_avatar_url,
        )

    async def get_threaded_comments(
        self,
        item_id: ItemId | None = None,
        author_id: UserId | None = None,
        exclude_self: bool = False,
        min_likes: int | None = None,
        limit: int | None = None,
    ) -> list[CommentNode]:
        """Get comments arranged into reply threads.

        Args:
            item_id: Only comments on this item
            author_id: Only comments addressed to this item owner
            exclude_self: With ``author_id``, leave out the owner's own comments
            min_likes: Only comments with at least this many likes
            limit: Maximum number of comments fetched before threading

        Returns:
            Root comment nodes, oldest first, with nested replies

        Raises:
            FetchError: If the record store read fails
        """
        with logfire.span(
            "comment_service.get_threaded_comments",
            item_id=item_id,
            author_id=author_id,
        ):
            query = Query().order("created_at")
            if item_id:
                query = query.and_(eq("item_id", item_id))
            if author_id:
                query = query.and_(eq("author_id", author_id))
                if exclude_self:
                    query = query.and_(neq("user_id", author_id))
            if min_likes is not None:
                query = query.and_(gte("likes", min_likes))
            if limit is not None:
                query = query.take(limit)

            rows = await self.record_store.find(Collection.COMMENTS, query)
            comments = [Comment.model_validate(row) for row in rows]

            profiles = await self.profile_service.get_profiles(
                c.user_id for c in comments
            )
            roll_ups = await self.vote_service.roll_up([c.id for c in comments])

            nodes = [
                CommentNode(
                    comment=comment,
                    author=self.author_profile(profiles.get(comment.user_id)),
                    liked_users=roll_ups[comment.id].liked_users,
                    disliked_users=roll_ups[comment.id].disliked_users,
                )
                for comment in comments
            ]
            tree = build_comment_tree(nodes)
            logfire.info(
                "Comments threaded", comment_count=len(nodes), root_count=len(tree)
            )
            return tree

    async def get_comment(self, comment_id: CommentId) -> Comment | None:
        """Get comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        row = await self.record_store.find_one(
            Collection.COMMENTS, Query.where(eq("id", comment_id))
        )
        return Comment.model_validate(row) if row else None

    async def create_comment(
        self,
        content: str,
        user_id: UserId,
        item_id: ItemId,
        item_type: ContentType | None = None,
        parent_id: CommentId | None = None,
    ) -> tuple[Comment, AuthorProfile]:
        """Create a comment on an item.

        The comment is addressed to the item's owner, resolved from the
        content collections.

        Args:
            content: Comment text
            user_id: Writer of the comment
            item_id: Commented-on item
            item_type: Content type of the item, if known
            parent_id: Comment being replied to

        Returns:
            The stored comment and its writer's display details

        Raises:
            NotFoundError: If the item does not exist
            ValidationError: If the parent is not a comment on the same item
        """
        with logfire.span(
            "comment_service.create_comment",
            user_id=user_id,
            item_id=item_id,
            parent_id=parent_id,
        ):
            item = await self.content_service.find_item(item_id, item_type)
            if item is None:
                raise NotFoundError("Item", item_id)
            if item.author_id is None:
                logfire.warn("Item has no owner", item_id=item_id)
                raise NotFoundError("Item", item_id)

            if parent_id is not None:
                parent = await self.get_comment(parent_id)
                if parent is None or parent.item_id != item_id:
                    logfire.warn(
                        "Reply to unknown parent", parent_id=parent_id, item_id=item_id
                    )
                    raise ValidationError("Parent comment not found")

            row = await self.record_store.insert(
                Collection.COMMENTS,
                {
                    "content": content,
                    "user_id": user_id,
                    "author_id": item.author_id,
                    "item_id": item_id,
                    "item_type": (item_type or item.content_type).value,
                    "parent_id": parent_id,
                    "likes": 0,
                    "dislikes": 0,
                },
            )
            comment = Comment.model_validate(row)
            profile = await self.profile_service.get_profile(user_id)
            logfire.info(
                "Comment created", comment_id=comment.id, author_id=comment.author_id
            )
            return comment, self.author_profile(profile)

    async def delete_comment(
        self, comment_id: CommentId, owner_id: UserId, item_type: str | None = None
    ) -> None:
        """Delete a comment addressed to the given item owner.

        Args:
            comment_id: Comment ID
            owner_id: Authenticated owner of the commented-on item
            item_type: Content type the comment was made on, if given

        Raises:
            NotFoundError: If no such comment is addressed to the owner
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=comment_id, owner_id=owner_id
        ):
            query = Query.where(eq("id", comment_id), eq("author_id", owner_id))
            if item_type:
                query = query.and_(eq("item_type", item_type))

            deleted = await self.record_store.delete(Collection.COMMENTS, query)
            if not deleted:
                logfire.warn(
                    "Comment not deleted", comment_id=comment_id, owner_id=owner_id
                )
                raise NotFoundError("Comment", comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)
