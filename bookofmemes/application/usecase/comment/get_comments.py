"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from bookofmemes.domain.service import AuthorProfile, CommentNode, CommentService, Voter
from bookofmemes.domain.value import ItemId, UserId


class CommentProfile(BaseModel):
    """Display details of a comment's writer."""

    full_name: str
    avatar_url: str

    @classmethod
    def from_domain(cls, author: AuthorProfile) -> "CommentProfile":
        return cls(full_name=author.full_name, avatar_url=author.avatar_url)


class VoterItem(BaseModel):
    """A user who liked or disliked a comment."""

    user_id: str
    full_name: str
    avatar_url: str

    @classmethod
    def from_domain(cls, voter: Voter) -> "VoterItem":
        return cls(
            user_id=voter.user_id,
            full_name=voter.full_name,
            avatar_url=voter.avatar_url,
        )


class ThreadedCommentItem(BaseModel):
    """A comment with its writer, votes and nested replies."""

    id: str
    content: str
    user_id: str
    author_id: str
    item_id: str
    item_type: str | None
    parent_id: str | None
    likes: int
    dislikes: int
    created_at: datetime
    profiles: CommentProfile
    liked_users: list[VoterItem]
    disliked_users: list[VoterItem]
    replies: list["ThreadedCommentItem"]

    @classmethod
    def from_domain(cls, node: CommentNode) -> "ThreadedCommentItem":
        """Convert a comment node (and its replies) to a response item."""
        comment = node.comment
        return cls(
            id=comment.id,
            content=comment.content,
            user_id=comment.user_id,
            author_id=comment.author_id,
            item_id=comment.item_id,
            item_type=comment.item_type,
            parent_id=comment.parent_id,
            likes=comment.likes,
            dislikes=comment.dislikes,
            created_at=comment.created_at,
            profiles=CommentProfile.from_domain(node.author),
            liked_users=[VoterItem.from_domain(v) for v in node.liked_users],
            disliked_users=[VoterItem.from_domain(v) for v in node.disliked_users],
            replies=[cls.from_domain(reply) for reply in node.replies],
        )


class GetCommentsRequest(BaseModel):
    """Get comments request. Every filter is optional."""

    item_id: str | None = None
    author_id: str | None = None
    exclude_self: bool = False
    min_likes: int | None = Field(default=None, ge=0)
    limit: int | None = Field(default=None, ge=1)


class GetCommentsUseCase:
    """Use case for getting comments arranged into reply threads."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> list[ThreadedCommentItem]:
        """Execute get comments flow.

        Args:
            request: Filters

        Returns:
            Root comments, oldest first, each with its reply subtree
        """
        tree = await self.comment_service.get_threaded_comments(
            item_id=ItemId(request.item_id) if request.item_id else None,
            author_id=UserId(request.author_id) if request.author_id else None,
            exclude_self=request.exclude_self,
            min_likes=request.min_likes,
            limit=request.limit,
        )
        return [ThreadedCommentItem.from_domain(node) for node in tree]
