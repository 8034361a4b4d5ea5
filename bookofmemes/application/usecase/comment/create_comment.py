"""Create comment use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from bookofmemes.domain.service import CommentService
from bookofmemes.domain.value import CommentId, ContentType, ItemId, UserId

from .get_comments import CommentProfile


class CreateCommentRequest(BaseModel):
    """Create comment request.

    The addressee (``author_id``) is not accepted from clients; it is
    resolved from the item.
    """

    content: str = Field(min_length=1)
    user_id: str = Field(min_length=1)
    item_id: str = Field(min_length=1)
    item_type: ContentType | None = None
    parent_id: str | None = None


class CreateCommentResponse(BaseModel):
    """Created comment with its writer's profile."""

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


class CreateCommentUseCase:
    """Use case for commenting on an item or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Comment data

        Returns:
            The stored comment

        Raises:
            NotFoundError: If the item does not exist
            ValidationError: If the parent comment is not on the same item
        """
        comment, author = await self.comment_service.create_comment(
            content=request.content,
            user_id=UserId(request.user_id),
            item_id=ItemId(request.item_id),
            item_type=request.item_type,
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
        )

        return CreateCommentResponse(
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
            profiles=CommentProfile.from_domain(author),
        )
