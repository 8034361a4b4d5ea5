"""Delete comment use case."""

from pydantic import BaseModel

from bookofmemes.domain.service import CommentService, JWTService
from bookofmemes.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    authorization: str | None = None  # Raw Authorization header
    item_type: str | None = None


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str


class DeleteCommentUseCase:
    """Use case for an item owner removing a comment addressed to them."""

    def __init__(
        self, comment_service: CommentService, jwt_service: JWTService
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            jwt_service: JWT service for bearer token verification
        """
        self.comment_service = comment_service
        self.jwt_service = jwt_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            AuthError: If the bearer token is missing or invalid
            NotFoundError: If no such comment is addressed to the caller
        """
        owner_id = self.jwt_service.authenticate(request.authorization)

        await self.comment_service.delete_comment(
            comment_id=CommentId(request.comment_id),
            owner_id=owner_id,
            item_type=request.item_type,
        )
        return DeleteCommentResponse(message="Comment deleted successfully")
