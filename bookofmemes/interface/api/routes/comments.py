"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Header, Query
from pydantic import BaseModel

from bookofmemes.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    ThreadedCommentItem,
)

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


@router.get("", response_model=list[ThreadedCommentItem], summary="Fetch comments")
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    item_id: str | None = Query(default=None, alias="itemId"),
    author_id: str | None = Query(default=None, alias="authorId"),
    exclude_self: bool = Query(default=False, alias="excludeSelf"),
    min_likes: int | None = Query(default=None, alias="minLikes", ge=0),
    limit: int | None = Query(default=None, ge=1),
) -> list[ThreadedCommentItem]:
    """Get comments arranged into reply threads.

    Args:
        get_comments_use_case: Get comments use case from DI
        item_id: Only comments on this item
        author_id: Only comments addressed to this item owner
        exclude_self: With authorId, leave out the owner's own comments
        min_likes: Only comments with at least this many likes
        limit: Maximum number of comments fetched

    Returns:
        Root comments, oldest first, each with nested replies
    """
    request = GetCommentsRequest(
        item_id=item_id,
        author_id=author_id,
        exclude_self=exclude_self,
        min_likes=min_likes,
        limit=limit,
    )
    return await get_comments_use_case.execute(request)


@router.post("", response_model=CreateCommentResponse, summary="Post comment")
async def create_comment(
    request: CreateCommentRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Comment on an item or reply to another comment.

    The comment is addressed to the item's owner.
    """
    return await create_comment_use_case.execute(request)


class DeleteCommentAPIRequest(BaseModel):
    """API request for deleting a comment."""

    item_type: str | None = None


@router.delete(
    "/{comment_id}", response_model=DeleteCommentResponse, summary="Delete comment"
)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    request: DeleteCommentAPIRequest | None = Body(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment addressed to the authenticated item owner.

    Requires an ``Authorization: Bearer <token>`` header.
    """
    use_case_request = DeleteCommentRequest(
        comment_id=comment_id,
        authorization=authorization,
        item_type=request.item_type if request else None,
    )
    return await delete_comment_use_case.execute(use_case_request)
