"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import (
    CommentProfile,
    GetCommentsRequest,
    GetCommentsUseCase,
    ThreadedCommentItem,
    VoterItem,
)

__all__ = [
    "CommentProfile",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
    "ThreadedCommentItem",
    "VoterItem",
]
