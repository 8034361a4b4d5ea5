"""Comment entities.

Comments are threaded discussions on content items. ``user_id`` is the
writer of the comment; ``author_id`` is the owner of the item the comment
is addressed to.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from bookofmemes.domain.model.common import DomainModel
from bookofmemes.domain.value import CommentId, ItemId, UserId, VoteType


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through ``parent_id``: None for top-level
    comments, otherwise the ID of a comment on the same item.
    ``likes`` and ``dislikes`` are maintained by the record store.
    """

    id: CommentId
    content: str = Field(min_length=1)
    user_id: UserId
    author_id: UserId
    item_id: ItemId
    item_type: Optional[str] = None
    parent_id: Optional[CommentId] = None
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class CommentVote(DomainModel):
    """A like or dislike on a comment.

    Business rules:
    - One vote per user per comment (upsert on ``(user_id, comment_id)``)
    - Voting again with the other type replaces the vote
    """

    user_id: UserId
    comment_id: CommentId
    vote_type: VoteType
