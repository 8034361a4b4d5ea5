"""Get comment history use case."""

from typing import Literal

from pydantic import BaseModel, Field

from bookofmemes.domain.service import FeedService
from bookofmemes.domain.value import UserId

from .get_user_feed import FeedEntryItem


class GetCommentHistoryRequest(BaseModel):
    """Get comment history request.

    ``type`` of ``mentions`` narrows the history to comments on other
    users' items.
    """

    user_id: str = Field(min_length=1)
    type: Literal["feeds", "mentions"] = "feeds"


class GetCommentHistoryUseCase:
    """Use case for the comments a user has written."""

    def __init__(self, feed_service: FeedService) -> None:
        self.feed_service = feed_service

    async def execute(self, request: GetCommentHistoryRequest) -> list[FeedEntryItem]:
        history = await self.feed_service.get_comment_history(
            UserId(request.user_id), on_others_only=request.type == "mentions"
        )
        return [FeedEntryItem.from_domain(entry) for entry in history]
