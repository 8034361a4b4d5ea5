"""Remove vote use case."""

from pydantic import BaseModel, Field

from bookofmemes.domain.service import VoteService
from bookofmemes.domain.value import CommentId, UserId

from .cast_vote import VoteResponse


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    comment_id: str
    user_id: str = Field(min_length=1)


class RemoveVoteUseCase:
    """Use case for withdrawing a vote on a comment."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: RemoveVoteRequest) -> VoteResponse:
        """Execute remove vote flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        tally = await self.vote_service.remove_vote(
            comment_id=CommentId(request.comment_id),
            user_id=UserId(request.user_id),
        )
        return VoteResponse.from_domain(tally)
