"""Cast vote use case."""

from pydantic import BaseModel, Field

from bookofmemes.domain.service import VoteService, VoteTally
from bookofmemes.domain.value import CommentId, UserId, VoteType


class VoteResponse(BaseModel):
    """A comment's counters after a vote change."""

    id: str
    likes: int
    dislikes: int
    current_user_vote: VoteType | None

    @classmethod
    def from_domain(cls, tally: VoteTally) -> "VoteResponse":
        return cls(
            id=tally.comment_id,
            likes=tally.likes,
            dislikes=tally.dislikes,
            current_user_vote=tally.current_user_vote,
        )


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    comment_id: str
    user_id: str = Field(min_length=1)
    vote_type: VoteType


class CastVoteUseCase:
    """Use case for liking or disliking a comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> VoteResponse:
        """Execute cast vote flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        tally = await self.vote_service.cast_vote(
            comment_id=CommentId(request.comment_id),
            user_id=UserId(request.user_id),
            vote_type=request.vote_type,
        )
        return VoteResponse.from_domain(tally)
